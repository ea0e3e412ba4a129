"""pnpm-workspace.yaml parsing."""

from pathlib import Path

import yaml

from .errors import ManifestParseError
from .models import WorkspaceManifest

STR_TAG = "tag:yaml.org,2002:str"
MERGE_TAG = "tag:yaml.org,2002:merge"


class WorkspaceLoader(yaml.SafeLoader):
    """SafeLoader that keeps scalar mapping keys as written.

    Package names such as `yes`, `on` or `123` stay strings instead of
    resolving to YAML 1.1 booleans and integers.
    """

    def construct_mapping(self, node, deep=False):
        # Merge keys first so keys pulled in through `<<` are covered too
        self.flatten_mapping(node)
        for key_node, _ in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.tag != MERGE_TAG:
                key_node.tag = STR_TAG
        return super().construct_mapping(node, deep=deep)


class WorkspaceParser:
    """Parser for pnpm-workspace.yaml files."""

    catalog_key = "catalog"

    def _load_document(self, content: str) -> dict:
        """Decode YAML content into the top-level mapping."""
        try:
            document = yaml.load(content, Loader=WorkspaceLoader)
        except yaml.YAMLError as e:
            raise ManifestParseError(f"Invalid YAML: {e}") from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ManifestParseError(
                f"Expected a mapping at the top level, got {type(document).__name__}"
            )
        return document

    def _extract_catalog(self, document: dict) -> dict:
        """Return the catalog section, attaching nothing when it is absent."""
        catalog = document.get(self.catalog_key)
        if catalog is None:
            # Empty and detached from the document; writes never add a catalog
            return {}
        if not isinstance(catalog, dict):
            raise ManifestParseError(
                f"Expected '{self.catalog_key}' to be a mapping, got {type(catalog).__name__}"
            )
        return catalog

    def parse(self, content: str) -> WorkspaceManifest:
        """Parse pnpm-workspace.yaml content into WorkspaceManifest."""
        document = self._load_document(content)
        catalog = self._extract_catalog(document)
        return WorkspaceManifest(raw=content, document=document, catalog=catalog)


def parse_workspace(content: str) -> WorkspaceManifest:
    """Parse pnpm-workspace.yaml content into WorkspaceManifest.

    Args:
        content: The pnpm-workspace.yaml file content

    Returns:
        Parsed WorkspaceManifest object

    Raises:
        ManifestParseError: If the content is not a valid workspace manifest
    """
    parser = WorkspaceParser()
    return parser.parse(content)


def load_workspace(path: Path) -> WorkspaceManifest:
    """Read and parse the manifest at path."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(f"Could not read {path}: {e}") from e

    manifest = parse_workspace(content)
    manifest.path = Path(path)
    return manifest
