"""Workspace manifest detection."""

import logging
from pathlib import Path

from .errors import ManifestNotFound

logger = logging.getLogger(__name__)

WORKSPACE_FILENAME = "pnpm-workspace.yaml"

# Current directory first, then the workspace root up to two levels above
SEARCH_PATHS = (
    Path(WORKSPACE_FILENAME),
    Path("..") / WORKSPACE_FILENAME,
    Path("..") / ".." / WORKSPACE_FILENAME,
)


def find_workspace_file(
    explicit_path: str | Path | None = None, base_dir: Path | None = None
) -> Path:
    """Locate the pnpm-workspace.yaml file.

    Args:
        explicit_path: Path given with -w; bypasses auto-discovery
        base_dir: Directory to probe from (defaults to the current directory)

    Returns:
        Path to the manifest file

    Raises:
        ManifestNotFound: If no manifest exists at the explicit or probed paths
    """
    if explicit_path is not None:
        path = Path(explicit_path)
        if not path.is_file():
            raise ManifestNotFound(
                f"{WORKSPACE_FILENAME} not found at specified path: {explicit_path}"
            )
        return path

    base = base_dir if base_dir is not None else Path.cwd()
    for candidate in SEARCH_PATHS:
        path = base / candidate
        logger.debug("Probing %s", path)
        if path.is_file():
            return path

    raise ManifestNotFound(
        f"{WORKSPACE_FILENAME} not found in current directory or workspace root."
    )
