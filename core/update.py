"""Applying catalog updates and writing the manifest back."""

import logging
import os
import tempfile
from pathlib import Path

import yaml

from .errors import WriteFailure
from .models import OutdatedEntry, WorkspaceManifest

logger = logging.getLogger(__name__)


def select_updates(
    entries: list[OutdatedEntry], filters: set[str] | None = None
) -> list[OutdatedEntry]:
    """Select the entries eligible for update.

    Args:
        entries: Outdated entries
        filters: Requested release types; empty or None selects everything

    Returns:
        Entries whose release type exactly matches a filter
    """
    if not filters:
        return list(entries)
    return [entry for entry in entries if entry.release_type in filters]


def updated_range(current: str, latest: str) -> str:
    """New catalog value for latest, keeping a caret prefix."""
    return f"^{latest}" if current.startswith("^") else latest


def apply_updates(catalog: dict, entries: list[OutdatedEntry]) -> list[OutdatedEntry]:
    """Write new versions into the catalog mapping in place.

    Only names already present in the catalog are touched.

    Returns:
        Entries that were applied
    """
    applied = []
    for entry in entries:
        if not catalog.get(entry.name):
            continue
        catalog[entry.name] = updated_range(entry.current, entry.latest)
        applied.append(entry)
    return applied


def render_workspace(document: dict) -> str:
    """Serialize the full manifest document, keeping key order."""
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def write_workspace(path: Path, content: str) -> None:
    """Replace the file at path with content atomically.

    Raises:
        WriteFailure: If the file cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o777)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteFailure(f"Could not write {path}: {e}") from e


def update_workspace(
    manifest: WorkspaceManifest,
    entries: list[OutdatedEntry],
    filters: set[str] | None = None,
) -> list[OutdatedEntry]:
    """Apply selected updates to the manifest and persist it.

    Args:
        manifest: Parsed manifest with a path
        entries: Outdated entries from classification
        filters: Requested release types

    Returns:
        Entries written to the manifest
    """
    selected = select_updates(entries, filters)
    applied = apply_updates(manifest.catalog, selected)
    if not applied:
        logger.info("No catalog entries matched the requested update types")
        return []

    if manifest.path is None:
        raise WriteFailure("Manifest has no path to write to")

    write_workspace(manifest.path, render_workspace(manifest.document))
    return applied
