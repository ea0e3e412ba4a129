"""Check/update pipeline for the workspace catalog."""

import logging
from collections.abc import Callable

from .classify import classify, is_checkable
from .detect import find_workspace_file
from .models import CheckOptions, CheckResult, OutdatedEntry
from .parse_workspace import load_workspace
from .resolve_npm import NpmResolver
from .update import update_workspace

logger = logging.getLogger(__name__)


async def find_outdated(catalog: dict, resolver: NpmResolver) -> list[OutdatedEntry]:
    """Look up every checkable catalog entry and classify the results.

    Args:
        catalog: Catalog mapping in file order
        resolver: Registry resolver

    Returns:
        Outdated entries in catalog order
    """
    names = [name for name, current in catalog.items() if is_checkable(current)]
    latest_versions = await resolver.fetch_latest_versions(names)

    outdated = []
    for name, latest in zip(names, latest_versions):
        entry = classify(name, catalog[name], latest)
        if entry is not None:
            outdated.append(entry)
    return outdated


async def check_dependencies(
    options: CheckOptions,
    resolver: NpmResolver | None = None,
    on_report: Callable[[list[OutdatedEntry]], None] | None = None,
) -> CheckResult:
    """Locate, parse, check and optionally update the workspace catalog.

    Args:
        options: Parsed command-line options
        resolver: Registry resolver; built from options when omitted
        on_report: Called with the outdated entries before any write

    Returns:
        CheckResult with the outdated and updated entries

    Raises:
        ManifestNotFound: If the manifest cannot be located
        ManifestParseError: If the manifest cannot be read or decoded
        WriteFailure: If the updated manifest cannot be written
    """
    path = find_workspace_file(options.workspace_path)
    logger.info("Found pnpm-workspace.yaml at: %s", path)

    manifest = load_workspace(path)
    logger.info(
        "Found %d dependencies in catalog. Fetching latest versions in parallel...",
        len(manifest.catalog),
    )

    if resolver is None:
        resolver = NpmResolver(registry_url=options.registry_url, timeout=options.timeout)

    outdated = await find_outdated(manifest.catalog, resolver)
    if on_report is not None:
        on_report(outdated)

    result = CheckResult(manifest=manifest, outdated=outdated)
    if options.update and outdated:
        logger.info("Updating %s...", path)
        result.updated = update_workspace(manifest, outdated, options.release_filters)

    return result
