"""Core data models for the workspace updater."""

from dataclasses import dataclass, field
from pathlib import Path

RELEASE_TYPES = (
    "major",
    "minor",
    "patch",
    "premajor",
    "preminor",
    "prepatch",
    "prerelease",
)

# Release types selectable with --major/--minor/--patch
UPDATE_FILTERS = ("major", "minor", "patch")


@dataclass
class WorkspaceManifest:
    """A parsed pnpm-workspace.yaml document."""

    raw: str
    document: dict
    catalog: dict[str, str]
    path: Path | None = None


@dataclass
class OutdatedEntry:
    """A catalog entry whose registry version is newer than the current one."""

    name: str
    current: str
    latest: str
    release_type: str | None = None  # major, minor, patch, pre*, or None


@dataclass
class CheckOptions:
    """Options for a single check/update run."""

    workspace_path: Path | None = None
    update: bool = False
    major: bool = False
    minor: bool = False
    patch: bool = False
    registry_url: str = "https://registry.npmjs.org"
    timeout: float = 30.0
    output_format: str = "text"  # text, json

    @property
    def release_filters(self) -> set[str]:
        """Release types requested with --major/--minor/--patch."""
        flags = (self.major, self.minor, self.patch)
        return {name for name, enabled in zip(UPDATE_FILTERS, flags) if enabled}


@dataclass
class CheckResult:
    """Outcome of a check run."""

    manifest: WorkspaceManifest
    outdated: list[OutdatedEntry]
    updated: list[OutdatedEntry] = field(default_factory=list)
