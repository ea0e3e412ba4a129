"""Exceptions raised by the workspace updater."""


class WorkspaceUpdaterError(Exception):
    """Base exception for workspace updater errors."""
    pass


class ManifestNotFound(WorkspaceUpdaterError):
    """No pnpm-workspace.yaml at the explicit or probed locations."""
    pass


class ManifestParseError(WorkspaceUpdaterError):
    """Workspace manifest could not be read or decoded."""
    pass


class RegistryLookupFailure(WorkspaceUpdaterError):
    """Registry lookup for a single package failed."""

    def __init__(self, package_name: str, reason: str):
        super().__init__(f"Failed to fetch version for {package_name}: {reason}")
        self.package_name = package_name
        self.reason = reason


class WriteFailure(WorkspaceUpdaterError):
    """Updated manifest could not be written back to disk."""
    pass
