"""Tests for workspace manifest detection."""

import pytest

from core.detect import SEARCH_PATHS, find_workspace_file
from core.errors import ManifestNotFound


class TestWorkspaceDetection:
    """Test locating pnpm-workspace.yaml."""

    def test_explicit_path_is_returned(self, workspace_file):
        """Should use the explicit path when it exists."""
        assert find_workspace_file(workspace_file) == workspace_file

    def test_explicit_path_missing(self, tmp_path):
        """Should fail for a missing explicit path without probing."""
        (tmp_path / "pnpm-workspace.yaml").write_text("catalog: {}\n")

        with pytest.raises(ManifestNotFound) as exc_info:
            find_workspace_file(tmp_path / "missing.yaml", base_dir=tmp_path)
        assert "missing.yaml" in str(exc_info.value)

    def test_finds_file_in_current_directory(self, tmp_path):
        """Should find the manifest in the base directory first."""
        (tmp_path / "pnpm-workspace.yaml").write_text("catalog: {}\n")

        found = find_workspace_file(base_dir=tmp_path)
        assert found == tmp_path / "pnpm-workspace.yaml"

    def test_finds_file_one_level_up(self, tmp_path):
        """Should find the manifest in the parent directory."""
        (tmp_path / "pnpm-workspace.yaml").write_text("catalog: {}\n")
        package_dir = tmp_path / "packages"
        package_dir.mkdir()

        found = find_workspace_file(base_dir=package_dir)
        assert found.resolve() == (tmp_path / "pnpm-workspace.yaml").resolve()

    def test_finds_file_two_levels_up(self, tmp_path):
        """Should find the manifest at the workspace root two levels up."""
        (tmp_path / "pnpm-workspace.yaml").write_text("catalog: {}\n")
        package_dir = tmp_path / "packages" / "ui"
        package_dir.mkdir(parents=True)

        found = find_workspace_file(base_dir=package_dir)
        assert found.resolve() == (tmp_path / "pnpm-workspace.yaml").resolve()

    def test_nearest_file_takes_precedence(self, tmp_path):
        """Current directory should win over the parent directory."""
        (tmp_path / "pnpm-workspace.yaml").write_text("catalog: {}\n")
        package_dir = tmp_path / "packages"
        package_dir.mkdir()
        (package_dir / "pnpm-workspace.yaml").write_text("catalog: {}\n")

        assert find_workspace_file(base_dir=package_dir) == package_dir / "pnpm-workspace.yaml"

    def test_not_found_anywhere(self, tmp_path):
        """Should fail when none of the probed paths exist."""
        package_dir = tmp_path / "a" / "b" / "c"
        package_dir.mkdir(parents=True)

        with pytest.raises(ManifestNotFound):
            find_workspace_file(base_dir=package_dir)

    def test_search_paths_order(self):
        """Probe order is current, parent, grandparent."""
        assert [len(path.parts) for path in SEARCH_PATHS] == [1, 2, 3]
