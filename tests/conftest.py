"""Pytest configuration and fixtures."""


import logging

import pytest

from core.log import LOGGER_NAMES
from core.models import OutdatedEntry


@pytest.fixture
def sample_workspace():
    """Sample pnpm-workspace.yaml content for testing."""
    return """packages:
  - apps/*
  - packages/*
catalog:
  react: ^18.2.0
  typescript: 5.3.3
  zod: ~3.22.0
onlyBuiltDependencies:
  - esbuild
"""


@pytest.fixture
def workspace_file(tmp_path, sample_workspace):
    """Create a temporary pnpm-workspace.yaml for testing."""
    manifest = tmp_path / "pnpm-workspace.yaml"
    manifest.write_text(sample_workspace)
    return manifest


@pytest.fixture
def outdated_entries():
    """One outdated entry per primary release type, in catalog order."""
    return [
        OutdatedEntry(name="react", current="^18.2.0", latest="19.0.0", release_type="major"),
        OutdatedEntry(name="typescript", current="5.3.3", latest="5.4.0", release_type="minor"),
        OutdatedEntry(name="zod", current="~3.22.0", latest="3.22.4", release_type="patch"),
    ]


@pytest.fixture(autouse=True)
def reset_loggers():
    """Undo handlers attached by setup_logging so caplog keeps working."""
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
