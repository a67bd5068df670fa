"""Pytest fixtures for rustw tests."""

from pathlib import Path

import pytest

from tests.helpers.sample_schema import Mode


@pytest.fixture
def mode_enum() -> type[Mode]:
    """Provide the sample closed-choice enum."""
    return Mode


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Provide a temporary project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
