"""Shared test fixtures."""

import json

import pytest

from tsmodules.paths import ProjectPaths


@pytest.fixture
def project(tmp_path):
    """A temporary project root with src/ and node_modules/."""
    (tmp_path / "src").mkdir()
    (tmp_path / "node_modules").mkdir()
    return tmp_path


@pytest.fixture
def project_paths(project):
    """Default ProjectPaths for the temporary project."""
    return ProjectPaths.from_root(project)


@pytest.fixture
def write_json():
    """Write a dict as JSON to a path and return the path."""
    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write
