"""tsmodules.toml loader and validation."""

import tomllib
from pathlib import Path

from tsmodules.constants import SETTINGS_FILE_NAME
from tsmodules.paths import ProjectPaths


def load_config(project_path: Path) -> dict | None:
    """Load tsmodules.toml. Returns None if the file doesn't exist."""
    config_file = project_path / SETTINGS_FILE_NAME
    if not config_file.exists():
        return None
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def get_paths_section(config: dict | None) -> dict:
    """Extract the optional [paths] section. Returns {} if absent."""
    if config is None:
        return {}
    value = config.get("paths")
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(
            f"[paths] in {SETTINGS_FILE_NAME} must be a table, got {type(value).__name__}"
        )
    return value


def build_project_paths(project_path: Path, config: dict | None) -> ProjectPaths:
    """ProjectPaths for project_path with [paths] overrides applied."""
    return ProjectPaths.from_root(project_path, get_paths_section(config))


def create_default_config(project_path: Path) -> Path:
    """Create a default tsmodules.toml in the project root. Returns the path."""
    config_path = project_path / SETTINGS_FILE_NAME
    if config_path.exists():
        raise FileExistsError(f"Config already exists: {config_path}")
    config_path.write_text(
        '# Project layout used to derive bundler and test runner aliases.\n'
        '# All paths are relative to the project root.\n'
        '[paths]\n'
        'src = "src"\n'
        'node_modules = "node_modules"\n'
        '# tsconfig = "tsconfig.json"\n'
        '# jsconfig = "jsconfig.json"\n'
    )
    return config_path
