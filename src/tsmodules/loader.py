"""Read tsconfig.json / jsconfig.json files from disk.

tsconfig files allow comments and trailing commas, so they are parsed with
json5 rather than json.
"""

import logging
from pathlib import Path

import json5

from tsmodules.errors import ConfigLoadError
from tsmodules.resolution.dataclasses import ProjectConfig

logger = logging.getLogger(__name__)


def has_config(path: str | Path) -> bool:
    """True if path exists and is a regular file."""
    return Path(path).is_file()


def parse_config_text(text: str, source: str = "<string>") -> ProjectConfig:
    """Parse tsconfig-dialect JSON text into a ProjectConfig."""
    try:
        data = json5.loads(text)
    except ValueError as e:
        raise ConfigLoadError(f"Invalid JSON in {source}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"{source} must contain a JSON object, got {type(data).__name__}"
        )
    try:
        return ProjectConfig.from_dict(data)
    except ValueError as e:
        raise ConfigLoadError(f"Malformed config in {source}: {e}") from e


def _locate(path: Path) -> Path:
    # `extends: "./base"` refers to base.json, as in TypeScript and Node
    if not path.exists() and path.suffix != ".json":
        candidate = path.with_name(path.name + ".json")
        if candidate.exists():
            return candidate
    return path


def load_config_file(path: str | Path) -> ProjectConfig:
    """Read and parse a config file. Raises ConfigLoadError on any failure."""
    config_path = _locate(Path(path))
    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {e}") from e
    logger.debug("Loaded %s (%d bytes)", config_path, len(text))
    return parse_config_text(text, source=str(config_path))
