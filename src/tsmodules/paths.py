"""Absolute project directories used by the resolvers."""

import os
from dataclasses import dataclass
from pathlib import Path

from tsmodules.constants import (
    JS_CONFIG_NAME,
    NODE_MODULES_DIR_NAME,
    SRC_DIR_NAME,
    TS_CONFIG_NAME,
)

# [paths] keys accepted in tsmodules.toml -> ProjectPaths field
PATH_OVERRIDE_KEYS: dict[str, str] = {
    "src": "app_src",
    "node_modules": "app_node_modules",
    "tsconfig": "app_ts_config",
    "jsconfig": "app_js_config",
}


def resolve_path(base: str | Path, *parts: str) -> str:
    """Join parts onto base and normalize, without touching the filesystem.

    An absolute part discards everything before it. Symlinks are not followed.
    """
    return os.path.normpath(os.path.join(os.path.abspath(base), *parts))


def is_same_path(a: str | Path, b: str | Path) -> bool:
    """True when the relative path between a and b is empty."""
    return os.path.relpath(a, b) == "."


@dataclass(frozen=True)
class ProjectPaths:
    """Absolute directories and config file locations of one project."""

    app_path: str
    app_node_modules: str
    app_src: str
    app_ts_config: str
    app_js_config: str

    def __post_init__(self):
        for name in ("app_path", "app_node_modules", "app_src", "app_ts_config", "app_js_config"):
            value = getattr(self, name)
            if not os.path.isabs(value):
                raise ValueError(f"{name} must be an absolute path, got {value!r}")

    @classmethod
    def from_root(cls, root: str | Path, overrides: dict | None = None) -> "ProjectPaths":
        """Build the default layout under root, applying [paths] overrides.

        Override values are relative to root (absolute values are kept).
        """
        app_path = resolve_path(root)
        values = {
            "app_path": app_path,
            "app_node_modules": resolve_path(app_path, NODE_MODULES_DIR_NAME),
            "app_src": resolve_path(app_path, SRC_DIR_NAME),
            "app_ts_config": resolve_path(app_path, TS_CONFIG_NAME),
            "app_js_config": resolve_path(app_path, JS_CONFIG_NAME),
        }
        for key, value in (overrides or {}).items():
            field_name = PATH_OVERRIDE_KEYS.get(key)
            if field_name is None:
                raise ValueError(
                    f"Unknown key {key!r} in [paths]. "
                    f"Valid keys: {', '.join(sorted(PATH_OVERRIDE_KEYS))}"
                )
            if not isinstance(value, str) or not value:
                raise ValueError(f"[paths] {key} must be a non-empty string, got {value!r}")
            values[field_name] = resolve_path(app_path, value)
        return cls(**values)
