"""Single-level `extends` resolution and `paths` merging."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from pathlib import Path

from tsmodules.constants import WILDCARD_SUFFIX
from tsmodules.errors import InvalidPathsError
from tsmodules.paths import resolve_path
from tsmodules.resolution.dataclasses import ProjectConfig

logger = logging.getLogger(__name__)

ParentLoader = Callable[[str], ProjectConfig]


def strip_wildcard(value: str) -> str:
    """Drop one trailing `/*` ("components/*" -> "components")."""
    if value.endswith(WILDCARD_SUFFIX):
        return value[: -len(WILDCARD_SUFFIX)]
    return value


def _paths_or_empty(config: ProjectConfig) -> object:
    paths = config.compiler_options.paths
    return paths if paths else {}


def merge_paths(child_paths: object, parent_paths: object) -> dict:
    """Overlay the parent's `paths` entries on the child's.

    On a key present in both, the parent's entry wins.
    Raises InvalidPathsError if either side is not a mapping.
    """
    if not isinstance(child_paths, Mapping):
        raise InvalidPathsError(
            f"compilerOptions.paths must be an object, got {type(child_paths).__name__}"
        )
    if not isinstance(parent_paths, Mapping):
        raise InvalidPathsError(
            "compilerOptions.paths inherited through extends must be an object, "
            f"got {type(parent_paths).__name__}"
        )
    return {**child_paths, **parent_paths}


def _first_target(key: str, value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        if not value:
            raise InvalidPathsError(f"compilerOptions.paths[{key!r}] has no targets")
        target = value[0]
        if isinstance(target, str):
            return target
    raise InvalidPathsError(
        f"compilerOptions.paths[{key!r}] must be a string or a list of strings, got {value!r}"
    )


def alias_map(paths: Mapping, app_path: str | Path) -> dict[str, str]:
    """Turn a `paths` mapping into bare alias -> absolute directory.

    Only the first target of each entry is used. Keys that collide once
    `/*` is stripped overwrite each other in iteration order.
    """
    aliases: dict[str, str] = {}
    for key, value in paths.items():
        target = strip_wildcard(_first_target(key, value))
        aliases[strip_wildcard(key)] = resolve_path(app_path, target)
    return aliases


def read_config(
    config: ProjectConfig,
    config_dir: str | Path,
    app_path: str | Path,
    load_parent: ParentLoader,
) -> ProjectConfig:
    """Resolve one level of `extends` and merge `compilerOptions.paths`.

    A config without a pending `extends` is returned as is. Otherwise the
    parent is loaded from a path relative to config_dir (the directory of
    the config file), the child and parent `paths` are merged (parent wins)
    and normalized into an alias map, and a new config is returned whose
    `paths` holds the child's original entries plus the alias map, and whose
    `extends` is the parent.

    Errors from load_parent propagate unchanged.
    """
    if not config.has_extends:
        return config

    parent_path = resolve_path(config_dir, config.extends)
    logger.debug("Loading parent config %s (extends %r)", parent_path, config.extends)
    parent = load_parent(parent_path)

    merged = merge_paths(_paths_or_empty(config), _paths_or_empty(parent))
    aliases = alias_map(merged, app_path)
    logger.debug("Merged %d path mapping(s) into %d alias(es)", len(merged), len(aliases))

    own_paths = config.compiler_options.paths or {}
    options = replace(config.compiler_options, paths={**own_paths, **aliases})
    return replace(config, compiler_options=options, extends=parent)
