"""baseUrl validation and the three alias tables derived from compilerOptions."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tsmodules.constants import JEST_SRC_PATTERN, JEST_SRC_TEMPLATE, SRC_DIR_NAME
from tsmodules.errors import InvalidPathsError, UnsupportedBaseUrlError
from tsmodules.paths import ProjectPaths, is_same_path, resolve_path
from tsmodules.resolution.dataclasses import (
    AdditionalModulePaths,
    CompilerOptions,
    ModulesBundle,
)
from tsmodules.resolution.merge import alias_map

logger = logging.getLogger(__name__)

UNSUPPORTED_BASE_URL_MESSAGE = (
    "Your project's `baseUrl` can only be set to `src` or `node_modules`. "
    "Create React App does not support other values at this time."
)


def _resolve_base_url(options: CompilerOptions, paths: ProjectPaths) -> str | None:
    base_url = options.base_url
    if not base_url:
        return None
    if not isinstance(base_url, str):
        raise UnsupportedBaseUrlError(
            f"compilerOptions.baseUrl must be a string, got {type(base_url).__name__}"
        )
    return resolve_path(paths.app_path, base_url)


def get_additional_module_paths(
    options: CompilerOptions, paths: ProjectPaths,
) -> AdditionalModulePaths:
    """Module directories the bundler should search besides node_modules.

    Raises UnsupportedBaseUrlError unless baseUrl is node_modules, src or
    the project root.
    """
    resolved = _resolve_base_url(options, paths)
    if resolved is None:
        return AdditionalModulePaths.disabled()

    # node_modules is searched by default
    if is_same_path(resolved, paths.app_node_modules):
        logger.debug("baseUrl %r is node_modules, nothing to add", options.base_url)
        return AdditionalModulePaths.not_needed()

    if is_same_path(resolved, paths.app_src):
        logger.debug("baseUrl %r is src, adding %s", options.base_url, paths.app_src)
        return AdditionalModulePaths.enabled(paths.app_src)

    # Files outside src are not transpiled; the root is handled with a `src` alias
    if is_same_path(resolved, paths.app_path):
        logger.debug("baseUrl %r is the project root, using the src alias", options.base_url)
        return AdditionalModulePaths.not_needed()

    raise UnsupportedBaseUrlError(
        f"{UNSUPPORTED_BASE_URL_MESSAGE} (baseUrl {options.base_url!r} resolves to {resolved})"
    )


def _normalize_aliases(supplied: Mapping, paths: ProjectPaths) -> dict[str, str]:
    """Alias entries as absolute directories.

    Plain string values (already produced by an `extends` merge) are kept
    under their key; pattern entries are stripped and resolved.
    """
    aliases: dict[str, str] = {}
    for key, value in supplied.items():
        if isinstance(value, str):
            aliases[key] = resolve_path(paths.app_path, value)
        else:
            aliases.update(alias_map({key: value}, paths.app_path))
    return aliases


def _require_mapping(supplied: object) -> Mapping:
    if not isinstance(supplied, Mapping):
        raise InvalidPathsError(
            f"compilerOptions.paths must be an object, got {type(supplied).__name__}"
        )
    return supplied


def get_webpack_aliases(options: CompilerOptions, paths: ProjectPaths) -> dict:
    """Import aliases for the bundler.

    Without baseUrl, `paths` is passed through untouched (or {} when absent).
    With baseUrl at the project root, `src` maps to the src directory and
    every `paths` entry is added on top of it.
    """
    # An empty or falsy `paths` counts as absent, same as in the merge
    supplied = options.paths or None

    resolved = _resolve_base_url(options, paths)
    if resolved is None:
        return dict(_require_mapping(supplied)) if supplied else {}

    if is_same_path(resolved, paths.app_path):
        aliases = _normalize_aliases(_require_mapping(supplied), paths) if supplied else {}
        return {SRC_DIR_NAME: paths.app_src, **aliases}

    return {}


def get_jest_aliases(options: CompilerOptions, paths: ProjectPaths) -> dict[str, str]:
    """moduleNameMapper entries for the test runner."""
    resolved = _resolve_base_url(options, paths)
    if resolved is not None and is_same_path(resolved, paths.app_path):
        return {JEST_SRC_PATTERN: JEST_SRC_TEMPLATE}
    return {}


def resolve_aliases(
    options: CompilerOptions, paths: ProjectPaths, has_ts_config: bool,
) -> ModulesBundle:
    """Compute all three tables; an unsupported baseUrl aborts the whole bundle."""
    additional = get_additional_module_paths(options, paths)
    return ModulesBundle(
        additional_module_paths=additional,
        webpack_aliases=get_webpack_aliases(options, paths),
        jest_aliases=get_jest_aliases(options, paths),
        has_ts_config=has_ts_config,
    )
