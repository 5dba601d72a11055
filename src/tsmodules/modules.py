"""Entry point: compute the module resolution bundle for a project.

The bundle is computed on demand and returned; nothing is cached between
calls. Callers hold on to the result and pass it where it is needed.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from tsmodules.errors import ConflictingConfigError
from tsmodules.loader import has_config, load_config_file
from tsmodules.paths import ProjectPaths
from tsmodules.resolution.aliases import resolve_aliases
from tsmodules.resolution.dataclasses import ModulesBundle, ProjectConfig
from tsmodules.resolution.merge import read_config

logger = logging.getLogger(__name__)


def load_project_config(
    paths: ProjectPaths,
    load: Callable[[str | Path], ProjectConfig] = load_config_file,
) -> tuple[ProjectConfig, bool]:
    """Load whichever of tsconfig.json / jsconfig.json exists, resolving `extends`.

    Returns (config, has_ts_config). A project with neither file gets an
    empty config.
    """
    has_ts_config = has_config(paths.app_ts_config)
    has_js_config = has_config(paths.app_js_config)

    if has_ts_config and has_js_config:
        raise ConflictingConfigError(
            "You have both a tsconfig.json and a jsconfig.json. "
            "If you are using TypeScript please remove your jsconfig.json file."
        )

    if has_ts_config:
        config_path = paths.app_ts_config
    elif has_js_config:
        config_path = paths.app_js_config
    else:
        logger.debug("No tsconfig.json or jsconfig.json in %s", paths.app_path)
        return ProjectConfig(), False

    logger.debug("Using %s", config_path)
    config = load(config_path)
    config = read_config(config, os.path.dirname(config_path), paths.app_path, load)
    return config, has_ts_config


def get_modules(
    paths: ProjectPaths | None = None,
    load: Callable[[str | Path], ProjectConfig] = load_config_file,
) -> ModulesBundle:
    """Compute additionalModulePaths, webpackAliases and jestAliases.

    paths defaults to the standard layout under the current directory.
    Raises ConflictingConfigError, ConfigLoadError, InvalidPathsError or
    UnsupportedBaseUrlError; there is no partial result.
    """
    if paths is None:
        paths = ProjectPaths.from_root(Path.cwd())
    config, has_ts_config = load_project_config(paths, load)
    return resolve_aliases(config.compiler_options, paths, has_ts_config)
