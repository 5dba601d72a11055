"""Errors raised while deriving module resolution settings.

All of them are fatal: there is no partial result when one is raised.
"""


class ModulesConfigError(Exception):
    """Base class for module resolution configuration errors."""


class ConflictingConfigError(ModulesConfigError):
    """Both tsconfig.json and jsconfig.json exist in the project."""


class UnsupportedBaseUrlError(ModulesConfigError, ValueError):
    """compilerOptions.baseUrl points somewhere other than src, node_modules or the root."""


class InvalidPathsError(ModulesConfigError, ValueError):
    """compilerOptions.paths (own or inherited) is not a usable mapping."""


class ConfigLoadError(ModulesConfigError, RuntimeError):
    """A config file could not be read or parsed."""
