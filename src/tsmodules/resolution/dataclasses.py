"""Typed config and result structures for module resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


VALID_MODULE_PATH_KINDS = ("disabled", "not_needed", "enabled")


@dataclass(frozen=True)
class CompilerOptions:
    """The compilerOptions fields module resolution looks at.

    paths is untrusted input and stays untyped until the merge validates it.
    Other compiler options are kept in extra so to_dict() round-trips.
    """
    base_url: str | None = None
    paths: Any = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict | None) -> CompilerOptions:
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"compilerOptions must be an object, got {type(data).__name__}")
        extra = {k: v for k, v in data.items() if k not in ("baseUrl", "paths")}
        return cls(base_url=data.get("baseUrl"), paths=data.get("paths"), extra=extra)

    def to_dict(self) -> dict:
        d = dict(self.extra)
        if self.base_url is not None:
            d["baseUrl"] = self.base_url
        if self.paths is not None:
            d["paths"] = self.paths
        return d


@dataclass(frozen=True)
class ProjectConfig:
    """A parsed tsconfig/jsconfig.

    extends is a path string on a raw config and the loaded parent
    ProjectConfig once the config has been resolved.
    """
    compiler_options: CompilerOptions = field(default_factory=CompilerOptions)
    extends: str | ProjectConfig | None = None
    extra: dict = field(default_factory=dict)

    def __post_init__(self):
        if self.extends is not None and not isinstance(self.extends, (str, ProjectConfig)):
            raise ValueError(
                f"extends must be a path string, got {type(self.extends).__name__}"
            )

    @property
    def has_extends(self) -> bool:
        """True while a parent still has to be loaded."""
        return isinstance(self.extends, str) and bool(self.extends)

    @classmethod
    def from_dict(cls, data: dict) -> ProjectConfig:
        extra = {k: v for k, v in data.items() if k not in ("compilerOptions", "extends")}
        return cls(
            compiler_options=CompilerOptions.from_dict(data.get("compilerOptions")),
            extends=data.get("extends") or None,
            extra=extra,
        )

    def to_dict(self) -> dict:
        d = dict(self.extra)
        options = self.compiler_options.to_dict()
        if options:
            d["compilerOptions"] = options
        if isinstance(self.extends, ProjectConfig):
            d["extends"] = self.extends.to_dict()
        elif self.extends is not None:
            d["extends"] = self.extends
        return d


@dataclass(frozen=True)
class AdditionalModulePaths:
    """Extra bundler module directories derived from baseUrl.

    disabled: no baseUrl. not_needed: baseUrl is node_modules or the root.
    enabled: baseUrl is src, paths holds the directories to add.
    """
    kind: str
    paths: tuple[str, ...] = ()

    def __post_init__(self):
        if self.kind not in VALID_MODULE_PATH_KINDS:
            raise ValueError(
                f"kind must be one of {VALID_MODULE_PATH_KINDS}, got {self.kind!r}"
            )
        if self.kind == "enabled" and not self.paths:
            raise ValueError("enabled module paths need at least one directory")
        if self.kind != "enabled" and self.paths:
            raise ValueError(f"{self.kind} module paths must not carry directories")

    @classmethod
    def disabled(cls) -> AdditionalModulePaths:
        return cls("disabled")

    @classmethod
    def not_needed(cls) -> AdditionalModulePaths:
        return cls("not_needed")

    @classmethod
    def enabled(cls, *paths: str) -> AdditionalModulePaths:
        return cls("enabled", tuple(paths))

    def to_legacy(self) -> str | list[str] | None:
        """Sentinel form read by existing bundler configs: "", None or a list."""
        if self.kind == "disabled":
            return ""
        if self.kind == "not_needed":
            return None
        return list(self.paths)


@dataclass(frozen=True)
class ModulesBundle:
    """Everything the bundler and test runner need, computed in one pass.

    The alias tables are copied into read-only mappings.
    """
    additional_module_paths: AdditionalModulePaths
    webpack_aliases: Mapping = field(default_factory=dict)
    jest_aliases: Mapping[str, str] = field(default_factory=dict)
    has_ts_config: bool = False

    def __post_init__(self):
        object.__setattr__(self, "webpack_aliases", MappingProxyType(dict(self.webpack_aliases)))
        object.__setattr__(self, "jest_aliases", MappingProxyType(dict(self.jest_aliases)))

    def to_dict(self) -> dict:
        return {
            "additionalModulePaths": self.additional_module_paths.to_legacy(),
            "webpackAliases": dict(self.webpack_aliases),
            "jestAliases": dict(self.jest_aliases),
            "hasTsConfig": self.has_ts_config,
        }
