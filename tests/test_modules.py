"""Tests for modules.py — end-to-end bundle computation."""

import os

import pytest

from tsmodules.errors import (
    ConfigLoadError,
    ConflictingConfigError,
    InvalidPathsError,
    UnsupportedBaseUrlError,
)
from tsmodules.loader import load_config_file
from tsmodules.modules import get_modules, load_project_config
from tsmodules.paths import ProjectPaths


class TestLoadProjectConfig:
    def test_no_config(self, project_paths):
        config, has_ts = load_project_config(project_paths)
        assert config.to_dict() == {}
        assert has_ts is False

    def test_both_configs_conflict(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {})
        write_json(project / "jsconfig.json", {})
        calls = []

        def load(path):
            calls.append(path)
            return load_config_file(path)

        with pytest.raises(ConflictingConfigError, match="both a tsconfig.json and a jsconfig.json"):
            load_project_config(project_paths, load)
        assert calls == []

    def test_jsconfig(self, project, project_paths, write_json):
        write_json(project / "jsconfig.json", {"compilerOptions": {"baseUrl": "src"}})
        config, has_ts = load_project_config(project_paths)
        assert config.compiler_options.base_url == "src"
        assert has_ts is False

    def test_extends_resolved(self, project, project_paths, write_json):
        write_json(project / "config" / "base.json", {
            "compilerOptions": {"paths": {"@shared/*": ["src/shared/*"]}},
        })
        write_json(project / "tsconfig.json", {
            "extends": "./config/base.json",
            "compilerOptions": {"baseUrl": "."},
        })
        config, has_ts = load_project_config(project_paths)
        assert has_ts is True
        assert config.compiler_options.paths == {
            "@shared": os.path.join(str(project), "src", "shared"),
        }
        assert config.extends.compiler_options.paths == {"@shared/*": ["src/shared/*"]}

    def test_missing_parent_raises(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {"extends": "./nope.json"})
        with pytest.raises(ConfigLoadError, match="nope.json"):
            load_project_config(project_paths)


class TestGetModules:
    def test_no_config(self, project_paths):
        bundle = get_modules(project_paths)
        assert bundle.to_dict() == {
            "additionalModulePaths": "",
            "webpackAliases": {},
            "jestAliases": {},
            "hasTsConfig": False,
        }

    def test_base_url_src(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {"compilerOptions": {"baseUrl": "src"}})
        bundle = get_modules(project_paths)
        assert bundle.to_dict() == {
            "additionalModulePaths": [project_paths.app_src],
            "webpackAliases": {},
            "jestAliases": {},
            "hasTsConfig": True,
        }

    def test_base_url_root_with_paths(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {
            "compilerOptions": {"baseUrl": ".", "paths": {"@app/*": ["src/app/*"]}},
        })
        bundle = get_modules(project_paths)
        assert bundle.additional_module_paths.to_legacy() is None
        assert bundle.webpack_aliases == {
            "src": project_paths.app_src,
            "@app": os.path.join(str(project), "src", "app"),
        }
        assert bundle.jest_aliases == {"^src/(.*)$": "<rootDir>/src/$1"}

    def test_base_url_outside_allowed_dirs(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {"compilerOptions": {"baseUrl": "./packages/shared"}})
        with pytest.raises(UnsupportedBaseUrlError):
            get_modules(project_paths)

    def test_base_url_node_modules(self, project, project_paths, write_json):
        write_json(project / "jsconfig.json", {"compilerOptions": {"baseUrl": "node_modules"}})
        bundle = get_modules(project_paths)
        assert bundle.additional_module_paths.kind == "not_needed"
        assert bundle.has_ts_config is False

    def test_both_configs(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {"compilerOptions": {"baseUrl": "bad"}})
        write_json(project / "jsconfig.json", {})
        with pytest.raises(ConflictingConfigError):
            get_modules(project_paths)

    def test_inherited_paths_collision_parent_wins(self, project, project_paths, write_json):
        write_json(project / "base.json", {
            "compilerOptions": {"paths": {"utils/*": ["src/parent-utils/*"]}},
        })
        write_json(project / "tsconfig.json", {
            "extends": "./base",
            "compilerOptions": {"baseUrl": ".", "paths": {"utils/*": ["src/child-utils/*"]}},
        })
        bundle = get_modules(project_paths)
        assert bundle.webpack_aliases["utils"] == os.path.join(str(project), "src", "parent-utils")

    def test_inherited_paths_not_mapping(self, project, project_paths, write_json):
        write_json(project / "base.json", {"compilerOptions": {"paths": ["src"]}})
        write_json(project / "tsconfig.json", {"extends": "./base.json"})
        with pytest.raises(InvalidPathsError):
            get_modules(project_paths)

    def test_extends_without_base_url_passes_aliases_through(self, project, project_paths, write_json):
        write_json(project / "base.json", {"compilerOptions": {"paths": {"@lib/*": ["lib/*"]}}})
        write_json(project / "jsconfig.json", {"extends": "./base.json"})
        bundle = get_modules(project_paths)
        assert bundle.webpack_aliases == {"@lib": os.path.join(str(project), "lib")}
        assert bundle.additional_module_paths.kind == "disabled"

    def test_recomputes_each_call(self, project, project_paths, write_json):
        assert get_modules(project_paths).has_ts_config is False
        write_json(project / "tsconfig.json", {})
        assert get_modules(project_paths).has_ts_config is True

    def test_defaults_to_cwd(self, project, write_json, monkeypatch):
        write_json(project / "tsconfig.json", {"compilerOptions": {"baseUrl": "src"}})
        monkeypatch.chdir(project)
        bundle = get_modules()
        assert bundle.additional_module_paths.paths == (str(project / "src"),)

    def test_custom_layout(self, project, write_json):
        write_json(project / "tsconfig.app.json", {"compilerOptions": {"baseUrl": "app"}})
        paths = ProjectPaths.from_root(project, {"src": "app", "tsconfig": "tsconfig.app.json"})
        bundle = get_modules(paths)
        assert bundle.additional_module_paths.paths == (str(project / "app"),)

    def test_empty_paths_list_without_extends(self, project, project_paths, write_json):
        write_json(project / "tsconfig.json", {"compilerOptions": {"paths": []}})
        assert get_modules(project_paths).webpack_aliases == {}

    def test_empty_paths_list_with_extends(self, project, project_paths, write_json):
        write_json(project / "base.json", {})
        write_json(project / "tsconfig.json", {
            "extends": "./base.json",
            "compilerOptions": {"paths": []},
        })
        assert get_modules(project_paths).webpack_aliases == {}
