"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: defaults < global < project < env < kwargs
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

from typemeta.config import loader
from typemeta.config.loader import _deep_merge, _load_yaml, load_config
from typemeta.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config at tmp_path and run from an empty directory."""
    global_path = tmp_path / "global.yaml"
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", global_path)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in list(os.environ):
        if name.upper().startswith("TYPEMETA__"):
            monkeypatch.delenv(name)
    return global_path


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        base = {"resolution": {"runtime_fallback": True, "import_modules": True}}
        override = {"resolution": {"import_modules": False}}

        assert _deep_merge(base, override) == {
            "resolution": {"runtime_fallback": True, "import_modules": False}
        }

    def test_override_replaces_non_dict(self) -> None:
        base: dict[str, Any] = {"a": {"nested": 1}}
        override: dict[str, Any] = {"a": "simple"}
        assert _deep_merge(base, override) == {"a": "simple"}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_when_no_files(self) -> None:
        config = load_config()

        assert config.logging.level == "INFO"
        assert config.resolution.runtime_fallback is True
        assert config.resolution.reflexive_subtypes is False
        assert config.formats.overrides == {}

    def test_project_file_in_working_directory(self) -> None:
        Path("typemeta.yaml").write_text("resolution:\n  import_modules: false\n")

        assert load_config().resolution.import_modules is False

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("logging:\n  level: WARNING\n")

        assert load_config(path).logging.level == "WARNING"

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_project_overrides_global(self, isolated_config: Path, tmp_path: Path) -> None:
        # Given
        isolated_config.write_text(
            "logging:\n  level: ERROR\nresolution:\n  reflexive_subtypes: true\n"
        )
        project = tmp_path / "project.yaml"
        project.write_text("logging:\n  level: DEBUG\n")

        # When
        config = load_config(project)

        # Then
        assert config.logging.level == "DEBUG"
        assert config.resolution.reflexive_subtypes is True

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # Given
        project = tmp_path / "project.yaml"
        project.write_text("resolution:\n  runtime_fallback: true\n")
        monkeypatch.setenv("TYPEMETA__RESOLUTION__RUNTIME_FALLBACK", "false")

        # When
        config = load_config(project)

        # Then
        assert config.resolution.runtime_fallback is False

    def test_kwargs_override_everything(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TYPEMETA__LOGGING__LEVEL", "ERROR")

        config = load_config(logging={"level": "DEBUG"})

        assert config.logging.level == "DEBUG"

    def test_format_overrides_from_yaml(self, tmp_path: Path) -> None:
        # Given
        project = tmp_path / "project.yaml"
        project.write_text(
            "formats:\n  overrides:\n    uuid.UUID:\n      type: string\n"
            "    app.Money:\n      type: number\n      format: double\n"
        )

        # When
        overrides = load_config(project).formats.overrides

        # Then
        assert overrides["uuid.UUID"].type.value == "string"
        assert overrides["app.Money"].format.value == "double"

    def test_incompatible_override_is_invalid(self, tmp_path: Path) -> None:
        project = tmp_path / "project.yaml"
        project.write_text(
            "formats:\n  overrides:\n    app.Flag:\n      type: boolean\n      format: int32\n"
        )

        with pytest.raises(ConfigError) as exc_info:
            load_config(project)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE

    def test_invalid_log_level(self, tmp_path: Path) -> None:
        project = tmp_path / "project.yaml"
        project.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(project)
        assert exc_info.value.details["field"].startswith("logging")
