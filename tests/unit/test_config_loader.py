"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading and merging
    ✅ Error Handling: Invalid values, missing files
"""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from patient_directory.config.loader import (
    CONFIG_ENV_VAR,
    PROFILE_ENV_VAR,
    ConfigLoader,
    deep_merge,
    load_config,
)
from patient_directory.config.models import DirectoryConfig

REPO_ROOT = Path(__file__).resolve().parents[2]


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: DirectoryConfig object created
        """
        # Arrange
        config_content = """
version: "1.0"
data_source:
  path: /srv/data/patients.json
pagination:
  default_limit: 50
sorting:
  allowed_fields:
    - age
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("config.yaml")

        # Assert
        assert isinstance(config, DirectoryConfig)
        assert config.data_source.path == "/srv/data/patients.json"
        assert config.pagination.default_limit == 50
        assert config.pagination.max_limit == 100
        assert config.sorting.allowed_fields == ["age"]

    def test_applies_defaults(self) -> None:
        config = ConfigLoader().load_from_dict({"version": "1.0"})

        assert config.pagination.default_limit == 20
        assert config.pagination.max_limit == 100
        assert config.filters.search is True
        assert config.data_source.path is None

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: default_limit above max_limit
        EXPECTED: pydantic ValidationError raised
        """
        config_file = tmp_path / "config.yaml"
        config_file.write_text("pagination:\n  default_limit: 500\n  max_limit: 100\n")

        with pytest.raises(pydantic.ValidationError):
            ConfigLoader(base_path=tmp_path).load("config.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        assert config == DirectoryConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("absent.yaml")

    def test_profile_overlay(self, tmp_path: Path) -> None:
        """
        SCENARIO: Base config plus development profile
        EXPECTED: Profile keys override, other keys kept
        """
        (tmp_path / "config" / "profiles").mkdir(parents=True)
        (tmp_path / "config" / "base.yaml").write_text(
            "logging:\n  level: INFO\n  use_json: true\npagination:\n  default_limit: 30\n"
        )
        (tmp_path / "config" / "profiles" / "dev.yaml").write_text(
            "logging:\n  level: DEBUG\n"
        )

        config = ConfigLoader(base_path=tmp_path).load("config/base.yaml", profile="dev")

        assert config.logging.level == "DEBUG"
        assert config.logging.use_json is True
        assert config.pagination.default_limit == 30

    def test_missing_profile(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text("version: '1.0'\n")

        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("base.yaml", profile="nope")

    def test_shipped_default_config_is_valid(self) -> None:
        config = ConfigLoader(base_path=REPO_ROOT).load("config/default.yaml")

        assert config == DirectoryConfig()


class TestLoadConfig:
    """Test cases for load_config()."""

    def test_defaults_without_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        assert load_config() == DirectoryConfig()

    def test_reads_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "env.yaml"
        config_file.write_text("pagination:\n  default_limit: 7\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert load_config().pagination.default_limit == 7

    def test_reads_profile_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """
        SCENARIO: Config and profile both named by environment variables
        EXPECTED: Profile found beside the config file and merged over it
        """
        (tmp_path / "profiles").mkdir()
        (tmp_path / "base.yaml").write_text("pagination:\n  default_limit: 7\n")
        (tmp_path / "profiles" / "qa.yaml").write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "base.yaml"))
        monkeypatch.setenv(PROFILE_ENV_VAR, "qa")

        config = load_config()

        assert config.pagination.default_limit == 7
        assert config.logging.level == "DEBUG"

    def test_shipped_development_profile(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(PROFILE_ENV_VAR, raising=False)

        config = load_config(REPO_ROOT / "config" / "default.yaml", profile="development")

        assert config.logging.level == "DEBUG"
        assert config.logging.use_json is False


class TestDeepMerge:
    """Test cases for deep_merge()."""

    def test_nested_keys_merge(self) -> None:
        base = {"pagination": {"default_limit": 20, "max_limit": 100}, "version": "1"}

        merged = deep_merge(base, {"pagination": {"default_limit": 5}})

        assert merged == {"pagination": {"default_limit": 5, "max_limit": 100}, "version": "1"}
        assert base["pagination"]["default_limit"] == 20

    def test_scalar_replaces_mapping(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}
