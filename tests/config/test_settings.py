"""Tests for IslandSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from island.config.discovery import CONFIG_FILENAME
from island.config.settings import IslandSettings
from island.errors import ConfigurationError


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = IslandSettings.load(start=tmp_path)
        assert settings.config_path is None
        assert settings.logging.verbose is False
        assert settings.logging.log_json is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = IslandSettings.load(start=tmp_path)
        with pytest.raises(Exception):
            settings.config_path = tmp_path  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / CONFIG_FILENAME
        toml.write_text("[logging]\nverbose = true\n")
        settings = IslandSettings.load(start=tmp_path)
        assert settings.config_path == toml
        assert settings.logging.verbose is True
        assert settings.logging.log_json is False  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[logging]\nlog_json = true\n")
        settings = IslandSettings.load(config_path=custom, start=tmp_path)
        assert settings.logging.log_json is True
        assert settings.config_path == custom

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("not = [valid")
        with pytest.raises(ConfigurationError):
            IslandSettings.load(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[logging]\nverbose = false\n")
        monkeypatch.setenv("ISLAND_LOGGING__VERBOSE", "true")
        settings = IslandSettings.load(start=tmp_path)
        assert settings.logging.verbose is True

    def test_overrides_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISLAND_LOGGING__LOG_JSON", "true")
        settings = IslandSettings.load(start=tmp_path, logging={"log_json": False})
        assert settings.logging.log_json is False
