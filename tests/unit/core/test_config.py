"""Tests for kwatch.core.config module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kwatch.core.config import (
    DEFAULT_CONFIG_FILE,
    Settings,
    get_settings,
    resolve_config_path,
)
from kwatch.core.exceptions import ConfigError


@pytest.mark.unit
def test_settings_default_values():
    """Test settings defaults without environment variables."""
    settings = Settings()

    assert settings.config_file == "config.yaml"
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_settings_from_env(monkeypatch):
    """Test settings are read from the environment."""
    monkeypatch.setenv("CONFIG_FILE", "/config/config.yaml")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.config_file == "/config/config.yaml"
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_settings_empty_env_ignored(monkeypatch):
    """Test an empty CONFIG_FILE counts as unset."""
    monkeypatch.setenv("CONFIG_FILE", "")
    assert Settings().config_file == DEFAULT_CONFIG_FILE


@pytest.mark.unit
def test_settings_invalid_log_level(monkeypatch):
    """Test unknown log levels are rejected."""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.unit
def test_resolve_config_path_default():
    """Test the default path is used when CONFIG_FILE is missing."""
    assert resolve_config_path() == Path("config.yaml")
    assert resolve_config_path() == resolve_config_path()


@pytest.mark.unit
def test_resolve_config_path_env(monkeypatch):
    """Test CONFIG_FILE overrides the default."""
    monkeypatch.setenv("CONFIG_FILE", "custom.yaml")
    assert resolve_config_path() == Path("custom.yaml")


@pytest.mark.unit
def test_resolve_config_path_explicit_wins(monkeypatch):
    """Test an explicit path bypasses the environment."""
    monkeypatch.setenv("CONFIG_FILE", "custom.yaml")
    assert resolve_config_path("explicit.yaml") == Path("explicit.yaml")
    assert resolve_config_path(Path("/etc/kwatch.yaml")) == Path("/etc/kwatch.yaml")


@pytest.mark.unit
def test_settings_log_level_any_case(monkeypatch):
    """Test lowercase level names are accepted."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"

    monkeypatch.setenv("LOG_LEVEL", "Warning")
    assert Settings().log_level == "WARNING"


@pytest.mark.unit
def test_resolve_config_path_ignores_log_level(monkeypatch):
    """Test finding the config file doesn't depend on LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setenv("CONFIG_FILE", "custom.yaml")

    assert resolve_config_path() == Path("custom.yaml")


@pytest.mark.unit
def test_get_settings_invalid_env(monkeypatch):
    """Test invalid environment settings raise ConfigError."""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setattr("kwatch.core.config._settings", None)

    with pytest.raises(ConfigError, match="log_level") as exc_info:
        get_settings()

    assert isinstance(exc_info.value.__cause__, ValidationError)


@pytest.mark.unit
def test_get_settings_singleton(monkeypatch):
    """Test get_settings returns the same instance."""
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setattr("kwatch.core.config._settings", None)

    assert get_settings() is get_settings()
    assert get_settings().log_level == "ERROR"
