"""Process settings using Pydantic Settings.

This module defines the settings kwatch reads from environment variables
before the YAML configuration is loaded: where the config file lives and
how verbose logging should be.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kwatch.core.exceptions import ConfigError

DEFAULT_CONFIG_FILE = "config.yaml"


class ConfigFileSettings(BaseSettings):
    """Location of the configuration file.

    Kept apart from the other settings so that finding the config file
    never depends on unrelated environment variables being valid.
    Empty environment values are treated as unset.

    Example:
        >>> settings = ConfigFileSettings()
        >>> print(settings.config_file)
        'config.yaml'
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    config_file: str = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Path to the YAML configuration file (CONFIG_FILE)",
    )


class Settings(ConfigFileSettings):
    """Environment settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level (LOG_LEVEL)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Resolve the configuration file location.

    An explicit path wins. Otherwise the CONFIG_FILE environment variable
    is read, falling back to DEFAULT_CONFIG_FILE in the working directory.

    Args:
        config_path: Explicit path, bypassing the environment

    Returns:
        Path to the configuration file
    """
    if config_path is not None:
        return Path(config_path)
    return Path(ConfigFileSettings().config_file)


# =============================================================================
# Singleton accessor
# =============================================================================

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global Settings singleton.

    Returns:
        The global Settings instance

    Raises:
        ConfigError: If an environment variable has an invalid value
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            error_messages = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigError(
                "Invalid environment settings: " + "; ".join(error_messages),
                context={"errors": error_messages},
            ) from e
    return _settings
