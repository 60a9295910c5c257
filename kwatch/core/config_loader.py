"""Configuration loader for the watcher.

This module reads the YAML configuration file, validates it against
WatchConfig and fills in the derived fields:
- allow/forbid namespace and reason sets
- compiled ignore patterns for log lines (strict)
- compiled ignore patterns for node messages (tolerant)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kwatch.config import (
    WatchConfig,
    compile_ignore_node_messages,
    get_allow_forbid_slices,
    get_compiled_ignore_patterns,
)
from kwatch.core.config import resolve_config_path
from kwatch.core.exceptions import (
    ConfigError,
    DeserializationError,
    FileReadError,
    PatternCompileError,
)
from kwatch.core.logging import get_logger

logger = get_logger(__name__)


def load_config(config_path: str | Path | None = None) -> WatchConfig:
    """Load the watcher configuration.

    Args:
        config_path: Explicit config file path. Defaults to CONFIG_FILE,
            then config.yaml in the working directory.

    Returns:
        Fully populated, frozen WatchConfig

    Raises:
        FileReadError: If the file can't be read
        DeserializationError: If the content is not a valid configuration
        PatternCompileError: If an ignoreLogPatterns entry is not a valid regex
    """
    path = resolve_config_path(config_path)
    raw = _read_config_bytes(path)
    data = _parse_yaml(raw, path)
    config = _validate_config(data, path)

    try:
        config = _derive_fields(config)
    except PatternCompileError as e:
        e.with_config_path(str(path)).with_context(field="ignoreLogPatterns")
        raise

    logger.info(
        "Config loaded",
        path=str(path),
        allowed_namespaces=len(config.allowed_namespaces),
        forbidden_namespaces=len(config.forbidden_namespaces),
        ignore_log_patterns=len(config.ignore_log_patterns_compiled),
        ignore_node_messages=len(config.ignore_node_messages_compiled),
    )
    return config


# =============================================================================
# ConfigLoader - Reloadable wrapper
# =============================================================================


class ConfigLoader:
    """Loads and reloads the watcher configuration.

    Example:
        >>> loader = ConfigLoader("config.yaml")
        >>> config = loader.load()
        >>> print(config.app.cluster_name)
        'development'
    """

    def __init__(self, config_path: Path | str | None = None):
        """Initialize the loader.

        Args:
            config_path: Config file path. None resolves the path on every load,
                so CONFIG_FILE changes are picked up by reload().
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self._config: WatchConfig | None = None

    @property
    def config(self) -> WatchConfig | None:
        """Get the last successfully loaded config.

        Returns:
            Loaded config, or None if nothing was loaded yet
        """
        return self._config

    def load(self) -> WatchConfig:
        """Load the config, reusing a previous result if there is one.

        Returns:
            Loaded WatchConfig

        Raises:
            ConfigError: If loading fails
        """
        if self._config is not None:
            return self._config
        return self.reload()

    def reload(self) -> WatchConfig:
        """Load the config from disk.

        A failed reload keeps the previously loaded config.

        Returns:
            Freshly loaded WatchConfig

        Raises:
            ConfigError: If loading fails
        """
        config = load_config(self.config_path)
        self._config = config
        return config

    def validate(self, config_path: Path | str | None = None) -> tuple[bool, list[str]]:
        """Check whether a config file loads, without keeping the result.

        Args:
            config_path: File to check (defaults to this loader's path)

        Returns:
            Tuple of (is_valid, error_messages)
        """
        try:
            load_config(config_path if config_path is not None else self.config_path)
        except DeserializationError as e:
            return False, e.errors or [str(e)]
        except ConfigError as e:
            return False, [str(e)]
        return True, []


# =============================================================================
# Private helpers
# =============================================================================


def _read_config_bytes(path: Path) -> bytes:
    """Read the config file.

    Args:
        path: Path to the config file

    Returns:
        Raw file content

    Raises:
        FileReadError: If the file is missing, unreadable or the path is invalid
    """
    try:
        return path.read_bytes()
    except (OSError, ValueError) as e:
        logger.error("Failed to read config file", path=str(path), error=str(e))
        raise FileReadError(f"Cannot read {path}: {e}", config_path=str(path)) from e


def _parse_yaml(raw: bytes, path: Path) -> dict[str, Any]:
    """Parse raw YAML content.

    Empty content parses to an empty mapping.

    Args:
        raw: File content
        path: Path for error messages

    Returns:
        Parsed YAML mapping

    Raises:
        DeserializationError: If the YAML is malformed or not a mapping
    """
    try:
        content = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logger.error("YAML parsing failed", path=str(path), error=str(e))
        raise DeserializationError(f"Invalid YAML in {path}: {e}", config_path=str(path)) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        logger.error("Config is not a mapping", path=str(path), type=type(content).__name__)
        raise DeserializationError(
            f"Config file must contain a YAML object: {path}", config_path=str(path)
        )
    return content


def _validate_config(data: dict[str, Any], path: Path) -> WatchConfig:
    """Validate parsed YAML against the schema.

    Args:
        data: Parsed YAML mapping
        path: Path for error messages

    Returns:
        WatchConfig with raw fields only

    Raises:
        DeserializationError: If validation fails
    """
    try:
        return WatchConfig.model_validate(data)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(loc_part) for loc_part in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.error("Config validation failed", path=str(path), errors=error_messages)
        full_error = "\n".join(error_messages)
        raise DeserializationError(
            f"Invalid configuration in {path}:\n{full_error}",
            errors=error_messages,
            config_path=str(path),
        ) from e


def _derive_fields(config: WatchConfig) -> WatchConfig:
    """Compute the derived fields of a freshly validated config.

    Args:
        config: Config with raw fields only

    Returns:
        New WatchConfig with derived fields set

    Raises:
        PatternCompileError: If an ignore log pattern does not compile
    """
    allowed_namespaces, forbidden_namespaces = get_allow_forbid_slices(config.namespaces)
    allowed_reasons, forbidden_reasons = get_allow_forbid_slices(config.reasons)
    log_patterns = get_compiled_ignore_patterns(config.ignore_log_patterns)
    node_messages = compile_ignore_node_messages(config.ignore_node_messages)

    return config.model_copy(
        update={
            "allowed_namespaces": tuple(allowed_namespaces),
            "forbidden_namespaces": tuple(forbidden_namespaces),
            "allowed_reasons": tuple(allowed_reasons),
            "forbidden_reasons": tuple(forbidden_reasons),
            "ignore_log_patterns_compiled": tuple(log_patterns),
            "ignore_node_messages_compiled": tuple(node_messages),
        }
    )


__all__ = ["ConfigLoader", "load_config"]
