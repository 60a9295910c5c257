"""Custom exceptions for kwatch.

This module defines all custom exceptions raised while loading configuration.
All exceptions inherit from KWatchError for easy catching.

Exception classes include context dictionaries for structured logging
and debugging. Use the `context` property to access additional details.
"""

from typing import Any


class KWatchError(Exception):
    """Base exception for all kwatch errors.

    Provides a context dictionary for structured error information.

    Attributes:
        context: Dictionary with additional error context

    Example:
        >>> try:
        ...     raise KWatchError("Something went wrong", context={"path": "config.yaml"})
        ... except KWatchError as e:
        ...     print(f"Error: {e}, Context: {e.context}")
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize KWatchError.

        Args:
            message: Error message
            context: Optional dictionary with additional context
        """
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **kwargs: Any) -> "KWatchError":
        """Add additional context to the exception.

        Args:
            **kwargs: Key-value pairs to add to context

        Returns:
            Self for method chaining
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with error type, message, and context
        """
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(KWatchError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message
            config_path: Path to the config file
            context: Additional context
        """
        ctx = context or {}
        if config_path:
            ctx["config_path"] = config_path
        super().__init__(message, context=ctx)
        self.config_path = config_path

    def with_config_path(self, config_path: str) -> "ConfigError":
        """Record the config file the error belongs to.

        Args:
            config_path: Path to the config file

        Returns:
            Self for method chaining
        """
        self.config_path = config_path
        self.context["config_path"] = config_path
        return self


class FileReadError(ConfigError):
    """Raised when the config file is missing, unreadable, or the path is invalid."""


class DeserializationError(ConfigError):
    """Raised when config content is not valid YAML or does not fit the schema.

    Attributes:
        errors: Individual problems, one string per offending field
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize DeserializationError.

        Args:
            message: Error message
            errors: Per-field error descriptions
            config_path: Path to config file
            context: Additional context
        """
        ctx = context or {}
        self.errors = errors or []
        if self.errors:
            ctx["errors"] = self.errors
        super().__init__(message, config_path=config_path, context=ctx)


class PatternCompileError(ConfigError):
    """Raised when a required ignore pattern is not a valid regular expression.

    Attributes:
        pattern: The offending pattern
        index: Position of the pattern in its list
        reason: Compiler error message
    """

    def __init__(
        self,
        pattern: str,
        reason: str,
        index: int | None = None,
        config_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize PatternCompileError.

        Args:
            pattern: Pattern that failed to compile
            reason: Compiler error message
            index: Position of the pattern in its list
            config_path: Path to config file
            context: Additional context
        """
        ctx = context or {}
        ctx.update({"pattern": pattern, "reason": reason})
        if index is not None:
            ctx["index"] = index
        super().__init__(
            f"Invalid ignore pattern '{pattern}': {reason}",
            config_path=config_path,
            context=ctx,
        )
        self.pattern = pattern
        self.reason = reason
        self.index = index


__all__ = [
    "KWatchError",
    "ConfigError",
    "FileReadError",
    "DeserializationError",
    "PatternCompileError",
]
