"""Structured logging configuration using structlog.

This module sets up structured logging for kwatch. The output format
follows the `app.logFormatter` setting of the loaded configuration:
"json" renders one JSON object per line, anything else renders
human-readable console output.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from kwatch.core.config import get_settings

APP_NAME = "kwatch"
JSON_FORMATTER = "json"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log events.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary

    Returns:
        Updated event dictionary with app context
    """
    event_dict["app"] = APP_NAME
    return event_dict


def setup_logging(log_formatter: str | None = None, log_level: str | None = None) -> None:
    """Configure structured logging.

    Safe to call more than once; the latest call wins. kwatch calls it
    once before loading the configuration and again afterwards so that
    `app.logFormatter` takes effect.

    Args:
        log_formatter: "json" for JSON output, anything else for console output
        log_level: Logging level name (defaults to LOG_LEVEL from the environment)

    Example:
        >>> setup_logging(log_formatter="json")
        >>> logger = structlog.get_logger()
        >>> logger.info("Config loaded", path="config.yaml")
    """
    level = (log_level or get_settings().log_level).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
        force=True,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if (log_formatter or "").lower() == JSON_FORMATTER:
        processors.extend(
            [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.dev.ConsoleRenderer(colors=False),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name (defaults to calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
