#!/usr/bin/env python3
"""Startup entry point.

Loads the watcher configuration the way the watcher does at startup and
reports the result. A configuration error is fatal: it is logged, a
readable message goes to stderr, and the process exits with status 1.

Usage:
    # Use CONFIG_FILE or ./config.yaml
    kwatch-config

    # Explicit file, print the effective configuration
    kwatch-config --config /config/config.yaml --print
"""

import argparse
import sys
from collections.abc import Sequence

import structlog
import yaml

from kwatch.config import WatchConfig
from kwatch.core.config_loader import load_config
from kwatch.core.exceptions import ConfigError
from kwatch.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="kwatch-config",
        description="Load and check the kwatch configuration file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to the config file (default: $CONFIG_FILE or ./config.yaml)",
    )
    parser.add_argument(
        "--print",
        dest="print_config",
        action="store_true",
        help="Print the effective configuration as YAML",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL",
    )
    return parser


def dump_config(config: WatchConfig) -> str:
    """Render the raw fields of a config as YAML.

    Args:
        config: Loaded configuration

    Returns:
        YAML document using the same keys as the config file
    """
    data = config.model_dump(mode="json", by_alias=True)
    return yaml.safe_dump(data, sort_keys=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the startup configuration check.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    structlog.contextvars.clear_contextvars()

    try:
        setup_logging(log_level=args.log_level)
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Failed to load config", **e.to_dict())
        print(f"kwatch: {e}", file=sys.stderr)
        return 1

    setup_logging(log_formatter=config.app.log_formatter, log_level=args.log_level)
    if config.app.cluster_name:
        structlog.contextvars.bind_contextvars(cluster=config.app.cluster_name)

    logger.info(
        "Configuration ready",
        allowed_namespaces=list(config.allowed_namespaces),
        forbidden_namespaces=list(config.forbidden_namespaces),
        allowed_reasons=list(config.allowed_reasons),
        forbidden_reasons=list(config.forbidden_reasons),
        alert_providers=config.alert_providers,
        pvc_monitor=config.pvc_monitor.enabled,
        node_monitor=config.node_monitor.enabled,
    )

    if args.print_config:
        print(dump_config(config), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
