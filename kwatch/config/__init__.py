"""Watcher configuration models."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_serializer, field_validator, model_validator

from kwatch.config.app import AppConfig, UpgraderConfig
from kwatch.config.base import ConfigModel
from kwatch.config.filtering import get_allow_forbid_slices
from kwatch.config.monitors import HealthCheckConfig, NodeMonitorConfig, PvcMonitorConfig
from kwatch.config.patterns import compile_ignore_node_messages, get_compiled_ignore_patterns
from kwatch.config.validators import (
    freeze,
    normalize_alert_providers,
    normalize_string_list,
    thaw,
)

DERIVED_FIELDS = frozenset(
    {
        "allowed_namespaces",
        "forbidden_namespaces",
        "allowed_reasons",
        "forbidden_reasons",
        "ignore_log_patterns_compiled",
        "ignore_node_messages_compiled",
    }
)


class WatchConfig(ConfigModel):
    """Complete watcher configuration.

    Raw fields map onto YAML keys. Derived fields are filled in by the
    loader and are excluded from serialization.

    Attributes:
        app: Application settings
        upgrader: Release check settings
        pvc_monitor: PVC usage monitor settings
        node_monitor: Node monitor settings
        health_check: Health check endpoint settings
        max_recent_log_lines: Number of container log lines attached to an alert
        ignore_failed_graceful_shutdown: Ignore pods that failed to shut down gracefully
        namespaces: Namespace filter, "!" prefix forbids
        reasons: Event reason filter, "!" prefix forbids
        ignore_container_names: Container names to ignore
        ignore_pod_names: Pod names to ignore
        ignore_log_patterns: Regular expressions for log lines to ignore
        ignore_node_reasons: Node reasons to ignore, compared verbatim
        ignore_node_messages: Regular expressions for node messages to ignore
        alert: Alert provider settings keyed by provider name
        allowed_namespaces: Derived from namespaces
        forbidden_namespaces: Derived from namespaces
        allowed_reasons: Derived from reasons
        forbidden_reasons: Derived from reasons
        ignore_log_patterns_compiled: Derived from ignore_log_patterns
        ignore_node_messages_compiled: Derived from ignore_node_messages, invalid ones dropped
    """

    app: AppConfig = Field(default_factory=AppConfig)
    upgrader: UpgraderConfig = Field(default_factory=UpgraderConfig)
    pvc_monitor: PvcMonitorConfig = Field(default_factory=PvcMonitorConfig, alias="pvcMonitor")
    node_monitor: NodeMonitorConfig = Field(
        default_factory=NodeMonitorConfig, alias="nodeMonitor"
    )
    health_check: HealthCheckConfig = Field(
        default_factory=HealthCheckConfig, alias="healthCheck"
    )
    max_recent_log_lines: int = Field(default=0, alias="maxRecentLogLines")
    ignore_failed_graceful_shutdown: bool = Field(
        default=False, alias="ignoreFailedGracefulShutdown"
    )
    namespaces: tuple[str, ...] = Field(default=())
    reasons: tuple[str, ...] = Field(default=())
    ignore_container_names: tuple[str, ...] = Field(default=(), alias="ignoreContainerNames")
    ignore_pod_names: tuple[str, ...] = Field(default=(), alias="ignorePodNames")
    ignore_log_patterns: tuple[str, ...] = Field(default=(), alias="ignoreLogPatterns")
    ignore_node_reasons: tuple[str, ...] = Field(default=(), alias="ignoreNodeReasons")
    ignore_node_messages: tuple[str, ...] = Field(default=(), alias="ignoreNodeMessages")
    alert: Mapping[str, Mapping[str, Any]] = Field(default_factory=lambda: freeze({}))

    # Derived
    allowed_namespaces: tuple[str, ...] = Field(default=(), exclude=True)
    forbidden_namespaces: tuple[str, ...] = Field(default=(), exclude=True)
    allowed_reasons: tuple[str, ...] = Field(default=(), exclude=True)
    forbidden_reasons: tuple[str, ...] = Field(default=(), exclude=True)
    ignore_log_patterns_compiled: tuple[re.Pattern[str], ...] = Field(default=(), exclude=True)
    ignore_node_messages_compiled: tuple[re.Pattern[str], ...] = Field(default=(), exclude=True)

    @model_validator(mode="before")
    @classmethod
    def drop_derived_fields(cls, data: Any) -> Any:
        """Ignore derived field names in input; only the loader sets them."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if key not in DERIVED_FIELDS}
        return data

    @field_validator(
        "namespaces",
        "reasons",
        "ignore_container_names",
        "ignore_pod_names",
        "ignore_log_patterns",
        "ignore_node_reasons",
        "ignore_node_messages",
        mode="before",
    )
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        """Treat a YAML null list as empty."""
        return normalize_string_list(v)

    @field_validator("alert", mode="before")
    @classmethod
    def null_alert_to_empty(cls, v: Any) -> Any:
        """Treat null alert sections and provider entries as empty."""
        return normalize_alert_providers(v)

    @field_validator("alert", mode="after")
    @classmethod
    def freeze_alert(cls, v: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Mapping[str, Any]]:
        """Make provider settings read-only."""
        return freeze(v)

    @field_serializer("alert")
    def serialize_alert(self, v: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
        """Serialize provider settings as plain dicts."""
        return thaw(v)

    @property
    def alert_providers(self) -> list[str]:
        """Get configured alert provider names.

        Returns:
            Provider names, sorted
        """
        return sorted(self.alert)


__all__ = [
    # App
    "AppConfig",
    "UpgraderConfig",
    # Monitors
    "PvcMonitorConfig",
    "NodeMonitorConfig",
    "HealthCheckConfig",
    # Helpers
    "get_allow_forbid_slices",
    "get_compiled_ignore_patterns",
    "compile_ignore_node_messages",
    # Main
    "ConfigModel",
    "WatchConfig",
]
