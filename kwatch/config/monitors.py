"""Monitor configuration models.

Zero values mean "not configured"; consumers decide their own fallbacks.
"""

from pydantic import Field

from kwatch.config.base import ConfigModel


class PvcMonitorConfig(ConfigModel):
    """Persistent volume claim usage monitor.

    Attributes:
        enabled: Whether the monitor runs
        interval: Minutes between checks
        threshold: Usage percentage that triggers an alert
    """

    enabled: bool = Field(default=False)
    interval: int = Field(default=0, ge=0)
    threshold: float = Field(default=0.0, ge=0, le=100)


class NodeMonitorConfig(ConfigModel):
    """Node condition monitor.

    Attributes:
        enabled: Whether node events are watched
    """

    enabled: bool = Field(default=False)


class HealthCheckConfig(ConfigModel):
    """Health check endpoint.

    Attributes:
        enabled: Whether the endpoint is served
        port: Listen port
    """

    enabled: bool = Field(default=False)
    port: int = Field(default=0, ge=0, le=65535)


__all__ = ["PvcMonitorConfig", "NodeMonitorConfig", "HealthCheckConfig"]
