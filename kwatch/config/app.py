"""Application-level configuration models."""

from pydantic import Field

from kwatch.config.base import ConfigModel


class AppConfig(ConfigModel):
    """Descriptive settings for the watcher process.

    Attributes:
        proxy_url: HTTP proxy used by alert providers
        cluster_name: Cluster name shown in alerts
        disable_startup_message: Skip the "kwatch started" notification
        log_formatter: "json" for JSON logs, empty or "text" for console logs
    """

    proxy_url: str = Field(default="", alias="proxyURL")
    cluster_name: str = Field(default="", alias="clusterName")
    disable_startup_message: bool = Field(default=False, alias="disableStartupMessage")
    log_formatter: str = Field(default="", alias="logFormatter")


class UpgraderConfig(ConfigModel):
    """Release check settings.

    Attributes:
        disable_update_check: Do not check for newer releases
    """

    disable_update_check: bool = Field(default=False, alias="disableUpdateCheck")


__all__ = ["AppConfig", "UpgraderConfig"]
