"""Base model shared by all configuration sections."""

from pydantic import BaseModel, ConfigDict


class ConfigModel(BaseModel):
    """Frozen model that accepts camelCase YAML keys or snake_case names.

    Unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


__all__ = ["ConfigModel"]
