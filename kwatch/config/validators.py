"""Shared validators for Pydantic config models.

YAML leaves a key with no value as null. These helpers turn such nulls
into empty containers so that `namespaces:` on its own line behaves the
same as omitting the key. Free-form sections are frozen into read-only
containers and thawed back for serialization.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def normalize_string_list(value: Any) -> Any:
    """Normalize a list-of-strings field.

    None becomes an empty tuple and lists become tuples. Anything else is
    returned unchanged so that Pydantic reports the type error.

    Args:
        value: Raw value from YAML

    Returns:
        Tuple of entries, or the original value
    """
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(value)
    return value


def normalize_alert_providers(value: Any) -> Any:
    """Normalize the alert provider mapping.

    Handles a null section and providers declared without settings.

    Args:
        value: Raw value from YAML

    Returns:
        Mapping of provider name to settings dict, or the original value
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {name: settings if settings is not None else {} for name, settings in value.items()}
    return value


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples.

    Args:
        value: Parsed YAML value

    Returns:
        Read-only equivalent
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Undo freeze(), producing plain dicts and lists.

    Args:
        value: Value produced by freeze()

    Returns:
        Plain, YAML-serializable equivalent
    """
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


__all__ = [
    "normalize_string_list",
    "normalize_alert_providers",
    "freeze",
    "thaw",
]
