"""Allow/forbid filter list handling.

Namespace and reason filters are written as one list in which a leading
"!" marks an entry to forbid, e.g. ``["default", "!kube-system"]``.
"""

from collections.abc import Iterable

FORBID_PREFIX = "!"


def get_allow_forbid_slices(entries: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split filter entries into allowed and forbidden values.

    Entries keep their relative order. The "!" marker is stripped from
    forbidden values.

    Args:
        entries: Raw filter entries

    Returns:
        Tuple of (allow, forbid) lists

    Example:
        >>> get_allow_forbid_slices(["hello", "!world"])
        (['hello'], ['world'])
    """
    allow: list[str] = []
    forbid: list[str] = []
    for entry in entries:
        if entry.startswith(FORBID_PREFIX):
            forbid.append(entry[len(FORBID_PREFIX) :])
        else:
            allow.append(entry)
    return allow, forbid


__all__ = ["FORBID_PREFIX", "get_allow_forbid_slices"]
