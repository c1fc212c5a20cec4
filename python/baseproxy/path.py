"""Nested property lookup over registry entries."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any, Hashable, Optional

__all__ = ["is_truthy", "is_falsy", "lookup", "resolve_path"]


def is_falsy(value: Any) -> bool:
    """Report whether ``value`` counts as missing.

    ``None``, ``False``, numeric zero, NaN and ``""`` are falsy. Empty
    containers are not.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value == ""
    return False


def is_truthy(value: Any) -> bool:
    return not is_falsy(value)


def _index(value: Sequence[Any], key: Any) -> Optional[Any]:
    if isinstance(key, str):
        if not key.isdigit():
            return None
        key = int(key)
    if isinstance(key, bool) or not isinstance(key, int):
        return None
    if 0 <= key < len(value):
        return value[key]
    return None


def lookup(value: Any, key: Hashable) -> Optional[Any]:
    if isinstance(value, Mapping):
        try:
            return value.get(key)
        except TypeError:
            return None
    if isinstance(value, Sequence):
        return _index(value, key)
    if value is None or not isinstance(key, str) or key.startswith("_"):
        return None
    return getattr(value, key, None)


def resolve_path(value: Any, path: Sequence[Any]) -> Optional[Any]:
    """Walk ``path`` one key at a time.

    Returns None as soon as a value along the way is falsy, so a ``0`` or
    ``""`` in the middle of the path ends the walk like a missing key does.
    The final value is returned as-is.
    """
    current = value
    for key in path:
        if is_falsy(current):
            return None
        current = lookup(current, key)
    return current
