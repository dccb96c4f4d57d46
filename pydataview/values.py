"""Helpers for reading row values and resolving computed configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_value(data: object, path: str, default: Any = None) -> Any:
    """Read a value from a row by property name or dotted path.

    Mapping keys are tried before attributes at every step, and a key that
    contains dots is matched as a whole before the path is split.

    Example:
        get_value({"user": {"name": "Ann"}}, "user.name")  # "Ann"
    """
    if isinstance(data, Mapping) and path in data:
        return data[path]
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return default
            current = current[part]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return default
    return current


def resolve_value(value: Any, *args: Any) -> Any:
    """Return ``value(*args)`` for callables, the value itself otherwise.

    Column options that accept either a literal or a function of the row
    context are all resolved through this helper.
    """
    if callable(value):
        return value(*args)
    return value
