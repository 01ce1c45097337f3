"""Schema node model helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

SchemaNode: TypeAlias = Any
"""Parsed JSON value: mapping, list, string, number, boolean or None."""


def get_type(value: Any) -> str:
    """Return the JSON type name of a parsed value for use in diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def string_value(node: Mapping[str, Any], key: str) -> str | None:
    """Return ``node[key]`` when it is a string, otherwise None."""
    value = node.get(key)
    return value if isinstance(value, str) else None
