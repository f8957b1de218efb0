"""Dictionary helpers used across pawfetch."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["deep_merge", "insert_path", "strip_none"]


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Recursively merge two mappings, giving precedence to override.

    Nested mappings are merged key by key, every other value (lists included)
    is replaced wholesale. ``None`` in the override never clears a base value.
    """
    merged: dict[str, object] = dict(base)

    for key, value in override.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value

    return merged


def strip_none(data: Mapping[str, object]) -> dict[str, object]:
    """Drop ``None`` values at every nesting level."""
    return {
        key: strip_none(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
        if value is not None
    }


def insert_path(data: dict[str, object], path: list[str], value: object) -> None:
    """Set ``value`` at the nested ``path`` inside ``data``, creating mappings on the way."""
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value
