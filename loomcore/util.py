"""Case-insensitive helpers for attribute maps."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def _find(attrs: Mapping[str, Sequence[str]], key: str) -> Sequence[str] | None:
    key_lower = key.lower()
    for name in sorted(attrs):
        if name.lower() == key_lower:
            return attrs[name]
    return None


def get_values(attrs: Mapping[str, Sequence[str]], key: str) -> list[str]:
    """Return a copy of all values of an attribute, or an empty list."""
    values = _find(attrs, key)
    return list(values) if values is not None else []


def get_first(attrs: Mapping[str, Sequence[str]], key: str) -> str | None:
    """Return the first value of an attribute, if any."""
    return next(iter(get_values(attrs, key)), None)


def has_attr(attrs: Mapping[str, Sequence[str]], key: str) -> bool:
    """Whether the attribute is present, ignoring case."""
    key_lower = key.lower()
    return any(name.lower() == key_lower for name in attrs)


def find_values_ci(attrs: Mapping[str, Sequence[str]], key: str) -> Sequence[str] | None:
    """Return the stored value list of an attribute itself, or None."""
    return _find(attrs, key)