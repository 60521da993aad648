"""Helpers for distinguished names."""

from __future__ import annotations


def parent_dn(dn: str) -> str | None:
    """Everything after the first comma, or None for a single component."""
    head, sep, tail = dn.partition(",")
    return tail if sep else None


def rdn(dn: str) -> str:
    """The first component of the DN."""
    return dn.split(",", 1)[0]


def depth(dn: str) -> int:
    """Number of components of the DN."""
    return len(dn.split(",")) if dn else 0


def is_ancestor(dn: str, ancestor: str) -> bool:
    """Whether ``ancestor`` is a proper ancestor of ``dn`` (case-insensitive)."""
    if not ancestor:
        return True
    dn_lower = dn.lower()
    ancestor_lower = ancestor.lower()
    return dn_lower.endswith(ancestor_lower) and len(dn_lower) > len(ancestor_lower)


def rdn_display_name(dn: str) -> str:
    """The value part of the RDN (after '=')."""
    first = rdn(dn)
    _, sep, value = first.partition("=")
    return value if sep else first