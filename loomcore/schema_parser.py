"""Parsers for attribute type and object class schema definitions."""

from __future__ import annotations

from loomcore.schema_types import (
    AttributeSyntax,
    AttributeTypeInfo,
    ObjectClassInfo,
    ObjectClassKind,
    map_syntax_oid,
)


def _inner(definition: str) -> str | None:
    text = definition.strip()
    if not text.startswith("(") or not text.endswith(")"):
        return None
    return text[1:-1].strip()


def _parse_names(text: str) -> list[str]:
    """Parse ``NAME 'single'`` or ``NAME ( 'first' 'second' )``."""
    pos = text.find("NAME")
    if pos == -1:
        return []
    rest = text[pos + 4 :].lstrip()
    if rest.startswith("("):
        end = rest.find(")")
        if end != -1:
            return [part for part in rest[1:end].split("'") if part.strip()]
    elif rest.startswith("'"):
        end = rest.find("'", 1)
        if end != -1:
            return [rest[1:end]]
    return []


def _parse_quoted_field(text: str, keyword: str) -> str | None:
    """Parse ``KEYWORD 'value'``."""
    pattern = f"{keyword} '"
    pos = text.find(pattern)
    if pos == -1:
        return None
    rest = text[pos + len(pattern) :]
    end = rest.find("'")
    return rest[:end] if end != -1 else None


def _parse_unquoted_field(text: str, keyword: str) -> str | None:
    """Parse ``KEYWORD value``, with any enclosing braces removed."""
    pattern = f"{keyword} "
    pos = text.find(pattern)
    if pos == -1:
        return None
    tokens = text[pos + len(pattern) :].split()
    if not tokens:
        return None
    value = tokens[0].strip("{}")
    return value or None


def _parse_attr_list(text: str, keyword: str) -> list[str]:
    """Parse ``KEYWORD ( first $ second )`` or ``KEYWORD single``."""
    pattern = f"{keyword} "
    pos = text.find(pattern)
    if pos == -1:
        return []
    rest = text[pos + len(pattern) :].lstrip()
    if rest.startswith("("):
        end = rest.find(")")
        if end == -1:
            return []
        return [part.strip() for part in rest[1:end].split("$") if part.strip()]
    return rest.split()[:1]


def parse_attribute_type(definition: str) -> AttributeTypeInfo | None:
    """Parse an attributeTypes value, or return None if it is malformed."""
    inner = _inner(definition)
    if inner is None:
        return None
    tokens = inner.split()
    if not tokens:
        return None
    syntax_oid = _parse_unquoted_field(inner, "SYNTAX")
    return AttributeTypeInfo(
        oid=tokens[0],
        names=_parse_names(inner),
        description=_parse_quoted_field(inner, "DESC"),
        syntax=map_syntax_oid(syntax_oid) if syntax_oid is not None else AttributeSyntax.STRING,
        single_value="SINGLE-VALUE" in inner,
        no_user_modification="NO-USER-MODIFICATION" in inner,
    )


def parse_object_class(definition: str) -> ObjectClassInfo | None:
    """Parse an objectClasses value, or return None if it is malformed."""
    inner = _inner(definition)
    if inner is None:
        return None
    tokens = inner.split()
    if not tokens:
        return None
    if "ABSTRACT" in inner:
        kind = ObjectClassKind.ABSTRACT
    elif "AUXILIARY" in inner:
        kind = ObjectClassKind.AUXILIARY
    else:
        kind = ObjectClassKind.STRUCTURAL
    return ObjectClassInfo(
        oid=tokens[0],
        names=_parse_names(inner),
        description=_parse_quoted_field(inner, "DESC"),
        superior=_parse_unquoted_field(inner, "SUP"),
        kind=kind,
        must=_parse_attr_list(inner, "MUST"),
        may=_parse_attr_list(inner, "MAY"),
    )