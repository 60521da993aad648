"""Search filter validation and completion-context detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_OPERATOR_MESSAGE = "Expected comparison operator (=, ~=, >=, <=) after attribute name"
_BOOLEAN_PREFIX = "&|!"
_VALUE_OPERATORS = ("~=", ">=", "<=", "=")


class FilterSyntaxError(ValueError):
    """A search filter does not follow the filter grammar."""


@dataclass(frozen=True)
class EmptyContext:
    """The input is empty or just ``(``; templates are appropriate."""


@dataclass(frozen=True)
class AttributeNameContext:
    """The cursor is where an attribute name goes."""

    partial: str


@dataclass(frozen=True)
class ValueContext:
    """The cursor is after a comparison operator."""

    attr: str
    partial: str


FilterContext = Union[EmptyContext, AttributeNameContext, ValueContext]


def _last_unmatched_open(text: str) -> int | None:
    stack: list[int] = []
    for index, char in enumerate(text):
        if char == "(":
            stack.append(index)
        elif char == ")" and stack:
            stack.pop()
    return stack[-1] if stack else None


def detect_filter_context(text: str) -> FilterContext | None:
    """Detect the completion context at the end of ``text``.

    Returns None when every parenthesis is matched.
    """
    trimmed = text.strip()
    if not trimmed or trimmed == "(":
        return EmptyContext()

    open_pos = _last_unmatched_open(text)
    if open_pos is None:
        return None

    content = text[open_pos + 1 :].lstrip(_BOOLEAN_PREFIX)
    for op in _VALUE_OPERATORS:
        op_pos = content.find(op)
        if op_pos != -1:
            return ValueContext(attr=content[:op_pos], partial=content[op_pos + len(op) :])
    return AttributeNameContext(partial=content)


def detect_attribute_context(text: str) -> str | None:
    """The partial attribute name at the end of ``text``, or None.

    None means the cursor is in value position or not inside an open filter.
    """
    open_pos = _last_unmatched_open(text)
    if open_pos is None:
        return None
    after_paren = text[open_pos + 1 :]
    # Every comparison operator ends in '='.
    if "=" in after_paren:
        return None
    return after_paren.lstrip(_BOOLEAN_PREFIX)


def validate_filter(text: str) -> None:
    """Check that ``text`` is a valid search filter; raise FilterSyntaxError if not."""
    stripped = text.strip()
    if not stripped:
        raise FilterSyntaxError("Filter cannot be empty")
    data = stripped.encode("utf-8")
    end = _parse_filter(data, 0)
    if end != len(data):
        raise FilterSyntaxError(
            f"Unexpected characters after filter at position {end + 1}"
        )


def _parse_filter(data: bytes, pos: int) -> int:
    """Parse ``( filtercomp )`` and return the position after ``)``."""
    if pos >= len(data) or data[pos : pos + 1] != b"(":
        raise FilterSyntaxError(f"Expected '(' at position {pos + 1}")

    inner = pos + 1
    if inner >= len(data):
        raise FilterSyntaxError(
            f"Unexpected end of filter after '(' at position {pos + 1}"
        )

    head = data[inner : inner + 1]
    if head in (b"&", b"|"):
        end = _parse_filter_list(data, inner + 1, head.decode())
    elif head == b"!":
        end = _parse_filter(data, inner + 1)
    else:
        end = _parse_item(data, inner)

    if end >= len(data) or data[end : end + 1] != b")":
        raise FilterSyntaxError(f"Expected ')' at position {end + 1}")
    return end + 1


def _parse_filter_list(data: bytes, pos: int, op: str) -> int:
    """Parse one or more filters and return the position after the last."""
    if pos >= len(data) or data[pos : pos + 1] != b"(":
        raise FilterSyntaxError(
            f"Empty filter list in '{op}' operator at position {pos + 1}"
        )
    cur = pos
    while cur < len(data) and data[cur : cur + 1] == b"(":
        cur = _parse_filter(data, cur)
    return cur


def _is_attr_byte(byte: int) -> bool:
    return (
        (0x30 <= byte <= 0x39)
        or (0x41 <= byte <= 0x5A)
        or (0x61 <= byte <= 0x7A)
        or byte in b"-.;"
    )


def _parse_item(data: bytes, pos: int) -> int:
    """Parse ``attr filtertype value``; return the position before ``)``."""
    cur = pos
    while cur < len(data) and _is_attr_byte(data[cur]):
        cur += 1

    if cur == pos:
        raise FilterSyntaxError(
            f"Expected attribute name after '(' at position {pos + 1}"
        )
    if cur >= len(data):
        raise FilterSyntaxError(_OPERATOR_MESSAGE)

    if cur + 1 < len(data) and data[cur + 1 : cur + 2] == b"=":
        first = data[cur : cur + 1]
        if first in (b"~", b">", b"<"):
            cur += 2
        elif first == b"=":
            cur += 1
        else:
            raise FilterSyntaxError(_OPERATOR_MESSAGE)
    elif data[cur : cur + 1] == b"=":
        cur += 1
    else:
        raise FilterSyntaxError(_OPERATOR_MESSAGE)

    while cur < len(data) and data[cur : cur + 1] != b")":
        if data[cur : cur + 1] == b"\\" and cur + 1 < len(data):
            cur += 2
        else:
            cur += 1
    return cur