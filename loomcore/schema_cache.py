"""Cached schema information and building it from a subschema entry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from loomcore.schema_parser import parse_attribute_type, parse_object_class
from loomcore.schema_types import (
    AttributeSyntax,
    AttributeTypeInfo,
    ObjectClassInfo,
    Syntax,
)
from loomcore.util import find_values_ci

log = logging.getLogger(__name__)

_FALLBACK_SCHEMA_DNS = ("cn=Subschema", "cn=schema")


@dataclass
class SchemaCache:
    """Attribute types and object classes keyed by lower-case name."""

    attribute_types: dict[str, AttributeTypeInfo] = field(default_factory=dict)
    object_classes: dict[str, ObjectClassInfo] = field(default_factory=dict)

    def get_attribute_type(self, name: str) -> AttributeTypeInfo | None:
        """Look up an attribute type by name, ignoring case."""
        return self.attribute_types.get(name.lower())

    def attribute_syntax(self, name: str) -> Syntax:
        """The syntax of an attribute, STRING when unknown."""
        at = self.get_attribute_type(name)
        return at.syntax if at is not None else AttributeSyntax.STRING

    def is_single_valued(self, name: str) -> bool:
        """Whether an attribute is single-valued; False when unknown."""
        at = self.get_attribute_type(name)
        return at.single_value if at is not None else False

    def allowed_attributes(self, object_classes: Iterable[str]) -> list[str]:
        """Sorted MUST and MAY attributes of the classes and their superiors.

        Attributes that users may not modify are left out.
        """
        attrs: set[str] = set()
        visited: set[str] = set()
        for name in object_classes:
            self._collect(name.lower(), attrs, visited)
        return sorted(
            name
            for name in attrs
            if (at := self.get_attribute_type(name)) is None or not at.no_user_modification
        )

    def _collect(self, oc_lower: str, attrs: set[str], visited: set[str]) -> None:
        while oc_lower not in visited:
            visited.add(oc_lower)
            oc = self.object_classes.get(oc_lower)
            if oc is None:
                return
            attrs.update(oc.must)
            attrs.update(oc.may)
            if oc.superior is None:
                return
            oc_lower = oc.superior.lower()

    def _unique_types(self) -> list[AttributeTypeInfo]:
        seen: set[str] = set()
        unique = []
        for key in sorted(self.attribute_types):
            at = self.attribute_types[key]
            if at.oid not in seen:
                seen.add(at.oid)
                unique.append(at)
        return unique

    def all_attribute_names(self) -> list[str]:
        """Every attribute name and alias in the schema, sorted."""
        return sorted(name for at in self._unique_types() for name in at.names)

    def all_user_attributes(self) -> list[str]:
        """The canonical name of every user-modifiable attribute type, sorted."""
        seen: set[str] = set()
        result = []
        for key in sorted(self.attribute_types):
            at = self.attribute_types[key]
            if at.no_user_modification or at.oid in seen:
                continue
            seen.add(at.oid)
            if at.names:
                result.append(at.names[0])
        return sorted(result)


def schema_from_attributes(attrs: Mapping[str, Sequence[str]]) -> SchemaCache:
    """Build a schema cache from the attributes of a subschema entry.

    Definitions that cannot be parsed are skipped.
    """
    cache = SchemaCache()
    for definition in find_values_ci(attrs, "attributetypes") or ():
        at = parse_attribute_type(definition)
        if at is None:
            log.debug("Failed to parse attributeType: %s", definition[:80])
            continue
        for name in at.names:
            cache.attribute_types[name.lower()] = at
    for definition in find_values_ci(attrs, "objectclasses") or ():
        oc = parse_object_class(definition)
        if oc is None:
            log.debug("Failed to parse objectClass: %s", definition[:80])
            continue
        for name in oc.names:
            cache.object_classes[name.lower()] = oc
    return cache


def schema_dn_candidates(subschema_dn: str | None) -> list[str]:
    """The DNs to try for the schema: the advertised one, then common fallbacks."""
    candidates = [subschema_dn] if subschema_dn is not None else []
    for fallback in _FALLBACK_SCHEMA_DNS:
        if not any(dn.encode().lower() == fallback.encode().lower() for dn in candidates):
            candidates.append(fallback)
    return candidates