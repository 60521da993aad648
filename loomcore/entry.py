"""The directory entry model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class LdapEntry:
    """A single directory entry with its DN and attributes."""

    dn: str
    attributes: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Attribute names are kept in sorted order.
        self.attributes = {
            name: list(values) for name, values in sorted(self.attributes.items())
        }

    def first_value(self, attr: str) -> str | None:
        """The first value of an attribute, if present."""
        values = self.attributes.get(attr)
        return values[0] if values else None

    def rdn(self) -> str:
        """The first component of the DN."""
        return self.dn.split(",", 1)[0]

    def object_classes(self) -> list[str]:
        """All objectClass values of this entry."""
        return list(self.attributes.get("objectClass", []))

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready representation."""
        return {
            "dn": self.dn,
            "attributes": {
                name: list(values) for name, values in sorted(self.attributes.items())
            },
        }

    @classmethod
    def from_dict(cls, data: Any) -> LdapEntry:
        """Build an entry from the representation made by :meth:`to_dict`."""
        if not isinstance(data, Mapping):
            raise ValueError("entry must be an object")
        try:
            dn = data["dn"]
            attributes = data["attributes"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(dn, str):
            raise ValueError("field 'dn' must be a string")
        if not isinstance(attributes, Mapping):
            raise ValueError("field 'attributes' must be an object")
        for name, values in attributes.items():
            if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                raise ValueError(f"attribute {name!r} must be a list of strings")
        return cls(dn, dict(attributes))