"""Schema definitions: attribute syntaxes, attribute types and object classes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


class AttributeSyntax(enum.Enum):
    """Known attribute syntaxes mapped to friendly types."""

    STRING = "String"
    DIRECTORY_STRING = "DirectoryString"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    DN = "Dn"
    OCTET_STRING = "OctetString"
    GENERALIZED_TIME = "GeneralizedTime"
    TELEPHONE_NUMBER = "TelephoneNumber"
    OID = "Oid"


@dataclass(frozen=True)
class OtherSyntax:
    """A syntax that is not one of the known ones, kept by its OID."""

    oid: str


Syntax = Union[AttributeSyntax, OtherSyntax]


@dataclass
class AttributeTypeInfo:
    """An attribute type definition from the schema."""

    oid: str
    names: list[str] = field(default_factory=list)
    description: str | None = None
    syntax: Syntax = AttributeSyntax.STRING
    single_value: bool = False
    no_user_modification: bool = False


class ObjectClassKind(enum.Enum):
    """The kind of an object class."""

    ABSTRACT = "Abstract"
    STRUCTURAL = "Structural"
    AUXILIARY = "Auxiliary"


@dataclass
class ObjectClassInfo:
    """An object class definition from the schema."""

    oid: str
    names: list[str] = field(default_factory=list)
    description: str | None = None
    superior: str | None = None
    kind: ObjectClassKind = ObjectClassKind.STRUCTURAL
    must: list[str] = field(default_factory=list)
    may: list[str] = field(default_factory=list)


_SYNTAX_OIDS = {
    "1.3.6.1.4.1.1466.115.121.1.15": AttributeSyntax.DIRECTORY_STRING,
    "1.3.6.1.4.1.1466.115.121.1.26": AttributeSyntax.STRING,  # IA5String
    "1.3.6.1.4.1.1466.115.121.1.27": AttributeSyntax.INTEGER,
    "1.3.6.1.4.1.1466.115.121.1.7": AttributeSyntax.BOOLEAN,
    "1.3.6.1.4.1.1466.115.121.1.12": AttributeSyntax.DN,
    "1.3.6.1.4.1.1466.115.121.1.40": AttributeSyntax.OCTET_STRING,
    "1.3.6.1.4.1.1466.115.121.1.24": AttributeSyntax.GENERALIZED_TIME,
    "1.3.6.1.4.1.1466.115.121.1.50": AttributeSyntax.TELEPHONE_NUMBER,
    "1.3.6.1.4.1.1466.115.121.1.38": AttributeSyntax.OID,
    "1.3.6.1.4.1.1466.115.121.1.5": AttributeSyntax.OCTET_STRING,  # Binary
    "1.3.6.1.4.1.1466.115.121.1.44": AttributeSyntax.STRING,  # PrintableString
    "1.3.6.1.4.1.1466.115.121.1.36": AttributeSyntax.STRING,  # NumericString
}


def map_syntax_oid(oid: str) -> Syntax:
    """Map a syntax OID, with any ``{length}`` bound removed, to a syntax."""
    base = oid.split("{", 1)[0]
    return _SYNTAX_OIDS.get(base, OtherSyntax(base))