import pytest

from loomcore.schema_parser import parse_attribute_type, parse_object_class
from loomcore.schema_types import AttributeSyntax, ObjectClassKind, OtherSyntax


def test_parse_attribute_type_single_name():
    definition = (
        "( 2.5.4.3 NAME 'cn' DESC 'Common Name' SYNTAX 1.3.6.1.4.1.1466.115.121.1.15{64} )"
    )
    at = parse_attribute_type(definition)
    assert at.oid == "2.5.4.3"
    assert at.names == ["cn"]
    assert at.description == "Common Name"
    assert at.syntax == AttributeSyntax.DIRECTORY_STRING
    assert at.single_value is False


def test_parse_attribute_type_multi_name():
    definition = (
        "( 2.5.4.4 NAME ( 'sn' 'surname' ) SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 SINGLE-VALUE )"
    )
    at = parse_attribute_type(definition)
    assert at.names == ["sn", "surname"]
    assert at.single_value is True


def test_parse_attribute_type_boolean():
    definition = "( 1.2.3.4 NAME 'enabled' SYNTAX 1.3.6.1.4.1.1466.115.121.1.7 SINGLE-VALUE )"
    assert parse_attribute_type(definition).syntax == AttributeSyntax.BOOLEAN


def test_parse_attribute_type_no_user_modification():
    definition = (
        "( 2.5.18.1 NAME 'createTimestamp' SYNTAX 1.3.6.1.4.1.1466.115.121.1.24 "
        "SINGLE-VALUE NO-USER-MODIFICATION USAGE directoryOperation )"
    )
    at = parse_attribute_type(definition)
    assert at.no_user_modification is True
    assert at.syntax == AttributeSyntax.GENERALIZED_TIME


def test_parse_attribute_type_without_syntax_defaults_to_string():
    at = parse_attribute_type("( 1.2.3 NAME 'x' )")
    assert at.syntax == AttributeSyntax.STRING
    assert at.description is None


def test_parse_attribute_type_unknown_syntax():
    at = parse_attribute_type("( 1.2.3 NAME 'x' SYNTAX 9.9.9{32} )")
    assert at.syntax == OtherSyntax("9.9.9")


@pytest.mark.parametrize("definition", ["2.5.4.3 NAME 'cn'", "( 2.5.4.3", "()", "  "])
def test_parse_attribute_type_malformed(definition):
    assert parse_attribute_type(definition) is None


def test_parse_object_class():
    definition = (
        "( 2.5.6.6 NAME 'person' DESC 'RFC2256: a person' SUP top STRUCTURAL "
        "MUST ( sn $ cn ) MAY ( userPassword $ telephoneNumber ) )"
    )
    oc = parse_object_class(definition)
    assert oc.oid == "2.5.6.6"
    assert oc.names == ["person"]
    assert oc.description == "RFC2256: a person"
    assert oc.superior == "top"
    assert oc.kind == ObjectClassKind.STRUCTURAL
    assert oc.must == ["sn", "cn"]
    assert oc.may == ["userPassword", "telephoneNumber"]


def test_parse_object_class_abstract_single_must():
    oc = parse_object_class("( 2.5.6.0 NAME 'top' ABSTRACT MUST objectClass )")
    assert oc.kind == ObjectClassKind.ABSTRACT
    assert oc.must == ["objectClass"]
    assert oc.may == []
    assert oc.superior is None


def test_parse_object_class_auxiliary():
    oc = parse_object_class("( 1.2.3 NAME 'extra' SUP top AUXILIARY MAY ( a $ b ) )")
    assert oc.kind == ObjectClassKind.AUXILIARY
    assert oc.may == ["a", "b"]


def test_parse_object_class_malformed():
    assert parse_object_class("NAME 'person'") is None