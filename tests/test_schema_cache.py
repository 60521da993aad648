from loomcore.schema_cache import SchemaCache, schema_dn_candidates, schema_from_attributes
from loomcore.schema_types import (
    AttributeSyntax,
    AttributeTypeInfo,
    ObjectClassInfo,
    ObjectClassKind,
)


def build_test_schema() -> SchemaCache:
    cache = SchemaCache()
    cache.object_classes["top"] = ObjectClassInfo(
        oid="2.5.6.0",
        names=["top"],
        kind=ObjectClassKind.ABSTRACT,
        must=["objectClass"],
    )
    cache.object_classes["person"] = ObjectClassInfo(
        oid="2.5.6.6",
        names=["person"],
        superior="top",
        kind=ObjectClassKind.STRUCTURAL,
        must=["sn", "cn"],
        may=["userPassword", "telephoneNumber"],
    )
    cache.object_classes["inetorgperson"] = ObjectClassInfo(
        oid="2.16.840.1.113730.3.2.2",
        names=["inetOrgPerson"],
        superior="person",
        kind=ObjectClassKind.STRUCTURAL,
        may=["mail", "uid"],
    )
    for oid, name, no_user_mod in [
        ("2.5.4.0", "objectClass", True),
        ("2.5.4.4", "sn", False),
        ("2.5.4.3", "cn", False),
        ("2.5.4.35", "userPassword", False),
        ("2.5.4.20", "telephoneNumber", False),
        ("0.9.2342.19200300.100.1.3", "mail", False),
        ("0.9.2342.19200300.100.1.1", "uid", False),
        ("2.5.18.1", "createTimestamp", True),
    ]:
        cache.attribute_types[name.lower()] = AttributeTypeInfo(
            oid=oid, names=[name], no_user_modification=no_user_mod
        )
    return cache


def test_allowed_attributes_walks_superior():
    allowed = build_test_schema().allowed_attributes(["inetOrgPerson"])
    for name in ["mail", "uid", "sn", "cn", "userPassword", "telephoneNumber"]:
        assert name in allowed
    assert "objectClass" not in allowed
    assert "createTimestamp" not in allowed


def test_allowed_attributes_deduplicates():
    allowed = build_test_schema().allowed_attributes(["person", "inetOrgPerson"])
    assert allowed.count("cn") == 1


def test_allowed_attributes_sorted_and_unknown_class():
    schema = build_test_schema()
    assert schema.allowed_attributes(["person"]) == sorted(
        ["cn", "sn", "telephoneNumber", "userPassword"]
    )
    assert schema.allowed_attributes(["nosuchclass"]) == []


def test_all_user_attributes():
    all_attrs = build_test_schema().all_user_attributes()
    assert "cn" in all_attrs
    assert "sn" in all_attrs
    assert "mail" in all_attrs
    assert "objectClass" not in all_attrs
    assert "createTimestamp" not in all_attrs


def test_lookups_are_case_insensitive():
    schema = build_test_schema()
    assert schema.get_attribute_type("MAIL").oid == "0.9.2342.19200300.100.1.3"
    assert schema.get_attribute_type("missing") is None
    assert schema.attribute_syntax("missing") == AttributeSyntax.STRING
    assert schema.is_single_valued("missing") is False


SUBSCHEMA = {
    "attributeTypes": [
        "( 2.5.4.4 NAME ( 'sn' 'surname' ) SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 SINGLE-VALUE )",
        "( 2.5.4.31 NAME 'member' SYNTAX 1.3.6.1.4.1.1466.115.121.1.12 )",
        "( 2.5.18.1 NAME 'createTimestamp' NO-USER-MODIFICATION )",
        "not a definition",
    ],
    "objectclasses": [
        "( 2.5.6.6 NAME 'person' SUP top STRUCTURAL MUST ( sn $ cn ) )",
    ],
}


def test_schema_from_attributes():
    schema = schema_from_attributes(SUBSCHEMA)
    assert sorted(schema.attribute_types) == ["createtimestamp", "member", "sn", "surname"]
    assert schema.attribute_syntax("member") == AttributeSyntax.DN
    assert schema.is_single_valued("surname") is True
    assert list(schema.object_classes) == ["person"]


def test_all_attribute_names_includes_aliases_once():
    schema = schema_from_attributes(SUBSCHEMA)
    assert schema.all_attribute_names() == ["createTimestamp", "member", "sn", "surname"]
    assert schema.all_user_attributes() == ["member", "sn"]


def test_schema_from_attributes_empty():
    schema = schema_from_attributes({})
    assert schema.attribute_types == {}
    assert schema.object_classes == {}


def test_schema_dn_candidates():
    assert schema_dn_candidates(None) == ["cn=Subschema", "cn=schema"]
    assert schema_dn_candidates("cn=aggregate") == ["cn=aggregate", "cn=Subschema", "cn=schema"]
    assert schema_dn_candidates("CN=SUBSCHEMA") == ["CN=SUBSCHEMA", "cn=schema"]