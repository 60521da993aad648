# loomcore

`loomcore` holds the parts of an LDAP directory browser that work without a
live server:

- **DN helpers** (`loomcore.dn`): `parent_dn`, `rdn`, `depth`, `is_ancestor`,
  `rdn_display_name`.
- **Attribute maps** (`loomcore.util`): case-insensitive `get_values`,
  `get_first`, `has_attr` and `find_values_ci`.
- **Entries and trees** (`loomcore.entry`, `loomcore.tree`): `LdapEntry`
  with `to_dict` / `from_dict`, `TreeNode`, and `DirectoryTree` with
  `find_node` and `insert_children`.
- **Search filters** (`loomcore.filter`): validation against the RFC 4515
  grammar with position-aware messages (`validate_filter`, raising
  `FilterSyntaxError`), and cursor-context detection for autocompletion
  (`detect_filter_context`, `detect_attribute_context`).
- **Schema** (`loomcore.schema_types`, `loomcore.schema_parser`,
  `loomcore.schema_cache`): `map_syntax_oid`, `parse_attribute_type`,
  `parse_object_class`, a `SchemaCache` that walks superior chains to find
  the attributes an object class allows, `schema_from_attributes` to build a
  cache from a subschema entry's attributes, and `schema_dn_candidates` for
  the DNs worth trying.
- **File formats** (`loomcore.export.formats`): `ExportFormat.from_path`
  picks a format from a file extension, and `requested_attrs` interprets an
  attribute list.
- **Certificate trust** (`loomcore.tls`): `sha256_fingerprint`,
  `parse_cert_info`, `CertificateInfo`, `TrustedCertEntry` and a
  thread-safe `TrustStore` of permanently and session-trusted fingerprints.

Python 3.10 or later is required; the only dependency is `cryptography`.

## Examples

### DNs, entries and trees

```python
from loomcore.dn import parent_dn, rdn_display_name, is_ancestor
from loomcore.entry import LdapEntry
from loomcore.tree import DirectoryTree, TreeNode

parent_dn("cn=admin,dc=example,dc=com")        # "dc=example,dc=com"
rdn_display_name("cn=admin,dc=example,dc=com")  # "admin"
is_ancestor("cn=admin,dc=example,dc=com", "dc=example,dc=com")  # True

entry = LdapEntry(
    "cn=Alice,dc=example,dc=com",
    {"cn": ["Alice"], "mail": ["alice@example.com"], "objectClass": ["top", "person"]},
)
entry.first_value("mail")   # "alice@example.com"
entry.object_classes()      # ["top", "person"]
LdapEntry.from_dict(entry.to_dict()) == entry   # True

tree = DirectoryTree("dc=example,dc=com")
tree.insert_children("dc=example,dc=com", [TreeNode("ou=Users,dc=example,dc=com")])
tree.find_node("OU=Users,DC=example,DC=com").display_name   # "Users"
```

### Search filters

```python
from loomcore.filter import validate_filter, detect_filter_context, FilterSyntaxError

validate_filter("(&(objectClass=person)(|(cn=Alice)(cn=Bob)))")

try:
    validate_filter("(cn=admin")
except FilterSyntaxError as exc:
    print(exc)   # Expected ')' at position 10

detect_filter_context("(cn=adm")   # ValueContext(attr="cn", partial="adm")
detect_filter_context("(&(obj")    # AttributeNameContext(partial="obj")
```

### Schema

```python
from loomcore.schema_cache import schema_from_attributes

schema = schema_from_attributes({
    "attributeTypes": [
        "( 2.5.4.3 NAME 'cn' SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
        "( 2.5.4.4 NAME ( 'sn' 'surname' ) SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 SINGLE-VALUE )",
    ],
    "objectClasses": [
        "( 2.5.6.6 NAME 'person' SUP top STRUCTURAL MUST ( sn $ cn ) )",
    ],
})
schema.allowed_attributes(["person"])   # ["cn", "sn"]
schema.is_single_valued("surname")      # True
```

### File formats

```python
from loomcore.export.formats import ExportFormat, requested_attrs

ExportFormat.from_path("people.LDIF")   # ExportFormat.LDIF
ExportFormat.from_path("notes.txt")     # None
requested_attrs(["*"])                  # None: every attribute
requested_attrs(["mail", "cn"])         # ["mail", "cn"]
```

### Trusting certificates

```python
from loomcore.tls import TrustStore, TrustedCertEntry, sha256_fingerprint

store = TrustStore.from_config([])
fingerprint = sha256_fingerprint(b"hello world")
store.trust_session(fingerprint)
store.is_trusted(fingerprint)   # True

store.trust_always(TrustedCertEntry("ldap.example.com", 636, "AB:CD", "CN=ldap.example.com"))
[entry.to_dict() for entry in store.to_config_entries()]
```

`parse_cert_info(der, host, port)` reads subject, issuer and validity dates
from a DER certificate, reporting `"Unknown"` for each when the bytes cannot
be parsed.

## What this package does not do

- It does not connect to, bind to, search or modify an LDAP server.
- It does not read or write LDIF, JSON, CSV or spreadsheet files:
  `loomcore.export.formats` only names the formats, and `loomcore.importer`
  holds no importers.
- It has no offline directory, no password vault or other credential storage,
  and no command-line program or user interface.