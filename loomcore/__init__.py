"""Core pieces for LDAP directory tools: DNs, entries, filters, schema and certificate trust."""

__version__ = "0.1.0"