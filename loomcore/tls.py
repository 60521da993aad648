"""Server certificate details and the store of trusted fingerprints."""

from __future__ import annotations

import hashlib
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any

from cryptography import x509

_UNKNOWN = "Unknown"


@dataclass(frozen=True)
class CertificateInfo:
    """Details of a server certificate, for showing to the user."""

    host: str
    port: int
    subject: str
    issuer: str
    not_before: str
    not_after: str
    fingerprint_sha256: str

    def __str__(self) -> str:
        return (
            f"{self.host}:{self.port} subject={self.subject} "
            f"issuer={self.issuer} fingerprint={self.fingerprint_sha256}"
        )


@dataclass(frozen=True)
class TrustedCertEntry:
    """A permanently trusted certificate, as kept in the configuration."""

    host: str
    port: int
    fingerprint_sha256: str
    subject: str

    def to_dict(self) -> dict[str, Any]:
        """A representation ready for serialization."""
        return {
            "host": self.host,
            "port": self.port,
            "fingerprint_sha256": self.fingerprint_sha256,
            "subject": self.subject,
        }

    @classmethod
    def from_dict(cls, data: Any) -> TrustedCertEntry:
        """Build an entry from the representation made by :meth:`to_dict`."""
        if not isinstance(data, Mapping):
            raise ValueError("trusted certificate entry must be an object")
        try:
            host = data["host"]
            port = data["port"]
            fingerprint = data["fingerprint_sha256"]
            subject = data["subject"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(port, int) or isinstance(port, bool) or not 0 <= port <= 0xFFFF:
            raise ValueError("field 'port' must be an integer between 0 and 65535")
        for name, value in (("host", host), ("fingerprint_sha256", fingerprint), ("subject", subject)):
            if not isinstance(value, str):
                raise ValueError(f"field {name!r} must be a string")
        return cls(host=host, port=port, fingerprint_sha256=fingerprint, subject=subject)


class TrustStore:
    """Trusted certificate fingerprints, both permanent and for this session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._always: dict[str, TrustedCertEntry] = {}
        self._session: set[str] = set()

    def __repr__(self) -> str:
        return "TrustStore(...)"

    @classmethod
    def from_config(cls, entries: Iterable[TrustedCertEntry]) -> TrustStore:
        """Create a store from previously saved entries."""
        store = cls()
        for entry in entries:
            store._always[entry.fingerprint_sha256] = entry
        return store

    def is_trusted(self, fingerprint: str) -> bool:
        """Whether the fingerprint is trusted permanently or for this session."""
        with self._lock:
            return fingerprint in self._always or fingerprint in self._session

    def trust_always(self, entry: TrustedCertEntry) -> None:
        """Trust a certificate permanently."""
        with self._lock:
            self._always[entry.fingerprint_sha256] = entry

    def trust_session(self, fingerprint: str) -> None:
        """Trust a certificate fingerprint for this session only."""
        with self._lock:
            self._session.add(fingerprint)

    def to_config_entries(self) -> list[TrustedCertEntry]:
        """The permanent entries, for saving to the configuration."""
        with self._lock:
            return list(self._always.values())


def sha256_fingerprint(der: bytes) -> str:
    """Colon-separated upper-case hex SHA-256 of the given bytes."""
    return hashlib.sha256(der).hexdigest().upper().__format__("")[:0] + ":".join(
        f"{byte:02X}" for byte in hashlib.sha256(der).digest()
    )


def _format_name(name: x509.Name) -> str:
    return ", ".join(
        f"{attribute.rfc4514_attribute_name}={attribute.value}" for attribute in name
    )


def _validity(cert: x509.Certificate, which: str) -> datetime:
    aware = getattr(cert, f"not_valid_{which}_utc", None)
    if aware is not None:
        return aware
    naive: datetime = getattr(cert, f"not_valid_{which}")
    return naive.replace(tzinfo=timezone.utc)


def parse_cert_info(der: bytes, host: str, port: int) -> CertificateInfo:
    """Extract display details from a DER-encoded certificate.

    Fields that cannot be read are reported as ``"Unknown"``.
    """
    fingerprint = sha256_fingerprint(der)
    try:
        cert = x509.load_der_x509_certificate(der)
        subject = _format_name(cert.subject)
        issuer = _format_name(cert.issuer)
        not_before = format_datetime(_validity(cert, "before"))
        not_after = format_datetime(_validity(cert, "after"))
    except ValueError:
        subject = issuer = not_before = not_after = _UNKNOWN
    return CertificateInfo(
        host=host,
        port=port,
        subject=subject,
        issuer=issuer,
        not_before=not_before,
        not_after=not_after,
        fingerprint_sha256=fingerprint,
    )