"""Structured X.509 subject for certificate requests.

The common name is used verbatim: no escaping and no RFC 4514 checks, so a
malformed name ends up in the request exactly as supplied. Extra
distinguished-name fields are optional and emitted only when set.
"""
from typing import List, Optional, Tuple

from cryptography import x509
from cryptography.x509.oid import NameOID
from pydantic import BaseModel


# (attribute, OID, OpenSSL short name) in the order they appear in the name
_FIELDS = [
    ("country", NameOID.COUNTRY_NAME, "C"),
    ("state", NameOID.STATE_OR_PROVINCE_NAME, "ST"),
    ("locality", NameOID.LOCALITY_NAME, "L"),
    ("organization", NameOID.ORGANIZATION_NAME, "O"),
    ("organizational_unit", NameOID.ORGANIZATIONAL_UNIT_NAME, "OU"),
    ("common_name", NameOID.COMMON_NAME, "CN"),
]


class Subject(BaseModel):
    common_name: str
    country: Optional[str] = None
    state: Optional[str] = None
    locality: Optional[str] = None
    organization: Optional[str] = None
    organizational_unit: Optional[str] = None

    @classmethod
    def for_name(cls, name: str) -> "Subject":
        return cls(common_name=name)

    def _parts(self) -> List[Tuple[object, str, str]]:
        parts = []
        for attr, oid, short in _FIELDS:
            value = getattr(self, attr)
            if value is not None:
                parts.append((oid, short, value))
        return parts

    def to_x509_name(self) -> x509.Name:
        return x509.Name([x509.NameAttribute(oid, value) for oid, _short, value in self._parts()])

    def oneline(self) -> str:
        """OpenSSL one-line form, e.g. '/CN=acme'."""
        return "".join(f"/{short}={value}" for _oid, short, value in self._parts())

    def __str__(self) -> str:
        return self.oneline()


__all__ = ["Subject"]
