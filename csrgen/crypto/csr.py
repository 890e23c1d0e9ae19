"""PKCS#10 certificate request construction.

build_csr() signs a request with SHA-256-with-RSA (PKCS#1 v1.5) and returns
it PEM-armored ("CERTIFICATE REQUEST"). load_csr()/get_common_name() read a
request back.
"""
from typing import Union

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from csrgen.common.errors import SigningError
from csrgen.crypto.subject import Subject


def build_csr(subject: Union[Subject, str], private_key) -> bytes:
    """Build and sign a CSR for subject; a plain string is taken as the common name."""
    if isinstance(subject, str):
        subject = Subject.for_name(subject)
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise SigningError(f"SHA256-RSA needs an RSA private key, got {type(private_key).__name__}")

    try:
        csr = (
            x509.CertificateSigningRequestBuilder()
            .subject_name(subject.to_x509_name())
            .sign(private_key=private_key, algorithm=hashes.SHA256())
        )
    except (ValueError, TypeError) as e:
        raise SigningError(f"signing certificate request for {subject} failed: {e}") from e

    return csr.public_bytes(serialization.Encoding.PEM)


def load_csr(pem: bytes) -> x509.CertificateSigningRequest:
    return x509.load_pem_x509_csr(pem)


def get_common_name(csr: x509.CertificateSigningRequest) -> str:
    attrs = csr.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    return attrs[0].value if attrs else ""


__all__ = ["build_csr", "load_csr", "get_common_name"]
