"""RSA key generation and PKCS#1 PEM export.

Functions:
 - generate_private_key(bits: int = 2048) -> RSAPrivateKey
 - validate_private_key(key) -> None
 - encode_private_key_pem(key) -> bytes

Keys are drawn from the OS CSPRNG through the cryptography library and are
checked for internal consistency before being handed back.
"""
import math

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from csrgen.common.errors import KeyGenerationError

PUBLIC_EXPONENT = 65537


def validate_private_key(key) -> None:
	"""Check the RSA parameters agree with each other.

	Raises KeyGenerationError on malformed primes or mismatched exponents.
	"""
	priv = key.private_numbers()
	pub = priv.public_numbers
	p, q, d = priv.p, priv.q, priv.d
	if p <= 1 or q <= 1 or p == q:
		raise KeyGenerationError("invalid RSA key: malformed primes")
	if p * q != pub.n:
		raise KeyGenerationError("invalid RSA key: modulus does not match primes")
	if (pub.e * d) % math.lcm(p - 1, q - 1) != 1:
		raise KeyGenerationError("invalid RSA key: public and private exponents do not match")
	if priv.dmp1 != d % (p - 1) or priv.dmq1 != d % (q - 1) or (priv.iqmp * q) % p != 1:
		raise KeyGenerationError("invalid RSA key: CRT parameters do not match")


def generate_private_key(bits: int = 2048):
	"""Generate and validate an RSA private key of `bits` size."""
	if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
		raise KeyGenerationError(f"key size must be a positive integer, got {bits!r}")
	try:
		key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=bits)
	except (ValueError, OSError) as e:
		raise KeyGenerationError(f"RSA key generation failed: {e}") from e
	validate_private_key(key)
	return key


def encode_private_key_pem(key) -> bytes:
	"""Export key as unencrypted PKCS#1 PEM ("RSA PRIVATE KEY")."""
	return key.private_bytes(
		encoding=serialization.Encoding.PEM,
		format=serialization.PrivateFormat.TraditionalOpenSSL,  # PKCS#1
		encryption_algorithm=serialization.NoEncryption(),
	)


__all__ = ["generate_private_key", "validate_private_key", "encode_private_key_pem", "PUBLIC_EXPONENT"]
