"""PEM key loading for the signer and verifier.

Functions provided:
- load_private_key(pem, policy=DEFAULT_POLICY, password=None)
- load_public_key(pem, policy=DEFAULT_POLICY)
- is_certificate(pem) -> bool

Key material is passed in as PEM bytes (or str); reading key files is up to
the caller. Every parse failure is raised as KeyParseError.
"""

from __future__ import annotations

from typing import Union

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.serialization import (
	load_pem_private_key,
	load_pem_public_key,
)

from .errors import KeyParseError
from .policy import DEFAULT_POLICY, AlgorithmPolicy

PemInput = Union[str, bytes, bytearray, memoryview]

_CERT_MARKER = b"-----BEGIN CERTIFICATE-----"


def _as_bytes(pem: PemInput) -> bytes:
	if isinstance(pem, str):
		return pem.encode("utf-8")
	if isinstance(pem, (bytes, bytearray, memoryview)):
		return bytes(pem)
	raise KeyParseError(f"key material must be PEM bytes or str, not {type(pem).__name__}")


def is_certificate(pem: PemInput) -> bool:
	"""Return True if `pem` holds an X.509 certificate rather than a bare key."""
	return _CERT_MARKER in _as_bytes(pem)


def load_private_key(pem: PemInput, policy: AlgorithmPolicy = DEFAULT_POLICY, password: Union[None, str, bytes] = None):
	"""Load a PEM private key and check it belongs to the policy's family.

	Both PKCS#1 ("BEGIN RSA PRIVATE KEY") and PKCS#8 ("BEGIN PRIVATE KEY" /
	"BEGIN ENCRYPTED PRIVATE KEY") encodings are accepted.
	"""
	data = _as_bytes(pem)
	if isinstance(password, str):
		password = password.encode("utf-8")
	try:
		key = load_pem_private_key(data, password=password)
	except TypeError as exc:
		# raised for encrypted keys without a password and vice versa
		raise KeyParseError(f"private key password mismatch: {exc}") from exc
	except (ValueError, UnsupportedAlgorithm) as exc:
		raise KeyParseError(f"could not parse private key: {exc}") from exc

	if not policy.accepts_private_key(key):
		raise KeyParseError(
			f"{type(key).__name__} is not a {policy.family} private key (required by {policy.name})"
		)
	return key


def load_public_key(pem: PemInput, policy: AlgorithmPolicy = DEFAULT_POLICY):
	"""Load a public key from a PEM public key or a PEM certificate.

	A certificate only carries the key here: its issuer, validity window and
	extensions are not checked.
	"""
	data = _as_bytes(pem)
	try:
		if is_certificate(data):
			key = x509.load_pem_x509_certificate(data).public_key()
		else:
			key = load_pem_public_key(data)
	except (ValueError, UnsupportedAlgorithm) as exc:
		raise KeyParseError(f"could not parse public key: {exc}") from exc

	if not policy.accepts_public_key(key):
		raise KeyParseError(
			f"{type(key).__name__} is not a {policy.family} public key (required by {policy.name})"
		)
	return key
