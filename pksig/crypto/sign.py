"""Sign and verify byte buffers with PEM key material.

Functions provided:
- sign_bytes(data, private_key_pem, policy=DEFAULT_POLICY, password=None) -> bytes
- verify_bytes(data, signature, public_key_pem, policy=DEFAULT_POLICY) -> bool

The default policy is RSA PKCS#1 v1.5 with SHA-256. Uses `cryptography`
primitives; no file I/O happens here.
"""

import logging

from cryptography.exceptions import InvalidSignature

from .errors import SigningError
from .keys import PemInput, load_private_key, load_public_key
from .policy import DEFAULT_POLICY, AlgorithmPolicy, get_policy

logger = logging.getLogger(__name__)


def sign_bytes(data: bytes, private_key_pem: PemInput, policy: AlgorithmPolicy = DEFAULT_POLICY, password=None) -> bytes:
	"""Sign `data` with the private key under `policy`. Returns raw signature bytes.

	Raises KeyParseError for unusable key material and SigningError when
	the primitive itself fails (for example a key too small for the digest).
	"""
	policy = get_policy(policy)
	private_key = load_private_key(private_key_pem, policy, password=password)
	try:
		signature = private_key.sign(
			bytes(data),
			policy.padding(),
			policy.hash_algorithm(),
		)
	except Exception as exc:
		raise SigningError(f"{policy.name} signing failed: {exc}") from exc

	logger.debug("signed %d bytes with %s (%d-byte signature)", len(data), policy.name, len(signature))
	return signature


def verify_bytes(data: bytes, signature: bytes, public_key_pem: PemInput, policy: AlgorithmPolicy = DEFAULT_POLICY) -> bool:
	"""Verify `signature` over `data` with a public key or certificate.

	Returns True on success, False for any signature that does not match,
	including empty, truncated or garbage bytes. Raises KeyParseError only
	when the public key material itself cannot be used.
	"""
	policy = get_policy(policy)
	public_key = load_public_key(public_key_pem, policy)
	try:
		public_key.verify(
			bytes(signature),
			bytes(data),
			policy.padding(),
			policy.hash_algorithm(),
		)
	except InvalidSignature:
		logger.debug("%s signature rejected over %d bytes", policy.name, len(data))
		return False
	logger.debug("%s signature accepted over %d bytes", policy.name, len(data))
	return True
