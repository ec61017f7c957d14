"""Signature algorithm policies.

A policy fixes the hash, the padding and the key family used by both the
signer and the verifier. Both sides must pick the same policy out of band;
the policy name is never written into the signature artifact.

Provided:
- AlgorithmPolicy: immutable policy value
- RSA_SHA256 (DEFAULT_POLICY), RSA_SHA384, RSA_SHA512, RSA_PSS_SHA256
- get_policy(name) -> AlgorithmPolicy
- available_policies() -> list of names
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding as asym_padding
from cryptography.hazmat.primitives.asymmetric import rsa

from .errors import AlgorithmError


def _pkcs1v15(hash_cls: type[hashes.HashAlgorithm]) -> asym_padding.AsymmetricPadding:
	return asym_padding.PKCS1v15()


def _pss(hash_cls: type[hashes.HashAlgorithm]) -> asym_padding.AsymmetricPadding:
	return asym_padding.PSS(
		mgf=asym_padding.MGF1(hash_cls()),
		salt_length=asym_padding.PSS.DIGEST_LENGTH,
	)


@dataclass(frozen=True)
class AlgorithmPolicy:
	"""Hash + padding + key family agreed between signer and verifier."""

	name: str
	hash_cls: type[hashes.HashAlgorithm]
	padding_factory: Callable[[type[hashes.HashAlgorithm]], asym_padding.AsymmetricPadding]
	private_key_types: tuple = (rsa.RSAPrivateKey,)
	public_key_types: tuple = (rsa.RSAPublicKey,)
	family: str = "RSA"

	def hash_algorithm(self) -> hashes.HashAlgorithm:
		"""Return a fresh hash instance for this policy."""
		return self.hash_cls()

	def padding(self) -> asym_padding.AsymmetricPadding:
		"""Return a fresh padding instance for this policy."""
		return self.padding_factory(self.hash_cls)

	def accepts_private_key(self, key) -> bool:
		return isinstance(key, self.private_key_types)

	def accepts_public_key(self, key) -> bool:
		return isinstance(key, self.public_key_types)

	def __str__(self) -> str:
		return self.name


# Same scheme as OpenSSL / Node.js "RSA-SHA256": PKCS#1 v1.5 over SHA-256.
RSA_SHA256 = AlgorithmPolicy("RSA-SHA256", hashes.SHA256, _pkcs1v15)
RSA_SHA384 = AlgorithmPolicy("RSA-SHA384", hashes.SHA384, _pkcs1v15)
RSA_SHA512 = AlgorithmPolicy("RSA-SHA512", hashes.SHA512, _pkcs1v15)
RSA_PSS_SHA256 = AlgorithmPolicy("RSA-PSS-SHA256", hashes.SHA256, _pss)

DEFAULT_POLICY = RSA_SHA256

_policies = {
	p.name.lower(): p
	for p in (RSA_SHA256, RSA_SHA384, RSA_SHA512, RSA_PSS_SHA256)
}


def get_policy(name: str | AlgorithmPolicy) -> AlgorithmPolicy:
	"""Look up a policy by name (case-insensitive).

	An AlgorithmPolicy instance is returned unchanged. Raises AlgorithmError
	for names that are not registered.
	"""
	if isinstance(name, AlgorithmPolicy):
		return name
	if policy := _policies.get(str(name).strip().lower()):
		return policy
	raise AlgorithmError(f"Unsupported signature algorithm: {name!r}")


def available_policies() -> list[str]:
	"""Return the names of all registered policies."""
	return [p.name for p in _policies.values()]
