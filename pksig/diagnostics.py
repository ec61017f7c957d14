"""Step-by-step trace of a sign or verify run.

Everything here is advisory: the CLI decides success from return values and
exceptions, never from what was logged. Private key material is only ever
reported by size.
"""

from __future__ import annotations

import hashlib
import logging

from pksig.crypto.codec import encode_signature

PREVIEW_BYTES = 64


def hex_preview(data: bytes, limit: int = PREVIEW_BYTES) -> str:
    """Hex of the first `limit` bytes, with the total length when truncated."""
    if len(data) <= limit:
        return data.hex()
    return f"{data[:limit].hex()}... ({len(data)} bytes)"


def fingerprint(material: bytes) -> str:
    """SHA-256 fingerprint of public key material, colon separated."""
    digest = hashlib.sha256(material).hexdigest()
    return ":".join(digest[i:i + 2] for i in range(0, len(digest), 2))


class Diagnostics:
    """Logs the inputs and outputs of each step at DEBUG level."""

    def __init__(self, logger: logging.Logger | None = None, preview_bytes: int = PREVIEW_BYTES):
        self.logger = logger or logging.getLogger(__name__)
        self.preview_bytes = preview_bytes

    def loaded(self, what: str, path, size: int) -> None:
        self.logger.debug("Loaded %s from '%s' (%d bytes)", what, path, size)

    def data(self, data: bytes) -> None:
        self.logger.debug("Data: %s", hex_preview(data, self.preview_bytes))

    def private_key(self, material: bytes) -> None:
        self.logger.debug("Using private key (%d bytes, contents not shown)", len(material))

    def public_key(self, material: bytes) -> None:
        self.logger.debug("Using public key with SHA-256 fingerprint %s", fingerprint(material))

    def policy(self, policy) -> None:
        self.logger.debug("Signature algorithm: %s", policy)

    def signature(self, raw: bytes, encoded: str | None = None) -> None:
        if encoded is None:
            encoded = encode_signature(raw)
        self.logger.debug("Signature bytes (%d): %s", len(raw), raw.hex())
        self.logger.debug("Signature encoded as base64: %s", encoded)

    def verdict(self, valid: bool) -> None:
        self.logger.debug("Signature valid? %s", valid)
