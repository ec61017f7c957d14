"""Typed errors raised by the signing core.

A rejected signature is not an error: `verify_bytes` returns False for it.
The errors below mean the operation could not be carried out at all.
"""


class PksigError(Exception):
	"""Base class for every error raised by pksig."""


class KeyParseError(PksigError, ValueError):
	"""Key material is malformed or not of the policy's key family."""


class CodecError(PksigError, ValueError):
	"""Encoded signature text is not valid base64."""


class SigningError(PksigError):
	"""The signing primitive failed for a reason other than key parsing."""


class AlgorithmError(PksigError, ValueError):
	"""Unknown signature algorithm name."""
