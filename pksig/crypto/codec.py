"""Signature artifact encoding.

The artifact is the raw signature as standard base64 (with padding), with
no header, newline or algorithm tag.

- encode_signature(raw) -> str
- decode_signature(text) -> bytes
"""

import base64
import binascii
from typing import Union

from .errors import CodecError


def encode_signature(raw: bytes) -> str:
	"""Encode raw signature bytes as base64 text."""
	return base64.b64encode(bytes(raw)).decode("ascii")


def decode_signature(text: Union[str, bytes]) -> bytes:
	"""Decode base64 artifact text back into raw signature bytes.

	Surrounding ASCII whitespace (such as a trailing newline) is ignored.
	Anything else outside the base64 alphabet, wrong padding, or text that
	is not the canonical encoding of its bytes raises CodecError instead of
	being skipped.
	"""
	if isinstance(text, str):
		try:
			data = text.encode("ascii")
		except UnicodeEncodeError as exc:
			raise CodecError("signature text contains non-ASCII characters") from exc
	elif isinstance(text, (bytes, bytearray, memoryview)):
		data = bytes(text)
	else:
		raise CodecError(f"signature text must be str or bytes, not {type(text).__name__}")

	data = data.strip()
	try:
		raw = base64.b64decode(data, validate=True)
	except binascii.Error as exc:
		raise CodecError(f"signature is not valid base64: {exc}") from exc
	# b64decode tolerates surplus padding and non-zero trailing bits
	if base64.b64encode(raw) != data:
		raise CodecError("signature is not canonical base64")
	return raw
