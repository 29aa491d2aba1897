"""Decoding of raw name records and encoding of results."""

from typing import BinaryIO, Iterator

from ..errors import EncodingError


def decode_name(raw: bytes, encoding: str = 'utf-8') -> str:
	"""Decode a name record.

	Args:
		raw: Encoded name
		encoding: Codec name

	Returns:
		Decoded name
	"""
	try:
		return raw.decode(encoding)
	except UnicodeDecodeError as e:
		raise EncodingError(f'Cannot decode name as {encoding}: {e.reason} at byte {e.start}') from e
	except LookupError as e:
		raise EncodingError(f'Unknown encoding {encoding!r}') from e


def encode_name(text: str, encoding: str = 'utf-8') -> bytes:
	try:
		return text.encode(encoding)
	except UnicodeEncodeError as e:
		raise EncodingError(f'Cannot encode {text!r} as {encoding}: {e.reason}') from e
	except LookupError as e:
		raise EncodingError(f'Unknown encoding {encoding!r}') from e


def strip_line_ending(line: bytes) -> bytes:
	if line.endswith(b'\r\n'):
		return line[:-2]
	if line.endswith(b'\n'):
		return line[:-1]
	return line


def iter_decoded_lines(stream: BinaryIO, encoding: str = 'utf-8') -> Iterator[str]:
	"""Yield one decoded name per line of a binary stream, without line endings."""
	for line in stream:
		yield decode_name(strip_line_ending(line), encoding)
