"""Exceptions raised by the name shortener and its collaborators."""


class ShortnamesError(Exception):
	"""Base class for all shortnames errors."""


class CapacityExceeded(ShortnamesError, ValueError):
	"""Input or output does not fit in the configured capacity."""

	def __init__(self, field: str, length: int, limit: int):
		self.field = field
		self.length = length
		self.limit = limit
		super().__init__(f'{field} is {length} characters long, limit is {limit}')


class EncodingError(ShortnamesError, UnicodeError):
	"""Input bytes could not be decoded."""


class LexiconError(ShortnamesError, ValueError):
	"""Dictionary data is malformed."""


class ConfigError(ShortnamesError, ValueError):
	"""Configuration value is invalid."""
