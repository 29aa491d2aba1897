"""Text normalization utilities for evaluation."""

import re

_MULTISPACE = re.compile(r'\s+')


def normalize_text(text: str) -> str:
	"""Normalize text for loose comparison (casefold, collapse spaces).

	Args:
		text: Input text

	Returns:
		Normalized text
	"""
	# "Straße" and "STRASSE" compare equal
	text = text.casefold()

	# Collapse runs of whitespace to a single space
	text = _MULTISPACE.sub(' ', text)

	return text.strip()
