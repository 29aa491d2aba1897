"""Character classification and case folding used by the shortener."""


class TextClassifier:
	"""Unicode character classes and case mapping.

	Passed to the shortener explicitly instead of relying on a process
	locale. Instances hold no state and can be shared between threads.
	"""

	def is_word_char(self, char: str) -> bool:
		"""Check if character belongs to a word (Unicode alphanumeric)."""
		return char.isalnum()

	def is_space(self, char: str) -> bool:
		return char.isspace()

	def is_upper(self, char: str) -> bool:
		return char.isupper()

	def is_lower(self, char: str) -> bool:
		return char.islower()

	def capitalize_first(self, text: str) -> str:
		"""Upper-case the first character of text if it is lower case."""
		if text and self.is_lower(text[0]):
			return text[0].upper() + text[1:]
		return text

	def fold(self, text: str) -> str:
		"""Fold text for case-insensitive comparison.

		Characters are lowered one at a time so that the result does not
		depend on the surrounding context (e.g. Greek final sigma).
		"""
		return ''.join(char.lower() for char in text)


DEFAULT_CLASSIFIER = TextClassifier()
