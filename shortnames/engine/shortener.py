"""Abbreviate place and street names for constrained-space display.

A name is scanned left to right. Every word is tried against the
abbreviation rules (first rule in list order wins), then against the given
names, and otherwise copied verbatim. Two outputs are produced at once: the
short form, where matched phrases are replaced by their abbreviations, and
the shortest form, where they are dropped as long as something remains.
"""

import logging
import threading
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..data.lexicon import AbbreviationRule, load_given_names, load_lexicon
from ..errors import CapacityExceeded, ConfigError
from .classifier import DEFAULT_CLASSIFIER, TextClassifier

logger = logging.getLogger(__name__)

# Code units including the terminator, as in the classic fixed buffers
DEFAULT_CAPACITY = 512
OVERFLOW_MODES = ('error', 'grow')


class ShortenedName(NamedTuple):
	"""Short and shortest forms of a name."""

	short: str
	shortest: str


class _OutputBuffer:
	"""Growable output that keeps separators tidy around omitted words."""

	def __init__(self, classifier: TextClassifier):
		self._classifier = classifier
		self._chars: List[str] = []
		self._swallow_space = False

	def write_word(self, text: str):
		self._chars.extend(text)
		self._swallow_space = False

	def write_gap(self, text: str):
		if self._swallow_space and self._classifier.is_space(text[0]):
			text = text[1:]
		self._swallow_space = False
		self._chars.extend(text)

	def omit(self):
		"""Account for a word that contributes nothing to this output.

		The whitespace character before the write position is retracted.
		If there is none, the one following the omitted word is skipped.
		"""
		if self._chars and self._classifier.is_space(self._chars[-1]):
			self._chars.pop()
		else:
			self._swallow_space = True

	def has_word(self) -> bool:
		return any(self._classifier.is_word_char(char) for char in self._chars)

	def replace(self, text: str):
		self._chars = list(text)

	def getvalue(self) -> str:
		return ''.join(self._chars)


class NameShortener:
	"""Produce short and shortest forms of names from ordered dictionaries."""

	def __init__(
		self,
		lexicon: Iterable[AbbreviationRule],
		given_names: Iterable[str],
		classifier: Optional[TextClassifier] = None,
		capacity: Optional[int] = DEFAULT_CAPACITY,
		overflow: str = 'error',
	):
		"""Initialize shortener.

		Args:
			lexicon: Abbreviation rules in priority order
			given_names: Given names in priority order
			classifier: Character classification (Unicode by default)
			capacity: Buffer size in code units including a terminator,
				so names and outputs may hold capacity - 1 characters;
				None for no limit
			overflow: 'error' to raise CapacityExceeded past capacity,
				'grow' to let outputs grow without limit
		"""
		if overflow not in OVERFLOW_MODES:
			raise ConfigError(f'Unknown overflow mode {overflow!r}, expected one of {OVERFLOW_MODES}')
		if capacity is not None and capacity < 2:
			raise ConfigError(f'Capacity must be at least 2, got {capacity}')

		self.lexicon = tuple(lexicon)
		self.given_names = tuple(given_names)
		self.classifier = classifier or DEFAULT_CLASSIFIER
		self.capacity = capacity
		self.overflow = overflow

		self._rule_index = self._build_index((rule.phrase, rule) for rule in self.lexicon)
		self._name_index = self._build_index((name, name) for name in self.given_names)

		logger.debug(
			'Shortener ready: %d rules, %d given names, capacity=%s, overflow=%s',
			len(self.lexicon),
			len(self.given_names),
			capacity,
			overflow,
		)

	@classmethod
	def from_config(cls, config, classifier: Optional[TextClassifier] = None) -> 'NameShortener':
		"""Build a shortener from a ShortenerConfig."""
		return cls(
			load_lexicon(config.lexicon_path),
			load_given_names(config.given_names_path),
			classifier=classifier,
			capacity=config.capacity,
			overflow=config.overflow,
		)

	def _build_index(self, entries) -> Dict[str, Tuple[tuple, ...]]:
		"""Group entries by first folded character, keeping list order."""
		index: Dict[str, list] = {}
		for text, value in entries:
			folded = self.classifier.fold(text)
			index.setdefault(folded[:1], []).append((value, folded, len(text)))
		return {key: tuple(items) for key, items in index.items()}

	def _run_end(self, text: str, pos: int, word: bool) -> int:
		"""Return the end of the run of word (or non-word) characters at pos."""
		is_word_char = self.classifier.is_word_char
		while pos < len(text) and is_word_char(text[pos]) == word:
			pos += 1
		return pos

	def _last_word_end(self, text: str) -> int:
		for i in range(len(text) - 1, -1, -1):
			if self.classifier.is_word_char(text[i]):
				return i + 1
		return 0

	def _lookup(self, index, text: str, pos: int, last_word_end: Optional[int] = None):
		"""Find the first entry matching a whole word or phrase at pos.

		Returns:
			(value, end) of the match, or (None, pos)
		"""
		candidates = index.get(self.classifier.fold(text[pos])[:1], ())
		for value, folded, length in candidates:
			end = pos + length
			if end > len(text):
				continue
			if end < len(text) and self.classifier.is_word_char(text[end]):
				continue
			if self.classifier.fold(text[pos:end]) != folded:
				continue
			if last_word_end is not None and end >= last_word_end:
				continue
			return value, end
		return None, pos

	def _check_capacity(self, field: str, text: str):
		if self.overflow == 'grow' or self.capacity is None:
			return
		if len(text) > self.capacity - 1:
			raise CapacityExceeded(field, len(text), self.capacity - 1)

	def shorten(self, name: Optional[str]) -> ShortenedName:
		"""Abbreviate a name.

		Args:
			name: Full, unabbreviated name (None is treated as no input)

		Returns:
			ShortenedName with the short and shortest forms
		"""
		if name is None:
			return ShortenedName('', '')
		self._check_capacity('name', name)

		classifier = self.classifier
		short = _OutputBuffer(classifier)
		shortest = _OutputBuffer(classifier)
		last_word_end = self._last_word_end(name)
		last_abbreviation = ''
		unabbreviated = 0
		pos = 0

		while pos < len(name):
			end = self._run_end(name, pos, word=False)
			if end > pos:
				gap = name[pos:end]
				short.write_gap(gap)
				shortest.write_gap(gap)
				pos = end
				continue

			rule, end = self._lookup(self._rule_index, name, pos)
			if rule is not None:
				abbreviation = rule.abbreviation
				if classifier.is_upper(name[pos]):
					abbreviation = classifier.capitalize_first(abbreviation)
				pos = end

				if abbreviation:
					short.write_word(abbreviation)
					last_abbreviation = abbreviation
				else:
					short.omit()

				# Keep the final phrase when nothing else would survive
				if abbreviation and pos >= last_word_end and not unabbreviated:
					shortest.write_word(abbreviation)
				else:
					shortest.omit()
				continue

			# A given name in last position is most likely a surname
			given_name, end = self._lookup(self._name_index, name, pos, last_word_end)
			if given_name is not None:
				initial = given_name[0] + '.'
				short.write_word(initial)
				shortest.omit()
				last_abbreviation = initial
				pos = end
				continue

			end = self._run_end(name, pos, word=True)
			word = name[pos:end]
			short.write_word(word)
			shortest.write_word(word)
			unabbreviated += 1
			pos = end

		if short.has_word() and not shortest.has_word():
			shortest.replace(last_abbreviation or short.getvalue())

		result = ShortenedName(short.getvalue(), shortest.getvalue())
		self._check_capacity('short', result.short)
		self._check_capacity('shortest', result.shortest)
		return result


_default_shortener = None
_default_lock = threading.Lock()


def get_default_shortener() -> NameShortener:
	"""Return the process-wide shortener over the bundled dictionaries."""
	global _default_shortener

	with _default_lock:
		if _default_shortener is None:
			_default_shortener = NameShortener(load_lexicon(), load_given_names())
	return _default_shortener


def shorten_name(name: Optional[str], shortener: Optional[NameShortener] = None) -> ShortenedName:
	"""Abbreviate a name with the given shortener, or the default one."""
	return (shortener or get_default_shortener()).shorten(name)
