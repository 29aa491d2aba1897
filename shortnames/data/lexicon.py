"""Lexicon management for phrase-to-abbreviation rules and given names."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import LexiconError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent
DEFAULT_LEXICON_PATH = DATA_DIR / 'abbreviations.json'
DEFAULT_GIVEN_NAMES_PATH = DATA_DIR / 'given_names.json'


@dataclass(frozen=True)
class AbbreviationRule:
	"""A phrase and the abbreviation that replaces it.

	An empty abbreviation removes the phrase from the output.
	``droppable`` marks phrases that may vanish from the shortest form;
	all bundled rules are droppable and the shortener does not consult it yet.
	"""

	phrase: str
	abbreviation: str
	droppable: bool = True


def _parse_rule(entry, index: int) -> AbbreviationRule:
	if isinstance(entry, dict):
		phrase = entry.get('phrase')
		abbreviation = entry.get('abbreviation', '')
		droppable = entry.get('droppable', True)
	elif isinstance(entry, (list, tuple)) and len(entry) == 2:
		phrase, abbreviation = entry
		droppable = True
	else:
		raise LexiconError(f'Rule {index}: expected [phrase, abbreviation] pair, got {entry!r}')

	if not isinstance(phrase, str) or not phrase:
		raise LexiconError(f'Rule {index}: phrase must be a non-empty string')
	if not isinstance(abbreviation, str):
		raise LexiconError(f'Rule {index}: abbreviation must be a string')
	if not isinstance(droppable, bool):
		raise LexiconError(f'Rule {index}: droppable must be a boolean')

	return AbbreviationRule(phrase, abbreviation, droppable)


def parse_lexicon(data) -> Tuple[AbbreviationRule, ...]:
	"""Build abbreviation rules from decoded JSON data.

	Args:
		data: List of [phrase, abbreviation] pairs or rule objects, or a
			dict mapping phrases to abbreviations (insertion order is kept)

	Returns:
		Rules in priority order
	"""
	if isinstance(data, dict):
		data = list(data.items())
	if not isinstance(data, list):
		raise LexiconError(f'Lexicon must be a list or an object, got {type(data).__name__}')

	return tuple(_parse_rule(entry, i) for i, entry in enumerate(data))


def parse_given_names(data) -> Tuple[str, ...]:
	"""Validate a decoded list of given names."""
	if not isinstance(data, list):
		raise LexiconError(f'Given names must be a list, got {type(data).__name__}')

	for i, name in enumerate(data):
		if not isinstance(name, str) or not name:
			raise LexiconError(f'Given name {i}: must be a non-empty string')

	return tuple(data)


def _load_json(path: str | Path):
	try:
		with open(path, 'r', encoding='utf-8') as f:
			return json.load(f)
	except json.JSONDecodeError as e:
		raise LexiconError(f'Invalid JSON in {path}: {e}') from e


def load_lexicon(lexicon_path: Optional[str | Path] = None) -> Tuple[AbbreviationRule, ...]:
	"""Load abbreviation rules from JSON file.

	Args:
		lexicon_path: Path to the rules file (bundled rules if None)

	Returns:
		Rules in priority order
	"""
	path = lexicon_path or DEFAULT_LEXICON_PATH
	rules = parse_lexicon(_load_json(path))
	logger.debug('Loaded %d abbreviation rules from %s', len(rules), path)
	return rules


def load_given_names(given_names_path: Optional[str | Path] = None) -> Tuple[str, ...]:
	"""Load given names from JSON file.

	Args:
		given_names_path: Path to the names file (bundled names if None)

	Returns:
		Given names in priority order
	"""
	path = given_names_path or DEFAULT_GIVEN_NAMES_PATH
	names = parse_given_names(_load_json(path))
	logger.debug('Loaded %d given names from %s', len(names), path)
	return names


def rules_from_pairs(pairs: List[Tuple[str, str]]) -> Tuple[AbbreviationRule, ...]:
	"""Build rules from (phrase, abbreviation) tuples, e.g. in tests."""
	return parse_lexicon([list(pair) for pair in pairs])
