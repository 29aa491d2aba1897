"""Tests for lexicon and name loading."""

import json

import pytest

from shortnames.data.lexicon import (
	AbbreviationRule,
	load_given_names,
	load_lexicon,
	parse_lexicon,
	rules_from_pairs,
)
from shortnames.data.name_loader import load_gold, load_names
from shortnames.errors import LexiconError


def test_bundled_lexicon_loading():
	"""Test loading of the bundled abbreviation rules."""
	rules = load_lexicon()

	assert len(rules) > 200
	assert rules[0] == AbbreviationRule('plac', 'pl.')
	assert AbbreviationRule('rodziny', '') in rules
	assert all(rule.phrase for rule in rules)
	assert all(rule.droppable for rule in rules)


def test_bundled_lexicon_keeps_duplicate_phrases_in_order():
	rules = load_lexicon()
	doctor = [rule.abbreviation for rule in rules if rule.phrase == 'doctor']

	assert doctor == ['dr.', 'dr']


def test_bundled_lexicon_military_ranks():
	rules = load_lexicon()
	lookup = {}
	for rule in rules:
		lookup.setdefault(rule.phrase, rule.abbreviation)

	assert lookup['hetmana'] == 'hetm.'
	assert lookup['kanclerza'] == 'kanc.'
	assert lookup['admirała'] == 'adm.'
	assert lookup['komandora'] == 'kmdr.'
	assert lookup['imienia'] == 'im.'


def test_bundled_given_names_loading():
	names = load_given_names()

	assert len(names) > 300
	assert 'Jana' in names
	assert 'Pawła' in names
	assert all(names)


def test_lexicon_formats(tmp_path):
	"""Test pairs, objects and plain mappings."""
	path = tmp_path / 'rules.json'
	path.write_text(json.dumps([
		['street', 'st'],
		{'phrase': 'armii krajowej', 'abbreviation': 'AK', 'droppable': False},
		{'phrase': 'rodziny'},
	]), encoding='utf-8')

	rules = load_lexicon(path)

	assert rules == (
		AbbreviationRule('street', 'st'),
		AbbreviationRule('armii krajowej', 'AK', droppable=False),
		AbbreviationRule('rodziny', ''),
	)

	assert parse_lexicon({'street': 'st', 'road': 'rd'}) == rules_from_pairs([('street', 'st'), ('road', 'rd')])


@pytest.mark.parametrize('data', [
	[['', 'x']],
	[['street']],
	[['street', None]],
	[{'abbreviation': 'st'}],
	[{'phrase': 'street', 'droppable': 'yes'}],
	'street',
])
def test_invalid_lexicon(data):
	with pytest.raises(LexiconError):
		parse_lexicon(data)


def test_invalid_given_names(tmp_path):
	path = tmp_path / 'names.json'
	path.write_text(json.dumps(['Jana', '']), encoding='utf-8')

	with pytest.raises(LexiconError):
		load_given_names(path)


def test_invalid_json(tmp_path):
	path = tmp_path / 'rules.json'
	path.write_text('[["street", "st"]', encoding='utf-8')

	with pytest.raises(LexiconError):
		load_lexicon(path)


def test_load_names(tmp_path):
	path = tmp_path / 'names.txt'
	path.write_text('Ulica Jana Kowalskiego\n\n  Main Street  \n', encoding='utf-8')

	assert load_names(path) == ['Ulica Jana Kowalskiego', 'Main Street']


def test_load_gold(tmp_path):
	path = tmp_path / 'gold.tsv'
	path.write_text(
		'# name\tshort\tshortest\n'
		'Main Street\tMain St\tMain\n'
		'Jana\tJana\n'
		'no tabs here\n',
		encoding='utf-8',
	)

	gold = load_gold(path)

	assert gold == [
		{'name': 'Main Street', 'short': 'Main St', 'shortest': 'Main'},
		{'name': 'Jana', 'short': 'Jana', 'shortest': None},
	]
