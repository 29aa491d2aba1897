"""Tests for evaluation metrics."""

from shortnames.eval.metrics import (
	character_error_rate,
	compression_ratio,
	compute_metrics,
	exact_match,
	levenshtein_distance,
)
from shortnames.utils.normalization import normalize_text


def test_levenshtein_distance():
	"""Test Levenshtein distance calculation."""
	assert levenshtein_distance("kitten", "sitting") == 3
	assert levenshtein_distance("", "abc") == 3
	assert levenshtein_distance("abc", "") == 3
	assert levenshtein_distance("Ul.", "Ul.") == 0
	assert levenshtein_distance("ul.", "ул.") == 2


def test_character_error_rate():
	"""Test CER calculation."""
	assert character_error_rate("Main St", "Main St") == 0.0
	assert character_error_rate("Main Sx", "Main St") == 1 / 7
	assert character_error_rate("abc", "") == 1.0
	assert character_error_rate("", "") == 0.0


def test_exact_match():
	"""Test strict and normalized matching."""
	assert exact_match("Ul. J. Kowalskiego", "Ul. J. Kowalskiego") is True
	assert exact_match("ul. J. Kowalskiego", "Ul. J. Kowalskiego") is False
	assert exact_match("ul.  J. Kowalskiego", "Ul. J. Kowalskiego", normalize=True) is True
	assert exact_match("Lange Straße", "LANGE STRASSE", normalize=True) is True


def test_compression_ratio():
	assert compression_ratio("Main St", "Main Street") == 7 / 11
	assert compression_ratio("", "") == 1.0


def test_compute_metrics():
	"""Test metric computation."""
	metrics = compute_metrics("Main Street", "Main St", "Main", "Main St", "Main")

	assert metrics['short_exact_match'] == 1.0
	assert metrics['shortest_exact_match'] == 1.0
	assert metrics['short_cer'] == 0.0
	assert metrics['shortest_cer'] == 0.0

	metrics = compute_metrics("Main Street", "Main Street", "Main Street", "Main St")

	assert metrics['short_exact_match'] == 0.0
	assert metrics['short_cer'] > 0.0
	assert 'shortest_exact_match' not in metrics


def test_normalize_text():
	"""Test text normalization."""
	assert normalize_text("  Ul.   J.  Kowalskiego ") == "ul. j. kowalskiego"
	assert normalize_text("ULICA") == "ulica"
	assert normalize_text("Straße") == "strasse"
