"""Evaluation metrics for name shortening."""

from typing import Dict, Optional

from ..utils.normalization import normalize_text


def levenshtein_distance(s1: str, s2: str) -> int:
	"""Compute Levenshtein (edit) distance between two strings.

	Args:
		s1: First string
		s2: Second string

	Returns:
		Edit distance
	"""
	if len(s1) < len(s2):
		return levenshtein_distance(s2, s1)

	if len(s2) == 0:
		return len(s1)

	previous_row = list(range(len(s2) + 1))
	for i, c1 in enumerate(s1):
		current_row = [i + 1]
		for j, c2 in enumerate(s2):
			insertions = previous_row[j + 1] + 1
			deletions = current_row[j] + 1
			substitutions = previous_row[j] + (c1 != c2)
			current_row.append(min(insertions, deletions, substitutions))
		previous_row = current_row

	return previous_row[-1]


def character_error_rate(pred: str, gold: str) -> float:
	"""Compute Character Error Rate (CER).

	CER = (substitutions + insertions + deletions) / len(gold)

	Args:
		pred: Predicted text
		gold: Gold standard text

	Returns:
		CER (0.0 = perfect match)
	"""
	if len(gold) == 0:
		return 1.0 if len(pred) > 0 else 0.0

	return levenshtein_distance(pred, gold) / len(gold)


def exact_match(pred: str, gold: str, normalize: bool = False) -> bool:
	"""Check if prediction matches gold, optionally after normalization.

	Args:
		pred: Predicted text
		gold: Gold standard text
		normalize: Whether to casefold and collapse whitespace first

	Returns:
		True if match
	"""
	if normalize:
		pred = normalize_text(pred)
		gold = normalize_text(gold)

	return pred == gold


def compression_ratio(shortened: str, full: str) -> float:
	"""Length of the shortened text relative to the full name."""
	if len(full) == 0:
		return 1.0
	return len(shortened) / len(full)


def compute_metrics(
	name: str,
	short: str,
	shortest: str,
	gold_short: str,
	gold_shortest: Optional[str] = None,
) -> Dict[str, float]:
	"""Compute all metrics for a single example.

	Args:
		name: Full input name
		short: Predicted short form
		shortest: Predicted shortest form
		gold_short: Expected short form
		gold_shortest: Expected shortest form (not scored if None)

	Returns:
		Dictionary of metric names to values
	"""
	metrics = {
		'short_exact_match': 1.0 if exact_match(short, gold_short) else 0.0,
		'short_normalized_match': 1.0 if exact_match(short, gold_short, normalize=True) else 0.0,
		'short_cer': character_error_rate(short, gold_short),
		'short_compression': compression_ratio(short, name),
		'shortest_compression': compression_ratio(shortest, name),
	}

	if gold_shortest is not None:
		metrics['shortest_exact_match'] = 1.0 if exact_match(shortest, gold_shortest) else 0.0
		metrics['shortest_cer'] = character_error_rate(shortest, gold_shortest)

	return metrics
