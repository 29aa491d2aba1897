"""Evaluator to run metrics on a gold file."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..data.name_loader import load_gold
from ..engine.shortener import NameShortener, get_default_shortener
from ..errors import ShortnamesError
from .metrics import compute_metrics

logger = logging.getLogger(__name__)


def _mean(values: List[float]) -> float:
	return sum(values) / len(values) if values else 0.0


def aggregate(all_metrics: List[Dict[str, float]]) -> Dict[str, float]:
	"""Average each metric over the examples that report it."""
	keys = []
	for metrics in all_metrics:
		for key in metrics:
			if key not in keys:
				keys.append(key)

	aggregated = {key: _mean([m[key] for m in all_metrics if key in m]) for key in keys}
	aggregated['num_examples'] = len(all_metrics)
	return aggregated


def evaluate(
	gold_path: str | Path,
	shortener: Optional[NameShortener] = None,
	encoding: str = 'utf-8',
	show_progress: bool = True,
) -> Dict[str, Any]:
	"""Run the shortener over a gold file and score its outputs.

	Args:
		gold_path: Path to gold TSV file
		shortener: Shortener to evaluate (default dictionaries if None)
		encoding: Gold file encoding
		show_progress: Whether to show a progress bar

	Returns:
		Dictionary with aggregated metrics and per-example results
	"""
	shortener = shortener or get_default_shortener()
	examples = load_gold(gold_path, encoding=encoding)

	all_metrics = []
	per_example = []
	errors = 0

	for example in tqdm(examples, desc='Evaluating', disable=not show_progress):
		name = example['name']
		try:
			short, shortest = shortener.shorten(name)
		except ShortnamesError as e:
			logger.warning("Error shortening '%s': %s", name, e)
			errors += 1
			short, shortest = '', ''

		metrics = compute_metrics(name, short, shortest, example['short'], example['shortest'])
		all_metrics.append(metrics)

		per_example.append({
			'name': name,
			'gold_short': example['short'],
			'gold_shortest': example['shortest'],
			'short': short,
			'shortest': shortest,
			**metrics,
		})

	aggregated = aggregate(all_metrics)
	aggregated['num_errors'] = errors

	return {
		'aggregated': aggregated,
		'per_example': per_example,
	}
