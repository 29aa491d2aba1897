"""Load name records and gold (name, short, shortest) files."""

from pathlib import Path
from typing import Dict, List, Optional


def load_names(names_path: str | Path, encoding: str = 'utf-8') -> List[str]:
	"""Load names from a text file, one name per line.

	Args:
		names_path: Path to names file
		encoding: File encoding

	Returns:
		Names with surrounding whitespace removed, blank lines skipped
	"""
	with open(names_path, 'r', encoding=encoding) as f:
		return [line.strip() for line in f if line.strip()]


def load_gold(gold_path: str | Path, encoding: str = 'utf-8') -> List[Dict[str, Optional[str]]]:
	"""Load gold examples from TSV (format: name\tshort\tshortest).

	The shortest column is optional. Lines starting with '#' are comments.

	Args:
		gold_path: Path to TSV file
		encoding: File encoding

	Returns:
		List of dicts with keys: name, short, shortest (None when absent)
	"""
	examples = []
	with open(gold_path, 'r', encoding=encoding) as f:
		for line in f:
			line = line.rstrip('\r\n')
			if not line.strip() or line.startswith('#'):
				continue

			parts = line.split('\t')
			if len(parts) < 2:
				continue

			name = parts[0].strip()
			if not name:
				continue
			examples.append({
				'name': name,
				'short': parts[1].strip(),
				'shortest': parts[2].strip() if len(parts) > 2 else None,
			})

	return examples
