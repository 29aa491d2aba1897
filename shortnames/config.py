"""Shortener configuration loading."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError


@dataclass
class ShortenerConfig:
	capacity: Optional[int] = 512
	overflow: str = 'error'
	lexicon_path: Optional[str] = None
	given_names_path: Optional[str] = None
	encoding: str = 'utf-8'
	gold_path: Optional[str] = None

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> 'ShortenerConfig':
		"""Build config from the sections of a parsed YAML file.

		Args:
			data: Parsed YAML with optional 'shortener', 'io' and 'eval' sections

		Returns:
			ShortenerConfig with defaults for missing keys
		"""
		if not isinstance(data, dict):
			raise ConfigError(f'Config must be a mapping, got {type(data).__name__}')

		known = {f.name for f in fields(cls)}
		values = {}
		for section in ('shortener', 'io', 'eval'):
			section_data = data.get(section) or {}
			if not isinstance(section_data, dict):
				raise ConfigError(f"Config section '{section}' must be a mapping")
			for key, value in section_data.items():
				if key not in known:
					raise ConfigError(f"Unknown config key '{section}.{key}'")
				values[key] = value

		return cls(**values)

	def override(self, **kwargs) -> 'ShortenerConfig':
		"""Return a copy with the non-None keyword values replaced."""
		values = {f.name: getattr(self, f.name) for f in fields(self)}
		values.update({k: v for k, v in kwargs.items() if v is not None})
		return ShortenerConfig(**values)


def load_config(config_path: Optional[str | Path] = None) -> ShortenerConfig:
	"""Load YAML configuration file.

	Args:
		config_path: Path to YAML config file (defaults only if None)

	Returns:
		Shortener configuration
	"""
	if config_path is None:
		return ShortenerConfig()

	with open(config_path, 'r', encoding='utf-8') as f:
		data = yaml.safe_load(f)

	return ShortenerConfig.from_dict(data or {})
