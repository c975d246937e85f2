"""Settings for vocabularies and credential storage.

Settings live in ``settings.json`` inside the data directory. The file is
optional; every key falls back to the defaults below.

Example::

	{
		"subjects": ["Maths", "Physics"],
		"categories": ["Maths", "Science", "Other"],
		"enforce_subjects": true,
		"enforce_categories": true,
		"credential_scheme": "plaintext"
	}
"""
import json
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from BackEnd.core.errors import ConfigError
from BackEnd.core.paths import settings_path

logger = logging.getLogger(__name__)

DEFAULT_SUBJECTS = [
	"English", "Maths", "Biology", "Chemistry", "Physics",
	"History", "Geography", "Economics", "Accounting", "Business Studies",
	"Digital Technologies", "Classical Studies", "Art History", "Drama",
	"Music", "Health", "Physical Education", "Te Reo Māori", "Japanese",
	"Chinese", "French", "Spanish", "German", "Samoan", "Cook Islands Māori",
	"Math", "Science", "Programming", "Business",
]

DEFAULT_CATEGORIES = [
	"Math", "Maths", "Science", "English", "History", "Programming",
	"Geography", "Business", "Digital Technologies", "Other",
]

CREDENTIAL_SCHEMES = ("plaintext", "sha256")


class Vocabulary(NamedTuple):
	"""Approved values the validator checks against.

	``None`` for a list disables that rule.
	"""
	subjects: Optional[Tuple[str, ...]] = None
	categories: Optional[Tuple[str, ...]] = None


@dataclass
class TrackerConfig:
	subjects: List[str] = field(default_factory=lambda: list(DEFAULT_SUBJECTS))
	categories: List[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
	enforce_subjects: bool = True
	enforce_categories: bool = True
	credential_scheme: str = "plaintext"

	def vocabulary(self) -> Vocabulary:
		return Vocabulary(
			subjects=tuple(self.subjects) if self.enforce_subjects else None,
			categories=tuple(self.categories) if self.enforce_categories else None,
		)


def _string_list(data, key):
	value = data[key]
	if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
		raise ConfigError(f"'{key}' must be a list of strings")
	cleaned = [v.strip() for v in value if v.strip()]
	for v in cleaned:
		if "," in v or "\n" in v or "\r" in v:
			raise ConfigError(f"'{key}' entry {v!r} may not contain commas or line breaks")
	if not cleaned:
		raise ConfigError(f"'{key}' must not be empty")
	return cleaned


def _flag(data, key):
	value = data[key]
	if not isinstance(value, bool):
		raise ConfigError(f"'{key}' must be true or false")
	return value


def config_from_dict(data) -> TrackerConfig:
	"""Build a TrackerConfig from parsed settings, validating each key."""
	if not isinstance(data, dict):
		raise ConfigError("Settings must be a JSON object")
	cfg = TrackerConfig()
	if "subjects" in data:
		cfg.subjects = _string_list(data, "subjects")
	if "categories" in data:
		cfg.categories = _string_list(data, "categories")
	if "enforce_subjects" in data:
		cfg.enforce_subjects = _flag(data, "enforce_subjects")
	if "enforce_categories" in data:
		cfg.enforce_categories = _flag(data, "enforce_categories")
	if "credential_scheme" in data:
		scheme = data["credential_scheme"]
		if scheme not in CREDENTIAL_SCHEMES:
			raise ConfigError(
				f"'credential_scheme' must be one of {', '.join(CREDENTIAL_SCHEMES)}")
		cfg.credential_scheme = scheme
	return cfg


def load_config(data_dir=None) -> TrackerConfig:
	"""Load settings.json from the data dir, or defaults if it is absent."""
	path = settings_path(data_dir)
	if not path.exists():
		return TrackerConfig()
	try:
		with open(path, "r", encoding="utf-8") as f:
			data = json.load(f)
	except json.JSONDecodeError as exc:
		raise ConfigError(f"Invalid settings file {path}: {exc.msg} (line {exc.lineno})") from exc
	cfg = config_from_dict(data)
	logger.info("Loaded settings from %s", path)
	return cfg
