"""
Validation and parsing of the raw strings typed into the session form.

The same checks run for adding and for editing a session, in a fixed order
so the first failing rule decides the message the user sees.
"""
import re
from datetime import date, datetime
from typing import NamedTuple

from BackEnd.core.config import Vocabulary
from BackEnd.core.errors import (
	InvalidCharacters, InvalidDate, InvalidMinutes, MissingField, UnapprovedCategory, UnapprovedSubject,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y")
# field delimiter and record separator of the session file
_RESERVED_CHARS = (",", "\n", "\r")


class ValidatedFields(NamedTuple):
	subject: str
	category: str
	minutes: int


def _in_vocabulary(value, approved):
	folded = value.casefold()
	return any(folded == item.casefold() for item in approved)


def parse_minutes(text: str) -> int:
	"""Parse a positive whole number of minutes."""
	t = (text or "").strip()
	if not _INT_RE.fullmatch(t):
		raise InvalidMinutes()
	minutes = int(t)
	if minutes <= 0:
		raise InvalidMinutes()
	return minutes


def validate_new_session(subject, category, minutes_text, vocabulary=Vocabulary()) -> ValidatedFields:
	"""
	Check one session's raw form fields and return them cleaned up.

	Rules, first failure wins: every field filled in, minutes a positive
	integer, subject approved, category approved, no comma or line break in
	subject or category. Matching against the
	vocabularies ignores case; the value is kept as typed (trimmed).
	"""
	fields = [(subject or "").strip(), (category or "").strip(), (minutes_text or "").strip()]
	if not all(fields):
		raise MissingField()
	subject, category, minutes_text = fields

	minutes = parse_minutes(minutes_text)

	if vocabulary.subjects is not None and not _in_vocabulary(subject, vocabulary.subjects):
		raise UnapprovedSubject()
	if vocabulary.categories is not None and not _in_vocabulary(category, vocabulary.categories):
		raise UnapprovedCategory(
			"Invalid category. Please choose from: " + ", ".join(vocabulary.categories) + ".")
	if any(ch in value for value in (subject, category) for ch in _RESERVED_CHARS):
		raise InvalidCharacters()

	return ValidatedFields(subject, category, minutes)


def parse_date(text: str) -> date:
	"""Parse a date typed as YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY."""
	t = (text or "").strip()
	if not t:
		raise MissingField("Please enter both dates.")
	for fmt in DATE_FORMATS:
		try:
			return datetime.strptime(t, fmt).date()
		except ValueError:
			continue
	raise InvalidDate()
