"""Time-window views over a list of sessions.

Every function returns a new list in the input order and leaves the input
untouched, so callers can hand either the full set or a filtered view to
the aggregator and the list display.
"""
from datetime import timedelta

from BackEnd.core.clock import as_date


def select(sessions, predicate=None):
	"""Sessions matching predicate, or a copy of all when predicate is None."""
	if predicate is None:
		return list(sessions)
	return [s for s in sessions if predicate(s)]


def by_last_n_days(sessions, n, now):
	"""Sessions with timestamp >= now - n days (boundary included)."""
	if n < 0:
		raise ValueError("n must be >= 0")
	cutoff = now - timedelta(days=n)
	return select(sessions, lambda s: s.timestamp >= cutoff)


def by_date_range(sessions, start, end):
	"""Sessions whose date lies in [start, end]; empty when start > end."""
	start, end = as_date(start), as_date(end)
	if start > end:
		return []
	return select(sessions, lambda s: start <= s.timestamp.date() <= end)
