from datetime import date, datetime

def now_local():
	"""Return the current local time as an aware datetime."""
	return datetime.now().astimezone()

def to_iso(ts: datetime) -> str:
	"""Format a timestamp as ISO8601 (offset included when aware)."""
	return ts.isoformat()

def from_iso(text: str) -> datetime:
	"""Parse an ISO8601 timestamp; naive values are taken as local time."""
	ts = datetime.fromisoformat(text)
	if ts.tzinfo is None:
		ts = ts.astimezone()
	return ts

def as_date(value) -> date:
	"""Truncate a datetime to its date; dates pass through."""
	if isinstance(value, datetime):
		return value.date()
	return value

def local_today():
	"""Return today's local date."""
	return now_local().date()

def fmt_minutes(minutes: int) -> str:
	"""Format minutes as e.g. 1h 05m (or 45m under an hour)."""
	h, m = divmod(int(minutes), 60)
	if h:
		return f"{h}h {m:02}m"
	return f"{m}m"
