import datetime
from dataclasses import dataclass
from typing import Dict, List, Tuple


def summarize(sessions) -> Dict[str, int]:
	"""Total minutes per exact subject string, in first-seen subject order."""
	totals: Dict[str, int] = {}
	for s in sessions:
		totals[s.subject] = totals.get(s.subject, 0) + s.minutes
	return totals


@dataclass(frozen=True)
class SubjectReport:
	"""One aggregation, shared by the text summary and the chart."""
	totals: Dict[str, int]

	@property
	def total_minutes(self) -> int:
		return sum(self.totals.values())

	def lines(self) -> List[str]:
		return [f"{subject}: {total} minutes" for subject, total in self.totals.items()]

	def text(self) -> str:
		return "\n".join(self.lines())

	def points(self) -> List[Tuple[str, int]]:
		return list(self.totals.items())


def build_report(sessions) -> SubjectReport:
	return SubjectReport(summarize(sessions))


def total_for_day(sessions, day):
	"""Sum minutes of sessions recorded on the given local date."""
	return sum(s.minutes for s in sessions if s.timestamp.date() == day)


def daily_streak(sessions, today=None):
	"""
	Calculate the current daily streak - consecutive days with study sessions.
	Returns 0 if nothing was logged today.
	"""
	today = today or datetime.date.today()
	dates = {s.timestamp.date() for s in sessions if s.minutes > 0}
	if today not in dates:
		return 0

	# Count consecutive days backwards from today
	streak = 0
	current_date = today
	while current_date in dates:
		streak += 1
		current_date -= datetime.timedelta(days=1)
	return streak


def days_studied(sessions):
	"""
	Returns the number of unique days with at least one session.
	"""
	return len({s.timestamp.date() for s in sessions if s.minutes > 0})


def total_hours(sessions):
	"""
	Returns the total hours studied across the given sessions.
	"""
	return sum(s.minutes for s in sessions) / 60.0
