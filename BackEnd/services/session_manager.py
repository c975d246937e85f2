import dataclasses
import logging
from typing import Any, NamedTuple

from PySide6.QtCore import QObject, Signal

from BackEnd.core import aggregation, filters
from BackEnd.core.clock import local_today, now_local
from BackEnd.core.config import Vocabulary, load_config
from BackEnd.core.errors import NotAuthenticated, OutOfRange, StudyTrackerError
from BackEnd.core.validation import validate_new_session
from BackEnd.models.study_session import StudySession
from BackEnd.repos import session_repo
from BackEnd.repos.credential_repo import CredentialStore, verifier_for

logger = logging.getLogger(__name__)


class ActionResult(NamedTuple):
	ok: bool
	message: str = ""
	value: Any = None


class StudyStats(NamedTuple):
	today_minutes: int
	streak_days: int
	days_studied: int
	total_hours: float


class UserSession:
	"""The loaded records of one logged-in user.

	Built on login and thrown away on logout or when another user logs in.
	Every mutation rewrites the user's whole file; if that write fails the
	in-memory list is put back as it was.
	"""

	def __init__(self, username, data_dir=None, vocabulary=Vocabulary()):
		self.username = username
		self.data_dir = data_dir
		self.vocabulary = vocabulary
		self._sessions = session_repo.load_all(username, data_dir)
		self._pending_delete = None

	@property
	def sessions(self):
		return tuple(self._sessions)

	def __len__(self):
		return len(self._sessions)

	def _index_of(self, session_id):
		for i, s in enumerate(self._sessions):
			if s.session_id == session_id:
				return i
		raise OutOfRange()

	def _commit(self, previous):
		try:
			session_repo.save_all(self.username, self._sessions, self.data_dir)
		except Exception:
			self._sessions = previous
			raise

	def get(self, session_id) -> StudySession:
		return self._sessions[self._index_of(session_id)]

	def id_at(self, index) -> str:
		"""Id of the record at a position in the full, unfiltered list."""
		if not 0 <= index < len(self._sessions):
			raise OutOfRange()
		return self._sessions[index].session_id

	# --- mutations ----------------------------------------------------------

	def add_session(self, subject, category, minutes_text, now=None) -> StudySession:
		fields = validate_new_session(subject, category, minutes_text, self.vocabulary)
		session = StudySession(
			timestamp=now or now_local(),
			subject=fields.subject,
			category=fields.category,
			minutes=fields.minutes,
		)
		previous = list(self._sessions)
		self._sessions.append(session)
		self._commit(previous)
		return session

	def edit_session(self, session_id, subject, category, minutes_text, timestamp=None) -> StudySession:
		index = self._index_of(session_id)
		fields = validate_new_session(subject, category, minutes_text, self.vocabulary)
		current = self._sessions[index]
		updated = dataclasses.replace(
			current,
			subject=fields.subject,
			category=fields.category,
			minutes=fields.minutes,
			timestamp=timestamp or current.timestamp,
		)
		previous = list(self._sessions)
		self._sessions[index] = updated
		self._commit(previous)
		return updated

	def edit_session_at(self, index, subject, category, minutes_text, timestamp=None):
		return self.edit_session(self.id_at(index), subject, category, minutes_text, timestamp)

	def request_delete(self, session_id) -> StudySession:
		"""First half of a delete: remember the record until it is confirmed."""
		session = self.get(session_id)
		self._pending_delete = session_id
		return session

	def request_delete_at(self, index):
		return self.request_delete(self.id_at(index))

	def cancel_delete(self):
		self._pending_delete = None

	def confirm_delete(self) -> StudySession:
		if self._pending_delete is None:
			raise OutOfRange("No delete is waiting for confirmation.")
		session_id, self._pending_delete = self._pending_delete, None
		index = self._index_of(session_id)
		previous = list(self._sessions)
		removed = self._sessions.pop(index)
		self._commit(previous)
		return removed

	def delete_session(self, session_id, confirmed) -> bool:
		self.request_delete(session_id)
		if not confirmed:
			self.cancel_delete()
			return False
		self.confirm_delete()
		return True

	def save(self):
		session_repo.save_all(self.username, self._sessions, self.data_dir)

	def reload(self):
		self._sessions = session_repo.load_all(self.username, self.data_dir)
		self._pending_delete = None

	# --- views --------------------------------------------------------------

	def last_n_days(self, n, now=None):
		return filters.by_last_n_days(self._sessions, n, now or now_local())

	def between(self, start, end):
		return filters.by_date_range(self._sessions, start, end)

	def report(self, view=None) -> aggregation.SubjectReport:
		"""Subject totals for a view, or for every record when view is None."""
		return aggregation.build_report(self._sessions if view is None else view)

	def stats(self, today=None) -> StudyStats:
		today = today or local_today()
		return StudyStats(
			today_minutes=aggregation.total_for_day(self._sessions, today),
			streak_days=aggregation.daily_streak(self._sessions, today),
			days_studied=aggregation.days_studied(self._sessions),
			total_hours=aggregation.total_hours(self._sessions),
		)

	@staticmethod
	def describe(session) -> str:
		return f"{session.timestamp.date().isoformat()} - {session.subject} ({session.category}) - {session.minutes} min"


class SessionManager(QObject):
	user_changed = Signal(str)  # emits username, '' when logged out
	sessions_changed = Signal()

	def __init__(self, data_dir=None, config=None):
		super().__init__()
		self.data_dir = data_dir
		self.config = config or load_config(data_dir)
		self.credentials = CredentialStore(data_dir, verifier_for(self.config.credential_scheme))
		self._session = None

	@property
	def is_logged_in(self):
		return self._session is not None

	@property
	def username(self):
		return self._session.username if self._session else ""

	@property
	def current(self) -> UserSession:
		if self._session is None:
			raise NotAuthenticated()
		return self._session

	# --- users --------------------------------------------------------------

	def register(self, username, password):
		self.credentials.register((username or "").strip(), (password or "").strip())

	def login(self, username, password) -> UserSession:
		"""Drop whoever is logged in, authenticate, then load the new user's records."""
		username, password = (username or "").strip(), (password or "").strip()
		self.logout()
		self.credentials.authenticate(username, password)
		self._session = UserSession(username, self.data_dir, self.config.vocabulary())
		logger.info("Logged in as %s (%d sessions)", username, len(self._session))
		self.user_changed.emit(username)
		self.sessions_changed.emit()
		return self._session

	def logout(self):
		if self._session is None:
			return
		logger.info("Logged out %s", self._session.username)
		self._session = None
		self.user_changed.emit("")
		self.sessions_changed.emit()

	# --- session operations -------------------------------------------------

	def _changed(self, value):
		self.sessions_changed.emit()
		return value

	def add_session(self, subject, category, minutes_text, now=None):
		return self._changed(self.current.add_session(subject, category, minutes_text, now))

	def edit_session(self, session_id, subject, category, minutes_text, timestamp=None):
		return self._changed(self.current.edit_session(session_id, subject, category, minutes_text, timestamp))

	def request_delete(self, session_id):
		return self.current.request_delete(session_id)

	def confirm_delete(self):
		return self._changed(self.current.confirm_delete())

	def cancel_delete(self):
		self.current.cancel_delete()

	def delete_session(self, session_id, confirmed):
		deleted = self.current.delete_session(session_id, confirmed)
		if deleted:
			self.sessions_changed.emit()
		return deleted

	def save(self):
		self.current.save()

	def reload(self):
		self._changed(self.current.reload())

	def perform(self, action, *args, success="", **kwargs) -> ActionResult:
		"""Run one user action, turning tracker errors into a message."""
		try:
			value = action(*args, **kwargs)
		except StudyTrackerError as exc:
			logger.warning("%s: %s", type(exc).__name__, exc.message)
			return ActionResult(False, exc.message)
		return ActionResult(True, success, value)
