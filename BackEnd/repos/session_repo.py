import logging
import os
import tempfile

from BackEnd.core.clock import from_iso, to_iso
from BackEnd.core.errors import MalformedRecord
from BackEnd.core.paths import sessions_path
from BackEnd.models.study_session import StudySession

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 4

def encode_session(session):
	"""Return the stored line for one session: timestamp,subject,category,minutes."""
	for value in (session.subject, session.category):
		if DELIMITER in value or "\n" in value or "\r" in value:
			raise ValueError(f"Cannot store {value!r}: commas and line breaks are not allowed")
	return DELIMITER.join([to_iso(session.timestamp), session.subject, session.category, str(session.minutes)])

def decode_session(line, path, line_no):
	"""Parse one stored line; raise MalformedRecord with its line number."""
	parts = line.split(DELIMITER)
	if len(parts) != FIELD_COUNT:
		raise MalformedRecord(path, line_no, f"expected {FIELD_COUNT} fields, got {len(parts)}")
	ts_text, subject, category, minutes_text = parts
	try:
		timestamp = from_iso(ts_text)
	except ValueError as exc:
		raise MalformedRecord(path, line_no, f"bad timestamp {ts_text!r}") from exc
	if not (minutes_text.isascii() and minutes_text.isdigit()) or int(minutes_text) <= 0:
		raise MalformedRecord(path, line_no, f"bad minutes {minutes_text!r}")
	return StudySession(timestamp=timestamp, subject=subject, category=category, minutes=int(minutes_text))

def load_all(username, data_dir=None):
	"""Return the user's sessions in stored order ([] if there is no file yet)."""
	path = sessions_path(username, data_dir)
	if not path.exists():
		return []
	with open(path, "r", encoding="utf-8") as f:
		lines = f.read().split("\n")
	if lines[-1] == "":
		lines.pop()
	sessions = [decode_session(line, path, i) for i, line in enumerate(lines, start=1)]
	logger.info("Loaded %d sessions for %s", len(sessions), username)
	return sessions

def save_all(username, sessions, data_dir=None):
	"""Replace the user's file with exactly these sessions."""
	path = sessions_path(username, data_dir)
	body = "".join(encode_session(s) + "\n" for s in sessions)
	path.parent.mkdir(parents=True, exist_ok=True)
	# temp file must live in the target dir for os.replace
	fd, tmp = tempfile.mkstemp(prefix=path.name, suffix=".tmp", dir=path.parent)
	try:
		with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
			f.write(body)
		os.replace(tmp, path)
	except BaseException:
		if os.path.exists(tmp):
			os.remove(tmp)
		raise
	logger.info("Saved %d sessions for %s", len(sessions), username)

def delete_all(username, data_dir=None):
	"""Remove the user's session file. Returns False if there was none."""
	path = sessions_path(username, data_dir)
	if not path.exists():
		return False
	os.remove(path)
	logger.info("Deleted session file %s", path)
	return True
