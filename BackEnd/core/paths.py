import os
from pathlib import Path

USERS_FILE = "users.txt"
SETTINGS_FILE = "settings.json"
SESSIONS_SUFFIX = "_sessions.txt"

def user_data_dir(app_name="StudyTracker"):
	"""Return per-user data dir (Windows/macOS/Linux)."""
	if os.name == "nt":
		base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
	elif os.name == "posix":
		base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
	else:
		base = os.path.expanduser("~")
	path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def _resolve(data_dir):
	return Path(data_dir) if data_dir is not None else user_data_dir()

def users_path(data_dir=None):
	"""Return Path to the credential file."""
	return _resolve(data_dir) / USERS_FILE

def settings_path(data_dir=None):
	"""Return Path to the optional settings.json."""
	return _resolve(data_dir) / SETTINGS_FILE

def sessions_path(username, data_dir=None):
	"""Return Path to <username>_sessions.txt for one user."""
	return _resolve(data_dir) / f"{username}{SESSIONS_SUFFIX}"
