import hashlib
import logging
import re
import secrets

from BackEnd.core.errors import DuplicateUser, InvalidCredentials, InvalidInput
from BackEnd.core.paths import users_path

logger = logging.getLogger(__name__)

# Usernames double as file name prefixes and as the first field of a line.
_BAD_USERNAME = re.compile(r"[,/\\\x00-\x1f\x7f]")


class PlaintextVerifier:
	"""Stores "username,password" and compares whole lines."""

	name = "plaintext"

	def encode(self, username, password):
		return f"{username},{password}"

	def matches(self, line, username, password):
		return line == self.encode(username, password)


class Sha256Verifier:
	"""Stores "username,salt$sha256(salt:username:password)"."""

	name = "sha256"

	def _digest(self, salt, username, password):
		combined = f"{salt}:{username}:{password}"
		return hashlib.sha256(combined.encode("utf-8")).hexdigest()

	def encode(self, username, password):
		salt = secrets.token_hex(8)
		return f"{username},{salt}${self._digest(salt, username, password)}"

	def matches(self, line, username, password):
		user, _, stored = line.partition(",")
		salt, sep, digest = stored.partition("$")
		if user != username or not sep:
			return False
		return secrets.compare_digest(digest, self._digest(salt, username, password))


VERIFIERS = {v.name: v for v in (PlaintextVerifier, Sha256Verifier)}


def verifier_for(scheme):
	"""Return a verifier instance for a credential_scheme setting."""
	return VERIFIERS[scheme]()


def check_username(username):
	"""Raise InvalidInput unless the username can name a session file."""
	if not username or _BAD_USERNAME.search(username) or username.startswith("."):
		raise InvalidInput("Usernames may not start with '.' or contain commas, slashes or control characters.")


class CredentialStore:
	"""Username/password lines in users.txt, appended on registration."""

	def __init__(self, data_dir=None, verifier=None):
		self.path = users_path(data_dir)
		self.verifier = verifier or PlaintextVerifier()

	def _lines(self):
		if not self.path.exists():
			return []
		with open(self.path, "r", encoding="utf-8") as f:
			return f.read().splitlines()

	def username_exists(self, username) -> bool:
		return any(line.split(",", 1)[0] == username for line in self._lines())

	def register(self, username, password):
		if not username or not password:
			raise InvalidInput()
		check_username(username)
		if "\n" in password or "\r" in password:
			raise InvalidInput("Passwords may not contain line breaks.")
		if self.username_exists(username):
			raise DuplicateUser()
		self.path.parent.mkdir(parents=True, exist_ok=True)
		with open(self.path, "a", encoding="utf-8") as f:
			f.write(self.verifier.encode(username, password) + "\n")
		logger.info("Registered user %s", username)

	def authenticate(self, username, password):
		try:
			check_username(username)
		except InvalidInput:
			logger.warning("Rejected login for unusable username %r", username)
			raise InvalidCredentials() from None
		if not any(self.verifier.matches(line, username, password) for line in self._lines()):
			logger.warning("Failed login for %s", username)
			raise InvalidCredentials()
		logger.info("Authenticated %s", username)
