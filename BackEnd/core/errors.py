"""Study tracker errors.

Every error carries a ``message`` that the window can show as-is in a dialog.
"""


class StudyTrackerError(Exception):
	"""Base class for all recoverable study tracker errors."""

	default_message = "Something went wrong."

	def __init__(self, message=None):
		self.message = message or self.default_message
		super().__init__(self.message)


# --- input validation -------------------------------------------------------

class ValidationError(StudyTrackerError):
	default_message = "Invalid input."


class MissingField(ValidationError):
	default_message = "Please fill in all fields."


class InvalidMinutes(ValidationError):
	default_message = "Enter a valid number of minutes."


class UnapprovedSubject(ValidationError):
	default_message = "Invalid subject. Please enter an approved subject."


class UnapprovedCategory(ValidationError):
	default_message = "Invalid category. Please choose an approved category."


class InvalidDate(ValidationError):
	default_message = "Dates must be YYYY-MM-DD or DD.MM.YYYY."


class InvalidCharacters(ValidationError):
	default_message = "Subject and category may not contain commas or line breaks."


# --- users ------------------------------------------------------------------

class AuthError(StudyTrackerError):
	default_message = "Authentication failed."


class InvalidInput(AuthError):
	default_message = "Enter both username and password."


class DuplicateUser(AuthError):
	default_message = "Username already exists."


class InvalidCredentials(AuthError):
	default_message = "Invalid login. Try again."


class NotAuthenticated(AuthError):
	default_message = "You must be logged in to do that."


# --- sessions and storage ---------------------------------------------------

class OutOfRange(StudyTrackerError):
	default_message = "Please select a session first."


class MalformedRecord(StudyTrackerError):
	"""A stored session line could not be parsed."""

	def __init__(self, path, line_no, reason=""):
		self.path = path
		self.line_no = line_no
		self.reason = reason
		detail = f": {reason}" if reason else ""
		super().__init__(f"Malformed record in {path} at line {line_no}{detail}")


class ConfigError(StudyTrackerError):
	default_message = "Invalid settings file."
