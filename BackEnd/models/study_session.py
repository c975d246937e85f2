import uuid
from dataclasses import dataclass, field
from datetime import datetime


def new_session_id() -> str:
	return uuid.uuid4().hex


@dataclass
class StudySession:
	"""One recorded study activity.

	``session_id`` lives only in memory; it is regenerated whenever the
	records are loaded from disk and is what edit/delete address. It is
	left out of equality so reloaded records compare equal to saved ones.
	"""
	timestamp: datetime
	subject: str
	category: str
	minutes: int
	session_id: str = field(default_factory=new_session_id, compare=False)
