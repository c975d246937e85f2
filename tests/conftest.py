"""Pytest fixtures for study tracker tests."""
from datetime import datetime, timedelta, timezone

import pytest

from BackEnd.models.study_session import StudySession

TZ = timezone(timedelta(hours=13))


@pytest.fixture
def data_dir(tmp_path):
    """Empty data directory for one test."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def now():
    """Fixed aware 'current time' used by time-window tests."""
    return datetime(2024, 5, 20, 18, 30, 0, tzinfo=TZ)


@pytest.fixture
def make_session(now):
    """Factory for sessions a number of days before `now`."""
    def _make(subject="Maths", minutes=30, days_ago=0, category="Maths", **delta):
        ts = now - timedelta(days=days_ago, **delta)
        return StudySession(timestamp=ts, subject=subject, category=category, minutes=minutes)
    return _make


@pytest.fixture(scope="session")
def qt_app():
    """A QCoreApplication so QObject signals behave as in the app."""
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def manager(qt_app, data_dir):
    """SessionManager on a temp data dir with default settings."""
    from BackEnd.services.session_manager import SessionManager
    return SessionManager(data_dir=data_dir)


@pytest.fixture
def logged_in(manager):
    """Manager with 'alice' registered and logged in."""
    manager.register("alice", "pw1")
    manager.login("alice", "pw1")
    return manager
