"""
Unit tests for the per-user session file.

Tests encoding, strict loading and whole-file saves.
"""
from datetime import datetime

import pytest

from BackEnd.core.errors import MalformedRecord
from BackEnd.models.study_session import StudySession
from BackEnd.repos import session_repo


class TestLoadAll:
    """Tests for reading a user's sessions."""

    def test_missing_file_is_empty(self, data_dir):
        """Test a user without a file has no sessions."""
        assert session_repo.load_all("alice", data_dir) == []

    def test_round_trip_keeps_order_and_fields(self, data_dir, make_session):
        """Test saved sessions load back equal and in order."""
        sessions = [
            make_session("Physics", 20, days_ago=2),
            make_session("Maths", 45, days_ago=1),
            make_session("Physics", 10),
        ]
        session_repo.save_all("alice", sessions, data_dir)

        loaded = session_repo.load_all("alice", data_dir)

        assert loaded == sessions
        assert [s.timestamp for s in loaded] == [s.timestamp for s in sessions]

    def test_loaded_sessions_get_fresh_ids(self, data_dir, make_session):
        """Test ids are generated on load and unique."""
        session_repo.save_all("alice", [make_session(), make_session()], data_dir)

        loaded = session_repo.load_all("alice", data_dir)

        assert len({s.session_id for s in loaded}) == 2

    def test_naive_timestamp_is_read_as_local(self, data_dir):
        """Test a timestamp without offset still loads."""
        (data_dir / "alice_sessions.txt").write_text("2024-05-01T10:00:00,Maths,Maths,30\n", encoding="utf-8")

        [session] = session_repo.load_all("alice", data_dir)

        assert session.timestamp.tzinfo is not None
        assert session.timestamp.replace(tzinfo=None) == datetime(2024, 5, 1, 10, 0)

    @pytest.mark.parametrize("bad_line,reason", [
        ("2024-05-01T10:00:00+13:00,Maths,30", "expected 4 fields"),
        ("2024-05-01T10:00:00+13:00,Maths,Maths,30,extra", "expected 4 fields"),
        ("yesterday,Maths,Maths,30", "bad timestamp"),
        ("2024-05-01T10:00:00+13:00,Maths,Maths,abc", "bad minutes"),
        ("2024-05-01T10:00:00+13:00,Maths,Maths,0", "bad minutes"),
        ("", "expected 4 fields"),
    ])
    def test_malformed_line_reports_line_number(self, data_dir, bad_line, reason):
        """Test a bad line fails the load with its 1-based line number."""
        good = "2024-05-01T09:00:00+13:00,English,English,15"
        path = data_dir / "alice_sessions.txt"
        path.write_text(f"{good}\n{bad_line}\n{good}\n", encoding="utf-8")

        with pytest.raises(MalformedRecord) as exc_info:
            session_repo.load_all("alice", data_dir)

        assert exc_info.value.line_no == 2
        assert exc_info.value.path == path
        assert reason in exc_info.value.message


class TestSaveAll:
    """Tests for rewriting a user's sessions."""

    def test_line_format(self, data_dir, now):
        """Test the stored line is timestamp,subject,category,minutes."""
        session = StudySession(timestamp=now, subject="Maths", category="Math", minutes=45)
        session_repo.save_all("alice", [session], data_dir)

        content = (data_dir / "alice_sessions.txt").read_text(encoding="utf-8")

        assert content == "2024-05-20T18:30:00+13:00,Maths,Math,45\n"

    def test_save_is_idempotent(self, data_dir, make_session):
        """Test saving the same set twice gives byte-identical files."""
        sessions = [make_session("Maths", 45), make_session("Physics", 15, days_ago=3)]
        path = data_dir / "alice_sessions.txt"

        session_repo.save_all("alice", sessions, data_dir)
        first = path.read_bytes()
        session_repo.save_all("alice", sessions, data_dir)

        assert path.read_bytes() == first
        assert len(session_repo.load_all("alice", data_dir)) == 2

    def test_empty_set_writes_empty_file(self, data_dir, make_session):
        """Test saving nothing leaves an empty file, not a stale one."""
        session_repo.save_all("alice", [make_session()], data_dir)
        session_repo.save_all("alice", [], data_dir)

        assert (data_dir / "alice_sessions.txt").read_text(encoding="utf-8") == ""
        assert session_repo.load_all("alice", data_dir) == []

    def test_no_temp_files_left(self, data_dir, make_session):
        """Test the temporary file is renamed over the target."""
        session_repo.save_all("alice", [make_session()], data_dir)

        assert [p.name for p in data_dir.iterdir()] == ["alice_sessions.txt"]

    def test_users_have_separate_files(self, data_dir, make_session):
        """Test one user's save does not touch another's file."""
        session_repo.save_all("alice", [make_session("Maths")], data_dir)
        session_repo.save_all("bob", [make_session("Physics")], data_dir)

        assert [s.subject for s in session_repo.load_all("alice", data_dir)] == ["Maths"]
        assert [s.subject for s in session_repo.load_all("bob", data_dir)] == ["Physics"]

    def test_delimiter_in_field_is_rejected(self, data_dir, make_session):
        """Test a subject containing a comma cannot be stored."""
        with pytest.raises(ValueError):
            session_repo.save_all("alice", [make_session("Maths, Algebra")], data_dir)
        assert not (data_dir / "alice_sessions.txt").exists()
        assert list(data_dir.iterdir()) == []


class TestDeleteAll:
    """Tests for removing a user's file."""

    def test_delete_existing(self, data_dir, make_session):
        """Test the file is removed."""
        session_repo.save_all("alice", [make_session()], data_dir)

        assert session_repo.delete_all("alice", data_dir) is True
        assert session_repo.load_all("alice", data_dir) == []

    def test_delete_missing(self, data_dir):
        """Test deleting without a file reports False."""
        assert session_repo.delete_all("alice", data_dir) is False
