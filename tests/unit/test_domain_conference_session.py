"""Unit tests for ConferenceSession and Conference entities.

Tests cover:
- Default pending status
- Valid and invalid lifecycle transitions
- Conference session list is returned as a copy
"""

import pytest

from conference_stats.domain.entities import Conference, ConferenceSession
from conference_stats.domain.enums import SessionKind, SessionStatus


@pytest.mark.unit
class TestConferenceSessionLifecycle:
    """Test ConferenceSession status transitions."""

    def test_new_session_is_pending(self):
        """Test sessions start pending and not terminal."""
        session = ConferenceSession(session_kind=SessionKind.SIP_CALL)

        assert session.status == SessionStatus.PENDING
        assert session.is_pending() is True
        assert session.is_active() is False
        assert session.is_terminal() is False

    def test_pending_to_active_to_finished(self):
        """Test the normal lifecycle."""
        session = ConferenceSession(session_kind=SessionKind.RECORDING)

        session.mark_active()
        assert session.is_active() is True
        assert session.is_pending() is False

        session.mark_finished()
        assert session.status == SessionStatus.FINISHED
        assert session.is_terminal() is True
        assert session.is_active() is False

    def test_pending_to_failed(self):
        """Test a pending session can fail to start."""
        session = ConferenceSession(session_kind=SessionKind.LIVE_STREAMING)

        session.mark_failed()

        assert session.status == SessionStatus.FAILED
        assert session.is_terminal() is True
        assert session.is_pending() is False

    def test_cannot_activate_terminal_session(self):
        """Test terminal sessions never change status again."""
        session = ConferenceSession(
            session_kind=SessionKind.RECORDING, status=SessionStatus.FAILED
        )

        with pytest.raises(ValueError, match="Cannot activate"):
            session.mark_active()

    def test_cannot_finish_pending_session(self):
        """Test only active sessions can finish."""
        session = ConferenceSession(session_kind=SessionKind.SIP_CALL)

        with pytest.raises(ValueError, match="Cannot finish"):
            session.mark_finished()

    def test_cannot_fail_active_session(self):
        """Test only pending sessions can fail to start."""
        session = ConferenceSession(
            session_kind=SessionKind.SIP_CALL, status=SessionStatus.ACTIVE
        )

        with pytest.raises(ValueError, match="Cannot fail"):
            session.mark_failed()

    def test_sessions_get_unique_ids(self):
        """Test each session gets its own id."""
        first = ConferenceSession(session_kind=SessionKind.RECORDING)
        second = ConferenceSession(session_kind=SessionKind.RECORDING)

        assert first.id != second.id


@pytest.mark.unit
class TestConference:
    """Test Conference entity."""

    def test_defaults_to_included_in_statistics(self):
        """Test conferences are included unless flagged otherwise."""
        conference = Conference(name="standup")

        assert conference.include_in_statistics is True
        assert conference.get_sessions() == []

    def test_add_session_and_get_sessions(self):
        """Test sessions are returned in creation order."""
        conference = Conference(name="standup")
        first = ConferenceSession(session_kind=SessionKind.RECORDING)
        second = ConferenceSession(session_kind=SessionKind.SIP_CALL)

        conference.add_session(first)
        conference.add_session(second)

        assert conference.get_sessions() == [first, second]

    def test_get_sessions_returns_copy(self):
        """Test mutating the returned list does not touch the conference."""
        conference = Conference(name="standup")
        conference.add_session(ConferenceSession(session_kind=SessionKind.RECORDING))

        sessions = conference.get_sessions()
        sessions.clear()

        assert len(conference.get_sessions()) == 1
