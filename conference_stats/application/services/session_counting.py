"""Live session counting.

Pure functions over the read-only conference registry views. Nothing here
caches or mutates: every call reflects the sessions it is given.

Pattern:
    count_sessions(sessions, kind, selector) is the single selection pass;
    count_active / count_pending fix the selector to a phase test.
"""

from collections.abc import Callable, Iterable

from conference_stats.domain.enums import SessionKind
from conference_stats.domain.protocols import ConferenceView, SessionView
from conference_stats.domain.value_objects import LiveSessionCounts

SessionSelector = Callable[[SessionView], bool]


def count_sessions(
    sessions: Iterable[SessionView],
    session_kind: SessionKind,
    selector: SessionSelector,
) -> int:
    """Count sessions of the given kind that pass the selector.

    Args:
        sessions: Sessions to scan.
        session_kind: Kind of session to count.
        selector: Decides whether a session of matching kind is counted.

    Returns:
        int: Number of matching sessions.
    """
    return sum(
        1
        for session in sessions
        if session.session_kind == session_kind and selector(session)
    )


def count_active(sessions: Iterable[SessionView], session_kind: SessionKind) -> int:
    """Count ACTIVE sessions of the given kind."""
    return count_sessions(sessions, session_kind, lambda session: session.is_active())


def count_pending(sessions: Iterable[SessionView], session_kind: SessionKind) -> int:
    """Count PENDING sessions of the given kind."""
    return count_sessions(sessions, session_kind, lambda session: session.is_pending())


def count_live_sessions(conferences: Iterable[ConferenceView]) -> LiveSessionCounts:
    """Sum active and pending sessions per kind over included conferences.

    Conferences with ``include_in_statistics`` False are skipped entirely.
    Sessions are assumed to appear in at most one conference.

    Args:
        conferences: Conferences as listed by the registry.

    Returns:
        LiveSessionCounts: All six counts; zeros when nothing is included.
    """
    active = dict.fromkeys(SessionKind, 0)
    pending = dict.fromkeys(SessionKind, 0)

    for conference in conferences:
        if not conference.include_in_statistics:
            continue

        sessions = list(conference.get_sessions())

        for kind in SessionKind:
            active[kind] += count_active(sessions, kind)
            pending[kind] += count_pending(sessions, kind)

    return LiveSessionCounts(active=active, pending=pending)
