"""Domain enums for session statistics.

Available Enums:
    - SessionKind: The three kinds of conference work sessions
    - SessionStatus: Lifecycle states of a session
"""

from conference_stats.domain.enums.session_kind import SessionKind
from conference_stats.domain.enums.session_status import SessionStatus

__all__ = [
    "SessionKind",
    "SessionStatus",
]
