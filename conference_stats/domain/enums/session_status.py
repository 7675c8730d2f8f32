"""Conference work session lifecycle states.

State Machine:
    PENDING → ACTIVE → FINISHED
    PENDING → FAILED

    - PENDING: Worker requested, session not yet running
    - ACTIVE: Session running
    - FINISHED: Session stopped normally (terminal)
    - FAILED: Session failed to start or crashed (terminal)

Only PENDING and ACTIVE matter for live statistics; the rest are ignored.
"""

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle states of a conference work session."""

    PENDING = "pending"
    ACTIVE = "active"
    FINISHED = "finished"
    FAILED = "failed"

    @classmethod
    def terminal_states(cls) -> list["SessionStatus"]:
        """Get terminal states (no further transitions).

        Returns:
            list[SessionStatus]: Terminal states.
        """
        return [cls.FINISHED, cls.FAILED]
