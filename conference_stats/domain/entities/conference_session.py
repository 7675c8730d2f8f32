"""Conference work session entity.

Reference implementation of the SessionView port, used by the in-memory
conference registry. The lifecycle owner mutates status; statistics only
read it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from conference_stats.domain.enums import SessionKind, SessionStatus


@dataclass(slots=True, kw_only=True)
class ConferenceSession:
    """A SIP call, recording or live stream attached to a conference.

    Business Rules:
        - A session is pending until its worker confirms start
        - Only PENDING → ACTIVE → FINISHED and PENDING → FAILED are valid
        - Terminal sessions never change status again

    Attributes:
        session_kind: Kind of work the session performs.
        status: Current lifecycle state.
        id: Unique session identifier.
        created_at: When the session was requested.

    Example:
        >>> session = ConferenceSession(session_kind=SessionKind.RECORDING)
        >>> session.is_pending()
        True
        >>> session.mark_active()
        >>> session.is_active()
        True
    """

    session_kind: SessionKind
    status: SessionStatus = SessionStatus.PENDING
    id: UUID = field(default_factory=uuid7)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_active(self) -> bool:
        """Check if session is running.

        Returns:
            bool: True if status is ACTIVE.
        """
        return self.status == SessionStatus.ACTIVE

    def is_pending(self) -> bool:
        """Check if session is waiting to start.

        Returns:
            bool: True if status is PENDING.
        """
        return self.status == SessionStatus.PENDING

    def is_terminal(self) -> bool:
        """Check if session reached a terminal state.

        Returns:
            bool: True if FINISHED or FAILED.
        """
        return self.status in SessionStatus.terminal_states()

    def mark_active(self) -> None:
        """Transition PENDING → ACTIVE.

        Raises:
            ValueError: If the session is not pending.
        """
        if not self.is_pending():
            raise ValueError(f"Cannot activate session in status {self.status.value}")
        self.status = SessionStatus.ACTIVE

    def mark_finished(self) -> None:
        """Transition ACTIVE → FINISHED.

        Raises:
            ValueError: If the session is not active.
        """
        if not self.is_active():
            raise ValueError(f"Cannot finish session in status {self.status.value}")
        self.status = SessionStatus.FINISHED

    def mark_failed(self) -> None:
        """Transition PENDING → FAILED.

        Raises:
            ValueError: If the session is not pending.
        """
        if not self.is_pending():
            raise ValueError(f"Cannot fail session in status {self.status.value}")
        self.status = SessionStatus.FAILED
