"""Conference entity.

Reference implementation of the ConferenceView port. Holds the work sessions
started for one conference.
"""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7

from conference_stats.domain.entities.conference_session import ConferenceSession


@dataclass(slots=True, kw_only=True)
class Conference:
    """A conference and its work sessions.

    Attributes:
        name: Conference room name.
        include_in_statistics: False for internal/health-check conferences
            that must not show up in live statistics.
        sessions: Work sessions in creation order.
        id: Unique conference identifier.
    """

    name: str
    include_in_statistics: bool = True
    sessions: list[ConferenceSession] = field(default_factory=list)
    id: UUID = field(default_factory=uuid7)

    def get_sessions(self) -> list[ConferenceSession]:
        """Return a copy of the session list.

        Returns:
            list[ConferenceSession]: Sessions in creation order.
        """
        return list(self.sessions)

    def add_session(self, session: ConferenceSession) -> None:
        """Attach a work session to the conference.

        Args:
            session: Session to attach.
        """
        self.sessions.append(session)
