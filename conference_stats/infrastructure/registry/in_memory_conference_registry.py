"""In-memory conference registry.

Implements ConferenceRegistryProtocol for a single process. The host's
conference manager registers conferences here as they are created and
removes them when they end; statistics read them through
list_conferences().
"""

import threading
from uuid import UUID

from conference_stats.domain.entities import Conference


class InMemoryConferenceRegistry:
    """Thread-safe registry of live conferences.

    Registration order is preserved. list_conferences() returns a copy of
    the conference list taken under the lock, so a reader never sees a
    half-applied add or remove.

    Example:
        >>> registry = InMemoryConferenceRegistry()
        >>> conference = registry.add_conference(Conference(name="standup"))
        >>> conference.add_session(ConferenceSession(session_kind=SessionKind.RECORDING))
        >>> len(registry.list_conferences())
        1
    """

    def __init__(self) -> None:
        self._conferences: dict[UUID, Conference] = {}
        self._lock = threading.Lock()

    def add_conference(self, conference: Conference) -> Conference:
        """Register a conference.

        Args:
            conference: Conference to register.

        Returns:
            Conference: The registered conference.

        Raises:
            ValueError: If a conference with the same id is already registered.
        """
        with self._lock:
            if conference.id in self._conferences:
                raise ValueError(f"Conference already registered: {conference.id}")
            self._conferences[conference.id] = conference
        return conference

    def remove_conference(self, conference_id: UUID) -> Conference | None:
        """Unregister a conference.

        Args:
            conference_id: Id of the conference to remove.

        Returns:
            Conference | None: The removed conference, or None if unknown.
        """
        with self._lock:
            return self._conferences.pop(conference_id, None)

    def get_conference(self, conference_id: UUID) -> Conference | None:
        """Find a registered conference by id."""
        with self._lock:
            return self._conferences.get(conference_id)

    def list_conferences(self) -> list[Conference]:
        """List registered conferences in registration order.

        Returns:
            list[Conference]: Point-in-time copy of the registry contents.
        """
        with self._lock:
            return list(self._conferences.values())

    def clear(self) -> None:
        """Unregister every conference."""
        with self._lock:
            self._conferences.clear()
