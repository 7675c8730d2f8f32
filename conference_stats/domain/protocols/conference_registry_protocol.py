"""Conference registry protocols (read-only ports).

The conference manager that owns conferences and their work sessions lives
outside this service. Statistics only need a read-only view of it:

    ConferenceRegistryProtocol.list_conferences()
        → ConferenceView.include_in_statistics
        → ConferenceView.get_sessions()
            → SessionView.session_kind / is_active() / is_pending()

The registry synchronizes its own state. Callers must not mutate anything
reached through these views.

Implementations:
    - InMemoryConferenceRegistry: conference_stats/infrastructure/registry/
    - The host's conference manager (any object with matching signatures)
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from conference_stats.domain.enums import SessionKind


class SessionView(Protocol):
    """Read-only view of one conference work session."""

    @property
    def session_kind(self) -> SessionKind:
        """Kind of the session (SIP call, recording, live streaming)."""
        ...

    def is_active(self) -> bool:
        """Whether the session is currently running."""
        ...

    def is_pending(self) -> bool:
        """Whether the session was requested and is waiting to start."""
        ...


class ConferenceView(Protocol):
    """Read-only view of one conference."""

    @property
    def include_in_statistics(self) -> bool:
        """Whether the conference's sessions count toward live statistics."""
        ...

    def get_sessions(self) -> Sequence[SessionView]:
        """Work sessions of this conference, in creation order."""
        ...


class ConferenceRegistryProtocol(Protocol):
    """Protocol for enumerating known conferences at query time."""

    def list_conferences(self) -> Sequence[ConferenceView]:
        """List every conference currently known to the registry.

        Returns:
            Conferences in registry order. The sequence is a point-in-time
            view; later registry changes do not affect it.
        """
        ...


RegistryProvider = Callable[[], ConferenceRegistryProtocol | None]
"""Lookup of the registry at query time.

Returns None when the registry cannot be resolved (not started yet, shut
down, or not configured). Statistics degrade instead of failing.
"""
