"""Conference work session events.

Published by the session lifecycle owner (the conference manager). This
service only consumes them.

Events:
    - SessionFailedToStart: a session of some kind never reached ACTIVE
"""

from dataclasses import dataclass
from uuid import UUID

from conference_stats.domain.enums import SessionKind
from conference_stats.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class SessionFailedToStart(DomainEvent):
    """A conference work session failed to start.

    One event is published per failure. The event is consumed immediately and
    never retained.

    Attributes:
        session_kind: Kind of the failed session. ``None`` marks a malformed
            event. A publisher built against a wider kind enumeration may
            deliver values this service does not know.
        session_id: Identifier of the failed session, if the publisher has one.
        conference_id: Identifier of the owning conference, if known.
    """

    session_kind: SessionKind | None
    session_id: UUID | None = None
    conference_id: UUID | None = None
