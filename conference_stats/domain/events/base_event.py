"""Base domain event class.

Domain events represent "things that happened" and are named in past tense
(e.g., SessionFailedToStart).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class SessionFailedToStart(DomainEvent):
    ...     session_kind: SessionKind | None
    >>>
    >>> event = SessionFailedToStart(session_kind=SessionKind.RECORDING)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance. Used to correlate
            handler logs for a single delivery.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
