"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides adapters. Conference
work session events reach the stats aggregator only through this interface.

Implementations:
    - InMemoryEventBus: conference_stats/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from conference_stats.core.container import get_event_bus
    >>> from conference_stats.domain.events import SessionFailedToStart
    >>>
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(SessionFailedToStart, handler.handle_session_failed_to_start)
    >>> await event_bus.publish(SessionFailedToStart(session_kind=SessionKind.RECORDING))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from conference_stats.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Type alias for async event handler functions.

Event handlers must:
    - Accept single DomainEvent parameter (or specific event subclass)
    - Return None (side-effects only)
    - Be async (async def)
    - Handle errors locally (fail-open pattern)
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Log errors but continue processing.
        2. **Type-based routing**: Handlers registered for an event type only
           receive events of exactly that type.
        3. **No ordering guarantees** between handlers of the same event.

    Notes:
        - Event bus is an application-scoped singleton
        - Handlers are registered at start-up (container initialization)
        - Publishers never see handler exceptions
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Handler will ONLY receive
                events of this exact type (no inheritance matching).
            handler: Async function to call when event is published.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        No handlers registered is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...
