"""Event bus dependency factory.

Application-scoped singleton for domain event delivery. Side-effect-only
handlers (logging) are subscribed here; the stats aggregator subscribes
itself through init_session_stats().
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conference_stats.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns correct adapter based on settings.event_bus_type:
        - 'in-memory': InMemoryEventBus (single process)

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If event_bus_type is unsupported.
    """
    from conference_stats.core.config import get_settings
    from conference_stats.core.container.infrastructure import get_logger
    from conference_stats.domain.events import SessionFailedToStart
    from conference_stats.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from conference_stats.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=get_logger())
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    logging_handler = LoggingEventHandler(logger=get_logger())
    event_bus.subscribe(
        SessionFailedToStart, logging_handler.handle_session_failed_to_start
    )

    return event_bus
