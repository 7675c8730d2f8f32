"""In-memory domain event bus.

Implements EventBusProtocol with a dictionary-based registry. Suitable for a
single process, which is all the statistics service needs: counters are
per-process by definition.

Behavior:
    - Handlers are keyed by exact event class; subclasses do not fan out
    - A raising handler is logged and skipped, the rest still run
    - All handlers for one event are awaited together

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(SessionFailedToStart, stats.handle_session_failed_to_start)
    >>> await bus.publish(SessionFailedToStart(session_kind=SessionKind.SIP_CALL))
"""

import asyncio
from collections import defaultdict

from conference_stats.domain.events.base_event import DomainEvent
from conference_stats.domain.protocols.event_bus_protocol import EventHandler
from conference_stats.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """Single-process publish/subscribe for domain events.

    Thread Safety:
        - Subscriptions happen at start-up, before any publish
        - NOT safe for concurrent subscribe and publish

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async function to call when event is published.

        Notes:
            Registering the same handler twice delivers each event to it twice.
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers registered for an event type.

        Args:
            event_type: Event class.

        Returns:
            int: Registered handler count (0 if none).
        """
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        No handlers registered is a no-op.

        Args:
            event: Domain event to publish.

        Handlers run concurrently via asyncio.gather with
        return_exceptions=True; each returned exception becomes one
        ``event_handler_failed`` warning.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
