"""Infrastructure event handlers (side effects only)."""

from conference_stats.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
