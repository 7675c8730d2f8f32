"""Logging event handler for conference work session events.

Writes one structured log line per SessionFailedToStart so operators can see
individual failures, not only the totals in the statistics snapshot.

Log Levels:
    - WARNING: session failed to start (operational issue)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - session_kind: kind value, or null for malformed events
    - session_id / conference_id: when the publisher provides them
"""

from conference_stats.domain.events import SessionFailedToStart
from conference_stats.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of session events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(
        ...     SessionFailedToStart, handler.handle_session_failed_to_start
        ... )
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    async def handle_session_failed_to_start(
        self,
        event: SessionFailedToStart,
    ) -> None:
        """Log a failed session start (WARNING).

        Args:
            event: SessionFailedToStart event.
        """
        session_kind = event.session_kind
        self._logger.warning(
            "session_failed_to_start",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            session_kind=getattr(session_kind, "value", session_kind),
            session_id=str(event.session_id) if event.session_id else None,
            conference_id=str(event.conference_id) if event.conference_id else None,
        )
