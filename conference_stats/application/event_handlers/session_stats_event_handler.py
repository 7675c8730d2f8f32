"""Session statistics event handler (the stats aggregator).

Counts conference work sessions that failed to start and, on demand, merges
those totals with live active/pending counts read from the conference
registry.

Architecture:
    - Application layer (aggregation logic)
    - App-scoped singleton (created once at startup, see
      conference_stats.core.container.stats.init_session_stats)
    - Subscribes to SessionFailedToStart
    - Passive: no thread or loop of its own

Pattern:
    This is a REACTIVE AGGREGATION handler:
    1. Listens to SessionFailedToStart and bumps one FailureCounter per event
    2. On get_stats(), resolves the registry, walks it, and merges the live
       counts with the counters into a SessionStatsSnapshot

Concurrency:
    Event delivery is sequential; queries may run concurrently with it and
    with each other. FailureCounter is the only mutable state and is
    lock-protected, so readers never observe a torn value.

Errors:
    Nothing here raises to the event bus or to query callers. Malformed or
    unrecognized events are logged and dropped; an unavailable registry
    yields a snapshot without live counts.
"""

from conference_stats.application.services.session_counting import (
    count_live_sessions,
)
from conference_stats.core.enums import ErrorCode
from conference_stats.core.result import Failure, Result, Success
from conference_stats.domain.entities import FailureCounter
from conference_stats.domain.enums import SessionKind
from conference_stats.domain.errors import SessionStatsError
from conference_stats.domain.events import SessionFailedToStart
from conference_stats.domain.protocols import (
    ConferenceRegistryProtocol,
    EventBusProtocol,
    LoggerProtocol,
    RegistryProvider,
)
from conference_stats.domain.value_objects import (
    LiveSessionCounts,
    SessionStatsSnapshot,
)


class SessionStatsEventHandler:
    """Aggregates failure totals and live session counts.

    Constructible with no arguments; the hosting process injects the
    registry lookup and logger through the container.

    Attributes:
        _registry_provider: Resolves the conference registry per query, or
            None when no registry is wired.
        _logger: For structured logging.

    Example:
        >>> handler = SessionStatsEventHandler(
        ...     registry_provider=get_conference_registry,
        ...     logger=get_logger(),
        ... )
        >>> handler.subscribe(get_event_bus())
        >>> handler.get_stats().to_dict()
        {'total_live_streaming_failures': 0, 'total_recording_failures': 0, ...}
    """

    def __init__(
        self,
        registry_provider: RegistryProvider | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize handler with optional collaborators.

        Args:
            registry_provider: Returns the conference registry at query time,
                or None if it cannot be resolved. Without a provider every
                snapshot omits live counts.
            logger: Logger protocol implementation. Defaults to the container
                logger.
        """
        if logger is None:
            from conference_stats.core.container.infrastructure import get_logger

            logger = get_logger()

        self._registry_provider = registry_provider
        self._logger = logger

        self._sip_call_failures = FailureCounter(
            SessionKind.SIP_CALL.total_failures_key
        )
        self._recording_failures = FailureCounter(
            SessionKind.RECORDING.total_failures_key
        )
        self._live_streaming_failures = FailureCounter(
            SessionKind.LIVE_STREAMING.total_failures_key
        )

    def subscribe(self, event_bus: EventBusProtocol) -> None:
        """Register for "failed to start" notifications of every session kind.

        Args:
            event_bus: Bus that delivers SessionFailedToStart events.
        """
        event_bus.subscribe(SessionFailedToStart, self.handle_session_failed_to_start)
        self._logger.info(
            "session_stats_subscribed",
            event_type=SessionFailedToStart.__name__,
        )

    async def handle_session_failed_to_start(
        self,
        event: SessionFailedToStart,
    ) -> None:
        """Count one failed session start.

        Never awaits and never raises; the only effect is incrementing the
        counter matching the event's session kind.

        Args:
            event: SessionFailedToStart event with session_kind.
        """
        match self._resolve_counter(event.session_kind):
            case Success(value=counter):
                total = counter.increment()
                self._logger.debug(
                    "session_failure_counted",
                    event_id=str(event.event_id),
                    counter=counter.name,
                    total=total,
                )
            case Failure(error=error):
                self._logger.error(
                    "session_failed_to_start_discarded",
                    event_id=str(event.event_id),
                    error_code=error.code.value,
                    reason=error.message,
                    session_kind=error.session_kind,
                )

    @property
    def total_sip_call_failures(self) -> int:
        """How many times a SIP call has failed to start."""
        return self._sip_call_failures.value

    @property
    def total_recording_failures(self) -> int:
        """How many times a recording has failed to start."""
        return self._recording_failures.value

    @property
    def total_live_streaming_failures(self) -> int:
        """How many times a live stream has failed to start."""
        return self._live_streaming_failures.value

    def get_total_failures(self, session_kind: SessionKind) -> int:
        """Cumulative failure total for one session kind.

        Args:
            session_kind: Kind to read.

        Returns:
            int: Current counter value.

        Raises:
            ValueError: If session_kind is not a SessionKind.
        """
        match self._resolve_counter(session_kind):
            case Success(value=counter):
                return counter.value
            case Failure(error=error):
                raise ValueError(str(error))

    def get_live_session_counts(self) -> LiveSessionCounts | None:
        """Compute active/pending counts from the registry right now.

        Returns:
            LiveSessionCounts for included conferences, or None when the
            registry could not be resolved or read.
        """
        registry_result = self._resolve_registry()
        if isinstance(registry_result, Failure):
            error = registry_result.error
            if error.details:
                self._logger.warning(
                    "conference_registry_unavailable",
                    error_code=error.code.value,
                    **error.details,
                )
            else:
                self._logger.debug(
                    "live_session_counts_skipped",
                    error_code=error.code.value,
                    reason=error.message,
                )
            return None

        try:
            return count_live_sessions(registry_result.value.list_conferences())
        except Exception as e:
            # Registry owns its state; a failing read degrades this snapshot only
            self._logger.warning(
                "conference_registry_unavailable",
                error_code=ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE.value,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return None

    def get_stats(self) -> SessionStatsSnapshot:
        """Build a snapshot of failure totals and live session counts.

        Failure totals are read directly; live counts are recomputed on every
        call.

        Returns:
            SessionStatsSnapshot: Never fails; live counts may be absent.
        """
        return SessionStatsSnapshot(
            total_sip_call_failures=self.total_sip_call_failures,
            total_recording_failures=self.total_recording_failures,
            total_live_streaming_failures=self.total_live_streaming_failures,
            live_counts=self.get_live_session_counts(),
        )

    def _resolve_counter(
        self,
        session_kind: SessionKind | None,
    ) -> Result[FailureCounter, SessionStatsError]:
        """Map a session kind to its failure counter.

        Args:
            session_kind: Kind carried by an event or passed by a caller.

        Returns:
            Success(FailureCounter) for the three known kinds.
            Failure(SessionStatsError) when the kind is missing or unknown.
        """
        if session_kind is None:
            return Failure(
                error=SessionStatsError(
                    code=ErrorCode.SESSION_KIND_MISSING,
                    message="No session kind passed for SessionFailedToStart",
                )
            )

        match session_kind:
            case SessionKind.SIP_CALL:
                return Success(value=self._sip_call_failures)
            case SessionKind.RECORDING:
                return Success(value=self._recording_failures)
            case SessionKind.LIVE_STREAMING:
                return Success(value=self._live_streaming_failures)

        return Failure(
            error=SessionStatsError(
                code=ErrorCode.SESSION_KIND_UNRECOGNIZED,
                message="Unhandled session kind",
                session_kind=repr(session_kind),
            )
        )

    def _resolve_registry(
        self,
    ) -> Result[ConferenceRegistryProtocol, SessionStatsError]:
        """Look up the conference registry for one query.

        Returns:
            Success(registry) when the provider yields one.
            Failure(SessionStatsError) when no provider is wired, the provider
            returns None, or the provider raises. Only the raising case
            carries details (error_type, error_message).
        """
        if self._registry_provider is None:
            return Failure(
                error=SessionStatsError(
                    code=ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE,
                    message="No conference registry provider configured",
                )
            )

        try:
            registry = self._registry_provider()
        except Exception as e:
            return Failure(
                error=SessionStatsError(
                    code=ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE,
                    message=f"Conference registry lookup failed: {e}",
                    details={
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                    },
                )
            )

        if registry is None:
            return Failure(
                error=SessionStatsError(
                    code=ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE,
                    message="Conference registry not resolvable",
                )
            )

        return Success(value=registry)
