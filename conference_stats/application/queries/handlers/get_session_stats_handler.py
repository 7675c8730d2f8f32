"""Session statistics query handlers.

Handle requests for the statistics snapshot and for the failure totals
alone. Both read from the app-scoped SessionStatsEventHandler.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Return Result[DTO, str] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from dataclasses import dataclass

from conference_stats.application.event_handlers.session_stats_event_handler import (
    SessionStatsEventHandler,
)
from conference_stats.application.queries.session_stats_queries import (
    GetSessionFailureTotals,
    GetSessionStats,
)
from conference_stats.core.result import Result, Success
from conference_stats.domain.enums import SessionKind
from conference_stats.domain.value_objects import SessionStatsSnapshot


@dataclass
class SessionFailureTotalsResult:
    """Failure totals DTO.

    Attributes:
        total_sip_call_failures: SIP calls that failed to start.
        total_recording_failures: Recordings that failed to start.
        total_live_streaming_failures: Live streams that failed to start.
    """

    total_sip_call_failures: int
    total_recording_failures: int
    total_live_streaming_failures: int

    def to_dict(self) -> dict[str, int]:
        """Export with the same keys the full snapshot uses."""
        return {
            SessionKind.LIVE_STREAMING.total_failures_key: self.total_live_streaming_failures,
            SessionKind.RECORDING.total_failures_key: self.total_recording_failures,
            SessionKind.SIP_CALL.total_failures_key: self.total_sip_call_failures,
        }


class GetSessionStatsHandler:
    """Handler for GetSessionStats query.

    Dependencies (injected via constructor):
        - SessionStatsEventHandler: Owner of counters and registry lookup
    """

    def __init__(self, session_stats: SessionStatsEventHandler) -> None:
        """Initialize handler with dependencies.

        Args:
            session_stats: App-scoped stats aggregator.
        """
        self._session_stats = session_stats

    async def handle(
        self, query: GetSessionStats
    ) -> Result[SessionStatsSnapshot, str]:
        """Handle GetSessionStats query.

        Args:
            query: GetSessionStats query (no parameters).

        Returns:
            Success(SessionStatsSnapshot): Always. Live counts are absent
            when the registry is unavailable; that is not a failure.
        """
        return Success(value=self._session_stats.get_stats())


class GetSessionFailureTotalsHandler:
    """Handler for GetSessionFailureTotals query.

    Reads the three counters only; the registry is never touched.
    """

    def __init__(self, session_stats: SessionStatsEventHandler) -> None:
        """Initialize handler with dependencies.

        Args:
            session_stats: App-scoped stats aggregator.
        """
        self._session_stats = session_stats

    async def handle(
        self, query: GetSessionFailureTotals
    ) -> Result[SessionFailureTotalsResult, str]:
        """Handle GetSessionFailureTotals query.

        Args:
            query: GetSessionFailureTotals query (no parameters).

        Returns:
            Success(SessionFailureTotalsResult): Always.
        """
        return Success(
            value=SessionFailureTotalsResult(
                total_sip_call_failures=self._session_stats.total_sip_call_failures,
                total_recording_failures=self._session_stats.total_recording_failures,
                total_live_streaming_failures=self._session_stats.total_live_streaming_failures,
            )
        )
