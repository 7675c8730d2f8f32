"""Query handlers."""

from conference_stats.application.queries.handlers.get_session_stats_handler import (
    GetSessionFailureTotalsHandler,
    GetSessionStatsHandler,
    SessionFailureTotalsResult,
)

__all__ = [
    "GetSessionFailureTotalsHandler",
    "GetSessionStatsHandler",
    "SessionFailureTotalsResult",
]
