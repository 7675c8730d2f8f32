"""Application services.

Pure functions used by the stats aggregator.
"""

from conference_stats.application.services.session_counting import (
    SessionSelector,
    count_active,
    count_live_sessions,
    count_pending,
    count_sessions,
)

__all__ = [
    "SessionSelector",
    "count_active",
    "count_live_sessions",
    "count_pending",
    "count_sessions",
]
