"""Domain value objects.

Immutable results of statistics computation.
"""

from conference_stats.domain.value_objects.live_session_counts import (
    LiveSessionCounts,
)
from conference_stats.domain.value_objects.session_stats_snapshot import (
    SessionStatsSnapshot,
)

__all__ = [
    "LiveSessionCounts",
    "SessionStatsSnapshot",
]
