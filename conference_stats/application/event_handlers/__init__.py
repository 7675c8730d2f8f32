"""Application event handlers for reactive aggregation.

These handlers listen to domain events and keep derived state that queries
read later. They use MANUAL WIRING: the container creates them and calls
their subscribe() at start-up.
"""

from conference_stats.application.event_handlers.session_stats_event_handler import (
    SessionStatsEventHandler,
)

__all__ = ["SessionStatsEventHandler"]
