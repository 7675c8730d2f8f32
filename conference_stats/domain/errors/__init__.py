"""Domain errors package.

Usage:
    from conference_stats.domain.errors import SessionStatsError
"""

from conference_stats.domain.errors.session_stats_error import SessionStatsError

__all__ = ["SessionStatsError"]
