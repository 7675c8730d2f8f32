"""Queries - Read operations that fetch data.

Queries are immutable dataclasses with question-like names. Each has a
handler that fetches and returns the requested data. Queries NEVER change
state.
"""

from conference_stats.application.queries.session_stats_queries import (
    GetSessionFailureTotals,
    GetSessionStats,
)

__all__ = [
    "GetSessionFailureTotals",
    "GetSessionStats",
]
