"""Session statistics queries (CQRS read operations).

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries never change state
- Queries do NOT emit domain events
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetSessionStats:
    """Get the full statistics snapshot.

    Walks the conference registry for live counts and merges them with the
    cumulative failure totals.

    Example:
        >>> result = await handler.handle(GetSessionStats())
        >>> result.value.to_dict()["recording_active"]
    """


@dataclass(frozen=True, kw_only=True)
class GetSessionFailureTotals:
    """Get only the cumulative failure totals (no registry walk)."""
