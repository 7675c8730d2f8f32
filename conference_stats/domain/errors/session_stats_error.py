"""Session statistics error types.

Returned (never raised) by the stats aggregator while resolving events and
collaborators, then logged by the caller.

Usage:
    from conference_stats.core.enums import ErrorCode
    from conference_stats.domain.errors import SessionStatsError

    return Failure(
        error=SessionStatsError(
            code=ErrorCode.SESSION_KIND_MISSING,
            message="No session kind on SessionFailedToStart",
        )
    )
"""

from dataclasses import dataclass

from conference_stats.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionStatsError(DomainError):
    """Session statistics failure.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        session_kind: Offending kind rendered as text, if any.
    """

    session_kind: str | None = None
