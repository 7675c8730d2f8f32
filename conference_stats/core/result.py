"""Result types for railway-oriented programming.

Operations that can fail without it being exceptional return a Result
instead of raising. Callers branch on the variant explicitly.

Usage:
    def resolve(kind: SessionKind | None) -> Result[FailureCounter, SessionStatsError]:
        if kind is None:
            return Failure(error=SessionStatsError(...))
        return Success(value=counter)

    match resolve(kind):
        case Success(value=counter):
            counter.increment()
        case Failure(error=error):
            logger.error("resolve_failed", error_code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
