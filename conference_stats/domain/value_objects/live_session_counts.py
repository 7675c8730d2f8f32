"""Live session counts value object.

Active and pending session counts per SessionKind, summed across every
conference included in statistics at one point in time.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from conference_stats.domain.enums import SessionKind


def _zero_counts() -> Mapping[SessionKind, int]:
    return MappingProxyType(dict.fromkeys(SessionKind, 0))


@dataclass(frozen=True, slots=True, kw_only=True)
class LiveSessionCounts:
    """Immutable active/pending counts for all three session kinds.

    Kinds absent from the input mappings count as zero, so every instance
    always covers the full SessionKind set.

    Attributes:
        active: Number of ACTIVE sessions per kind.
        pending: Number of PENDING sessions per kind.

    Example:
        >>> counts = LiveSessionCounts(active={SessionKind.RECORDING: 1})
        >>> counts.active_count(SessionKind.RECORDING)
        1
        >>> counts.pending_count(SessionKind.SIP_CALL)
        0
    """

    active: Mapping[SessionKind, int] = field(default_factory=_zero_counts)
    pending: Mapping[SessionKind, int] = field(default_factory=_zero_counts)

    def __post_init__(self) -> None:
        for name in ("active", "pending"):
            given = getattr(self, name)
            if any(count < 0 for count in given.values()):
                raise ValueError(f"{name} session counts must be non-negative")
            complete = {kind: given.get(kind, 0) for kind in SessionKind}
            object.__setattr__(self, name, MappingProxyType(complete))

    def active_count(self, session_kind: SessionKind) -> int:
        """Number of active sessions of the given kind."""
        return self.active[session_kind]

    def pending_count(self, session_kind: SessionKind) -> int:
        """Number of pending sessions of the given kind."""
        return self.pending[session_kind]

    def to_dict(self) -> dict[str, int]:
        """Flat mapping keyed ``<kind>_active`` / ``<kind>_pending``.

        Returns:
            dict[str, int]: Six entries, one active and one pending per kind.
        """
        result: dict[str, int] = {}
        for kind in SessionKind:
            result[kind.active_key] = self.active[kind]
        for kind in SessionKind:
            result[kind.pending_key] = self.pending[kind]
        return result
