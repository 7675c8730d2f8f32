"""Conference work session kinds.

A conference can host three kinds of transient work sessions, each run by an
external worker. The set is closed.

Usage:
    from conference_stats.domain.enums import SessionKind

    if event.session_kind == SessionKind.RECORDING:
        ...
"""

from enum import Enum


class SessionKind(str, Enum):
    """Kind of a conference work session.

    String Enum:
        Values double as the prefix of every snapshot key for the kind
        (``recording_active``, ``total_recording_failures`` ...).
    """

    SIP_CALL = "sip_call"
    """Outbound SIP call bridged into the conference."""

    RECORDING = "recording"
    """Conference recording to a file."""

    LIVE_STREAMING = "live_streaming"
    """Conference live stream to an external platform."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all kind values as strings.

        Returns:
            list[str]: List of kind values.
        """
        return [kind.value for kind in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid kind.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid kind.
        """
        return value in cls.values()

    @property
    def active_key(self) -> str:
        """Snapshot key for the active-session count of this kind."""
        return f"{self.value}_active"

    @property
    def pending_key(self) -> str:
        """Snapshot key for the pending-session count of this kind."""
        return f"{self.value}_pending"

    @property
    def total_failures_key(self) -> str:
        """Snapshot key for the cumulative failure count of this kind."""
        return f"total_{self.value}_failures"
