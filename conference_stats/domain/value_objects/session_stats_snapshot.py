"""Session statistics snapshot value object.

Point-in-time merge of the cumulative failure totals with the live session
counts. Built on demand, handed to the caller, then discarded.

Export keys (stable contract for dashboards and scrapers):
    total_live_streaming_failures, total_recording_failures,
    total_sip_call_failures                     -- always present
    live_streaming_active, recording_active, sip_call_active,
    live_streaming_pending, recording_pending,
    sip_call_pending                            -- only when the registry was reachable
"""

from dataclasses import dataclass

from conference_stats.domain.enums import SessionKind
from conference_stats.domain.value_objects.live_session_counts import (
    LiveSessionCounts,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionStatsSnapshot:
    """Immutable statistics snapshot.

    Attributes:
        total_sip_call_failures: SIP calls that failed to start.
        total_recording_failures: Recordings that failed to start.
        total_live_streaming_failures: Live streams that failed to start.
        live_counts: Active/pending counts, or None when the conference
            registry could not be resolved for this snapshot.
    """

    total_sip_call_failures: int
    total_recording_failures: int
    total_live_streaming_failures: int
    live_counts: LiveSessionCounts | None = None

    def to_dict(self) -> dict[str, int]:
        """Flat key→value export of the snapshot.

        Returns:
            dict[str, int]: The three failure totals, plus the six live
            counts when present.
        """
        stats = {
            SessionKind.LIVE_STREAMING.total_failures_key: self.total_live_streaming_failures,
            SessionKind.RECORDING.total_failures_key: self.total_recording_failures,
            SessionKind.SIP_CALL.total_failures_key: self.total_sip_call_failures,
        }
        if self.live_counts is not None:
            stats.update(self.live_counts.to_dict())
        return stats
