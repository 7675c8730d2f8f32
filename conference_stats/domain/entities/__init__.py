"""Domain entities.

Usage:
    from conference_stats.domain.entities import Conference, ConferenceSession
"""

from conference_stats.domain.entities.conference import Conference
from conference_stats.domain.entities.conference_session import ConferenceSession
from conference_stats.domain.entities.failure_counter import FailureCounter

__all__ = ["Conference", "ConferenceSession", "FailureCounter"]
