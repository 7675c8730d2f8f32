"""Domain events package.

Usage:
    from conference_stats.domain.events import DomainEvent, SessionFailedToStart
"""

from conference_stats.domain.events.base_event import DomainEvent
from conference_stats.domain.events.session_events import SessionFailedToStart

__all__ = ["DomainEvent", "SessionFailedToStart"]
