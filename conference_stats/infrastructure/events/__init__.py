"""Event bus adapters.

Usage:
    from conference_stats.infrastructure.events import InMemoryEventBus
"""

from conference_stats.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)

__all__ = ["InMemoryEventBus"]
