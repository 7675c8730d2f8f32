"""Conference registry adapters.

Usage:
    from conference_stats.infrastructure.registry import InMemoryConferenceRegistry
"""

from conference_stats.infrastructure.registry.in_memory_conference_registry import (
    InMemoryConferenceRegistry,
)

__all__ = ["InMemoryConferenceRegistry"]
