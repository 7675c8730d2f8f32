"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from conference_stats.core.container import get_event_bus, get_session_stats_handler

The container is organized into modules by concern:
- infrastructure: logging
- events: event bus and subscriptions
- stats: conference registry, stats aggregator and its query handlers
"""

# Infrastructure services
from conference_stats.core.container.infrastructure import get_logger

# Event bus
from conference_stats.core.container.events import get_event_bus

# Session statistics
from conference_stats.core.container.stats import (
    get_conference_registry,
    get_get_session_failure_totals_handler,
    get_get_session_stats_handler,
    get_session_stats_handler,
    init_session_stats,
)

__all__ = [
    # Infrastructure
    "get_logger",
    # Events
    "get_event_bus",
    # Session statistics
    "get_conference_registry",
    "get_session_stats_handler",
    "init_session_stats",
    "get_get_session_stats_handler",
    "get_get_session_failure_totals_handler",
]
