"""Domain protocols (ports) package.

Protocol definitions the domain and application layers need. Infrastructure
adapters (and the host's conference manager) implement them without
inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from conference_stats.domain.protocols import (
        ConferenceRegistryProtocol,
        EventBusProtocol,
        LoggerProtocol,
    )
"""

from conference_stats.domain.protocols.conference_registry_protocol import (
    ConferenceRegistryProtocol,
    ConferenceView,
    RegistryProvider,
    SessionView,
)
from conference_stats.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from conference_stats.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ConferenceRegistryProtocol",
    "ConferenceView",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "RegistryProvider",
    "SessionView",
]
