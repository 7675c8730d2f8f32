"""Session statistics dependency factories.

The stats aggregator is an app-scoped singleton. init_session_stats() is the
composition function: it builds a fresh aggregator, subscribes it to an
event bus and returns the handle. get_session_stats_handler() calls it once
with the application's collaborators; tests call it directly with their own.

Host integration:
    The service only observes. The embedding conference manager is the
    input path: it publishes SessionFailedToStart on get_event_bus() and
    adds or removes conferences on get_conference_registry(). A process
    that does neither serves zero failure totals and zero live counts.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conference_stats.application.event_handlers.session_stats_event_handler import (
        SessionStatsEventHandler,
    )
    from conference_stats.application.queries.handlers.get_session_stats_handler import (
        GetSessionFailureTotalsHandler,
        GetSessionStatsHandler,
    )
    from conference_stats.domain.protocols.conference_registry_protocol import (
        ConferenceRegistryProtocol,
        RegistryProvider,
    )
    from conference_stats.domain.protocols.event_bus_protocol import EventBusProtocol
    from conference_stats.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_conference_registry() -> "ConferenceRegistryProtocol | None":
    """Get conference registry singleton (app-scoped).

    Returns correct adapter based on settings.conference_registry_backend:
        - 'in-memory': InMemoryConferenceRegistry
        - 'none': None (no registry; snapshots carry failure totals only)

    Returns:
        Registry implementing ConferenceRegistryProtocol, or None.

    Raises:
        ValueError: If the backend is unsupported.
    """
    from conference_stats.core.config import get_settings

    backend = get_settings().conference_registry_backend

    if backend == "in-memory":
        from conference_stats.infrastructure.registry.in_memory_conference_registry import (
            InMemoryConferenceRegistry,
        )

        return InMemoryConferenceRegistry()
    elif backend == "none":
        return None
    else:
        raise ValueError(
            f"Unsupported CONFERENCE_REGISTRY_BACKEND: {backend}. "
            f"Supported: 'in-memory', 'none'"
        )


def init_session_stats(
    event_bus: "EventBusProtocol",
    registry_provider: "RegistryProvider | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> "SessionStatsEventHandler":
    """Create a stats aggregator and subscribe it to an event bus.

    Args:
        event_bus: Bus delivering SessionFailedToStart events.
        registry_provider: Registry lookup used on every snapshot.
        logger: Logger; defaults to the container logger.

    Returns:
        SessionStatsEventHandler: Subscribed aggregator handle.
    """
    from conference_stats.application.event_handlers.session_stats_event_handler import (
        SessionStatsEventHandler,
    )

    session_stats = SessionStatsEventHandler(
        registry_provider=registry_provider,
        logger=logger,
    )
    session_stats.subscribe(event_bus)
    return session_stats


@lru_cache()
def get_session_stats_handler() -> "SessionStatsEventHandler":
    """Get the stats aggregator singleton (app-scoped).

    Subscribed to get_event_bus() and reading get_conference_registry().
    The registry backend is resolved once here, so an unsupported
    CONFERENCE_REGISTRY_BACKEND fails start-up instead of every snapshot.

    Returns:
        SessionStatsEventHandler: The application's aggregator.

    Raises:
        ValueError: If the registry backend or event bus type is unsupported.
    """
    from conference_stats.core.container.events import get_event_bus
    from conference_stats.core.container.infrastructure import get_logger

    get_conference_registry()

    return init_session_stats(
        event_bus=get_event_bus(),
        registry_provider=get_conference_registry,
        logger=get_logger(),
    )


def get_get_session_stats_handler() -> "GetSessionStatsHandler":
    """Get GetSessionStats query handler (request-scoped).

    Returns:
        GetSessionStatsHandler bound to the app-scoped aggregator.
    """
    from conference_stats.application.queries.handlers.get_session_stats_handler import (
        GetSessionStatsHandler,
    )

    return GetSessionStatsHandler(session_stats=get_session_stats_handler())


def get_get_session_failure_totals_handler() -> "GetSessionFailureTotalsHandler":
    """Get GetSessionFailureTotals query handler (request-scoped).

    Returns:
        GetSessionFailureTotalsHandler bound to the app-scoped aggregator.
    """
    from conference_stats.application.queries.handlers.get_session_stats_handler import (
        GetSessionFailureTotalsHandler,
    )

    return GetSessionFailureTotalsHandler(session_stats=get_session_stats_handler())
