"""Pytest configuration shared by all test suites.

This configuration ensures:
1. Container singletons are rebuilt for every test (no leaked subscriptions)
2. Common test doubles (mock logger, session/conference builders) are shared
"""

from unittest.mock import MagicMock

import pytest

from conference_stats.core.config import get_settings
from conference_stats.core.container import (
    get_conference_registry,
    get_event_bus,
    get_logger,
    get_session_stats_handler,
)
from conference_stats.domain.entities import Conference, ConferenceSession
from conference_stats.domain.enums import SessionKind, SessionStatus


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset app-scoped singletons around each test.

    Counters live as long as the aggregator singleton, so a test that
    publishes failures must not leak them into the next one.
    """
    _clear_caches()
    yield
    _clear_caches()


def _clear_caches() -> None:
    get_session_stats_handler.cache_clear()
    get_event_bus.cache_clear()
    get_conference_registry.cache_clear()
    get_logger.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def mock_logger():
    """Create mock LoggerProtocol."""
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


# Test helper functions for domain entities


def create_session(
    session_kind: SessionKind = SessionKind.RECORDING,
    status: SessionStatus = SessionStatus.PENDING,
) -> ConferenceSession:
    """Helper to create a ConferenceSession in a given status.

    Args:
        session_kind: Kind of session (default: recording).
        status: Status to put the session in (default: pending).

    Returns:
        ConferenceSession instance for testing.
    """
    return ConferenceSession(session_kind=session_kind, status=status)


def create_conference(
    *sessions: ConferenceSession,
    include_in_statistics: bool = True,
    name: str = "test-room",
) -> Conference:
    """Helper to create a Conference holding the given sessions.

    Usage:
        conference = create_conference(
            create_session(SessionKind.SIP_CALL, SessionStatus.ACTIVE),
            include_in_statistics=False,
        )
    """
    return Conference(
        name=name,
        include_in_statistics=include_in_statistics,
        sessions=list(sessions),
    )
