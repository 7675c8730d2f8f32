"""Unit tests for SessionStatsEventHandler (the stats aggregator).

Tests cover:
- Zero-argument construction
- Failure events increment exactly one counter
- Missing and unrecognized session kinds are logged and dropped
- Snapshot merges failure totals with live counts
- Live counts omitted when the registry is absent, None or raising
- Subscription to the event bus
- Concurrent event delivery loses no increments

Test Strategy:
- Mock LoggerProtocol and EventBusProtocol
- Real in-memory conferences for registry contents
- Test behavior through public accessors and snapshots
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from conference_stats.application.event_handlers import SessionStatsEventHandler
from conference_stats.core.enums import ErrorCode
from conference_stats.domain.enums import SessionKind, SessionStatus
from conference_stats.domain.events import SessionFailedToStart
from conference_stats.infrastructure.registry import InMemoryConferenceRegistry
from tests.conftest import create_conference, create_session


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def registry():
    """Create an empty in-memory conference registry."""
    return InMemoryConferenceRegistry()


@pytest.fixture
def handler(registry, mock_logger):
    """Create SessionStatsEventHandler wired to the test registry."""
    return SessionStatsEventHandler(
        registry_provider=lambda: registry,
        logger=mock_logger,
    )


def failed(session_kind) -> SessionFailedToStart:
    """Build a SessionFailedToStart event for a kind."""
    return SessionFailedToStart(session_kind=session_kind)


# =============================================================================
# Initialization Tests
# =============================================================================


@pytest.mark.unit
class TestSessionStatsEventHandlerInit:
    """Test handler construction."""

    def test_init_with_no_arguments_uses_container_logger(self):
        """Test zero-arg construction pulls the logger from the container."""
        container_logger = MagicMock()

        with patch(
            "conference_stats.core.container.infrastructure.get_logger",
            return_value=container_logger,
        ):
            handler = SessionStatsEventHandler()

        assert handler._logger is container_logger
        assert handler.total_sip_call_failures == 0
        assert handler.total_recording_failures == 0
        assert handler.total_live_streaming_failures == 0

    def test_fresh_handler_snapshot_without_registry(self, mock_logger):
        """Test a fresh handler with no registry reports only zero totals."""
        handler = SessionStatsEventHandler(logger=mock_logger)

        assert handler.get_stats().to_dict() == {
            "total_live_streaming_failures": 0,
            "total_recording_failures": 0,
            "total_sip_call_failures": 0,
        }

    def test_subscribe_registers_failure_handler(self, handler, mock_logger):
        """Test subscribe wires handle_session_failed_to_start to the bus."""
        event_bus = MagicMock()

        handler.subscribe(event_bus)

        event_bus.subscribe.assert_called_once_with(
            SessionFailedToStart, handler.handle_session_failed_to_start
        )
        mock_logger.info.assert_called_once()


# =============================================================================
# Failure Counting Tests
# =============================================================================


@pytest.mark.unit
class TestHandleSessionFailedToStart:
    """Test failure counting."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("kind", "attribute"),
        [
            (SessionKind.SIP_CALL, "total_sip_call_failures"),
            (SessionKind.RECORDING, "total_recording_failures"),
            (SessionKind.LIVE_STREAMING, "total_live_streaming_failures"),
        ],
    )
    async def test_event_increments_matching_counter_only(
        self, handler, kind, attribute
    ):
        """Test one event bumps exactly one counter by exactly one."""
        # Act
        await handler.handle_session_failed_to_start(failed(kind))

        # Assert
        totals = {
            "total_sip_call_failures": handler.total_sip_call_failures,
            "total_recording_failures": handler.total_recording_failures,
            "total_live_streaming_failures": handler.total_live_streaming_failures,
        }
        assert totals.pop(attribute) == 1
        assert set(totals.values()) == {0}
        assert handler.get_total_failures(kind) == 1

    @pytest.mark.asyncio
    async def test_events_accumulate(self, handler):
        """Test totals reflect every event since construction."""
        # Arrange
        events = [
            failed(SessionKind.RECORDING),
            failed(SessionKind.RECORDING),
            failed(SessionKind.SIP_CALL),
            failed(SessionKind.RECORDING),
        ]

        # Act
        for event in events:
            await handler.handle_session_failed_to_start(event)

        # Assert
        assert handler.total_recording_failures == 3
        assert handler.total_sip_call_failures == 1
        assert handler.total_live_streaming_failures == 0

    @pytest.mark.asyncio
    async def test_success_logged_at_debug(self, handler, mock_logger):
        """Test a counted failure logs at debug with the new total."""
        await handler.handle_session_failed_to_start(failed(SessionKind.SIP_CALL))

        mock_logger.debug.assert_called_once()
        call_kwargs = mock_logger.debug.call_args[1]
        assert call_kwargs["counter"] == "total_sip_call_failures"
        assert call_kwargs["total"] == 1

    @pytest.mark.asyncio
    async def test_missing_kind_is_logged_and_dropped(self, handler, mock_logger):
        """Test an event without a kind changes no counter and logs an error."""
        # Act
        await handler.handle_session_failed_to_start(failed(None))

        # Assert
        assert handler.total_sip_call_failures == 0
        assert handler.total_recording_failures == 0
        assert handler.total_live_streaming_failures == 0
        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert call_args[0][0] == "session_failed_to_start_discarded"
        assert call_args[1]["error_code"] == ErrorCode.SESSION_KIND_MISSING.value
        assert call_args[1]["reason"] == (
            "No session kind passed for SessionFailedToStart"
        )

    @pytest.mark.asyncio
    async def test_unrecognized_kind_is_logged_and_dropped(
        self, handler, mock_logger
    ):
        """Test a kind outside the known set changes no counter."""
        # Act
        await handler.handle_session_failed_to_start(failed("transcription"))

        # Assert
        assert handler.get_stats().total_sip_call_failures == 0
        assert handler.get_stats().total_recording_failures == 0
        assert handler.get_stats().total_live_streaming_failures == 0
        call_kwargs = mock_logger.error.call_args[1]
        assert call_kwargs["error_code"] == ErrorCode.SESSION_KIND_UNRECOGNIZED.value
        assert call_kwargs["reason"] == "Unhandled session kind"
        assert call_kwargs["session_kind"] == "'transcription'"

    @pytest.mark.asyncio
    async def test_kind_value_string_is_counted(self, handler):
        """Test a raw kind value string counts as that kind."""
        await handler.handle_session_failed_to_start(failed("recording"))

        assert handler.total_recording_failures == 1

    def test_get_total_failures_unknown_kind_raises(self, handler):
        """Test the per-kind accessor rejects unknown kinds."""
        with pytest.raises(ValueError, match="Unhandled session kind"):
            handler.get_total_failures("transcription")  # type: ignore[arg-type]


# =============================================================================
# Snapshot Tests
# =============================================================================


@pytest.mark.unit
class TestGetStats:
    """Test snapshot production."""

    @pytest.mark.asyncio
    async def test_snapshot_merges_totals_and_live_counts(self, handler, registry):
        """Test a reachable registry yields all nine keys."""
        # Arrange
        registry.add_conference(
            create_conference(
                create_session(SessionKind.RECORDING, SessionStatus.ACTIVE),
                create_session(SessionKind.SIP_CALL, SessionStatus.PENDING),
            )
        )
        await handler.handle_session_failed_to_start(failed(SessionKind.LIVE_STREAMING))

        # Act
        stats = handler.get_stats().to_dict()

        # Assert
        assert stats == {
            "total_live_streaming_failures": 1,
            "total_recording_failures": 0,
            "total_sip_call_failures": 0,
            "sip_call_active": 0,
            "recording_active": 1,
            "live_streaming_active": 0,
            "sip_call_pending": 1,
            "recording_pending": 0,
            "live_streaming_pending": 0,
        }

    def test_empty_registry_reports_zero_live_counts(self, handler):
        """Test a reachable but empty registry still reports six zero counts."""
        stats = handler.get_stats().to_dict()

        assert len(stats) == 9
        assert all(value == 0 for value in stats.values())

    def test_live_counts_sum_across_conferences(self, handler, registry):
        """Test counts from several included conferences add up."""
        for _ in range(3):
            registry.add_conference(
                create_conference(
                    create_session(SessionKind.LIVE_STREAMING, SessionStatus.ACTIVE)
                )
            )

        stats = handler.get_stats().to_dict()

        assert stats["live_streaming_active"] == 3

    def test_excluded_conferences_not_counted(self, handler, registry):
        """Test conferences excluded from statistics are invisible."""
        registry.add_conference(
            create_conference(
                create_session(SessionKind.RECORDING, SessionStatus.ACTIVE),
                include_in_statistics=False,
            )
        )

        stats = handler.get_stats().to_dict()

        assert stats["recording_active"] == 0

    def test_included_pair_counted_excluded_ignored(self, handler, registry):
        """Test an included active+pending pair counts; excluded sessions do not."""
        # Arrange
        registry.add_conference(
            create_conference(
                create_session(SessionKind.RECORDING, SessionStatus.ACTIVE),
                create_session(SessionKind.RECORDING, SessionStatus.PENDING),
            )
        )
        registry.add_conference(
            create_conference(
                create_session(SessionKind.RECORDING, SessionStatus.ACTIVE),
                include_in_statistics=False,
            )
        )

        # Act
        stats = handler.get_stats().to_dict()

        # Assert
        assert stats["recording_active"] == 1
        assert stats["recording_pending"] == 1

    @pytest.mark.asyncio
    async def test_fresh_handler_one_recording_one_sip_call_failure(self, handler):
        """Test totals 1/1/0 and six zero live counts on an empty registry."""
        # Arrange
        events = [failed(SessionKind.RECORDING), failed(SessionKind.SIP_CALL)]

        # Act
        for event in events:
            await handler.handle_session_failed_to_start(event)
        stats = handler.get_stats().to_dict()

        # Assert
        assert stats == {
            "total_live_streaming_failures": 0,
            "total_recording_failures": 1,
            "total_sip_call_failures": 1,
            "sip_call_active": 0,
            "recording_active": 0,
            "live_streaming_active": 0,
            "sip_call_pending": 0,
            "recording_pending": 0,
            "live_streaming_pending": 0,
        }

    def test_live_counts_recomputed_per_call(self, handler, registry):
        """Test each snapshot reflects the registry at call time."""
        session = create_session(SessionKind.SIP_CALL, SessionStatus.PENDING)
        registry.add_conference(create_conference(session))

        before = handler.get_stats().to_dict()
        session.mark_active()
        after = handler.get_stats().to_dict()

        assert before["sip_call_pending"] == 1
        assert after["sip_call_pending"] == 0
        assert after["sip_call_active"] == 1

    def test_get_stats_does_not_change_totals(self, handler):
        """Test snapshots are side-effect free on the counters."""
        first = handler.get_stats()
        second = handler.get_stats()

        assert first == second


@pytest.mark.unit
class TestRegistryUnavailable:
    """Test degraded snapshots when the registry cannot be used."""

    @pytest.mark.asyncio
    async def test_no_provider_omits_live_counts(self, mock_logger):
        """Test live keys are absent when no provider is configured."""
        handler = SessionStatsEventHandler(logger=mock_logger)
        await handler.handle_session_failed_to_start(failed(SessionKind.RECORDING))

        snapshot = handler.get_stats()

        assert snapshot.live_counts is None
        assert snapshot.to_dict() == {
            "total_live_streaming_failures": 0,
            "total_recording_failures": 1,
            "total_sip_call_failures": 0,
        }
        mock_logger.warning.assert_not_called()

    def test_provider_returning_none_omits_live_counts(self, mock_logger):
        """Test a provider that cannot resolve the registry degrades quietly."""
        handler = SessionStatsEventHandler(
            registry_provider=lambda: None, logger=mock_logger
        )

        snapshot = handler.get_stats()

        assert snapshot.live_counts is None
        assert handler.get_live_session_counts() is None
        mock_logger.warning.assert_not_called()
        assert mock_logger.debug.call_args[0][0] == "live_session_counts_skipped"

    def test_provider_raising_omits_live_counts(self, mock_logger):
        """Test a provider exception is logged, not raised."""
        provider = MagicMock(side_effect=RuntimeError("registry shut down"))
        handler = SessionStatsEventHandler(
            registry_provider=provider, logger=mock_logger
        )

        snapshot = handler.get_stats()

        assert snapshot.live_counts is None
        mock_logger.warning.assert_called_once()
        call_kwargs = mock_logger.warning.call_args[1]
        assert call_kwargs["error_type"] == "RuntimeError"
        assert call_kwargs["error_message"] == "registry shut down"
        assert call_kwargs["error_code"] == (
            ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE.value
        )
        mock_logger.debug.assert_not_called()

    def test_registry_read_raising_omits_live_counts(self, mock_logger):
        """Test a failing list_conferences() degrades to totals only."""
        broken_registry = MagicMock()
        broken_registry.list_conferences.side_effect = RuntimeError("boom")
        handler = SessionStatsEventHandler(
            registry_provider=lambda: broken_registry, logger=mock_logger
        )

        stats = handler.get_stats().to_dict()

        assert set(stats) == {
            "total_live_streaming_failures",
            "total_recording_failures",
            "total_sip_call_failures",
        }
        assert (
            mock_logger.warning.call_args[1]["error_code"]
            == ErrorCode.CONFERENCE_REGISTRY_UNAVAILABLE.value
        )

    def test_registry_resolved_per_query(self, mock_logger, registry):
        """Test the provider is consulted on every snapshot."""
        provider = MagicMock(side_effect=[None, registry])
        handler = SessionStatsEventHandler(
            registry_provider=provider, logger=mock_logger
        )

        first = handler.get_stats()
        second = handler.get_stats()

        assert first.live_counts is None
        assert second.live_counts is not None
        assert provider.call_count == 2


# =============================================================================
# Concurrency Tests
# =============================================================================


@pytest.mark.unit
class TestConcurrentDelivery:
    """Test counters under concurrent event delivery."""

    def test_concurrent_events_lose_no_increments(self, handler):
        """Test K events delivered from many threads give a total of K."""
        # Arrange
        events_per_thread = 250
        threads = 8

        def deliver() -> None:
            async def run() -> None:
                for _ in range(events_per_thread):
                    await handler.handle_session_failed_to_start(
                        failed(SessionKind.RECORDING)
                    )

            asyncio.run(run())

        # Act
        with ThreadPoolExecutor(max_workers=threads) as executor:
            futures = [executor.submit(deliver) for _ in range(threads)]
            for future in futures:
                future.result()

        # Assert
        assert handler.total_recording_failures == events_per_thread * threads
        assert handler.total_sip_call_failures == 0
