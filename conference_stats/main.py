"""
Main FastAPI application entry point.

Wires the stats aggregator to the event bus at start-up and exposes the
statistics snapshot over HTTP.

The app publishes no events and registers no conferences itself. The host
process feeds it through conference_stats.core.container: failures via
get_event_bus().publish(SessionFailedToStart(...)) and live sessions via
get_conference_registry().add_conference(...). Without a host the
endpoints report zeros.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from conference_stats.core.config import settings
from conference_stats.presentation.api.v1 import v1_router
from conference_stats.presentation.routers import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: create the stats aggregator and subscribe it to the event bus,
    so failures are counted from the first event on.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from conference_stats.core.container import get_logger, get_session_stats_handler

    get_session_stats_handler()
    get_logger().info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield


app = FastAPI(
    title=settings.app_name,
    description="Conference work session statistics",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(system_router)
app.include_router(v1_router)
