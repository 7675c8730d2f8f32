"""API v1 routers.

Resources:
    /api/v1/session-stats           - Statistics snapshot
    /api/v1/session-stats/failures  - Cumulative failure totals only
"""

from fastapi import APIRouter

from conference_stats.core.config import settings
from conference_stats.presentation.api.v1.session_stats import (
    router as session_stats_router,
)

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(session_stats_router)

__all__ = [
    "v1_router",
    "session_stats_router",
]
