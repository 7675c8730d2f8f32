"""Session statistics resource router.

Endpoints:
    GET /api/v1/session-stats           - Full snapshot (failure totals + live counts)
    GET /api/v1/session-stats/failures  - Failure totals only (no registry walk)

Response bodies are flat JSON objects whose keys are the stable snapshot
contract (e.g. ``recording_active``, ``total_sip_call_failures``).
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from conference_stats.application.queries.handlers.get_session_stats_handler import (
    GetSessionFailureTotalsHandler,
    GetSessionStatsHandler,
)
from conference_stats.application.queries.session_stats_queries import (
    GetSessionFailureTotals,
    GetSessionStats,
)
from conference_stats.core.container import (
    get_get_session_failure_totals_handler,
    get_get_session_stats_handler,
)

router = APIRouter(prefix="/session-stats", tags=["Session Stats"])


@router.get("")
async def get_session_stats(
    handler: Annotated[GetSessionStatsHandler, Depends(get_get_session_stats_handler)],
) -> dict[str, int]:
    """Get the current statistics snapshot.

    Live count keys are omitted when the conference registry is unavailable.

    Returns:
        dict[str, int]: Flat snapshot mapping.
    """
    result = await handler.handle(GetSessionStats())
    return result.value.to_dict()


@router.get("/failures")
async def get_session_failure_totals(
    handler: Annotated[
        GetSessionFailureTotalsHandler,
        Depends(get_get_session_failure_totals_handler),
    ],
) -> dict[str, int]:
    """Get the cumulative failure totals.

    Returns:
        dict[str, int]: The three ``total_*_failures`` keys.
    """
    result = await handler.handle(GetSessionFailureTotals())
    return result.value.to_dict()
