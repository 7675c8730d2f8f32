"""Non-versioned routers."""

from conference_stats.presentation.routers.system import system_router

__all__ = ["system_router"]
