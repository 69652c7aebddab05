"""Aggregate API routers."""

from fastapi import APIRouter

from .counters import router as counters_router
from .leaderboard import router as leaderboard_router
from .name import router as name_router
from .race import router as race_router
from .session import router as session_router
from .stats import router as stats_router
from .system import router as system_router

# Mounted under the configured API prefix.
API_ROUTERS: tuple[APIRouter, ...] = (
    session_router,
    name_router,
    counters_router,
    leaderboard_router,
    race_router,
)

# Mounted at the site root.
SITE_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    stats_router,
)

__all__ = ["API_ROUTERS", "SITE_ROUTERS"]
