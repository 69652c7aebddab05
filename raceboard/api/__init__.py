"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .errors import register_error_handlers
from .routers import API_ROUTERS, SITE_ROUTERS


def register_routes(app: FastAPI, api_prefix: str = "") -> None:
    """Attach all application routers to the given app."""

    for router in SITE_ROUTERS:
        app.include_router(router)
    for router in API_ROUTERS:
        app.include_router(router, prefix=api_prefix)


__all__ = ["register_error_handlers", "register_routes"]
