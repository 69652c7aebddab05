"""Rendering of error kinds as JSON responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import RaceboardError


async def raceboard_error_handler(request: Request, exc: RaceboardError) -> JSONResponse:
    return JSONResponse(
        {"result": "fail", "message": exc.message, **exc.payload},
        status_code=exc.status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RaceboardError, raceboard_error_handler)


__all__ = ["raceboard_error_handler", "register_error_handlers"]
