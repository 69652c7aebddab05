"""Guest session endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...services.guest_session import GuestSession, create_identity
from ..deps import get_guest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


@router.get("/session")
def read_session(guest: GuestSession = Depends(get_guest)) -> JSONResponse:
    """Report whether the cookie carries a live guest identity."""

    if guest.has_identity:
        return JSONResponse(
            {"result": "ok", "message": "session exists", "userName": guest.user_name}
        )
    return JSONResponse(
        {"result": "fail", "message": "session not found"}, status_code=404
    )


@router.post("/session")
def create_session(request: Request) -> JSONResponse:
    """Mint a guest identity unless one exists already."""

    if GuestSession.load(request.session).has_identity:
        return JSONResponse({"result": "ok", "message": "session exists"})

    guest = create_identity(request.session)
    logger.info("session created for %s (%s)", guest.user_id, guest.user_name)
    return JSONResponse({"result": "ok", "message": "session created"})


@router.delete("/session")
def destroy_session(request: Request) -> JSONResponse:
    user_id = request.session.get("userId")
    request.session.clear()
    logger.info("session destroyed for %s", user_id)
    return JSONResponse({"result": "ok", "message": "session destroyed"})


__all__ = ["router"]
