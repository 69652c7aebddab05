"""Shared request dependencies and body validation."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fastapi import Body, Depends, Request

from ..core.time import Clock
from ..errors import MissingParameter, Unauthorized
from ..services.guest_session import GuestSession
from ..services.profanity import ProfanityCheck


def get_guest(request: Request) -> GuestSession:
    return GuestSession.load(request.session)


def require_guest(guest: GuestSession = Depends(get_guest)) -> GuestSession:
    """Reject the request with 401 unless the session carries an identity."""

    if not guest.has_identity:
        raise Unauthorized()
    return guest


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_profanity_check(request: Request) -> ProfanityCheck:
    return request.app.state.profanity_check


def json_body(body: Optional[Dict[str, Any]] = Body(None)) -> Dict[str, Any]:
    return body or {}


def require_params(body: Mapping[str, Any], *names: str) -> None:
    """Raise ``MissingParameter`` naming every absent or empty field."""

    missing = [name for name in names if not body.get(name)]
    if missing:
        raise MissingParameter(missing)


__all__ = [
    "get_clock",
    "get_guest",
    "get_profanity_check",
    "json_body",
    "require_guest",
    "require_params",
]
