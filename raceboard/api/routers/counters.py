"""Completion counter endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services.counters import get_counter, increment_counter, list_counters
from ...services.guest_session import GuestSession
from ..deps import require_guest

router = APIRouter(tags=["counters"])


@router.get("/counters")
def read_counters(
    guest: GuestSession = Depends(require_guest),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    counters = list_counters(session)
    return {
        "result": "ok",
        "results": [{"mode": c.mode, "count": c.count} for c in counters],
    }


@router.get("/counters/{mode}")
def read_counter(
    mode: str,
    guest: GuestSession = Depends(require_guest),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    counter = get_counter(session, mode)
    return {"result": "ok", "params": {"mode": mode}, "count": counter.count}


@router.post("/counters/{mode}")
def bump_counter(
    mode: str,
    guest: GuestSession = Depends(require_guest),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Record one more completion of ``mode``."""

    counter = increment_counter(session, mode)
    return {"result": "ok", "params": {"mode": mode}, "count": counter.count}


__all__ = ["router"]
