"""Public leaderboard endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ...core import get_session
from ...services.leaderboard import LeaderboardParams, query_races

router = APIRouter(tags=["leaderboard"])


@router.get("/race")
def get_leaderboard(request: Request, session: Session = Depends(get_session)) -> Dict[str, Any]:
    """List finished races filtered by mode, sorted and paginated.

    The resolved parameters are echoed back so clients can see which defaults
    and fallbacks were applied.
    """

    params = LeaderboardParams.from_query(request.query_params)
    races = query_races(session, params)
    return {
        "result": "ok",
        "params": params.to_dict(),
        "results": [race.to_dict() for race in races],
    }


__all__ = ["router"]
