"""Race lifecycle endpoints: start, pause, resume, finish and abandon."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ...core import get_session
from ...core.time import Clock
from ...errors import InvalidParameter, TimeMismatch
from ...services import race_timer
from ...services.guest_session import GuestSession
from ...services.leaderboard import INT64_MAX, INT64_MIN, parse_int, record_race
from ..deps import get_clock, json_body, require_guest, require_params

logger = logging.getLogger(__name__)

router = APIRouter(tags=["race"])


def _client_time(raw: Any) -> int:
    """Coerce the reported race time to whole milliseconds."""

    value = None
    if isinstance(raw, bool):
        pass
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and math.isfinite(raw):
        value = int(raw)
    elif isinstance(raw, str):
        value = parse_int(raw, None)
    if value is None or not INT64_MIN <= value <= INT64_MAX:
        raise InvalidParameter("raceTime")
    return value


def _race_mode(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidParameter("raceMode")
    return raw


@router.post("/race")
def start(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    """Begin a new race, abandoning any race still in progress."""

    if not isinstance(guest.race, race_timer.Idle):
        logger.info(
            "user %s abandoned race %s by starting another",
            guest.user_id,
            guest.race.race_id,
        )
    guest.race = race_timer.start_race(clock())
    guest.race_end_time = 0
    guest.save(request.session)
    logger.info("user %s started race %s", guest.user_id, guest.race.race_id)
    return {"result": "ok", "message": "race started", "raceId": guest.race.race_id}


@router.post("/pause")
def pause(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    body: Dict[str, Any] = Depends(json_body),
    clock: Clock = Depends(get_clock),
) -> Dict[str, str]:
    require_params(body, "raceId")
    guest.race = race_timer.pause_race(guest.race, body["raceId"], clock())
    guest.save(request.session)
    logger.info("user %s paused race %s", guest.user_id, body["raceId"])
    return {"result": "ok", "message": "race paused"}


@router.patch("/pause")
def resume(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    body: Dict[str, Any] = Depends(json_body),
    clock: Clock = Depends(get_clock),
) -> Dict[str, str]:
    require_params(body, "raceId")
    guest.race = race_timer.resume_race(guest.race, body["raceId"], clock())
    guest.save(request.session)
    logger.info("user %s resumed race %s", guest.user_id, body["raceId"])
    return {"result": "ok", "message": "race unpaused"}


@router.patch("/race")
def finish(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    body: Dict[str, Any] = Depends(json_body),
    clock: Clock = Depends(get_clock),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Finish the active race and submit it to the leaderboard.

    The race is consumed whether or not the reported time is accepted, and
    also when the leaderboard write fails.
    """

    require_params(body, "raceId", "raceTime", "raceMode")
    client_time = _client_time(body["raceTime"])
    race_mode = _race_mode(body["raceMode"])
    tolerance = request.app.state.race_time_tolerance_ms

    result = race_timer.finish_race(
        guest.race, body["raceId"], client_time, clock(), tolerance
    )

    guest.race = race_timer.Idle()
    guest.race_end_time = result.ended_at
    guest.save(request.session)

    if not result.accepted:
        logger.info(
            "user %s race %s rejected: server=%sms client=%sms",
            guest.user_id,
            result.race_id,
            result.server_time,
            result.client_time,
        )
        raise TimeMismatch(result.server_time, result.client_time, result.difference)

    record = record_race(
        session, name=guest.user_name or "", mode=race_mode, time=client_time
    )
    logger.info(
        "user %s finished race %s in %sms (mode=%s)",
        guest.user_id,
        result.race_id,
        client_time,
        record.mode,
    )
    return {"result": "ok", "message": "race updated", "race": record.to_dict()}


@router.delete("/race")
def abandon(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    body: Dict[str, Any] = Depends(json_body),
) -> Dict[str, str]:
    require_params(body, "raceId")
    guest.race = race_timer.abandon_race(guest.race, body["raceId"])
    guest.race_end_time = 0
    guest.save(request.session)
    logger.info("user %s abandoned race %s", guest.user_id, body["raceId"])
    return {"result": "ok", "message": "race interrupted"}


__all__ = ["router"]
