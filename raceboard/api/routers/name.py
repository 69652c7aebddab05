"""Display name endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from ...errors import InvalidParameter, MissingParameter, ProfanityRejected
from ...services.guest_session import GuestSession
from ...services.profanity import ProfanityCheck
from ..deps import get_profanity_check, json_body, require_guest, require_params

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


def _normalize_user_name(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidParameter("userName")
    normalized = raw.strip()
    if not normalized:
        raise MissingParameter(["userName"])
    return normalized


@router.post("/name")
def set_name(
    request: Request,
    guest: GuestSession = Depends(require_guest),
    body: Dict[str, Any] = Depends(json_body),
    is_profane: ProfanityCheck = Depends(get_profanity_check),
) -> Dict[str, str]:
    """Replace the guest's display name."""

    require_params(body, "userName")
    name = _normalize_user_name(body["userName"])
    if is_profane(name):
        raise ProfanityRejected()

    previous = guest.user_name
    guest.user_name = name
    guest.save(request.session)
    logger.info("user %s renamed %r -> %r", guest.user_id, previous, name)
    return {"result": "ok", "message": "name is set"}


__all__ = ["router"]
