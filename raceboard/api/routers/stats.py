"""HTML completion statistics page."""

from __future__ import annotations

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlmodel import Session

from ...core import get_session
from ...errors import InternalError
from ...services.counters import list_counters
from ...services.guest_session import GuestSession
from ..deps import get_guest

router = APIRouter(tags=["stats"])

_PAGE = (
    "<html><head><title>{title}</title></head>"
    "<body>{body}</body></html>"
)


def _message_page(title: str, text: str, status_code: int) -> HTMLResponse:
    body = f"<center><h1>{title}</h1><p>{text}</p></center>"
    return HTMLResponse(_PAGE.format(title=title, body=body), status_code=status_code)


@router.get("/stats", response_class=HTMLResponse)
def stats_page(
    guest: GuestSession = Depends(get_guest),
    session: Session = Depends(get_session),
) -> HTMLResponse:
    if not guest.has_identity:
        return _message_page(
            "Unauthorized", "You do not have the rights to see this content.", 401
        )

    try:
        counters = list_counters(session)
    except InternalError:
        return _message_page(
            "Not Found",
            "The content you are looking for can not be found at the location you specified.",
            404,
        )

    rows = "".join(
        f"<p>{escape(counter.mode)}: {counter.count}</p>" for counter in counters
    )
    return HTMLResponse(
        _PAGE.format(
            title="Stats | Escape the Machine",
            body=f"<h1>Completion Counters</h1>{rows}",
        )
    )


__all__ = ["router"]
