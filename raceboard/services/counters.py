"""Per-mode completion counters."""

from __future__ import annotations

import logging
from typing import List

from sqlmodel import Session, select

from ..errors import CounterNotFound
from ..models import Counter
from .store import store_operation

logger = logging.getLogger(__name__)


def list_counters(session: Session) -> List[Counter]:
    with store_operation(session, "list counters"):
        return list(session.exec(select(Counter).order_by(Counter.mode)).all())


def get_counter(session: Session, mode: str) -> Counter:
    with store_operation(session, f"read counter {mode!r}"):
        counter = session.get(Counter, mode)
    if counter is None:
        raise CounterNotFound()
    return counter


def increment_counter(session: Session, mode: str) -> Counter:
    """Add one to the counter for ``mode`` and return the updated row.

    The increment is issued as ``count = count + 1`` so concurrent requests
    never lose an update.
    """

    with store_operation(session, f"increment counter {mode!r}"):
        counter = session.get(Counter, mode)
        if counter is None:
            raise CounterNotFound()
        counter.count = Counter.count + 1
        session.add(counter)
        session.commit()
        session.refresh(counter)
    logger.info("counter %s incremented to %s", mode, counter.count)
    return counter


__all__ = ["get_counter", "increment_counter", "list_counters"]
