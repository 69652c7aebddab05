"""Guarding leaderboard store calls."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..errors import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(session: Session, action: str) -> Iterator[Session]:
    """Roll back and raise ``InternalError`` if the wrapped store call fails."""

    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("store operation failed: %s", action)
        raise InternalError() from exc


__all__ = ["store_operation"]
