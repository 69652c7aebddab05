"""Clock helpers."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], int]


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Milliseconds since the epoch, the unit race timing is kept in."""
    return int(time.time() * 1000)


__all__ = ["Clock", "now_ms", "utcnow"]
