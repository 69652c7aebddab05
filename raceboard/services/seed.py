"""First-boot seeding of the leaderboard store."""

from __future__ import annotations

import logging

from sqlmodel import Session, select

from ..models import Counter, RaceRecord

logger = logging.getLogger(__name__)

COUNTER_MODES = ("normal-main", "encore-main", "normal-survival", "encore-survival")

BASELINE_MODES = ("normal", "encore")
BASELINE_NAME = "MACHINE"
BASELINE_TIME_MS = 5999999
BASELINE_ROWS_PER_MODE = 10


def seed_database(session: Session) -> bool:
    """Insert counters and baseline races unless the store was seeded before.

    Returns ``True`` when rows were written.
    """

    if session.exec(select(Counter)).first() is not None:
        return False

    for mode in COUNTER_MODES:
        session.add(Counter(mode=mode, count=0))
    for _ in range(BASELINE_ROWS_PER_MODE):
        for mode in BASELINE_MODES:
            session.add(RaceRecord(name=BASELINE_NAME, mode=mode, time=BASELINE_TIME_MS))
    session.commit()

    logger.info(
        "seeded %d counters and %d baseline races",
        len(COUNTER_MODES),
        BASELINE_ROWS_PER_MODE * len(BASELINE_MODES),
    )
    return True


__all__ = [
    "BASELINE_MODES",
    "BASELINE_NAME",
    "BASELINE_ROWS_PER_MODE",
    "BASELINE_TIME_MS",
    "COUNTER_MODES",
    "seed_database",
]
