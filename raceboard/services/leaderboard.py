"""Leaderboard query parameters and lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from sqlmodel import Session, select

from ..models import RaceRecord
from .store import store_operation

# Only these names may select the ordering column.
SORTABLE_COLUMNS = {
    "id": RaceRecord.id,
    "mode": RaceRecord.mode,
    "time": RaceRecord.time,
    "created_at": RaceRecord.created_at,
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# SQLite binds integers as signed 64-bit values.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    """Parse the leading integer of ``raw`` (``"12abc"`` -> 12).

    Values without a leading integer keep ``default``; values outside the
    signed 64-bit range are clamped to it.
    """

    if not raw:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return min(INT64_MAX, max(INT64_MIN, int(match.group(1))))


@dataclass
class LeaderboardParams:
    sort: str = "ASC"
    mode: str = ""
    offset: int = 0
    limit: int = 10
    sort_by: str = "id"

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "LeaderboardParams":
        params = cls()

        sort = (query.get("sort") or "").lower()
        if sort == "asc":
            params.sort = "ASC"
        elif sort == "desc":
            params.sort = "DESC"

        if query.get("mode"):
            params.mode = query["mode"]

        params.offset = max(0, parse_int(query.get("offset"), params.offset))
        params.limit = parse_int(query.get("limit"), params.limit)

        if query.get("sortBy") in SORTABLE_COLUMNS:
            params.sort_by = query["sortBy"]

        return params

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sort": self.sort,
            "mode": self.mode,
            "offset": self.offset,
            "limit": self.limit,
            "sortBy": self.sort_by,
        }


def query_races(session: Session, params: LeaderboardParams) -> List[RaceRecord]:
    """Races of ``params.mode`` ordered and paginated per ``params``.

    A negative limit means no upper bound. Ties on the ordering column are
    broken by id so pages stay stable.
    """

    column = SORTABLE_COLUMNS[params.sort_by]
    order = column.desc() if params.sort == "DESC" else column.asc()

    statement = select(RaceRecord).where(RaceRecord.mode == params.mode).order_by(order)
    if params.sort_by != "id":
        statement = statement.order_by(RaceRecord.id.asc())
    statement = statement.offset(params.offset)
    if params.limit >= 0:
        statement = statement.limit(params.limit)

    with store_operation(session, "query races"):
        return list(session.exec(statement).all())


def record_race(session: Session, *, name: str, mode: str, time: int) -> RaceRecord:
    record = RaceRecord(name=name, mode=mode, time=time)
    with store_operation(session, "insert race"):
        session.add(record)
        session.commit()
        session.refresh(record)
    return record


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "LeaderboardParams",
    "SORTABLE_COLUMNS",
    "parse_int",
    "query_races",
    "record_race",
]
