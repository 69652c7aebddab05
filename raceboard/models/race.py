"""Database model for finished races."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class RaceRecord(SQLModel, table=True):
    """A finished race accepted onto the leaderboard."""

    __tablename__ = "races"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    mode: str = ORMField(index=True)
    time: int
    created_at: datetime = ORMField(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "mode": self.mode,
            "time": self.time,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


__all__ = ["RaceRecord"]
