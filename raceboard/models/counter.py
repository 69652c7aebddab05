"""Database model for per-mode completion counters."""

from __future__ import annotations

from sqlmodel import Field as ORMField, SQLModel


class Counter(SQLModel, table=True):
    """Completion tally for one game mode."""

    __tablename__ = "counters"

    mode: str = ORMField(primary_key=True)
    count: int = ORMField(default=0)


__all__ = ["Counter"]
