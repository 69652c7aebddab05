"""Database model exports."""

from .counter import Counter
from .race import RaceRecord

__all__ = [
    "Counter",
    "RaceRecord",
]
