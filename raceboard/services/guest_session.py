"""Typed view over the cookie-backed session bag."""

from __future__ import annotations

import random
import string
import uuid
from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional

from .race_timer import Idle, Paused, RaceState, Running

_GUEST_ALPHABET = string.ascii_lowercase + string.digits


def generate_guest_name(length: int = 5) -> str:
    """Random default display name such as ``Guest_k3x9q``."""
    return "Guest_" + "".join(random.choices(_GUEST_ALPHABET, k=length))


@dataclass
class GuestSession:
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    race: RaceState = field(default_factory=Idle)
    race_end_time: int = 0

    @property
    def has_identity(self) -> bool:
        return bool(self.user_id)

    @classmethod
    def load(cls, bag: MutableMapping[str, Any]) -> "GuestSession":
        race: RaceState = Idle()
        race_id = bag.get("raceId")
        if race_id:
            started_at = int(bag.get("raceStartTime") or 0)
            paused_total = int(bag.get("racePauseTimeTotal") or 0)
            paused_at = int(bag.get("racePauseTimeStart") or 0)
            if paused_at:
                race = Paused(race_id, started_at, paused_total, paused_at)
            else:
                race = Running(race_id, started_at, paused_total)
        return cls(
            user_id=bag.get("userId"),
            user_name=bag.get("userName"),
            race=race,
            race_end_time=int(bag.get("raceEndTime") or 0),
        )

    def save(self, bag: MutableMapping[str, Any]) -> None:
        """Write the fields back; idle races serialise as zeroed timings."""

        race = self.race
        bag["userId"] = self.user_id
        bag["userName"] = self.user_name
        bag["raceEndTime"] = self.race_end_time
        if isinstance(race, Idle):
            bag["raceId"] = None
            bag["raceStartTime"] = 0
            bag["racePauseTimeStart"] = 0
            bag["racePauseTimeTotal"] = 0
            return
        bag["raceId"] = race.race_id
        bag["raceStartTime"] = race.started_at
        bag["racePauseTimeTotal"] = race.paused_total
        bag["racePauseTimeStart"] = race.paused_at if isinstance(race, Paused) else 0


def create_identity(bag: MutableMapping[str, Any]) -> GuestSession:
    guest = GuestSession(user_id=str(uuid.uuid4()), user_name=generate_guest_name())
    guest.save(bag)
    return guest


__all__ = ["GuestSession", "create_identity", "generate_guest_name"]
