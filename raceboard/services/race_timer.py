"""Race timing state machine.

A session's race is always in exactly one of three states::

    Idle --start--> Running --pause--> Paused --resume--> Running
                       |                  |
                       +--finish/abandon--+--> Idle

Transitions are pure functions taking the current state and the current time
in milliseconds. Starting is allowed from any state and discards whatever race
was in progress.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import AlreadyPaused, NotPaused, RaceNotFound


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Running:
    race_id: str
    started_at: int
    paused_total: int = 0


@dataclass(frozen=True)
class Paused:
    race_id: str
    started_at: int
    paused_total: int
    paused_at: int


RaceState = Union[Idle, Running, Paused]


@dataclass(frozen=True)
class FinishedRace:
    """Server measurement of a race compared with the client's report."""

    race_id: str
    ended_at: int
    server_time: int
    client_time: int
    tolerance: int

    @property
    def difference(self) -> int:
        return abs(self.server_time - self.client_time)

    @property
    def accepted(self) -> bool:
        return self.difference <= self.tolerance


def _active(state: RaceState, race_id: str) -> Union[Running, Paused]:
    if isinstance(state, Idle) or state.race_id != race_id:
        raise RaceNotFound()
    return state


def start_race(now: int, race_id: Optional[str] = None) -> Running:
    return Running(race_id=race_id or str(uuid.uuid4()), started_at=now)


def pause_race(state: RaceState, race_id: str, now: int) -> Paused:
    current = _active(state, race_id)
    if isinstance(current, Paused):
        raise AlreadyPaused()
    return Paused(
        race_id=current.race_id,
        started_at=current.started_at,
        paused_total=current.paused_total,
        paused_at=now,
    )


def resume_race(state: RaceState, race_id: str, now: int) -> Running:
    current = _active(state, race_id)
    if not isinstance(current, Paused):
        raise NotPaused()
    return Running(
        race_id=current.race_id,
        started_at=current.started_at,
        paused_total=current.paused_total + (now - current.paused_at),
    )


def finish_race(
    state: RaceState, race_id: str, client_time: int, now: int, tolerance: int
) -> FinishedRace:
    """Measure the active race against ``client_time``.

    Only completed pauses are deducted; a race finished while paused counts the
    open pause interval as race time.
    """

    current = _active(state, race_id)
    server_time = (now - current.started_at) - current.paused_total
    return FinishedRace(
        race_id=current.race_id,
        ended_at=now,
        server_time=server_time,
        client_time=client_time,
        tolerance=tolerance,
    )


def abandon_race(state: RaceState, race_id: str) -> Idle:
    _active(state, race_id)
    return Idle()


__all__ = [
    "FinishedRace",
    "Idle",
    "Paused",
    "RaceState",
    "Running",
    "abandon_race",
    "finish_race",
    "pause_race",
    "resume_race",
    "start_race",
]
