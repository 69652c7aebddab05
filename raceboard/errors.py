"""Error kinds surfaced to API clients.

Every error carries the HTTP status it maps to and the ``message`` rendered in
the ``{"result": "fail", "message": ...}`` envelope. Extra keyword arguments
are merged into the response body.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


class RaceboardError(Exception):
    status_code = 500
    message = "server error. contact admin"

    def __init__(self, message: str | None = None, **payload: Any) -> None:
        if message is not None:
            self.message = message
        self.payload: Dict[str, Any] = payload
        super().__init__(self.message)


class Unauthorized(RaceboardError):
    status_code = 401
    message = "unauthorized"


class MissingParameter(RaceboardError):
    status_code = 400

    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        super().__init__(f"required parameter ({','.join(self.names)}) missing")


class InvalidParameter(RaceboardError):
    status_code = 400

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid parameter ({name})")


class RaceNotFound(RaceboardError):
    """The request's raceId is not the session's active race."""

    status_code = 404
    message = "raceId not found"


class AlreadyPaused(RaceboardError):
    status_code = 400
    message = "race already paused"


class NotPaused(RaceboardError):
    status_code = 400
    message = "race not paused"


class TimeMismatch(RaceboardError):
    status_code = 400
    message = "raceTime mismatch"

    def __init__(self, server_time: int, client_time: int, difference: int) -> None:
        super().__init__(
            serverTime=server_time, clientTime=client_time, difference=difference
        )


class ProfanityRejected(RaceboardError):
    status_code = 406
    message = "the provided name contains profanity"


class CounterNotFound(RaceboardError):
    status_code = 404
    message = "counter not found"


class InternalError(RaceboardError):
    """A leaderboard store operation failed."""


__all__ = [
    "AlreadyPaused",
    "CounterNotFound",
    "InternalError",
    "InvalidParameter",
    "MissingParameter",
    "NotPaused",
    "ProfanityRejected",
    "RaceNotFound",
    "RaceboardError",
    "TimeMismatch",
    "Unauthorized",
]
