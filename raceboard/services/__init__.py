"""Service layer helpers."""

from .counters import get_counter, increment_counter, list_counters
from .guest_session import GuestSession, create_identity, generate_guest_name
from .leaderboard import LeaderboardParams, query_races, record_race
from .profanity import ProfanityCheck, default_profanity_check
from .seed import seed_database

__all__ = [
    "GuestSession",
    "LeaderboardParams",
    "ProfanityCheck",
    "create_identity",
    "default_profanity_check",
    "generate_guest_name",
    "get_counter",
    "increment_counter",
    "list_counters",
    "query_races",
    "record_race",
    "seed_database",
]
