"""Guest-session race timing and leaderboard API."""

__version__ = "1.0.0"
