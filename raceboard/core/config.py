"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Runtime environment --------------------------------------------------------
APP_ENV = os.getenv("APP_ENV", "development").strip().lower()
IS_PRODUCTION = APP_ENV == "production"

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Sessions -------------------------------------------------------------------
SESSION_NAME = os.getenv("SESSION_NAME", "sessionid")
SESSION_SECRET = os.getenv("SESSION_SECRET", "totally-a-secret")
SESSION_MAX_AGE = _env_int("SESSION_MAX_AGE", 24 * 60 * 60)

COOKIE_SECURE = _env_bool("COOKIE_SECURE", IS_PRODUCTION)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "strict")


# CORS -----------------------------------------------------------------------
_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


# Storage and serving --------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{_PROJECT_ROOT / 'data' / 'races.db'}"
)
DB_RESET = _env_bool("DB_RESET", False)

PUBLIC_DIRECTORY = Path(os.getenv("PUBLIC_DIRECTORY", "public"))
API_PREFIX = os.getenv("API_PREFIX", "/api").rstrip("/")


# Race rules -----------------------------------------------------------------
RACE_TIME_TOLERANCE_MS = _env_int("RACE_TIME_TOLERANCE_MS", 1000)


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_PREFIX",
    "APP_ENV",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "IS_PRODUCTION",
    "LOG_LEVEL",
    "PORT",
    "PUBLIC_DIRECTORY",
    "RACE_TIME_TOLERANCE_MS",
    "SESSION_MAX_AGE",
    "SESSION_NAME",
    "SESSION_SECRET",
]
