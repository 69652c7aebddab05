"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    API_PREFIX,
    APP_ENV,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    HOST,
    IS_PRODUCTION,
    LOG_LEVEL,
    PORT,
    PUBLIC_DIRECTORY,
    RACE_TIME_TOLERANCE_MS,
    SESSION_MAX_AGE,
    SESSION_NAME,
    SESSION_SECRET,
)
from .database import build_engine, get_session
from .logs import AccessLogMiddleware, configure_logging
from .time import Clock, now_ms, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_PREFIX",
    "APP_ENV",
    "AccessLogMiddleware",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "Clock",
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
    "build_engine",
    "configure_logging",
    "get_session",
    "now_ms",
    "utcnow",
]
