"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_error_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    API_PREFIX,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DB_RESET,
    PUBLIC_DIRECTORY,
    RACE_TIME_TOLERANCE_MS,
    SESSION_MAX_AGE,
    SESSION_NAME,
    SESSION_SECRET,
    AccessLogMiddleware,
    Clock,
    build_engine,
    configure_logging,
    now_ms,
)
from .services.profanity import ProfanityCheck, default_profanity_check
from .services.seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    if app.state.db_reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    if app.state.seed:
        with Session(engine) as session:
            seed_database(session)
    yield


def create_app(
    *,
    engine: Optional[Engine] = None,
    profanity_check: Optional[ProfanityCheck] = None,
    clock: Clock = now_ms,
    api_prefix: str = API_PREFIX,
    public_directory: Optional[Path] = PUBLIC_DIRECTORY,
    session_secret: str = SESSION_SECRET,
    race_time_tolerance_ms: int = RACE_TIME_TOLERANCE_MS,
    seed: bool = True,
    db_reset: bool = DB_RESET,
) -> FastAPI:
    """Build the application around its store handles.

    The engine, profanity predicate and clock are attached to ``app.state``
    and reached through request dependencies.
    """

    configure_logging()

    app = FastAPI(title="Raceboard API", version="1.0.0", lifespan=lifespan)
    app.state.engine = engine if engine is not None else build_engine()
    app.state.profanity_check = profanity_check or default_profanity_check()
    app.state.clock = clock
    app.state.race_time_tolerance_ms = race_time_tolerance_ms
    app.state.seed = seed
    app.state.db_reset = db_reset

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret,
        session_cookie=SESSION_NAME,
        max_age=SESSION_MAX_AGE,
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
    )
    app.add_middleware(AccessLogMiddleware)

    register_error_handlers(app)
    register_routes(app, api_prefix=api_prefix)

    if public_directory is not None and public_directory.is_dir():
        app.mount("/", StaticFiles(directory=public_directory, html=True), name="public")
        logger.info("serving static files from %s", public_directory)

    return app


__all__ = ["create_app", "lifespan"]
