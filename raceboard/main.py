"""ASGI entry point: ``uvicorn raceboard.main:app``."""

from __future__ import annotations

import uvicorn

from .app import create_app
from .core import HOST, IS_PRODUCTION, LOG_LEVEL, PORT

app = create_app()


def main() -> None:
    uvicorn.run(
        "raceboard.main:app",
        host=HOST,
        port=PORT,
        reload=not IS_PRODUCTION,
        proxy_headers=IS_PRODUCTION,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
