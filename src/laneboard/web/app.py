"""FastAPI app factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .config import LOG_FORMAT, WebConfig

logger = logging.getLogger(__name__)

_DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def create_app(config: WebConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or WebConfig.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """App lifespan: configure logging, open and close the database."""
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

        from .db.database import close_db, init_db

        await init_db(config.db_path)
        yield
        await close_db()

    app = FastAPI(
        title="laneboard",
        description="Kanban board with drag-and-drop card ordering",
        version=__version__,
        debug=config.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins or _DEFAULT_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from .boards.router import router as boards_router
    from .cards.router import router as cards_router

    app.include_router(boards_router)
    app.include_router(cards_router)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app
