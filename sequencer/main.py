"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from sqlalchemy import make_url

from sequencer.api import health, sequence
from sequencer.config import Settings, get_settings
from sequencer.db import create_engine, create_session_maker
from sequencer.logging import setup_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the application around one settings instance.

    The engine is created at startup and disposed at shutdown; request handlers
    reach it through the session maker on ``app.state``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        url = make_url(settings.database_url)
        logger.info("Starting Element Sequencer API", debug=settings.debug, database=url.host or url.database)
        engine = create_engine(settings)
        app.state.session_maker = create_session_maker(engine)

        yield

        logger.info("Shutting down Element Sequencer API")
        await engine.dispose()
        logger.info("Database connections disposed")

    app = FastAPI(
        title="Element Sequencer API",
        description="Ordering and version stamps for typed elements",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health.router, tags=["health"])
    app.include_router(sequence.router)

    return app


def build_app() -> FastAPI:
    """Application factory for uvicorn (``--factory``)."""
    settings = get_settings()
    setup_logging(settings)
    return create_app(settings)
