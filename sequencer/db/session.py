"""Database engine and session configuration."""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

import sequencer.models  # noqa: F401  # register tables on SQLModel.metadata
from sequencer.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine for the configured database."""
    return create_async_engine(
        settings.database_url,
        echo=False,  # SQL logging controlled via structlog configuration
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=300,  # Recycle connections after 5 minutes
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def get_session_maker(request: Request) -> async_sessionmaker[AsyncSession]:
    """Dependency that provides the session maker created at application startup."""
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    return session_maker
