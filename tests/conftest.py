"""Shared pytest fixtures."""

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel, select

from sequencer.config import Settings
from sequencer.db import create_engine, create_session_maker, get_session_maker
from sequencer.main import create_app
from sequencer.models import SequenceElement
from sequencer.services.sequence.sequence_service import SequenceService

FetchElements = Callable[[], Awaitable[list[SequenceElement]]]


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    """Settings pointing at a throwaway sqlite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'sequencer.db'}")
    return Settings(_env_file=None)


@pytest.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(engine)


@pytest.fixture
def service(session_maker: async_sessionmaker[AsyncSession]) -> SequenceService:
    return SequenceService(session_maker)


@pytest.fixture
def app(settings: Settings, session_maker: async_sessionmaker[AsyncSession]) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_session_maker] = lambda: session_maker
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def fetch_elements(session_maker: async_sessionmaker[AsyncSession]) -> FetchElements:
    """Read every stored element straight from the database."""

    async def fetch() -> list[SequenceElement]:
        async with session_maker() as session:
            result = await session.execute(select(SequenceElement))
            return list(result.scalars().all())

    return fetch
