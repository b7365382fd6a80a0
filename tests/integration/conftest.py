"""Fixtures for SQLite-backed integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from interview.config import DatabaseConfig
from interview.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from interview.infrastructure.persistence.tables import metadata


@pytest_asyncio.fixture
async def sqlite_engine():
    """Per-test in-memory database with the schema created."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine: AsyncEngine):
    factory = create_session_factory(sqlite_engine)
    async with factory() as session:
        yield session
        await session.rollback()
