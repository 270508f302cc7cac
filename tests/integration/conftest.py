"""Fixtures for integration tests against a real PostgreSQL database.

Tables are created from the model metadata before each test and dropped
afterwards, so ``DB_NAME`` must point at a disposable test database.
Tests are skipped if PostgreSQL is not reachable.
"""

from typing import AsyncGenerator

import pytest
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import academic_records.models  # noqa: F401  registers every table on Base
from academic_records.utils.db import Base, get_db_url


@pytest.fixture
async def db_engine():
    """Create an engine on the configured database with a fresh schema.

    Skips if PostgreSQL is not available.
    """
    engine = create_async_engine(get_db_url(), poolclass=NullPool)

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, DBAPIError):
        await engine.dispose()
        pytest.skip("PostgreSQL not available")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Session configured like the application's request sessions."""
    factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with factory() as session:
        yield session
