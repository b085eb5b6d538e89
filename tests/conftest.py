"""Pytest configuration and fixtures for entity-relations.

Integration fixtures run the SQLAlchemy repository against an in-memory
SQLite database (aiosqlite, single shared connection). Tests seed the rows
they need through db_session and commit before resolving.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import app.infrastructure.persistence.models  # noqa: F401  (register tables)
from app.application.use_cases.entity_relations import EntityRelationsService
from app.core.composition import build_entity_relations_service
from app.core.config import Settings, get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.database import Base


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with library defaults, independent of any local .env."""
    return Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory SQLite schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Session on the SQLite engine. Seed with add_all() then commit()."""
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def service(db_session: AsyncSession, test_settings: Settings) -> EntityRelationsService:
    """Resolver wired exactly as in production, bound to db_session."""
    return build_entity_relations_service(db_session, test_settings)


@pytest.fixture
async def pg_session() -> AsyncIterator[AsyncSession]:
    """PostgreSQL session for tests marked requires_db. Rolls back after test.

    Skips (pytest.skip) when DATABASE_URL is not a PostgreSQL URL. Run
    without a database via: pytest -m 'not requires_db'.
    """
    if "postgresql" not in get_settings().database_url:
        pytest.skip("Postgres not configured: set DATABASE_URL=postgresql+asyncpg://...")
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured")
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
