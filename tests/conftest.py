"""Pytest configuration and fixtures for the search core.

Database fixtures run compiled statements on an in-memory SQLite database
through aiosqlite, so no Postgres is needed. All imports use app.*.
"""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.tenant_context import set_tenant_id
from app.infrastructure.persistence import models  # noqa: F401
from app.infrastructure.persistence.database import Base
from app.infrastructure.search.factory import build_query_service
from app.shared.context import clear_current_user


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit search values (no .env)."""
    return Settings(
        _env_file=None,
        search_provider="postgres",
        search_query_max_length=256,
        search_max_results=500,
    )


@pytest.fixture
def query_service(settings: Settings):
    """QueryService wired with the trigram provider and default registry."""
    return build_query_service(settings)


@pytest.fixture(autouse=True)
def _reset_request_context():
    """Request-scoped context vars start empty in every test."""
    set_tenant_id(None)
    clear_current_user()
    yield
    set_tenant_id(None)
    clear_current_user()


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite engine with all search tables created."""
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Session bound to the in-memory database."""
    factory = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with factory() as session:
        yield session
