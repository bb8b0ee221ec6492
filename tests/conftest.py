"""
Hotel API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── db_schema: creates the Hotels table in a throwaway SQLite file, drops it after
    ├── db_session: AsyncSession bound to that schema (repository tests)
    ├── test_client: HTTPX AsyncClient talking to the FastAPI app in-process
    ├── mock_repository: AsyncMock honoring the HotelRepository interface
    └── log_records: captures hotel_api log records with their correlation ids
"""

import os
import tempfile

# Override settings BEFORE any hotel_api import builds the engine
_TEST_DIR = tempfile.mkdtemp(prefix="hotel_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("LOG_FILE", None)

import logging
from typing import AsyncGenerator, List
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hotel_api.database import Base, async_session_factory, engine
from hotel_api.logging_config import CorrelationIdFilter
from hotel_api.main import app
from hotel_api.repositories.base import HotelRepository
import hotel_api.models  # noqa: F401


@pytest_asyncio.fixture
async def db_schema() -> AsyncGenerator[None, None]:
    """Fresh Hotels table per test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_schema):
    """
    Provides a real AsyncSession on the test schema.

    Usage:
        async def test_create(db_session):
            repo = SQLAlchemyHotelRepository(db_session)
    """
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(db_schema):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app; the lifespan
    does not run, so logging keeps pytest's configuration.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_repository():
    """A HotelRepository double; every method is an AsyncMock."""
    return AsyncMock(spec=HotelRepository)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def log_records():
    """
    Collects every record logged under `hotel_api` at INFO and above.

    Records pass through CorrelationIdFilter, so each carries the
    correlation_id that was active when it was logged.
    """
    handler = _ListHandler()
    handler.addFilter(CorrelationIdFilter())
    app_logger = logging.getLogger("hotel_api")
    previous_level = app_logger.level
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.INFO)
    yield handler.records
    app_logger.removeHandler(handler)
    app_logger.setLevel(previous_level)
