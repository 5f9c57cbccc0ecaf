"""
Core pytest configuration for the entire test suite.

Only the database setup and cross-cutting utilities live here. Domain fixtures
are in tests/test_fixtures/ and imported at the bottom of this module so every
test module can use them without imports:

- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/service_fixtures.py
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import logging
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before they are imported (keep this block first).
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

from catalog.config import get_settings
from catalog.core.logging.builder import setup_logging
from catalog.database.base import Base
from catalog.database.session import build_engine, build_session_maker, get_async_session
from catalog import models  # noqa: F401 - registers every model on Base.metadata

settings = get_settings()
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install the application's dictConfig logging for the whole session.

    pytest adds its capture handler to the root logger around every test phase,
    so `caplog` keeps working after dictConfig replaced the root handlers.
    """
    setup_logging(settings)
    yield


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------

IN_MEMORY_SQLITE = "sqlite+aiosqlite:///:memory:"


def safe_log_db_url(db_url: str) -> str:
    """
    Sanitized database URL for logging: scheme, host, port and database name only.
    """
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    `TEST_DATABASE_URL` (CI override, e.g. a throwaway Postgres) when set,
    otherwise a private in-memory SQLite database per test.
    """
    return os.getenv("TEST_DATABASE_URL") or IN_MEMORY_SQLITE


TEST_DATABASE_URL = get_test_database_url()
logger.info(f"Using test DB: {safe_log_db_url(TEST_DATABASE_URL)}")


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh engine and schema per test.

    Services commit, so SAVEPOINT tricks would have to fight the code under test;
    a new in-memory database is cheaper and fully isolated. StaticPool keeps the
    single in-memory connection alive for the whole test.
    """
    if TEST_DATABASE_URL == IN_MEMORY_SQLITE:
        engine = build_engine(
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = build_engine(TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
async def session_maker(async_engine: AsyncEngine):
    return build_session_maker(async_engine)


@pytest.fixture()
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    httpx client wired to the FastAPI app in-process.

    The app's session dependency is replaced by the test session, so API tests
    can arrange data with the same fixtures the service tests use. The lifespan
    does not run under ASGITransport, so no tables are created on the app's own
    engine.
    """
    from catalog.main import create_app

    app = create_app(settings, create_tables=False)

    async def _override_session():
        yield db_session

    app.dependency_overrides[get_async_session] = _override_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# Repository fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    product_repository,
    category_repository,
    cart_repository,
    user_repository,
    fake,
    create_category,
    electronics,
    create_product,
    multiple_products,
    create_user,
)

# Service fixtures
from .test_fixtures.service_fixtures import (  # noqa: E402,F401
    product_service,
    product_payload,
)
