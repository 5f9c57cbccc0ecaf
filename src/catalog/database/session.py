"""
Async engine, session factory and schema bootstrap.

The engine is created from `Settings.DATABASE_URL`. Sessions are handed out per
request through `get_async_session()`; services commit, repositories only flush.
"""
import logging
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from catalog.config import get_settings
from .base import Base

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    SQLite ignores FOREIGN KEY clauses unless the pragma is switched on per connection.
    No-op for other backends.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    engine = create_async_engine(url, echo=echo, future=True, pool_pre_ping=True, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: services return entities after commit, and lazy
    # reloads are not available on AsyncSession.
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


settings = get_settings()

engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.SQLALCHEMY_ECHO)

AsyncSessionMaker = build_session_maker(engine)


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Importing the package registers every model on Base.metadata.
    from catalog import models  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("db.init_models.done", extra={"dialect": target.dialect.name})


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with AsyncSessionMaker() as session:
        yield session
