"""Database configuration and session management.

Provides async SQLAlchemy engine and session factories. Reads and writes
get separate session dependencies: a read session never commits, a write
session is scoped to a single mutating operation.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine.interfaces import DBAPIConnection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from catalog_api.infrastructure.config import settings

# Base class for models
Base = declarative_base()


def _set_sqlite_pragma(dbapi_connection: DBAPIConnection, connection_record: Any) -> None:
    """Turn on foreign key enforcement for a new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for the given URL.

    SQLite engines get foreign key enforcement switched on for every
    connection so category references are checked by the store.

    Args:
        database_url: SQLAlchemy database URL with an async driver.
        **kwargs: Extra keyword arguments for ``create_async_engine``.

    Returns:
        Configured async engine.
    """
    if not database_url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)

    async_engine = create_async_engine(database_url, echo=settings.debug, **kwargs)

    if async_engine.dialect.name == "sqlite":
        event.listen(async_engine.sync_engine, "connect", _set_sqlite_pragma)

    return async_engine


def build_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# Create async engine
engine = build_engine(settings.database_url)

# Session factory
async_session_factory = build_session_factory(engine)


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for read-only operations.

    The session is never committed; any transaction it opened is rolled
    back when the request finishes.

    Yields:
        AsyncSession for queries.
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for a single mutating operation.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(async_engine: AsyncEngine | None = None) -> None:
    """Create database tables if they don't exist."""
    # Register models on Base.metadata
    import catalog_api.catalog.models  # noqa: F401

    async with (async_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session: AsyncSession) -> None:
    """Run a trivial query to verify database connectivity."""
    await session.execute(text("SELECT 1"))
