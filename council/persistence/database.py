"""Database connection and session management.

Provides the async engine and session factory. SQLite (via aiosqlite) is the
default backend; PostgreSQL (via asyncpg) is used in production.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from council.config import Settings
from council.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    database = settings.database
    if database.is_sqlite:
        return create_async_engine(database.url, echo=settings.debug)

    return create_async_engine(
        database.url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
