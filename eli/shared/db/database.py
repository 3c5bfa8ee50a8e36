"""Async engine and session handling for the ELI Postgres database."""

import os
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import NullPool
from dotenv import load_dotenv

load_dotenv()


def normalize_database_url(url: str) -> str:
    """Convert postgres:// and postgresql:// to postgresql+asyncpg:// for the async driver."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


# Empty means no database: reads return empty results, writes fail
DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL", ""))

# Created on first use so the app can boot without a database
_engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def is_database_configured() -> bool:
    """Whether a database URL was provided."""
    return bool(DATABASE_URL)


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it on first call."""
    global _engine
    if _engine is None:
        if not is_database_configured():
            raise RuntimeError("DATABASE_URL is not configured")
        _engine = create_async_engine(
            DATABASE_URL,
            echo=os.getenv("SQL_ECHO", "false").lower() == "true",
            poolclass=NullPool,  # Managed Postgres does its own pooling
            future=True,
        )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the shared session factory bound to the engine."""
    global AsyncSessionLocal
    if AsyncSessionLocal is None:
        engine = get_engine()
        AsyncSessionLocal = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )
    return AsyncSessionLocal


async def init_db() -> bool:
    """
    Initialize database engine and session factory.

    Returns:
        False when no database is configured
    """
    if not is_database_configured():
        return False
    get_engine()
    get_session_factory()
    return True


async def close_db() -> None:
    """Dispose of the engine and forget the session factory."""
    global _engine, AsyncSessionLocal
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        AsyncSessionLocal = None


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session that commits on success and rolls back on error.

    Usage:
        async with get_db() as db:
            result = await db.execute(select(Camera))
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db_session() -> AsyncGenerator[Optional[AsyncSession], None]:
    """
    Request-scoped session dependency.

    Yields None when the database is not configured.

    Usage:
        @app.get("/cameras")
        async def list_cameras(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    if not is_database_configured():
        yield None
        return
    async with get_db() as session:
        yield session
