"""
Async database engine and session factory.

Supports:
- Dev: SQLite with aiosqlite
- Prod: PostgreSQL with asyncpg

The engine is built per application in the lifespan and kept on
``app.state``; request handlers receive sessions through ``get_session``.
"""
from collections.abc import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ratguide.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async engine based on environment."""
    if settings.is_dev:
        # SQLite needs check_same_thread=False for async
        return create_async_engine(
            settings.async_db_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Production: PostgreSQL with connection pooling
    return create_async_engine(
        settings.async_db_url,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session for dependency injection."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
