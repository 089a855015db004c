"""SQLAlchemy database engine and session configuration.

The engine (and its connection pool) is owned by a ``Database`` instance that
the application lifespan creates once and stores on ``app.state``; nothing
here is a module-level global.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from records_api.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


class Database:
    """Pooled connection set to the record store."""

    def __init__(self, url: str, *, pool_size: int = 10, echo: bool = False):
        async_url = _get_async_url(url)
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if not async_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = pool_size
        self.engine: AsyncEngine = create_async_engine(async_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self) -> None:
        """Verify connectivity and create the schema if it is missing."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to %s", self.engine.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session and release its connection on every exit path.

        Callers commit their own work; anything left uncommitted when the
        block exits is rolled back by ``close()``.
        """
        async with self.session_factory() as session:
            yield session


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
