"""
Resource API - Database Handle
===============================

What:  Async SQLAlchemy engine and session factory wrapped in one explicit
       handle object, plus the FastAPI dependency that hands out sessions.
How:   `Database` is constructed once by the application lifespan (or by a
       test fixture), stored on `app.state.database`, and disposed at
       shutdown. Nothing here runs at import time.
Who:   main.py owns the lifecycle; routes receive sessions through
       `get_db_session`; Alembic and tests use `create_all`/`engine`.

Connection Pooling (PostgreSQL):
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600.
    SQLite (tests, local development) keeps SQLAlchemy's default pool.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resource_api.config import Settings
from resource_api.models.resource import metadata

logger = logging.getLogger(__name__)


class Database:
    """
    Store handle owning the engine and the session factory.

    Lifecycle:
        db = Database.from_settings(settings)   # startup
        async with db.session_factory() as s:   # per request
            ...
        await db.dispose()                      # shutdown
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        engine_kwargs = {"echo": echo}
        if make_url(url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=3600,
            )
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        # expire_on_commit=False: records stay readable after each write commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    async def create_all(self) -> None:
        """Create missing tables and indexes from the mapped metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Database schema ensured (%s)", make_url(self.url).render_as_string())

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The record store commits its own writes, so this dependency only has to
    roll back whatever is left open when the handler raises, and return the
    connection to the pool.

    Example usage in a route:
        @router.get("/resources")
        async def list_resources(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
