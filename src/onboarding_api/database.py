"""Database connection pool and lifecycle management."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from onboarding_api.config import Settings
from onboarding_api.models.orm.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Shared connection pool.

    Created once at application start and handed to request handlers through
    ``app.state``. Tests substitute an instance backed by another engine.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize with an async engine that owns the pool."""
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the pool from application settings."""
        engine = create_async_engine(
            settings.async_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            # Validate connections before checkout to detect stale connections
            pool_pre_ping=True,
            pool_recycle=3600,
            # Never echo SQL statements as they contain personal data
            echo=False,
        )
        return cls(engine)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        """Check out one connection for the duration of the block.

        The statement executed inside the block is committed on success and
        rolled back on error. The connection returns to the pool either way.
        """
        async with self.engine.begin() as connection:
            yield connection

    async def ping(self) -> None:
        """Run a trivial query to verify the pool can reach the database."""
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def create_schema(self) -> None:
        """Create all tables known to the ORM metadata."""
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Get the application's shared database dependency."""
    return request.app.state.database
