"""
Database connection management for Compensation Service.

The pool is owned by a ``DatabaseManager`` instance created at startup and
handed to the repository; nothing else holds a connection between requests.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import asyncpg
import structlog

from app.config import Settings

logger = structlog.get_logger(__name__)


class DatabaseManager:
    """Manages the PostgreSQL connection pool."""

    def __init__(
        self,
        dsn: str,
        min_size: int = 1,
        max_size: int = 7,
        command_timeout: float = 10.0,
    ):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self.pool: Optional[asyncpg.Pool] = None
        self._connect_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseManager":
        """Build a manager from application settings."""
        return cls(
            dsn=settings.database_dsn,
            min_size=settings.DATABASE_POOL_MIN_SIZE,
            max_size=settings.DATABASE_POOL_SIZE,
            command_timeout=settings.DATABASE_COMMAND_TIMEOUT,
        )

    async def connect(self) -> None:
        """Create database connection pool; concurrent callers share one pool."""
        async with self._connect_lock:
            if self.pool is None:
                logger.info("Creating database connection pool", max_size=self.max_size)
                self.pool = await asyncpg.create_pool(
                    self.dsn,
                    min_size=self.min_size,
                    max_size=self.max_size,
                    command_timeout=self.command_timeout,
                )
                logger.info("Database connection pool created")

    async def disconnect(self) -> None:
        """Close database connection pool."""
        if self.pool is not None:
            logger.info("Closing database connection pool")
            await self.pool.close()
            self.pool = None
            logger.info("Database connection pool closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[asyncpg.Connection, None]:
        """
        Get database connection from pool.

        Yields:
            asyncpg.Connection: Database connection

        Example:
            async with db.acquire() as conn:
                row = await conn.fetchrow("SELECT salary FROM employees WHERE name = $1", name)
        """
        if self.pool is None:
            await self.connect()
        async with self.pool.acquire() as connection:
            yield connection
