"""
Database connection management for PostgreSQL.
Wraps a pooled async SQLAlchemy engine (asyncpg driver) behind a single query primitive.
"""

from sqlalchemy import text as sql_text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from lightbnb.config import Settings
from lightbnb.utils.exceptions import DatabaseNotConnectedError
from typing import Any, Dict, List, Optional, Protocol, Sequence
import logging

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """Anything that can run a positional-parameter statement and return rows."""

    async def query(self, text: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        ...


class Database:
    """
    Shared connection pool handle with an explicit lifecycle.

    Open it once at startup with ``connect()`` (or ``async with``), hand it to the
    repositories, and ``disconnect()`` at shutdown. Statements use PostgreSQL's
    native ``$1..$n`` placeholders and are run directly on the asyncpg connection
    checked out of the SQLAlchemy pool.
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True,
        application_name: str = "lightbnb",
    ):
        self.url = url
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping
        self.application_name = application_name
        self._engine: Optional[AsyncEngine] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle from application settings."""
        return cls(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=settings.db_pool_pre_ping,
        )

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotConnectedError()
        return self._engine

    async def connect(self) -> "Database":
        """Create the engine and its connection pool. Calling twice is a no-op."""
        if self._engine is not None:
            return self

        self._engine = create_async_engine(
            self.url,
            echo=self.echo,
            pool_size=self.pool_size,  # Number of connections to maintain in the pool
            max_overflow=self.max_overflow,  # Additional connections that can be created on demand
            pool_pre_ping=self.pool_pre_ping,  # Validate connections before use
            pool_recycle=self.pool_recycle,
            pool_timeout=self.pool_timeout,  # Timeout for getting connection from pool
            connect_args={
                "server_settings": {
                    "application_name": self.application_name,
                }
            }
        )
        logger.info("Database connection pool created")
        return self

    async def disconnect(self) -> None:
        """Dispose of the pool. Safe to call on a handle that was never opened."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connections closed")

    async def __aenter__(self) -> "Database":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    async def query(self, text: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Execute a single parameterized statement.

        Args:
            text: SQL text with ``$1..$n`` placeholders
            values: Values bound to the placeholders, in order

        Returns:
            Result rows as dictionaries, in result order

        Raises:
            DatabaseNotConnectedError: If ``connect()`` has not been called
            Exception: Driver errors propagate unchanged
        """
        # Statements bypass SQLAlchemy execution, so engine echo never sees them
        if self.echo:
            logger.info(f"{text} {tuple(values)!r}")

        async with self.engine.connect() as conn:
            raw = await conn.get_raw_connection()
            records = await raw.driver_connection.fetch(text, *values)

        logger.debug(f"Query returned {len(records)} rows")
        return [dict(record) for record in records]

    async def ping(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(sql_text("SELECT 1"))
                result.scalar()
            logger.info("Database connection successful")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def pool_status(self) -> Dict[str, Any]:
        """Get connection pool information for monitoring."""
        pool = self.engine.pool
        return {
            "pool_size": pool.size(),
            "checked_in_connections": pool.checkedin(),
            "checked_out_connections": pool.checkedout(),
            "overflow_connections": pool.overflow(),
        }
