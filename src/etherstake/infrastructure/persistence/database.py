"""
Database connection and session management.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from etherstake.infrastructure.monitoring.logger import get_logger
from etherstake.infrastructure.persistence.models import Base

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Async database connection manager using SQLAlchemy.

    Owns the engine and session factory for one database URL. Built and
    disposed by the DI container; there is no module-level instance.

    PostgreSQL (asyncpg) is the production target. SQLite (aiosqlite) is
    supported for local runs and tests, with foreign keys switched on.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
    ):
        """
        Initialize database connection settings.

        Args:
            database_url: SQLAlchemy async URL (postgresql+asyncpg://...)
            echo: Enable SQL query logging
            pool_size: Number of connections to maintain in pool
            max_overflow: Max connections beyond pool_size
            pool_timeout: Seconds to wait for connection
            pool_recycle: Recycle connections after N seconds
        """
        self.database_url = database_url
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    def _engine_options(self) -> Dict[str, Any]:
        """Engine keyword arguments for the configured backend."""
        options: Dict[str, Any] = {"echo": self.echo, "pool_pre_ping": True}

        if self.is_sqlite:
            return options

        options.update(
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_timeout=self.pool_timeout,
            pool_recycle=self.pool_recycle,
            connect_args={"server_settings": {"application_name": "etherstake"}},
        )
        return options

    async def connect(self) -> None:
        """Create the engine and session factory (idempotent)."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(
            self.database_url, **self._engine_options()
        )

        if self.is_sqlite:
            event.listen(
                self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys
            )

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(
            "Database engine created",
            extra={"backend": self._engine.dialect.name},
        )

    async def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    async def create_tables(self) -> None:
        """Create users and stakes tables if missing (dev and test bootstrap)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional session.

        Commits when the block exits normally, rolls back and re-raises
        otherwise.

        Usage:
            async with database.session() as session:
                result = await session.execute(query)

        Yields:
            AsyncSession bound to one transaction
        """
        if self._session_factory is None:
            raise RuntimeError("Database not connected. Call connect() first.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.debug(
                    "Transaction rolled back",
                    extra={"error_type": type(e).__name__},
                )
                raise

    async def health_check(self) -> bool:
        """
        Check database connectivity with a trivial query.

        Returns:
            True if the database answered, False otherwise
        """
        if self._engine is None:
            return False

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Database health check failed",
                extra={"error_type": type(e).__name__},
            )
            return False
