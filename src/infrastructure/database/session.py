"""Database engine and session management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.config import Settings
from infrastructure.database.models import Base

logger = structlog.get_logger()

# Hosts that front PostgreSQL with a transaction-mode pooler
_POOLER_HOST_MARKERS = ("pooler.supabase.com", "pgbouncer")


class Database:
    """Process-wide connection pool and session factory.

    Built once by the application factory and disposed at shutdown; request
    handlers reach it through ``app.state.database``.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 5,
        pool_timeout: float = 10.0,
        statement_timeout: float = 10.0,
        idle_recycle: int = 300,
        require_ssl: bool = False,
        echo: bool = False,
    ) -> None:
        self.url = url
        backend = make_url(url).get_backend_name()
        engine_kwargs: dict[str, Any] = {"echo": echo}
        connect_args: dict[str, Any] = {}

        if backend == "sqlite":
            if ":memory:" in url or url.endswith("://"):
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
                connect_args["check_same_thread"] = False
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=0,
                pool_timeout=pool_timeout,
                pool_recycle=idle_recycle,
                pool_pre_ping=True,
            )
            connect_args["timeout"] = pool_timeout
            connect_args["command_timeout"] = statement_timeout
            if require_ssl:
                connect_args["ssl"] = "require"
            # asyncpg's prepared statement cache is incompatible with
            # transaction-mode pooling
            if any(marker in url for marker in _POOLER_HOST_MARKERS):
                connect_args["statement_cache_size"] = 0

        self.engine: AsyncEngine = create_async_engine(
            url, connect_args=connect_args, **engine_kwargs
        )
        if backend == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.async_database_url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
            statement_timeout=settings.db_statement_timeout,
            idle_recycle=settings.db_idle_recycle,
            require_ssl=settings.is_production,
            echo=settings.debug,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Scoped session; the connection goes back to the pool on every exit path."""
        async with self.session_factory() as session:
            try:
                yield session
            except BaseException:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create all tables (tests and local development)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("database_disposed")


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
