"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StorageError
from domain.repositories.unit_of_work import TransactionOutcome
from infrastructure.database.repositories.sqlalchemy_credential_repo import (
    SQLAlchemyCredentialRepository,
)
from infrastructure.database.repositories.sqlalchemy_session_repo import (
    SQLAlchemySessionRepository,
)
from infrastructure.database.repositories.sqlalchemy_user_repo import SQLAlchemyUserRepository

logger = structlog.get_logger()


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    One ``AsyncSession`` (and so at most one pooled connection) per unit.
    Any exception raised inside the context rolls the transaction back
    before it propagates; database faults and timeouts surface as
    ``StorageError``.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self.outcome = TransactionOutcome.PENDING

    @property
    def users(self) -> SQLAlchemyUserRepository:
        """Get user repository."""
        return SQLAlchemyUserRepository(self._require_session())

    @property
    def credentials(self) -> SQLAlchemyCredentialRepository:
        """Get credential repository."""
        return SQLAlchemyCredentialRepository(self._require_session())

    @property
    def sessions(self) -> SQLAlchemySessionRepository:
        """Get auth session repository."""
        return SQLAlchemySessionRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()
            self.outcome = TransactionOutcome.COMMITTED

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()
            self.outcome = TransactionOutcome.ROLLED_BACK

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        self.outcome = TransactionOutcome.PENDING
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Roll back unless committed, release the session, translate faults."""
        if not self._session:
            return
        try:
            if exc_type is not None or self.outcome is not TransactionOutcome.COMMITTED:
                await self._safe_rollback()
        finally:
            await self._safe_close()

        if isinstance(exc_val, (SQLAlchemyError, TimeoutError)):
            logger.error(
                "database_error",
                error=str(exc_val),
                error_type=type(exc_val).__name__,
            )
            raise StorageError() from exc_val

    async def _safe_rollback(self) -> None:
        try:
            await self.rollback()
        except (SQLAlchemyError, TimeoutError):
            # The connection is already unusable; closing the session
            # invalidates it and the server discards the transaction
            logger.warning("rollback_failed", exc_info=True)
            self.outcome = TransactionOutcome.ROLLED_BACK

    async def _safe_close(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            await session.close()
        except (SQLAlchemyError, TimeoutError):
            # The pool discards a connection that fails to reset
            logger.warning("session_close_failed", exc_info=True)

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session
