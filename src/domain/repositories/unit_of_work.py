"""Unit of Work protocol."""

from enum import StrEnum
from typing import Protocol

from domain.repositories.credential_repository import ICredentialRepository
from domain.repositories.session_repository import ISessionRepository
from domain.repositories.user_repository import IUserRepository


class TransactionOutcome(StrEnum):
    """How a unit of work ended."""

    PENDING = "pending"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions.

    Leaving the context without ``commit()`` discards every write; an
    exception inside the context always rolls back.
    """

    users: IUserRepository
    credentials: ICredentialRepository
    sessions: ISessionRepository
    outcome: TransactionOutcome

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
