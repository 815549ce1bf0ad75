"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from domain.repositories.unit_of_work import TransactionOutcome


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing.

    Mirrors the real unit of work: leaving the context with an exception, or
    without a commit, counts as a rollback.
    """

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.credentials = AsyncMock()
        self.sessions = AsyncMock()
        self.committed = False
        self.rolled_back = False
        self.outcome = TransactionOutcome.PENDING
        self.entered = 0

    async def commit(self) -> None:
        self.committed = True
        self.outcome = TransactionOutcome.COMMITTED

    async def rollback(self) -> None:
        self.rolled_back = True
        self.outcome = TransactionOutcome.ROLLED_BACK

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.entered += 1
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type is not None or not self.committed:
            await self.rollback()


class FakePasswordHasher:
    """Deterministic stand-in for bcrypt."""

    def __init__(self) -> None:
        self.hashed: list[str] = []

    async def hash(self, password: str) -> str:
        self.hashed.append(password)
        return f"hashed::{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{password}"


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def user_id() -> str:
    """A random user ID."""
    return str(uuid4())
