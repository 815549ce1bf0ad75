"""Unit tests for DatabaseSessionProvider."""

from datetime import datetime, timedelta

import pytest

from domain.entities.session import AuthSession
from infrastructure.auth.session_provider import DatabaseSessionProvider, strip_cookie_signature
from tests.unit.conftest import FakeUnitOfWork

NOW = datetime(2026, 5, 1, 9, 30)


@pytest.fixture
def provider(uow: FakeUnitOfWork) -> DatabaseSessionProvider:
    return DatabaseSessionProvider(lambda: uow, clock=lambda: NOW)  # type: ignore[arg-type]


class TestStripCookieSignature:
    def test_keeps_plain_token(self):
        assert strip_cookie_signature("abc123") == "abc123"

    def test_drops_signature(self):
        assert strip_cookie_signature("abc123.c2lnbmF0dXJl") == "abc123"


class TestResolve:
    @pytest.mark.asyncio
    async def test_resolves_live_session(
        self, provider: DatabaseSessionProvider, uow: FakeUnitOfWork, user_id: str
    ):
        session = AuthSession(user_id=user_id, token="tok", expires_at=NOW + timedelta(hours=1))
        uow.sessions.get_by_token.return_value = session

        result = await provider.resolve("tok.signature")

        assert result is not None
        assert result.id == user_id
        assert result.session_id == session.id
        uow.sessions.get_by_token.assert_called_once_with("tok")

    @pytest.mark.asyncio
    async def test_unknown_token(self, provider: DatabaseSessionProvider, uow: FakeUnitOfWork):
        uow.sessions.get_by_token.return_value = None

        assert await provider.resolve("missing") is None

    @pytest.mark.asyncio
    async def test_expired_session(
        self, provider: DatabaseSessionProvider, uow: FakeUnitOfWork, user_id: str
    ):
        uow.sessions.get_by_token.return_value = AuthSession(
            user_id=user_id, token="tok", expires_at=NOW
        )

        assert await provider.resolve("tok") is None

    @pytest.mark.asyncio
    async def test_blank_token_skips_lookup(
        self, provider: DatabaseSessionProvider, uow: FakeUnitOfWork
    ):
        assert await provider.resolve("  ") is None
        assert await provider.resolve(".sig") is None
        uow.sessions.get_by_token.assert_not_called()
