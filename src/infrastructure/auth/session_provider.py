"""Database-backed session provider.

The auth library stores one row per login in the ``session`` table and hands
the browser a cookie of the form ``<token>.<signature>``. Only the token part
is looked up here; the signature is the library's concern.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Optional

import structlog

from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import SessionUser

logger = structlog.get_logger()


def strip_cookie_signature(value: str) -> str:
    """Return the token part of a signed session cookie value."""
    token, _, _ = value.partition(".")
    return token


class DatabaseSessionProvider:
    """Resolve opaque session tokens against the ``session`` table."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    async def resolve(self, token: str) -> Optional[SessionUser]:
        token = strip_cookie_signature(token.strip())
        if not token:
            return None

        async with self._uow_factory() as uow:
            session = await uow.sessions.get_by_token(token)

        if session is None:
            return None
        if session.is_expired(self._clock()):
            logger.info("session_expired", session_id=session.id)
            return None

        return SessionUser(
            id=session.user_id,
            session_id=session.id,
            expires_at=session.expires_at,
        )
