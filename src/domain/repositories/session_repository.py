"""Auth session repository protocol."""

from typing import Protocol

from domain.entities.session import AuthSession


class ISessionRepository(Protocol):
    """Repository interface for AuthSession entities."""

    async def get_by_token(self, token: str) -> AuthSession | None:
        """Get a session by its opaque token."""
        ...
