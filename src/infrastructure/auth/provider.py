"""Authentication provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol


@dataclass
class SessionUser:
    """The caller as resolved from a session credential."""

    id: str
    email: Optional[str] = None
    session_id: Optional[str] = None
    expires_at: Optional[datetime] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def resolve(self, token: str) -> Optional[SessionUser]:
        """
        Resolve a session credential to the user it belongs to.

        Args:
            token: The session token or bearer token presented by the client

        Returns:
            SessionUser if valid, None if unknown, expired or malformed
        """
        ...
