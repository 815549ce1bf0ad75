"""Credential repository protocol."""

from datetime import datetime
from typing import Protocol

from domain.entities.credential import Credential


class ICredentialRepository(Protocol):
    """Repository interface for Credential (account) entities."""

    async def get_for_user(self, user_id: str, provider_id: str) -> Credential | None:
        """Get the user's credential for one login method."""
        ...

    async def update_password(
        self, user_id: str, password_hash: str, updated_at: datetime
    ) -> bool:
        """Replace the password hash of the user's password credential."""
        ...
