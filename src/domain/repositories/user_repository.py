"""User repository protocol."""

from datetime import datetime
from typing import Protocol

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: str) -> User | None:
        """Get a user by ID."""
        ...

    async def update_profile(
        self, id: str, name: str, image: str | None, updated_at: datetime
    ) -> bool:
        """Overwrite name, image and updated_at; False if no row matched."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a user and return whether a row was removed."""
        ...
