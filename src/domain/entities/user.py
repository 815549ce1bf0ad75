"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass
class User:
    """Identity record for an account holder.

    ``email`` is owned by the auth library and is never changed through the
    profile flow.
    """

    name: str
    email: str
    id: str = field(default_factory=lambda: uuid4().hex)
    image: str | None = None
    email_verified: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
