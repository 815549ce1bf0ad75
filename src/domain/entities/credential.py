"""Credential (login method) domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

# Provider id of the email/password login method
CREDENTIALS_PROVIDER = "credentials"


@dataclass
class Credential:
    """One login method of a user; holds the password hash for ``credentials``."""

    user_id: str
    provider_id: str
    account_id: str
    id: str = field(default_factory=lambda: uuid4().hex)
    password_hash: str | None = field(default=None, repr=False)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_password_login(self) -> bool:
        return self.provider_id == CREDENTIALS_PROVIDER
