"""Auth session domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass
class AuthSession:
    """A login session issued by the auth library."""

    user_id: str
    token: str = field(repr=False)
    expires_at: datetime
    id: str = field(default_factory=lambda: uuid4().hex)
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
