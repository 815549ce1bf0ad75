"""JWT authentication provider implementation.

Validates HS256 tokens signed with the shared application secret.

Payload structure:
    {
        "sub": "user-id",
        "email": "user@example.com",
        "sid": "session-id",        (optional)
        "exp": 1234567890
    }
"""

from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import SessionUser


class JWTAuthProvider:
    """Stateless JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def resolve(self, token: str) -> Optional[SessionUser]:
        """
        Validate a JWT and extract the caller.

        Args:
            token: The JWT to validate

        Returns:
            SessionUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except JWTError:
            return None

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            return None

        try:
            session_id = str(payload["sid"]) if payload.get("sid") else None
            return SessionUser(
                id=user_id,
                email=payload.get("email"),
                session_id=session_id,
                expires_at=(
                    datetime.utcfromtimestamp(payload["exp"]) if payload.get("exp") else None
                ),
            )
        except (TypeError, ValueError):
            return None

    def create_token(self, user: SessionUser) -> str:
        """
        Create a JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": user.id,
            "exp": expire,
        }
        if user.email:
            payload["email"] = user.email
        if user.session_id:
            payload["sid"] = user.session_id

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
