"""Authentication dependencies for FastAPI."""

from typing import Annotated, Callable

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies.database import get_uow_factory
from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IAuthProvider, SessionUser
from infrastructure.auth.session_provider import DatabaseSessionProvider
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Security schemes for OpenAPI docs
bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


def get_auth_provider(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> IAuthProvider:
    """Build the provider for the configured auth backend."""
    if settings.auth_backend == "jwt":
        return JWTAuthProvider()
    return DatabaseSessionProvider(uow_factory)


def get_session_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    cookie: Annotated[str | None, Depends(cookie_scheme)],
) -> str | None:
    """Session credential from the Authorization header, else the session cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return cookie or None


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(get_session_token)],
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> SessionUser:
    """
    Dependency to get the current authenticated user.

    Raises:
        AuthenticationError: If no session credential is presented or it does not resolve
    """
    if not token:
        raise AuthenticationError(
            message="Authentication required",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = await auth_provider.resolve(token)

    if not user:
        raise AuthenticationError(
            message="Invalid or expired session",
            error_code=ErrorCode.INVALID_SESSION,
        )

    request.state.user_id = user.id
    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[SessionUser, Depends(get_current_user)]
