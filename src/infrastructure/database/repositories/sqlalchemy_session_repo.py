"""SQLAlchemy implementation of AuthSession repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.session import AuthSession
from infrastructure.database.models import SessionModel


class SQLAlchemySessionRepository:
    """SQLAlchemy implementation of ISessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_token(self, token: str) -> AuthSession | None:
        """Get a session by its opaque token."""
        stmt = select(SessionModel).where(SessionModel.token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: SessionModel) -> AuthSession:
        """Convert ORM model to domain entity."""
        return AuthSession(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            created_at=model.created_at,
        )
