"""SQLAlchemy implementation of User repository."""

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import User
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> User | None:
        """Get a user by ID."""
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update_profile(
        self, id: str, name: str, image: str | None, updated_at: datetime
    ) -> bool:
        """Overwrite name, image and updated_at in a single statement."""
        stmt = (
            update(UserModel)
            .where(UserModel.id == id)
            .values(name=name, image=image, updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    async def delete(self, id: str) -> bool:
        """Delete a user; dependent rows are removed by the FK cascade."""
        stmt = (
            delete(UserModel)
            .where(UserModel.id == id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            image=model.image,
            email_verified=model.email_verified,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
