"""SQLAlchemy implementation of Credential repository."""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.credential import CREDENTIALS_PROVIDER, Credential
from infrastructure.database.models import AccountModel


class SQLAlchemyCredentialRepository:
    """SQLAlchemy implementation of ICredentialRepository over the ``account`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_for_user(self, user_id: str, provider_id: str) -> Credential | None:
        """Get the user's credential for one login method."""
        stmt = select(AccountModel).where(
            AccountModel.user_id == user_id,
            AccountModel.provider_id == provider_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def update_password(
        self, user_id: str, password_hash: str, updated_at: datetime
    ) -> bool:
        """Replace the hash on the user's ``credentials`` account row."""
        stmt = (
            update(AccountModel)
            .where(
                AccountModel.user_id == user_id,
                AccountModel.provider_id == CREDENTIALS_PROVIDER,
            )
            .values(password=password_hash, updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    def _to_entity(self, model: AccountModel) -> Credential:
        """Convert ORM model to domain entity."""
        return Credential(
            id=model.id,
            user_id=model.user_id,
            provider_id=model.provider_id,
            account_id=model.account_id,
            password_hash=model.password,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
