"""Profile service: read, update and delete the caller's own account."""

from collections.abc import Callable
from datetime import datetime

import structlog

from core.exceptions import (
    InvalidArgumentError,
    PasswordLoginUnavailableError,
    StorageError,
    UserNotFoundError,
)
from core.security import MAX_PASSWORD_BYTES, PasswordHasher
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork, TransactionOutcome

logger = structlog.get_logger()


class ProfileService:
    """Service layer for account self-management.

    Every method takes the user id resolved from the caller's session; the
    service never looks at an id supplied in a request body.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = password_hasher
        self._clock = clock

    async def get_profile(self, user_id: str) -> User:
        """Get the caller's identity record."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(user_id)
            return user

    async def update_profile(
        self,
        user_id: str,
        name: str | None,
        password: str | None = None,
        image: str | None = None,
    ) -> TransactionOutcome:
        """Replace name and image, rotating the password when one is given.

        With a password, the user row and the ``credentials`` account row are
        written in one transaction: both land or neither does.
        """
        name = (name or "").strip()
        if not name:
            raise InvalidArgumentError("name", "Name is required")

        password_hash = None
        if password:
            if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
                raise InvalidArgumentError(
                    "password", f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )
            # Hash before opening the transaction so no pooled connection is
            # held across the slow computation
            password_hash = await self._hasher.hash(password)

        uow = self._uow_factory()
        try:
            async with uow:
                now = self._clock()
                if not await uow.users.update_profile(user_id, name, image, now):
                    raise UserNotFoundError(user_id)

                if password_hash is not None:
                    if not await uow.credentials.update_password(user_id, password_hash, now):
                        raise PasswordLoginUnavailableError()

                await uow.commit()
        except (StorageError, UserNotFoundError, PasswordLoginUnavailableError):
            logger.warning(
                "profile_update_rolled_back",
                user_id=user_id,
                password_change=password_hash is not None,
                outcome=uow.outcome.value,
            )
            raise

        logger.info(
            "profile_updated",
            user_id=user_id,
            password_change=password_hash is not None,
        )
        return uow.outcome

    async def delete_profile(self, user_id: str) -> bool:
        """Delete the caller's account.

        Credentials and sessions go with it through ON DELETE CASCADE.
        Returns False when the account was already gone.
        """
        async with self._uow_factory() as uow:
            deleted = await uow.users.delete(user_id)
            await uow.commit()

        if deleted:
            logger.info("account_deleted", user_id=user_id)
        else:
            logger.info("account_already_deleted", user_id=user_id)
        return deleted
