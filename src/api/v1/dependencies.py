"""Dependency injection factories for API v1."""

from typing import Callable

from fastapi import Depends

from api.dependencies.database import get_uow_factory
from core.config import settings
from core.security import PasswordHasher
from domain.services.profile_service import ProfileService
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# bcrypt context is stateless; one instance serves every request
_password_hasher = PasswordHasher(settings.password_hash_rounds)


def get_password_hasher() -> PasswordHasher:
    """Get the shared password hasher."""
    return _password_hasher


def get_profile_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory, password_hasher)
