"""Database dependencies shared by every router."""

from typing import Callable

from fastapi import Depends, Request

from infrastructure.database.session import Database
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_database(request: Request) -> Database:
    """The pool owned by the running application."""
    return request.app.state.database  # type: ignore[no-any-return]


def get_uow_factory(
    database: Database = Depends(get_database),
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(database.session_factory)

    return factory
