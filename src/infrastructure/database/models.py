"""SQLAlchemy ORM models.

Table and column names follow the auth library's schema (``user``,
``account``, ``session`` with camelCase columns) so both share one database.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    # Ids are opaque text; the auth library mints its own format
    return uuid4().hex


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """Identity record."""

    __tablename__ = "user"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    email_verified: Mapped[bool] = mapped_column(
        "emailVerified", Boolean, nullable=False, default=False
    )
    # Holds a URL or, until an upload backend exists, an inline data URL
    image: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime, nullable=False, default=datetime.utcnow
    )

    # Relationships (deletion is handled by the database cascade)
    accounts: Mapped[list["AccountModel"]] = relationship(
        "AccountModel",
        back_populates="user",
        passive_deletes=True,
    )
    sessions: Mapped[list["SessionModel"]] = relationship(
        "SessionModel",
        back_populates="user",
        passive_deletes=True,
    )


class AccountModel(Base):
    """Login method of a user; ``providerId = 'credentials'`` holds the password hash."""

    __tablename__ = "account"
    __table_args__ = (
        UniqueConstraint("providerId", "accountId", name="uq_account_provider_account"),
        Index("ix_account_user_provider", "userId", "providerId"),
    )

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    account_id: Mapped[str] = mapped_column("accountId", Text, nullable=False)
    provider_id: Mapped[str] = mapped_column("providerId", String(50), nullable=False)
    user_id: Mapped[str] = mapped_column(
        "userId",
        Text,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    password: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime, nullable=False, default=datetime.utcnow
    )

    user: Mapped["UserModel"] = relationship("UserModel", back_populates="accounts")


class SessionModel(Base):
    """Login session issued by the auth library."""

    __tablename__ = "session"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    user_id: Mapped[str] = mapped_column(
        "userId",
        Text,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column("expiresAt", DateTime, nullable=False)
    ip_address: Mapped[str | None] = mapped_column("ipAddress", String(64))
    user_agent: Mapped[str | None] = mapped_column("userAgent", Text)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime, nullable=False, default=datetime.utcnow
    )

    user: Mapped["UserModel"] = relationship("UserModel", back_populates="sessions")
