"""Pytest configuration and fixtures."""

import os
import secrets
import sys
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from string import ascii_letters, digits

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("APP_ENV", "test")

import bcrypt
import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import settings
from infrastructure.database.models import AccountModel, SessionModel, UserModel
from infrastructure.database.session import Database

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ORIGINAL_PASSWORD = "oldpass123"


def opaque_id() -> str:
    """A 32-character alphanumeric id in the format the auth library mints."""
    return "".join(secrets.choice(ascii_letters + digits) for _ in range(32))


def fast_hash(password: str) -> str:
    """Low-cost bcrypt hash for seeding fixtures; production hashing uses cost 12."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("ascii")


@dataclass
class SeededUser:
    """A user row plus a live session token for it."""

    id: str
    name: str
    email: str
    session_token: str


async def seed_user(
    database: Database,
    name: str,
    email: str,
    password: str | None = ORIGINAL_PASSWORD,
    image: str | None = None,
    user_id: str | None = None,
    token: str | None = None,
) -> SeededUser:
    """Insert a user, its login method and a session, like the auth library does at sign-up."""
    user_id = user_id or opaque_id()
    token = token or secrets.token_urlsafe(24)
    created = datetime.utcnow() - timedelta(days=1)
    async with database.session() as session:
        session.add(
            UserModel(
                id=user_id,
                name=name,
                email=email,
                image=image,
                created_at=created,
                updated_at=created,
            )
        )
        await session.flush()
        if password is not None:
            session.add(
                AccountModel(
                    user_id=user_id,
                    provider_id="credentials",
                    account_id=user_id,
                    password=fast_hash(password),
                    created_at=created,
                    updated_at=created,
                )
            )
        else:
            session.add(
                AccountModel(
                    user_id=user_id,
                    provider_id="github",
                    account_id=f"gh-{user_id[:8]}",
                    created_at=created,
                    updated_at=created,
                )
            )
        session.add(
            SessionModel(
                user_id=user_id,
                token=token,
                expires_at=datetime.utcnow() + timedelta(days=7),
            )
        )
        await session.commit()
    return SeededUser(id=user_id, name=name, email=email, session_token=token)


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables for each test."""
    db = Database(TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def test_user(database: Database) -> SeededUser:
    """Alice, who signed up with email and password."""
    return await seed_user(database, "Alice", "alice@example.com")


@pytest.fixture
async def other_user(database: Database) -> SeededUser:
    """Bob, a second account that must never be touched by Alice's requests."""
    return await seed_user(database, "Bob", "bob@example.com", password="bobs-secret")


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth, no database)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def app_client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app wired to the test database, without credentials."""
    from main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def authenticated_client(
    database: Database, test_user: SeededUser
) -> AsyncGenerator[AsyncClient, None]:
    """Client carrying Alice's signed session cookie."""
    from main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    cookies = {settings.session_cookie_name: f"{test_user.session_token}.c2lnbmF0dXJl"}
    async with AsyncClient(transport=transport, base_url="http://test", cookies=cookies) as c:
        yield c
