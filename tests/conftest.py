import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from uuid import uuid4

# Required settings must exist before the application is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MAIL_USER", "support@fitness.test")
os.environ.setdefault("MAIL_PASSWORD", "test-mail-password")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from fitness_server.core.mail import get_mail_service
from fitness_server.database import get_db, to_async_url
from fitness_server.main import app
from fitness_server.models import metadata

# Tests run on an in-memory SQLite database unless TEST_DATABASE_URL points elsewhere
TEST_DATABASE_URL = to_async_url(os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://"))


def _create_test_engine() -> AsyncEngine:
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection keeps the in-memory database alive across sessions
        return create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    # NullPool avoids sharing connections between event loops
    return create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on fresh tables."""
    test_engine = _create_test_engine()
    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)

    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def mail_service():
    """Mail relay stand-in recording relayed messages."""
    from unittest.mock import AsyncMock, MagicMock

    service = MagicMock()
    service.send_contact_message = AsyncMock(return_value=None)
    return service


@pytest_asyncio.fixture
async def client(db_session: AsyncSession, mail_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_service] = lambda: mail_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_data() -> dict:
    """Registration payload."""
    return {"name": "A", "email": "a@x.com", "clerkId": "u1"}


@pytest_asyncio.fixture
async def test_user(client: AsyncClient, sample_user_data: dict) -> dict:
    """Registered user."""
    response = await client.post("/user-create", json=sample_user_data)
    assert response.status_code == 201
    return sample_user_data


@pytest_asyncio.fixture
async def test_admin(db_session: AsyncSession) -> dict:
    """Admin account with a known password."""
    from fitness_server.core.security import get_password_hash
    from fitness_server.models.admins import admins

    admin_data = {
        "id": uuid4(),
        "name": "Test Admin",
        "email": "admin@fitnessapp.io",
        "password_hash": get_password_hash("correct-horse"),
        "role": "admin",
        "created_at": datetime.now(UTC),
    }
    await db_session.execute(admins.insert().values(**admin_data))
    await db_session.commit()

    return {"id": admin_data["id"], "email": admin_data["email"], "password": "correct-horse"}
