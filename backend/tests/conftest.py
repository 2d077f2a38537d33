"""
Incubator Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every API test runs against a real schema on a throwaway SQLite file,
       through the real application factory, with real signed tokens.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    database ─┬─ app ── client
              └─ user_factory ─┬─ admin_user ─── admin_headers
                               └─ reviewer_user ─ reviewer_headers
"""

import os

# Override settings for testing BEFORE any incubator imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from typing import Any, Dict  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from incubator.database import Database  # noqa: E402
from incubator.main import create_app  # noqa: E402
from incubator.models.user import User  # noqa: E402
from incubator.schemas.user import UserRead  # noqa: E402
from incubator.security import create_access_token, get_password_hash  # noqa: E402

DEFAULT_PASSWORD = "password123"


def bearer(user: UserRead) -> Dict[str, str]:
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    A fresh on-disk SQLite database with every table created.

    On-disk rather than in-memory: listing opens two sessions concurrently,
    and each pooled connection to ":memory:" would see its own empty database.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'incubator_test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_factory(database):
    """Insert a user directly and return its public view."""

    async def make(
        role: str = "admin",
        email: str = "admin@example.com",
        name: str = "Test Admin",
        password: str = DEFAULT_PASSWORD,
        is_active: bool = True,
    ) -> UserRead:
        async with database.session() as session:
            user = User(
                name=name,
                email=email,
                password_hash=get_password_hash(password),
                role=role,
                is_active=is_active,
            )
            session.add(user)
            await session.flush()
            await session.refresh(user)
        return UserRead.model_validate(user)

    return make


@pytest_asyncio.fixture
async def admin_user(user_factory) -> UserRead:
    return await user_factory()


@pytest_asyncio.fixture
async def reviewer_user(user_factory) -> UserRead:
    return await user_factory(role="reviewer", email="reviewer@example.com", name="Reviewer")


@pytest.fixture
def headers_for():
    """Authorization headers for any user built by user_factory."""
    return bearer


@pytest.fixture
def default_password() -> str:
    return DEFAULT_PASSWORD


@pytest.fixture
def admin_headers(admin_user) -> Dict[str, str]:
    return bearer(admin_user)


@pytest.fixture
def reviewer_headers(reviewer_user) -> Dict[str, str]:
    return bearer(reviewer_user)


@pytest.fixture
def announcement_payload() -> Dict[str, Any]:
    return {
        "title": "Demo day announced",
        "description": "Our spring demo day is open for registrations.",
        "link": "https://example.com/demo-day",
    }
