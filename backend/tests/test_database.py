"""
Incubator Backend — Database Handle and Bootstrap Tests
=========================================================

What we test:
    ✅ Store failures surface as DatabaseError with a generic message
    ✅ Failed sessions roll back
    ✅ ping() reports reachability
    ✅ ensure_admin creates the first admin exactly once
    ✅ Startup creates tables and the bootstrap admin when configured
"""

from unittest.mock import patch

import pytest
from sqlalchemy import func, select, text

from incubator.config import Settings
from incubator.database import Database
from incubator.exceptions import DatabaseError, NotFoundError
from incubator.models.user import User
from incubator.main import create_app, lifespan
from incubator.services.auth_service import AuthService


class TestSession:

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_is_wrapped(self, database):
        with pytest.raises(DatabaseError) as exc_info:
            async with database.session() as session:
                await session.execute(text("SELECT * FROM no_such_table"))
        assert exc_info.value.status_code == 500
        assert "no_such_table" not in exc_info.value.message
        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_application_error_rolls_back(self, database):
        """Non-database errors propagate unchanged and nothing is committed."""
        with pytest.raises(NotFoundError):
            async with database.session() as session:
                session.add(User(name="Ghost", email="ghost@example.com", password_hash="x", role="admin"))
                await session.flush()
                raise NotFoundError(resource="Ghost")

        async with database.session() as session:
            count = (await session.execute(select(func.count(User.id)))).scalar_one()
        assert count == 0

    @pytest.mark.asyncio
    async def test_ping(self, database, tmp_path):
        assert await database.ping() is True

        unreachable = Database(f"sqlite+aiosqlite:///{tmp_path / 'absent' / 'db.sqlite'}")
        assert await unreachable.ping() is False
        await unreachable.dispose()


class TestBootstrapAdmin:

    @pytest.mark.asyncio
    async def test_ensure_admin_once(self, database):
        auth = AuthService(database)
        assert await auth.ensure_admin("Root@Example.com", "bootstrap-pass", "Root") is True
        assert await auth.ensure_admin("root@example.com", "other-pass", "Root") is False

        async with database.session() as session:
            users = (await session.execute(select(User))).scalars().all()
        assert [(u.email, u.role, u.is_active) for u in users] == [("root@example.com", "admin", True)]

    @pytest.mark.asyncio
    async def test_bootstrap_admin_can_log_in(self, client, app):
        await app.state.services.auth.ensure_admin("root@example.com", "bootstrap-pass", "Root")
        response = await client.post(
            "/api/auth/login",
            json={"email": "root@example.com", "password": "bootstrap-pass"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["user"]["role"] == "admin"


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_creates_schema_and_admin(self, tmp_path):
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'fresh.db'}")
        settings = Settings(
            db_auto_create=True,
            bootstrap_admin_email="founder@example.com",
            bootstrap_admin_password="bootstrap-pass",
        )
        app = create_app(settings=settings, database=database)

        with patch("incubator.main.setup_logging") as mock_logging:
            async with lifespan(app):
                async with database.session() as session:
                    users = (await session.execute(select(User))).scalars().all()
        mock_logging.assert_called_once_with(settings.log_level)
        assert [u.email for u in users] == ["founder@example.com"]

    @pytest.mark.asyncio
    async def test_startup_survives_unreachable_database(self, tmp_path):
        """A failed bootstrap is logged; the app still starts so /health can report."""
        database = Database(f"sqlite+aiosqlite:///{tmp_path / 'absent' / 'db.sqlite'}")
        settings = Settings(db_auto_create=True)
        app = create_app(settings=settings, database=database)

        with patch("incubator.main.setup_logging"):
            async with lifespan(app):
                assert await database.ping() is False
