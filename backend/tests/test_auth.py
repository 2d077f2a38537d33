"""
Incubator Backend — Access Gate and Login Tests
=================================================

What we test:
    ✅ Missing, malformed and foreign tokens → 401 with the envelope
    ✅ Roles are compared exactly: reviewer and super_admin → 403 on admin routes
    ✅ Login issues a token, stamps lastLogin, rejects bad credentials
    ✅ Deactivated accounts cannot log in
    ✅ /auth/me returns the caller without secrets
"""

import uuid

import pytest

from incubator.security import create_access_token


class TestAccessGate:

    @pytest.mark.asyncio
    async def test_missing_token(self, client):
        response = await client.get("/api/announcement")
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "No token, authorization denied",
        }

    @pytest.mark.asyncio
    async def test_garbage_token(self, client):
        response = await client.get(
            "/api/announcement", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Token is not valid"

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, client):
        """A well-signed token whose user no longer exists is rejected."""
        token = create_access_token({"sub": str(uuid.uuid4()), "role": "admin"})
        response = await client.get(
            "/api/announcement", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Token is not valid"

    @pytest.mark.asyncio
    async def test_malformed_subject(self, client):
        token = create_access_token({"sub": "not-a-uuid"})
        response = await client.get(
            "/api/announcement", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_reviewer_is_forbidden(self, client, reviewer_headers):
        response = await client.get("/api/announcement", headers=reviewer_headers)
        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "Access denied. Admin role required.",
        }

    @pytest.mark.asyncio
    async def test_super_admin_is_not_admin(self, client, user_factory, headers_for):
        """Role equality is strict; super_admin does not inherit admin routes."""
        boss = await user_factory(role="super_admin", email="boss@example.com")
        response = await client.get("/api/announcement", headers=headers_for(boss))
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_passes(self, client, admin_headers):
        response = await client.get("/api/announcement", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["success"] is True


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_success(self, client, admin_user, default_password):
        response = await client.post(
            "/api/auth/login",
            json={"email": "ADMIN@example.com", "password": default_password},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["token"]
        user = body["data"]["user"]
        assert user["email"] == "admin@example.com"
        assert user["lastLogin"] is not None
        assert "password" not in user
        assert "passwordHash" not in user

    @pytest.mark.asyncio
    async def test_issued_token_works(self, client, admin_user, default_password):
        login = await client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": default_password},
        )
        token = login.json()["data"]["token"]
        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["data"]["id"] == str(admin_user.id)

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, admin_user):
        response = await client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "not-the-password"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_unknown_email(self, client, default_password):
        """Unknown accounts get the same answer as wrong passwords."""
        response = await client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": default_password},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_deactivated_account(self, client, user_factory, default_password):
        await user_factory(email="gone@example.com", is_active=False)
        response = await client.post(
            "/api/auth/login",
            json={"email": "gone@example.com", "password": default_password},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Account is deactivated"

    @pytest.mark.asyncio
    async def test_invalid_body(self, client):
        response = await client.post("/api/auth/login", json={"email": "not-an-email"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        assert any(
            error.startswith("email: value is not a valid email address")
            for error in body["errors"]
        )
        assert any(error.startswith("password:") for error in body["errors"])


class TestMe:

    @pytest.mark.asyncio
    async def test_me(self, client, reviewer_user, reviewer_headers):
        """Any signed-in role may read its own profile."""
        response = await client.get("/api/auth/me", headers=reviewer_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["role"] == "reviewer"
        assert data["isActive"] is True

    @pytest.mark.asyncio
    async def test_me_requires_token(self, client):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401
