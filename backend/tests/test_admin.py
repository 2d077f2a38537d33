"""
Incubator Backend — Admin Account Tests
=========================================

What we test:
    ✅ Admins can create admin accounts; emails are unique across all users
    ✅ Responses never include password material
    ✅ Password change requires the current password
    ✅ Self-deactivation is refused; others can be (de)activated
    ✅ Listing and lookups only see admin-role accounts
"""

import uuid

import pytest


NEW_ADMIN = {
    "name": "Second Admin",
    "email": "second@example.com",
    "password": "another-password",
}


class TestAddAdmin:

    @pytest.mark.asyncio
    async def test_add_admin(self, client, admin_headers):
        response = await client.post("/api/admin/add-admin", json=NEW_ADMIN, headers=admin_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Admin user created successfully"
        data = body["data"]
        assert data["email"] == "second@example.com"
        assert data["role"] == "admin"
        assert data["isActive"] is True
        assert set(data) == {"id", "name", "email", "role", "isActive", "createdAt"}

    @pytest.mark.asyncio
    async def test_new_admin_can_log_in(self, client, admin_headers):
        await client.post("/api/admin/add-admin", json=NEW_ADMIN, headers=admin_headers)
        response = await client.post(
            "/api/auth/login",
            json={"email": NEW_ADMIN["email"], "password": NEW_ADMIN["password"]},
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client, admin_headers):
        """Uniqueness spans every role, including the caller's own address."""
        duplicate = dict(NEW_ADMIN, email="Admin@Example.com")
        response = await client.post("/api/admin/add-admin", json=duplicate, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "User with this email already exists",
        }

    @pytest.mark.asyncio
    async def test_duplicate_of_reviewer_email(self, client, admin_headers, reviewer_user):
        duplicate = dict(NEW_ADMIN, email="reviewer@example.com")
        response = await client.post("/api/admin/add-admin", json=duplicate, headers=admin_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_short_password(self, client, admin_headers):
        response = await client.post(
            "/api/admin/add-admin",
            json=dict(NEW_ADMIN, password="short"),
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("password:")

    @pytest.mark.asyncio
    async def test_reviewer_cannot_add(self, client, reviewer_headers):
        response = await client.post("/api/admin/add-admin", json=NEW_ADMIN, headers=reviewer_headers)
        assert response.status_code == 403


class TestChangePassword:

    @pytest.mark.asyncio
    async def test_change_password(self, client, admin_headers, default_password):
        response = await client.put(
            "/api/admin/change-password",
            json={"currentPassword": default_password, "newPassword": "brand-new-password"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Password changed successfully"}

        old = await client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": default_password},
        )
        assert old.status_code == 401
        new = await client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "brand-new-password"},
        )
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, client, admin_headers):
        response = await client.put(
            "/api/admin/change-password",
            json={"currentPassword": "definitely-wrong", "newPassword": "brand-new-password"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Current password is incorrect"

    @pytest.mark.asyncio
    async def test_any_role_may_change_own_password(self, client, reviewer_headers, default_password):
        response = await client.put(
            "/api/admin/change-password",
            json={"currentPassword": default_password, "newPassword": "reviewer-password"},
            headers=reviewer_headers,
        )
        assert response.status_code == 200


class TestAdminStatus:

    @pytest.mark.asyncio
    async def test_cannot_deactivate_self(self, client, admin_user, admin_headers):
        response = await client.put(
            f"/api/admin/admin/{admin_user.id}/status",
            json={"isActive": False},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "You cannot deactivate your own account"

        me = await client.get("/api/auth/me", headers=admin_headers)
        assert me.json()["data"]["isActive"] is True

    @pytest.mark.asyncio
    async def test_toggle_other_admin(self, client, admin_headers, user_factory):
        other = await user_factory(email="other@example.com", name="Other Admin")
        url = f"/api/admin/admin/{other.id}/status"

        off = await client.put(url, json={"isActive": False}, headers=admin_headers)
        assert off.status_code == 200
        assert off.json()["message"] == "Admin deactivated successfully"
        assert off.json()["data"]["isActive"] is False

        on = await client.put(url, json={"isActive": True}, headers=admin_headers)
        assert on.json()["message"] == "Admin activated successfully"
        assert on.json()["data"]["isActive"] is True

    @pytest.mark.asyncio
    async def test_unknown_admin(self, client, admin_headers):
        response = await client.put(
            f"/api/admin/admin/{uuid.uuid4()}/status",
            json={"isActive": False},
            headers=admin_headers,
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Admin user not found"

    @pytest.mark.asyncio
    async def test_reviewer_is_not_an_admin_account(self, client, admin_headers, reviewer_user):
        response = await client.get(f"/api/admin/admin/{reviewer_user.id}", headers=admin_headers)
        assert response.status_code == 404


class TestListAdmins:

    @pytest.mark.asyncio
    async def test_list_scoped_to_admin_roles(self, client, admin_headers, reviewer_user, user_factory):
        await user_factory(role="super_admin", email="boss@example.com", name="Boss")
        response = await client.get(
            "/api/admin/admins",
            params={"sortBy": "email", "sortOrder": "asc"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        emails = [item["email"] for item in response.json()["data"]["items"]]
        assert emails == ["admin@example.com", "boss@example.com"]

    @pytest.mark.asyncio
    async def test_filter_by_role(self, client, admin_headers, user_factory):
        await user_factory(role="super_admin", email="boss@example.com", name="Boss")
        response = await client.get(
            "/api/admin/admins", params={"role": "super_admin"}, headers=admin_headers
        )
        items = response.json()["data"]["items"]
        assert [item["role"] for item in items] == ["super_admin"]

    @pytest.mark.asyncio
    async def test_get_admin(self, client, admin_user, admin_headers):
        response = await client.get(f"/api/admin/admin/{admin_user.id}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "admin@example.com"
        assert "passwordHash" not in response.json()["data"]

    @pytest.mark.asyncio
    async def test_stats(self, client, admin_headers, reviewer_user, user_factory):
        await user_factory(email="idle@example.com", is_active=False)
        response = await client.get("/api/admin/stats", headers=admin_headers)
        stats = response.json()["data"]
        assert stats["total"] == 2
        assert stats["active"] == 1
        assert stats["roleDistribution"] == [{"value": "admin", "count": 2}]
        assert "recent" not in stats
