"""
Incubator Backend — Contact Submission Tests
==============================================

What we test:
    ✅ Anyone can submit; the submitter gets a receipt, not the full record
    ✅ Field rules (email, phone, lengths) are reported together
    ✅ A response stamps respondedBy/respondedAt and moves status to responded
    ✅ Resending the stored response changes nothing
    ✅ Repeating an update changes nothing but the activity timestamps
    ✅ Admin reads carry fullName and timeSinceSubmission
    ✅ Stats: per-status counts and newsletter subscribers
"""

import pytest

CONTACT = {
    "firstName": "Asha",
    "lastName": "Verma",
    "email": "Asha.Verma@Example.com",
    "phone": "+91 98765 43210",
    "subject": "Incubation enquiry",
    "message": "We would like to know more about the incubation programme.",
}


async def submit(client, **overrides):
    response = await client.post("/api/contact", json=dict(CONTACT, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestSubmitContact:

    @pytest.mark.asyncio
    async def test_public_submit_returns_receipt(self, client):
        response = await client.post("/api/contact", json=CONTACT)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Contact form submitted successfully"
        assert set(body["data"]) == {"id", "submittedAt", "status"}
        assert body["data"]["status"] == "new"

    @pytest.mark.asyncio
    async def test_invalid_submission(self, client):
        response = await client.post(
            "/api/contact",
            json=dict(CONTACT, email="nope", phone="12", subject="Hi"),
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert any(error.startswith("email: value is not a valid email address") for error in errors)
        assert "phone: Please provide a valid phone number" in errors
        assert any(error.startswith("subject:") for error in errors)

    @pytest.mark.asyncio
    async def test_admin_read(self, client, admin_headers):
        receipt = await submit(client)
        response = await client.get(f"/api/contact/{receipt['id']}", headers=admin_headers)
        data = response.json()["data"]
        assert data["email"] == "asha.verma@example.com"
        assert data["fullName"] == "Asha Verma"
        assert data["timeSinceSubmission"] == "Just now"
        assert data["priority"] == "medium"
        assert data["source"] == "website"
        assert data["respondedAt"] is None


class TestHandleContact:

    @pytest.mark.asyncio
    async def test_response_is_stamped(self, client, admin_user, admin_headers):
        receipt = await submit(client)
        response = await client.put(
            f"/api/contact/{receipt['id']}",
            json={"response": "Thanks, we will call you this week."},
            headers=admin_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "responded"
        assert data["respondedBy"] == {
            "id": str(admin_user.id),
            "name": "Test Admin",
            "email": "admin@example.com",
        }
        assert data["respondedAt"] is not None
        assert data["lastActivityAt"] is not None

    @pytest.mark.asyncio
    async def test_resent_response_keeps_stamps(
        self, client, admin_user, admin_headers, user_factory, headers_for
    ):
        """Resending the stored response neither re-stamps nor reopens the submission."""
        colleague = await user_factory(email="colleague@example.com", name="Colleague")
        receipt = await submit(client)
        url = f"/api/contact/{receipt['id']}"
        reply = {"response": "Thanks, we will call you this week."}

        first = (await client.put(url, json=reply, headers=admin_headers)).json()["data"]
        await client.put(url, json={"status": "closed"}, headers=admin_headers)
        again = await client.put(url, json=reply, headers=headers_for(colleague))
        assert again.status_code == 200
        data = again.json()["data"]
        assert data["respondedAt"] == first["respondedAt"]
        assert data["respondedBy"]["id"] == str(admin_user.id)
        assert data["status"] == "closed"

        changed = await client.put(
            url, json={"response": "Call scheduled for Friday."}, headers=headers_for(colleague)
        )
        data = changed.json()["data"]
        assert data["respondedBy"]["id"] == str(colleague.id)
        assert data["status"] == "responded"

    @pytest.mark.asyncio
    async def test_repeated_update_is_stable(self, client, admin_headers):
        receipt = await submit(client)
        url = f"/api/contact/{receipt['id']}"
        update = {"response": "Thanks, we will call you this week.", "priority": "high"}

        first = (await client.put(url, json=update, headers=admin_headers)).json()["data"]
        second = (await client.put(url, json=update, headers=admin_headers)).json()["data"]
        for data in (first, second):
            data.pop("updatedAt")
            data.pop("lastActivityAt")
        assert second == first

    @pytest.mark.asyncio
    async def test_explicit_status_wins(self, client, admin_headers):
        """Responding and closing in one update leaves the submission closed."""
        receipt = await submit(client)
        response = await client.put(
            f"/api/contact/{receipt['id']}",
            json={"response": "Resolved over the phone.", "status": "closed"},
            headers=admin_headers,
        )
        data = response.json()["data"]
        assert data["status"] == "closed"
        assert data["respondedAt"] is not None

    @pytest.mark.asyncio
    async def test_triage_without_response(self, client, admin_headers):
        receipt = await submit(client)
        response = await client.put(
            f"/api/contact/{receipt['id']}",
            json={"status": "in-progress", "priority": "high"},
            headers=admin_headers,
        )
        data = response.json()["data"]
        assert data["status"] == "in-progress"
        assert data["priority"] == "high"
        assert data["respondedBy"] is None

    @pytest.mark.asyncio
    async def test_public_cannot_read(self, client):
        receipt = await submit(client)
        response = await client.get(f"/api/contact/{receipt['id']}")
        assert response.status_code == 401


class TestContactListing:

    @pytest.mark.asyncio
    async def test_search_and_filter(self, client, admin_headers):
        await submit(client, firstName="Ravi", subject="Lab access request")
        await submit(client, firstName="Meera", subject="Mentorship question", source="referral")

        by_search = await client.get("/api/contact", params={"search": "lab access"}, headers=admin_headers)
        assert [i["firstName"] for i in by_search.json()["data"]["items"]] == ["Ravi"]

        by_source = await client.get("/api/contact", params={"source": "referral"}, headers=admin_headers)
        assert [i["firstName"] for i in by_source.json()["data"]["items"]] == ["Meera"]

    @pytest.mark.asyncio
    async def test_stats(self, client, admin_headers):
        first = await submit(client, subscribeNewsletter=True)
        await submit(client)
        await client.put(
            f"/api/contact/{first['id']}",
            json={"response": "Answered by email."},
            headers=admin_headers,
        )

        response = await client.get("/api/contact/stats", headers=admin_headers)
        stats = response.json()["data"]
        assert stats["total"] == 2
        assert stats["new"] == 1
        assert stats["responded"] == 1
        assert stats["inProgress"] == 0
        assert stats["closed"] == 0
        assert stats["newsletterSubscribers"] == 1
        assert len(stats["recent"]) == 2
