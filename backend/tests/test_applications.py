"""
Incubator Backend — Intake Application Tests
==============================================

What we test:
    ✅ Pre-incubation and incubation forms are public and validated in full
    ✅ Minimum answer lengths are enforced
    ✅ reviewedAt / approvedAt are stamped once, on the right transitions
    ✅ Repeating a status update changes nothing but updatedAt
    ✅ Admin listing filters (status, stage, category) and stats
"""

import pytest

SHORT = (
    "Rural clinics lack affordable diagnostics, so many infections go "
    "untreated for weeks."
)
LONG = (
    "A paper-based rapid test kit that reads out in fifteen minutes, needs no "
    "cold chain and costs a tenth of current lab tests in district hospitals."
)
BRIEF = "Two advisors from the medical college."

PRE_INCUBATION = {
    "applicantName": "Neha Singh",
    "companyName": "DiagnoSure",
    "foundingTeam": [{"name": "Neha Singh", "contact": "neha@example.com"}],
    "shareholdingStructure": [{"name": "Neha Singh", "shares": 1000, "percentage": 100}],
    "hasFiledITReturn": True,
    "problemAddressed": SHORT,
    "proposedSolution": SHORT,
    "productServiceDetails": LONG,
    "targetCustomer": LONG,
    "businessPlan": LONG,
    "marketSize": LONG,
    "goToMarketStrategy": LONG,
    "revenueModel": LONG,
    "competitors": LONG,
    "fundingInvestment": LONG,
    "swotAnalysis": LONG,
    "technologyCategory": "self-developed",
    "technologyDetails": SHORT,
    "infrastructureFacilities": SHORT,
    "mentors": BRIEF,
    "manpower": BRIEF,
}

INCUBATION = {
    "applicantName": "Rahul Das",
    "applicantEmail": "rahul@example.com",
    "dateOfBirth": "1996-04-12",
    "qualification": "M.Tech, Biomedical Engineering",
    "contactDetails": SHORT,
    "entityType": "startup",
    "innovationTitle": "Low-cost glucose monitor",
    "prototypeTime": "6 months",
    "category": "Product",
    "innovationDescription": LONG,
    "applications": SHORT,
    "novelty": SHORT,
    "businessModel": SHORT,
    "rndStatus": SHORT,
    "trlStatus": SHORT,
    "teamMembers": SHORT,
    "requestedPeriod": "12 months",
    "spaceRequested": "Two desks in the wet lab",
    "equipmentRequired": SHORT,
    "fundRaised": "Seed grant of five lakh rupees.",
    "annualTurnover": "No revenue yet, pilot stage.",
    "incubationHelp": SHORT,
    "documents": "Pitch deck and patent draft.",
    "futureVision": SHORT,
}


async def submit(client, path, payload, **overrides):
    response = await client.post(path, json=dict(payload, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestPreIncubationSubmission:

    @pytest.mark.asyncio
    async def test_submit(self, client, admin_headers):
        body = await submit(client, "/api/pre-incubation", PRE_INCUBATION)
        assert body["message"] == "Pre-incubation application submitted successfully"
        data = body["data"]
        assert data["applicationStatus"] == "submitted"
        assert data["currentStage"] == "pre-incubation"
        assert data["status"] == "active"
        assert data["hasFiledITReturn"] is True
        assert data["reviewedAt"] is None
        assert data["foundingTeam"][0]["name"] == "Neha Singh"
        assert data["createdBy"] is None

    @pytest.mark.asyncio
    async def test_min_lengths(self, client):
        response = await client.post(
            "/api/pre-incubation",
            json=dict(PRE_INCUBATION, problemAddressed="Too short", swotAnalysis=SHORT, mentors="None"),
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 3
        assert any(error.startswith("problemAddressed:") for error in errors)
        assert any(error.startswith("swotAnalysis:") for error in errors)
        assert any(error.startswith("mentors:") for error in errors)

    @pytest.mark.asyncio
    async def test_missing_fields_all_reported(self, client):
        response = await client.post("/api/pre-incubation", json={"applicantName": "Neha Singh"})
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "companyName: Field required" in errors
        assert "technologyCategory: Field required" in errors
        assert len(errors) >= 15

    @pytest.mark.asyncio
    async def test_tracking_fields_are_admin_only(self, client):
        """Applicants cannot submit themselves as already approved."""
        body = await submit(client, "/api/pre-incubation", PRE_INCUBATION, applicationStatus="approved")
        assert body["data"]["applicationStatus"] == "submitted"

    @pytest.mark.asyncio
    async def test_listing_requires_admin(self, client):
        response = await client.get("/api/pre-incubation")
        assert response.status_code == 401


class TestReviewTimeline:

    @pytest.mark.asyncio
    async def test_reviewed_and_approved_stamps(self, client, admin_headers):
        created = (await submit(client, "/api/pre-incubation", PRE_INCUBATION))["data"]
        url = f"/api/pre-incubation/{created['id']}"

        review = await client.put(url, json={"applicationStatus": "under-review"}, headers=admin_headers)
        assert review.status_code == 200
        reviewed = review.json()["data"]
        assert reviewed["reviewedAt"] is not None
        assert reviewed["approvedAt"] is None

        approve = await client.put(url, json={"applicationStatus": "approved"}, headers=admin_headers)
        approved = approve.json()["data"]
        assert approved["reviewedAt"] == reviewed["reviewedAt"]
        assert approved["approvedAt"] is not None

        incubate = await client.put(
            url,
            json={"applicationStatus": "incubated", "currentStage": "incubation", "employees": 4},
            headers=admin_headers,
        )
        incubated = incubate.json()["data"]
        assert incubated["approvedAt"] == approved["approvedAt"]
        assert incubated["currentStage"] == "incubation"
        assert incubated["employees"] == 4

    @pytest.mark.asyncio
    async def test_repeated_status_update_is_stable(self, client, admin_headers):
        """Approving twice keeps the first reviewedAt/approvedAt."""
        created = (await submit(client, "/api/pre-incubation", PRE_INCUBATION))["data"]
        url = f"/api/pre-incubation/{created['id']}"
        update = {"applicationStatus": "approved"}

        first = (await client.put(url, json=update, headers=admin_headers)).json()["data"]
        second = (await client.put(url, json=update, headers=admin_headers)).json()["data"]
        assert first["approvedAt"] is not None
        first.pop("updatedAt")
        second.pop("updatedAt")
        assert second == first

    @pytest.mark.asyncio
    async def test_transitions_are_permissive(self, client, admin_headers):
        """Any status may follow any other; stamps still appear on first entry."""
        created = (await submit(client, "/api/pre-incubation", PRE_INCUBATION))["data"]
        response = await client.put(
            f"/api/pre-incubation/{created['id']}",
            json={"applicationStatus": "approved"},
            headers=admin_headers,
        )
        data = response.json()["data"]
        assert data["applicationStatus"] == "approved"
        assert data["reviewedAt"] is not None
        assert data["approvedAt"] is not None

    @pytest.mark.asyncio
    async def test_unknown_status(self, client, admin_headers):
        created = (await submit(client, "/api/pre-incubation", PRE_INCUBATION))["data"]
        response = await client.put(
            f"/api/pre-incubation/{created['id']}",
            json={"applicationStatus": "accepted"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_answer_correction(self, client, admin_headers):
        created = (await submit(client, "/api/pre-incubation", PRE_INCUBATION))["data"]
        response = await client.put(
            f"/api/pre-incubation/{created['id']}",
            json={"companyName": "DiagnoSure Labs", "milestones": ["Pilot in two districts"]},
            headers=admin_headers,
        )
        data = response.json()["data"]
        assert data["companyName"] == "DiagnoSure Labs"
        assert data["milestones"] == ["Pilot in two districts"]
        assert data["reviewedAt"] is None


class TestIncubation:

    @pytest.mark.asyncio
    async def test_submit(self, client):
        body = await submit(client, "/api/incubation", INCUBATION)
        assert body["message"] == "Incubation application submitted successfully"
        data = body["data"]
        assert data["currentStage"] == "incubation"
        assert data["category"] == "Product"
        assert data["isStudent"] is False

    @pytest.mark.asyncio
    async def test_invalid_category(self, client):
        response = await client.post("/api/incubation", json=dict(INCUBATION, category="Service"))
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("category:")

    @pytest.mark.asyncio
    async def test_category_filter_and_search(self, client, admin_headers):
        await submit(client, "/api/incubation", INCUBATION)
        await submit(
            client,
            "/api/incubation",
            INCUBATION,
            applicantEmail="priya@example.com",
            innovationTitle="Solvent recovery process",
            category="Process",
        )

        by_category = await client.get("/api/incubation", params={"category": "Process"}, headers=admin_headers)
        assert [i["innovationTitle"] for i in by_category.json()["data"]["items"]] == [
            "Solvent recovery process"
        ]

        by_search = await client.get("/api/incubation", params={"search": "glucose"}, headers=admin_headers)
        assert [i["innovationTitle"] for i in by_search.json()["data"]["items"]] == [
            "Low-cost glucose monitor"
        ]

    @pytest.mark.asyncio
    async def test_stats(self, client, admin_headers):
        first = (await submit(client, "/api/incubation", INCUBATION))["data"]
        await submit(client, "/api/incubation", INCUBATION, category="Process")
        await client.put(
            f"/api/incubation/{first['id']}",
            json={"applicationStatus": "approved"},
            headers=admin_headers,
        )

        stats = (await client.get("/api/incubation/stats", headers=admin_headers)).json()["data"]
        assert stats["total"] == 2
        assert stats["submitted"] == 1
        assert stats["approved"] == 1
        assert stats["underReview"] == 0
        assert stats["stageDistribution"] == [{"value": "incubation", "count": 2}]
        assert stats["categoryDistribution"] == [
            {"value": "Process", "count": 1},
            {"value": "Product", "count": 1},
        ]
