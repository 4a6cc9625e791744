"""Tests for user profile endpoints."""

import pytest
from httpx import AsyncClient

from fitness_server.services.user_service import UPDATABLE_FIELDS, allowed_update_fields

ALLOWED_FIELD_VALUES = {
    "name": "Alice",
    "email": "alice@x.com",
    "gender": "female",
    "weight": 68.5,
    "height": 170,
    "age": 31,
    "goal": "lose weight",
    "exerciseType": "cardio",
    "bmi": 23.7,
}


async def _details(client: AsyncClient, clerk_id: str) -> dict:
    response = await client.post("/user-details", json={"clerkId": clerk_id})
    assert response.status_code == 200
    return response.json()["data"]


@pytest.mark.asyncio
class TestUserCreate:
    """Tests for registration."""

    async def test_create_user(self, client: AsyncClient, sample_user_data: dict):
        """Test registering a user."""
        response = await client.post("/user-create", json=sample_user_data)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User created successfully"
        assert data["data"]["acknowledged"] is True
        assert data["data"]["insertedId"]

    @pytest.mark.parametrize("missing", ["name", "email", "clerkId"])
    async def test_create_user_missing_field(
        self, client: AsyncClient, sample_user_data: dict, missing: str
    ):
        """Test registration without a required field is rejected."""
        sample_user_data.pop(missing)
        response = await client.post("/user-create", json=sample_user_data)

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"

    async def test_create_user_empty_clerk_id(self, client: AsyncClient):
        """Test an empty identifier counts as missing."""
        response = await client.post(
            "/user-create", json={"name": "A", "email": "a@x.com", "clerkId": ""}
        )
        assert response.status_code == 400

    async def test_create_user_duplicate(self, client: AsyncClient, test_user: dict):
        """Test registering the same identifier twice conflicts."""
        response = await client.post("/user-create", json=test_user)
        assert response.status_code == 409


@pytest.mark.asyncio
class TestVitals:
    """Tests for the vitals upsert."""

    async def test_update_bmi_computes_bmi(self, client: AsyncClient, test_user: dict):
        """Test BMI is computed from centimeters when omitted."""
        response = await client.put(
            "/update-bmi",
            json={"clerkId": "u1", "age": 30, "weight": 70, "height": 175},
        )

        assert response.status_code == 200
        assert response.json()["data"]["matchedCount"] == 1

        user = await _details(client, "u1")
        assert user["bmi"] == 22.86
        assert user["age"] == 30
        assert user["weight"] == 70
        assert user["height"] == 175

    async def test_update_bmi_keeps_supplied_bmi(self, client: AsyncClient, test_user: dict):
        """Test a supplied BMI is stored as is, with the terms flag."""
        response = await client.put(
            "/update-bmi",
            json={
                "clerkId": "u1",
                "age": 30,
                "weight": 70,
                "height": 175,
                "bmi": 21.5,
                "termsAccepted": True,
            },
        )
        assert response.status_code == 200

        user = await _details(client, "u1")
        assert user["bmi"] == 21.5
        assert user["termsAccepted"] is True

    async def test_update_bmi_creates_profile(self, client: AsyncClient):
        """Test vitals for an unknown user create the profile."""
        response = await client.put(
            "/update-bmi",
            json={"clerkId": "new-user", "age": 25, "weight": 60, "height": 160},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["matchedCount"] == 0
        assert data["upsertedId"]

        user = await _details(client, "new-user")
        assert user["bmi"] == 23.44

    @pytest.mark.parametrize(
        "payload",
        [
            {"clerkId": "u1", "weight": 70, "height": 175},
            {"clerkId": "u1", "age": 30, "weight": 70, "height": 0},
            {"age": 30, "weight": 70, "height": 175},
        ],
    )
    async def test_update_bmi_invalid(self, client: AsyncClient, payload: dict):
        """Test missing or non-positive vitals are rejected."""
        response = await client.put("/update-bmi", json=payload)
        assert response.status_code == 400


@pytest.mark.asyncio
class TestFieldUpdate:
    """Tests for the allow-listed single-field update."""

    @pytest.mark.parametrize("field,value", list(ALLOWED_FIELD_VALUES.items()))
    async def test_update_allowed_field_is_idempotent(
        self, client: AsyncClient, test_user: dict, field: str, value
    ):
        """Test every allow-listed field can be set, twice, to the same end state."""
        payload = {"clerkId": "u1", "field": field, "value": value}

        first = await client.post("/user-update", json=payload)
        after_first = await _details(client, "u1")
        second = await client.post("/user-update", json=payload)
        after_second = await _details(client, "u1")

        assert first.status_code == 200
        assert second.status_code == 200
        assert after_first[field] == value
        after_first.pop("updatedAt")
        after_second.pop("updatedAt")
        assert after_first == after_second

    @pytest.mark.parametrize("field", ["clerkId", "clerk_id", "id", "createdAt", "role", "$set"])
    async def test_update_rejects_unlisted_field(
        self, client: AsyncClient, test_user: dict, field: str
    ):
        """Test fields outside the allow-list are rejected before any write."""
        response = await client.post(
            "/user-update", json={"clerkId": "u1", "field": field, "value": "hacked"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == f"Invalid field: {field}"

        user = await _details(client, "u1")
        assert user["clerkId"] == "u1"

    async def test_update_rejects_invalid_value(self, client: AsyncClient, test_user: dict):
        """Test numeric fields reject non-numeric values."""
        response = await client.post(
            "/user-update", json={"clerkId": "u1", "field": "weight", "value": "heavy"}
        )
        assert response.status_code == 400

    async def test_update_with_bmi(self, client: AsyncClient, test_user: dict):
        """Test a BMI sent with a weight change is stored too."""
        response = await client.post(
            "/user-update",
            json={"clerkId": "u1", "field": "weight", "value": 80, "bmi": 26.12},
        )
        assert response.status_code == 200

        user = await _details(client, "u1")
        assert user["weight"] == 80
        assert user["bmi"] == 26.12

    async def test_update_unknown_user(self, client: AsyncClient):
        """Test updating a missing profile returns 404."""
        response = await client.post(
            "/user-update", json={"clerkId": "ghost", "field": "name", "value": "Ghost"}
        )
        assert response.status_code == 404

    async def test_update_missing_value(self, client: AsyncClient, test_user: dict):
        """Test a field update without a value is rejected."""
        response = await client.post("/user-update", json={"clerkId": "u1", "field": "name"})
        assert response.status_code == 400


def test_allowed_update_fields_default():
    """Test the default allow-list."""
    assert allowed_update_fields() == frozenset(ALLOWED_FIELD_VALUES)


def test_allowed_update_fields_ignores_unknown_columns():
    """Test configured names without a profile column are never allowed."""
    allowed = allowed_update_fields(frozenset({"name", "targetSteps", "clerkId", "password"}))
    assert allowed == frozenset({"name", "targetSteps"})
    assert "clerkId" not in UPDATABLE_FIELDS


@pytest.mark.asyncio
class TestTargetsAndPreferences:
    """Tests for the narrow profile updates."""

    async def test_target_steps_roundtrip(self, client: AsyncClient, test_user: dict):
        """Test setting and reading the step target."""
        response = await client.put("/user-target-steps", json={"clerkId": "u1", "goal": 8000})
        assert response.status_code == 200

        response = await client.get("/user-target-steps", params={"clerkId": "u1"})
        assert response.status_code == 200
        assert response.json()["data"] == {"clerkId": "u1", "targetSteps": 8000}

    async def test_target_steps_not_set(self, client: AsyncClient, test_user: dict):
        """Test reading an unset step target returns 404."""
        response = await client.get("/user-target-steps", params={"clerkId": "u1"})
        assert response.status_code == 404

    async def test_target_steps_missing_clerk_id(self, client: AsyncClient):
        """Test reading the step target without an identifier returns 400."""
        response = await client.get("/user-target-steps")
        assert response.status_code == 400

    async def test_update_goal_and_fetch(self, client: AsyncClient, test_user: dict):
        """Test the goal endpoints."""
        response = await client.put("/update-goal", json={"clerkId": "u1", "goal": "build muscle"})
        assert response.status_code == 200
        assert response.json()["message"] == "Goal updated successfully"

        await client.put("/update-exercise-type", json={"clerkId": "u1", "exerciseType": "yoga"})

        response = await client.post("/fetch-goal", json={"clerkId": "u1"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["goal"] == "build muscle"
        assert data["exerciseType"] == "yoga"

    async def test_fetch_goal_unknown_user(self, client: AsyncClient):
        """Test fetching the goal of a missing profile returns 404."""
        response = await client.post("/fetch-goal", json={"clerkId": "ghost"})
        assert response.status_code == 404

    async def test_update_gender_is_idempotent(self, client: AsyncClient, test_user: dict):
        """Test setting the same gender twice."""
        for _ in range(2):
            response = await client.put("/update-gender", json={"clerkId": "u1", "gender": "male"})
            assert response.status_code == 200
            assert response.json()["data"]["matchedCount"] == 1

        user = await _details(client, "u1")
        assert user["gender"] == "male"

    async def test_update_gender_creates_profile(self, client: AsyncClient):
        """Test the gender upsert can create a profile with name and email."""
        response = await client.put(
            "/update-gender",
            json={"clerkId": "u2", "gender": "female", "name": "B", "email": "b@x.com"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["upsertedId"]

        user = await _details(client, "u2")
        assert user["name"] == "B"
        assert user["email"] == "b@x.com"
        assert user["gender"] == "female"

    async def test_user_details_not_found(self, client: AsyncClient):
        """Test details of a missing profile return 404."""
        response = await client.post("/user-details", json={"clerkId": "ghost"})
        assert response.status_code == 404
        assert response.json()["error"] == "NotFoundException"
