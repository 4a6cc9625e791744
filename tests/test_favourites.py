"""Tests for favourite endpoints."""

import pytest
from httpx import AsyncClient

FAVOURITE = {"clerkId": "u1", "recommendation_id": "rec-42"}


@pytest.mark.asyncio
class TestFavourites:
    """Tests for adding, listing and removing favourites."""

    async def test_add_favourite(self, client: AsyncClient):
        """Test favouriting a recommendation."""
        response = await client.post("/favourites", json=FAVOURITE)

        assert response.status_code == 201
        assert response.json()["data"]["insertedId"]

    async def test_duplicate_favourites_are_kept(self, client: AsyncClient):
        """Test the same pair posted twice is listed twice."""
        first = await client.post("/favourites", json=FAVOURITE)
        second = await client.post("/favourites", json=FAVOURITE)
        assert first.status_code == second.status_code == 201
        assert first.json()["data"]["insertedId"] != second.json()["data"]["insertedId"]

        response = await client.get("/favourites", params={"clerkId": "u1"})

        assert response.status_code == 200
        favourites = response.json()
        assert len(favourites) == 2
        assert all(f["favourite_id"] == "rec-42" for f in favourites)
        assert all(f["clerkId"] == "u1" for f in favourites)

    async def test_list_only_own_favourites(self, client: AsyncClient):
        """Test listing is scoped to the user."""
        await client.post("/favourites", json=FAVOURITE)
        await client.post("/favourites", json={"clerkId": "u2", "recommendation_id": "rec-7"})

        response = await client.get("/favourites", params={"clerkId": "u2"})
        assert [f["favourite_id"] for f in response.json()] == ["rec-7"]

    async def test_delete_removes_one_match(self, client: AsyncClient):
        """Test delete removes a single row of a duplicated pair."""
        await client.post("/favourites", json=FAVOURITE)
        await client.post("/favourites", json=FAVOURITE)

        response = await client.request("DELETE", "/favourites", json=FAVOURITE)

        assert response.status_code == 200
        assert response.json()["data"]["deletedCount"] == 1
        remaining = await client.get("/favourites", params={"clerkId": "u1"})
        assert len(remaining.json()) == 1

    async def test_delete_missing_pair_is_noop(self, client: AsyncClient):
        """Test deleting a pair that does not exist succeeds with zero deletions."""
        response = await client.request(
            "DELETE", "/favourites", json={"clerkId": "u1", "recommendation_id": "nope"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"acknowledged": True, "deletedCount": 0}

    @pytest.mark.parametrize(
        "payload",
        [{"clerkId": "u1"}, {"recommendation_id": "rec-42"}, {"clerkId": "", "recommendation_id": "x"}],
    )
    async def test_missing_fields(self, client: AsyncClient, payload: dict):
        """Test both identifiers are required."""
        assert (await client.post("/favourites", json=payload)).status_code == 400
        assert (await client.request("DELETE", "/favourites", json=payload)).status_code == 400

    async def test_list_requires_clerk_id(self, client: AsyncClient):
        """Test listing without an identifier."""
        response = await client.get("/favourites")
        assert response.status_code == 400

    async def test_favourite_ids(self, client: AsyncClient):
        """Test the id projection."""
        await client.post("/favourites", json=FAVOURITE)
        await client.post("/favourites", json={"clerkId": "u1", "recommendation_id": "rec-9"})

        response = await client.post("/favourite-ids", json={"clerkId": "u1"})

        assert response.status_code == 200
        rows = response.json()["data"]
        assert sorted(row["favourite_id"] for row in rows) == ["rec-42", "rec-9"]
        assert set(rows[0]) == {"id", "favourite_id"}
