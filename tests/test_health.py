"""Tests for health checks and error responses."""

import pytest
from httpx import AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.mark.asyncio
class TestHealth:
    """Tests for health endpoints."""

    async def test_ping(self, client: AsyncClient):
        """Test ping."""
        response = await client.get("/ping")
        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    async def test_health(self, client: AsyncClient):
        """Test basic health check."""
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_detailed_health(self, client: AsyncClient):
        """Test the readiness probe reaches the store."""
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"]["status"] == "healthy"
        assert data["database"]["latency_ms"] >= 0

    async def test_root(self, client: AsyncClient):
        """Test root endpoint."""
        response = await client.get("/")
        assert response.status_code == 200
        assert "version" in response.json()


@pytest.mark.asyncio
class TestErrorResponses:
    """Tests for the error envelope."""

    async def test_validation_error_shape(self, client: AsyncClient):
        """Test validation failures map to 400 with details."""
        response = await client.post("/user-create", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["message"] == "Missing or invalid required fields"
        assert {tuple(d["loc"])[-1] for d in data["details"]} >= {"name", "email", "clerkId"}

    async def test_malformed_json_is_client_error(self, client: AsyncClient):
        """Test an unparseable body is a 400."""
        response = await client.post(
            "/user-create", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    async def test_unknown_route(self, client: AsyncClient):
        """Test unknown routes return 404 in the error envelope."""
        response = await client.get("/no-such-route")
        assert response.status_code == 404
        assert response.json()["error"] == "HTTPException"

    async def test_store_error_is_generic(self, client: AsyncClient, db_session: AsyncSession):
        """Test data store failures return 500 without driver details."""
        await db_session.execute(text("DROP TABLE favourites"))
        await db_session.commit()

        response = await client.get("/favourites", params={"clerkId": "u1"})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "StoreError"
        assert data["message"] == "Internal Server Error"
        assert "favourites" not in data["message"]
