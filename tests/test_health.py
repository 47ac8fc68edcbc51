"""
Tests for the health check endpoint and application startup.
"""

from httpx import AsyncClient

from telemedicine.database import USES_SQLITE
from telemedicine.main import app


class TestHealthCheck:
    """GET /api/health"""

    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert response.headers.get("X-Request-ID")


class TestStartup:

    async def test_startup_prepares_sqlite_schema(self):
        assert USES_SQLITE
        # Runs logging setup and table creation against the configured engine
        async with app.router.lifespan_context(app):
            pass
