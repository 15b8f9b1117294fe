"""Tests for the service info and liveness endpoints."""

from httpx import ASGITransport, AsyncClient

from app.core.config import settings
from app.main import app


class TestIndex:
    async def test_reports_version_and_endpoints(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == settings.API_VERSION
        assert body["endpoints"]["create_reading"] == "POST /api/readings"

    async def test_api_version_header(self, client):
        response = await client.get("/")
        assert response.headers["X-API-Version"] == settings.API_VERSION


class TestHealth:
    async def test_healthy(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "timestamp" in body

    async def test_does_not_need_database(self):
        # No get_db override: the default engine points at a server that is not running
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            response = await ac.get("/health")
        assert response.status_code == 200
