"""Tests for main application endpoints."""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from kosman.api.dependencies import get_store
from kosman.core.config import Settings
from kosman.main import app
from kosman.services.kos_store import KosStore
from kosman.services.storage import MemoryKeyValueStore


@pytest.fixture
def client():
    """Create a test client with an in-memory store."""
    store = KosStore(MemoryKeyValueStore(), Settings())
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client: TestClient):
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "kosman"


def test_store_available_to_routes(client: TestClient):
    """Test that routes reach the overridden store."""
    response = client.get("/api/properties")
    assert response.status_code == 200
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_health_endpoint_async() -> None:
    """Test the health endpoint over the ASGI transport."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
