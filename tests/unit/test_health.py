"""
Unit tests for health endpoints.
"""

import pytest
from httpx import AsyncClient

from ticket_inbox.api.deps import get_cache
from ticket_inbox.main import app


@pytest.mark.asyncio
async def test_health_check(async_client: AsyncClient) -> None:
    """Test basic health check endpoint."""
    response = await async_client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "Ticket Inbox API"
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_readiness_check(async_client: AsyncClient) -> None:
    """Test readiness check endpoint."""
    response = await async_client.get("/health/ready")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"] == {"app": True, "cache": True}


@pytest.mark.asyncio
async def test_readiness_reports_unreachable_cache(async_client: AsyncClient) -> None:
    """Readiness turns not_ready when the cache store does not answer."""

    class DownCache:
        async def ping(self) -> bool:
            return False

    app.dependency_overrides[get_cache] = lambda: DownCache()

    response = await async_client.get("/health/ready")
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["cache"] is False


@pytest.mark.asyncio
async def test_liveness_check(async_client: AsyncClient) -> None:
    """Test liveness check endpoint."""
    response = await async_client.get("/health/live")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "alive"


@pytest.mark.asyncio
async def test_root_endpoint(async_client: AsyncClient) -> None:
    """Test root endpoint."""
    response = await async_client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert "name" in data
    assert data["endpoints"]["inbox"] == "/api/inbox"
