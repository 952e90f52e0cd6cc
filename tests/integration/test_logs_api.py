"""Integration tests for the log dashboard API."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_dashboard(async_client: AsyncClient):
    """Test the unfiltered dashboard."""
    response = await async_client.get("/api/v1/logs")

    assert response.status_code == 200
    data = response.json()
    assert data["filter"] == {
        "level": None,
        "service": None,
        "message": None,
        "timestamp": None,
    }
    assert data["stats"] == {
        "total_logs": 8,
        "errors": 2,
        "warnings": 2,
        "success_rate": 75.0,
    }
    assert len(data["volume"]) == 24
    assert data["volume"][14] == {"hour": "14", "count": 4}
    assert [t["name"] for t in data["types"]] == ["Info", "Warning", "Error", "Debug"]
    assert len(data["recent"]) == 8
    assert data["recent"][0]["message"] == "User authentication successful"


@pytest.mark.asyncio
async def test_set_filter(async_client: AsyncClient):
    """Test that PUT replaces the filter and recomputes the dashboard."""
    response = await async_client.put(
        "/api/v1/logs/filter", json={"service": "db-service"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filter"]["service"] == "db-service"
    assert data["stats"]["total_logs"] == 2
    assert data["stats"]["warnings"] == 1
    assert data["stats"]["success_rate"] == 100.0

    response = await async_client.put("/api/v1/logs/filter", json={"level": "INFO"})
    data = response.json()
    assert data["filter"]["service"] is None
    assert data["stats"]["total_logs"] == 3


@pytest.mark.asyncio
async def test_set_filter_by_message(async_client: AsyncClient):
    response = await async_client.put(
        "/api/v1/logs/filter", json={"message": "REDIS"}
    )

    data = response.json()
    assert data["stats"]["total_logs"] == 1
    assert data["recent"][0]["service"] == "cache-service"


@pytest.mark.asyncio
async def test_set_filter_rejects_unknown_level(async_client: AsyncClient):
    response = await async_client.put("/api/v1/logs/filter", json={"level": "TRACE"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_clear_filter(async_client: AsyncClient):
    await async_client.put("/api/v1/logs/filter", json={"level": "ERROR"})

    response = await async_client.delete("/api/v1/logs/filter")

    assert response.status_code == 200
    assert response.json()["stats"]["total_logs"] == 8


@pytest.mark.asyncio
async def test_filter_matching_nothing(async_client: AsyncClient):
    """Test the dashboard when no log passes the filter."""
    response = await async_client.put(
        "/api/v1/logs/filter", json={"service": "missing-service"}
    )

    data = response.json()
    assert data["stats"]["total_logs"] == 0
    assert data["stats"]["success_rate"] == 0.0
    assert all(bucket["count"] == 0 for bucket in data["volume"])
    assert all(share["percentage"] == 0 for share in data["types"])
    assert data["recent"] == []
