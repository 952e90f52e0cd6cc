"""Integration tests for the theme API."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_theme_default(async_client: AsyncClient):
    response = await async_client.get("/api/v1/theme")

    assert response.status_code == 200
    assert response.json() == {"theme": "light"}


@pytest.mark.asyncio
async def test_set_theme(async_client: AsyncClient):
    response = await async_client.put("/api/v1/theme", json={"theme": "dark"})

    assert response.status_code == 200
    assert response.json() == {"theme": "dark"}
    assert (await async_client.get("/api/v1/theme")).json()["theme"] == "dark"


@pytest.mark.asyncio
async def test_set_theme_rejects_unknown(async_client: AsyncClient):
    response = await async_client.put("/api/v1/theme", json={"theme": "purple"})

    assert response.status_code == 422
    assert (await async_client.get("/api/v1/theme")).json()["theme"] == "light"


@pytest.mark.asyncio
async def test_toggle_theme(async_client: AsyncClient):
    first = await async_client.post("/api/v1/theme/toggle")
    second = await async_client.post("/api/v1/theme/toggle")

    assert first.json() == {"theme": "dark"}
    assert second.json() == {"theme": "light"}
