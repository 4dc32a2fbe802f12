"""Integration tests for the /categories color endpoints."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from sdn_map.api.v1.categories import categories_router


@pytest.fixture
def client() -> AsyncClient:
    app = FastAPI()
    app.include_router(categories_router, prefix="/api/v1")
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestCategoryColors:
    """Tests for category color endpoints."""

    @pytest.mark.asyncio
    async def test_color_by_id(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/categories/1/color")
        assert resp.status_code == 200
        assert resp.json() == {
            "id": 1,
            "primary": "#FF3B30",
            "light": "#FF3B3020",
            "dark": "#cc2f26",
            "text": "#FF3B30",
        }

    @pytest.mark.asyncio
    async def test_color_wraps(self, client: AsyncClient) -> None:
        first = (await client.get("/api/v1/categories/1/color")).json()
        wrapped = (await client.get("/api/v1/categories/17/color")).json()
        assert first["primary"] == wrapped["primary"]

    @pytest.mark.asyncio
    async def test_color_by_name(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/categories/color", params={"name": "a"})
        assert resp.status_code == 200
        assert resp.json()["id"] == 2

    @pytest.mark.asyncio
    async def test_color_by_name_requires_name(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/categories/color")
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_non_integer_id_returns_422(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/categories/abc/color")
        assert resp.status_code == 422
