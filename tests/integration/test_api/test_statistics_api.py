"""Integration tests for POST /statistics/distribution."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from sdn_map.api.v1.statistics import statistics_router


@pytest.fixture
def client() -> AsyncClient:
    app = FastAPI()
    app.include_router(statistics_router, prefix="/api/v1")
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestDistributionEndpoint:
    """Tests for document distribution aggregation."""

    @pytest.mark.asyncio
    async def test_distribution(self, client: AsyncClient) -> None:
        payload = {
            "documents": [
                {"province": "ชลบุรี", "category_id": 1, "is_published": True, "created_at": "2025-03-02T09:00:00"},
                {"province": " ชลบุรี ", "category_id": 1, "created_at": "2025-01-15T12:30:00"},
                {"province": "เชียงใหม่", "category_id": 2, "is_published": True},
            ],
            "months": 3,
            "as_of": "2025-03-20",
            "categories": [{"id": 1, "name": "นโยบาย"}, {"id": 2, "name": "รายงาน"}, {"id": 3, "name": "แผน"}],
        }
        resp = await client.post("/api/v1/statistics/distribution", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_documents"] == 3
        assert data["provinces_with_documents"] == 2
        assert [row["zone"] for row in data["by_zone"]] == ["east", "north-upper"]
        assert [row["count"] for row in data["by_category"]] == [2, 1, 0]
        assert data["published_documents"] == 2
        assert data["unpublished_documents"] == 1
        assert data["total_categories"] == 3
        assert [row["label"] for row in data["by_month"]] == ["มกราคม 2568", "กุมภาพันธ์ 2568", "มีนาคม 2568"]
        assert [row["count"] for row in data["by_month"]] == [1, 0, 1]

    @pytest.mark.asyncio
    async def test_empty_body(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/statistics/distribution", json={})
        assert resp.status_code == 200
        assert resp.json()["total_documents"] == 0

    @pytest.mark.asyncio
    async def test_blank_province_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/statistics/distribution", json={"documents": [{"province": ""}]})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_whitespace_province_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/statistics/distribution", json={"documents": [{"province": "   "}]})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_months_out_of_range(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/statistics/distribution", json={"months": 0})
        assert resp.status_code == 422
