"""Pydantic v2 schemas for document distribution statistics."""

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from sdn_map.lib.zones import HealthZone

ProvinceName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class DocumentItem(BaseModel):
    province: ProvinceName
    category_id: int | None = None
    is_published: bool = False
    created_at: datetime | None = None


class CategoryItem(BaseModel):
    id: int
    name: str = Field(..., min_length=1)


class DistributionRequest(BaseModel):
    """Documents and categories to aggregate."""

    documents: list[DocumentItem] = Field(default_factory=list, max_length=100_000)
    categories: list[CategoryItem] = Field(default_factory=list)
    months: int = Field(default=6, ge=1, le=24, description="Length of the creation timeline in months")
    as_of: date | None = Field(default=None, description="Last month of the timeline; defaults to today")


class ProvinceCountResponse(BaseModel):
    model_config = {"from_attributes": True}

    name: str
    count: int


class ZoneCountResponse(BaseModel):
    model_config = {"from_attributes": True}

    zone: HealthZone
    name: str
    count: int
    color: str


class CategoryCountResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    count: int
    color: str


class MonthCountResponse(BaseModel):
    model_config = {"from_attributes": True}

    year: int
    month: int
    label: str
    count: int


class DistributionSummaryResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_documents: int
    published_documents: int
    unpublished_documents: int
    total_categories: int
    provinces_with_documents: int
    by_province: list[ProvinceCountResponse]
    by_zone: list[ZoneCountResponse]
    by_category: list[CategoryCountResponse]
    by_month: list[MonthCountResponse]
