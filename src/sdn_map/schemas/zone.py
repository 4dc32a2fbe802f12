"""Pydantic v2 schemas for health zones."""

from pydantic import BaseModel

from sdn_map.lib.zones import HealthZone


class ZoneSummaryResponse(BaseModel):
    """Display summary of one zone."""

    model_config = {"from_attributes": True}

    id: HealthZone
    name: str
    province_count: int
    color: str


class ZoneDetailResponse(ZoneSummaryResponse):
    """Zone summary with its member provinces."""

    provinces: list[str]
