"""Pydantic v2 schemas for province lookups."""

from pydantic import BaseModel, Field

from sdn_map.lib.zones import HealthZone


class ProvinceLocationResponse(BaseModel):
    """Province containing a coordinate, with its health zone."""

    model_config = {"from_attributes": True}

    latitude: float
    longitude: float
    matched: bool
    province: str | None = None
    name_english: str | None = None
    source: str | None = Field(
        default=None,
        description="'boundary' for the local dataset, 'reverse_geocoder' for the external provider",
    )
    zone: HealthZone | None = None
    zone_name: str | None = None
    zone_color: str | None = None
    zone_fallback: bool = Field(
        default=False,
        description="True when the province is not in the zone table and the zone is the default",
    )
    remote_province: str | None = None
    agrees: bool | None = None


class ProvinceResponse(BaseModel):
    """A province in the boundary dataset."""

    name: str
    name_english: str | None = None
    zone: HealthZone


class ProvinceListResponse(BaseModel):
    items: list[ProvinceResponse]
    total: int


class ZoneAssignmentResponse(BaseModel):
    """Zone of a province by name."""

    model_config = {"from_attributes": True}

    province: str
    zone: HealthZone
    zone_name: str
    is_fallback: bool
