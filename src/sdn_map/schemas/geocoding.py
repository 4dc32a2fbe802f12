"""Pydantic v2 schemas for reverse geocoding."""

from pydantic import BaseModel


class ReverseGeocodeResponse(BaseModel):
    """Address of a coordinate from the external reverse geocoder."""

    latitude: float
    longitude: float
    provider: str
    province: str
    district: str | None = None
    subdistrict: str | None = None
    geocode: int | None = None
