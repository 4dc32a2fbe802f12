"""Geocoding API endpoints — reverse geocoding proxy."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sdn_map.core.dependencies import get_geocoder
from sdn_map.lib.geocoder import BaseReverseGeocoder, GeocodingProviderError
from sdn_map.schemas.geocoding import ReverseGeocodeResponse

geocoding_router = APIRouter(prefix="/geocoding", tags=["geocoding"])


@geocoding_router.get(
    "/reverse",
    response_model=ReverseGeocodeResponse,
)
async def reverse_geocode(
    geocoder: Annotated[BaseReverseGeocoder | None, Depends(get_geocoder)],
    lat: float = Query(..., ge=-90, le=90, description="WGS84 latitude"),  # noqa: B008
    lng: float = Query(..., ge=-180, le=180, description="WGS84 longitude"),  # noqa: B008
) -> ReverseGeocodeResponse:
    """Resolve a coordinate to its address through the external provider."""
    if geocoder is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Reverse geocoding is not configured.",
        )

    try:
        result = await geocoder.reverse_geocode(lat, lng)
    except GeocodingProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Geocoding provider is temporarily unavailable. Please retry later.",
        ) from e

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="The provider returned no province for this location.",
        )

    return ReverseGeocodeResponse(
        latitude=lat,
        longitude=lng,
        provider=geocoder.provider_name,
        province=result.province,
        district=result.district,
        subdistrict=result.subdistrict,
        geocode=result.geocode,
    )
