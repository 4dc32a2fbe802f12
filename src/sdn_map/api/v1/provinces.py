"""Province API endpoints — point location, dataset listing, and zone lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from sdn_map.core.dependencies import get_geocoder, get_locator, get_zone_classifier
from sdn_map.lib.geocoder import BaseReverseGeocoder
from sdn_map.lib.locator import ProvinceLocator
from sdn_map.lib.zones import ZoneClassifier, zone_display_name
from sdn_map.schemas.province import (
    ProvinceListResponse,
    ProvinceLocationResponse,
    ProvinceResponse,
    ZoneAssignmentResponse,
)
from sdn_map.services.location_service import resolve_location

provinces_router = APIRouter(prefix="/provinces", tags=["provinces"])


@provinces_router.get(
    "/locate",
    response_model=ProvinceLocationResponse,
)
async def locate_province(
    locator: Annotated[ProvinceLocator, Depends(get_locator)],
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
    geocoder: Annotated[BaseReverseGeocoder | None, Depends(get_geocoder)],
    lat: float = Query(..., ge=-90, le=90, description="WGS84 latitude"),  # noqa: B008
    lng: float = Query(..., ge=-180, le=180, description="WGS84 longitude"),  # noqa: B008
    cross_check: bool = Query(  # noqa: B008
        False, description="Also ask the external reverse geocoder when the boundary lookup matches"
    ),
) -> ProvinceLocationResponse:
    """Find the province containing a point. An unmatched point is a 200 with ``matched`` false."""
    location = await resolve_location(locator, lat, lng, geocoder, classifier, cross_check=cross_check)
    return ProvinceLocationResponse.model_validate(location)


@provinces_router.get(
    "",
    response_model=ProvinceListResponse,
)
async def list_provinces(
    locator: Annotated[ProvinceLocator, Depends(get_locator)],
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
) -> ProvinceListResponse:
    """List the provinces of the loaded boundary dataset in dataset order."""
    items = [
        ProvinceResponse(
            name=feature.name_local,
            name_english=feature.name_english,
            zone=classifier.zone_of(feature.name_local),
        )
        for feature in locator
    ]
    return ProvinceListResponse(items=items, total=len(items))


@provinces_router.get(
    "/{name}/zone",
    response_model=ZoneAssignmentResponse,
)
async def get_province_zone(
    name: str,
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
) -> ZoneAssignmentResponse:
    """Return the health zone of a province. Unknown names get the default zone."""
    assignment = classifier.classify(name.strip())
    return ZoneAssignmentResponse(
        province=assignment.province,
        zone=assignment.zone,
        zone_name=zone_display_name(assignment.zone),
        is_fallback=assignment.is_fallback,
    )
