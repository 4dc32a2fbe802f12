"""Zone API endpoints — zone summaries and membership."""

from typing import Annotated

from fastapi import APIRouter, Depends

from sdn_map.core.dependencies import get_zone_classifier
from sdn_map.lib.zones import HealthZone, ZoneClassifier, zone_color, zone_display_name
from sdn_map.schemas.zone import ZoneDetailResponse, ZoneSummaryResponse

zones_router = APIRouter(prefix="/zones", tags=["zones"])


@zones_router.get(
    "",
    response_model=list[ZoneSummaryResponse],
)
async def list_zones(
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
) -> list[ZoneSummaryResponse]:
    """List all ten health zones with province counts and colors."""
    return [ZoneSummaryResponse.model_validate(row) for row in classifier.summary()]


@zones_router.get(
    "/{zone_id}",
    response_model=ZoneDetailResponse,
)
async def get_zone(
    zone_id: HealthZone,
    classifier: Annotated[ZoneClassifier, Depends(get_zone_classifier)],
) -> ZoneDetailResponse:
    """Return one zone with its provinces sorted by name."""
    provinces = classifier.provinces_in_zone(zone_id)
    return ZoneDetailResponse(
        id=zone_id,
        name=zone_display_name(zone_id),
        province_count=len(provinces),
        color=zone_color(zone_id),
        provinces=provinces,
    )
