"""Location service: province resolution with optional reverse-geocode cross-check."""

from dataclasses import dataclass

from loguru import logger

from sdn_map.lib.geocoder import BaseReverseGeocoder, GeocodingProviderError, ReverseGeocodeResult
from sdn_map.lib.locator import ProvinceLocator, is_within_thailand
from sdn_map.lib.zones import DEFAULT_CLASSIFIER, HealthZone, ZoneClassifier, zone_color, zone_display_name

SOURCE_BOUNDARY = "boundary"
SOURCE_REVERSE_GEOCODER = "reverse_geocoder"


@dataclass(frozen=True)
class ProvinceLocation:
    """Resolved province of a coordinate with its zone metadata."""

    latitude: float
    longitude: float
    matched: bool
    province: str | None = None
    name_english: str | None = None
    source: str | None = None
    zone: HealthZone | None = None
    zone_name: str | None = None
    zone_color: str | None = None
    zone_fallback: bool = False
    remote_province: str | None = None
    agrees: bool | None = None


async def resolve_location(
    locator: ProvinceLocator,
    lat: float,
    lng: float,
    geocoder: BaseReverseGeocoder | None = None,
    classifier: ZoneClassifier = DEFAULT_CLASSIFIER,
    *,
    cross_check: bool = False,
) -> ProvinceLocation:
    """Resolve the province of a coordinate.

    The boundary dataset is consulted first. The reverse geocoder, when
    given, is asked only for points inside Thailand's map bounds and only if
    the local lookup missed or ``cross_check`` is requested. Provider failures
    are logged and leave the local answer in place.

    Args:
        locator: Province locator over the boundary dataset.
        lat: WGS84 latitude.
        lng: WGS84 longitude.
        geocoder: Optional external reverse geocoder.
        classifier: Zone classifier for the resolved province.
        cross_check: Query the geocoder even when the local lookup matched.

    Returns:
        ProvinceLocation; ``matched`` is False when neither source names a province.
    """
    local = locator.locate(lat, lng)

    remote: ReverseGeocodeResult | None = None
    if geocoder is not None and (cross_check or not local.matched) and is_within_thailand(lat, lng):
        remote = await _reverse_geocode(geocoder, lat, lng)

    if local.matched:
        province, source = local.name, SOURCE_BOUNDARY
    elif remote is not None:
        province, source = remote.province, SOURCE_REVERSE_GEOCODER
    else:
        return ProvinceLocation(latitude=lat, longitude=lng, matched=False)

    assignment = classifier.classify(province)
    agrees = None
    if local.matched and remote is not None:
        agrees = remote.province == local.name
        if not agrees:
            logger.warning(f"Province mismatch at ({lat}, {lng}): boundary={local.name!r} remote={remote.province!r}")

    return ProvinceLocation(
        latitude=lat,
        longitude=lng,
        matched=True,
        province=province,
        name_english=local.name_english,
        source=source,
        zone=assignment.zone,
        zone_name=zone_display_name(assignment.zone),
        zone_color=zone_color(assignment.zone),
        zone_fallback=assignment.is_fallback,
        remote_province=remote.province if remote is not None else None,
        agrees=agrees,
    )


async def _reverse_geocode(geocoder: BaseReverseGeocoder, lat: float, lng: float) -> ReverseGeocodeResult | None:
    try:
        return await geocoder.reverse_geocode(lat, lng)
    except GeocodingProviderError as e:
        logger.warning(f"Reverse geocoding unavailable, using boundary lookup only: {e}")
        return None
