"""Unit tests for the location service."""

from unittest.mock import AsyncMock

import pytest

from sdn_map.lib.geocoder import GeocodingProviderError, ReverseGeocodeResult
from sdn_map.lib.locator import ProvinceLocator
from sdn_map.lib.zones import HealthZone
from sdn_map.services.location_service import (
    SOURCE_BOUNDARY,
    SOURCE_REVERSE_GEOCODER,
    resolve_location,
)


def _geocoder(province: str | None = None, error: Exception | None = None) -> AsyncMock:
    geocoder = AsyncMock()
    if error is not None:
        geocoder.reverse_geocode.side_effect = error
    elif province is None:
        geocoder.reverse_geocode.return_value = None
    else:
        geocoder.reverse_geocode.return_value = ReverseGeocodeResult(province=province)
    return geocoder


class TestResolveLocation:
    @pytest.mark.asyncio
    async def test_boundary_match(self, locator: ProvinceLocator) -> None:
        result = await resolve_location(locator, 13.1, 101.3)
        assert result.matched
        assert result.province == "ชลบุรี"
        assert result.source == SOURCE_BOUNDARY
        assert result.zone == HealthZone.EAST
        assert result.zone_name == "ตะวันออก"
        assert result.zone_fallback is False
        assert result.remote_province is None
        assert result.agrees is None

    @pytest.mark.asyncio
    async def test_no_match_without_geocoder(self, locator: ProvinceLocator) -> None:
        result = await resolve_location(locator, 15.0, 100.0)
        assert result.matched is False
        assert result.province is None
        assert result.zone is None

    @pytest.mark.asyncio
    async def test_geocoder_not_called_when_boundary_matches(self, locator: ProvinceLocator) -> None:
        geocoder = _geocoder("ชลบุรี")
        await resolve_location(locator, 13.1, 101.3, geocoder)
        geocoder.reverse_geocode.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_geocoder_fills_gap(self, locator: ProvinceLocator) -> None:
        geocoder = _geocoder("สระบุรี")
        result = await resolve_location(locator, 15.0, 100.0, geocoder)
        assert result.matched
        assert result.province == "สระบุรี"
        assert result.source == SOURCE_REVERSE_GEOCODER
        assert result.zone == HealthZone.CENTRAL
        geocoder.reverse_geocode.assert_awaited_once_with(15.0, 100.0)

    @pytest.mark.asyncio
    async def test_geocoder_skipped_outside_thailand(self, locator: ProvinceLocator) -> None:
        geocoder = _geocoder("ชลบุรี")
        result = await resolve_location(locator, 35.0, 139.0, geocoder)
        assert result.matched is False
        geocoder.reverse_geocode.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cross_check_agreement(self, locator: ProvinceLocator) -> None:
        result = await resolve_location(locator, 13.1, 101.3, _geocoder("ชลบุรี"), cross_check=True)
        assert result.source == SOURCE_BOUNDARY
        assert result.remote_province == "ชลบุรี"
        assert result.agrees is True

    @pytest.mark.asyncio
    async def test_cross_check_disagreement_keeps_boundary_answer(self, locator: ProvinceLocator) -> None:
        result = await resolve_location(locator, 13.1, 101.3, _geocoder("ระยอง"), cross_check=True)
        assert result.province == "ชลบุรี"
        assert result.remote_province == "ระยอง"
        assert result.agrees is False

    @pytest.mark.asyncio
    async def test_provider_error_is_not_fatal(self, locator: ProvinceLocator) -> None:
        geocoder = _geocoder(error=GeocodingProviderError("gistda", "timed out"))
        result = await resolve_location(locator, 13.1, 101.3, geocoder, cross_check=True)
        assert result.province == "ชลบุรี"
        assert result.remote_province is None
        assert result.agrees is None

    @pytest.mark.asyncio
    async def test_geocoder_without_province(self, locator: ProvinceLocator) -> None:
        result = await resolve_location(locator, 15.0, 100.0, _geocoder(None))
        assert result.matched is False

    @pytest.mark.asyncio
    async def test_unzoned_boundary_name_falls_back(self) -> None:
        from shapely.geometry import MultiPolygon, Polygon

        from sdn_map.lib.boundary_loader import BoundaryFeature

        feature = BoundaryFeature(
            name_local="Chonburi",
            name_english=None,
            geometry=MultiPolygon([Polygon([(100, 13), (101, 13), (101, 14), (100, 14)])]),
        )
        result = await resolve_location(ProvinceLocator([feature]), 13.5, 100.5)
        assert result.province == "Chonburi"
        assert result.zone == HealthZone.CENTRAL
        assert result.zone_fallback is True
