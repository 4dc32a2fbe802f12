"""GISTDA Sphere reverse geocoder provider.

Uses the GISTDA Sphere address service
(https://api.sphere.gistda.or.th/services/geo/address) to resolve a
coordinate to its Thai province, district and subdistrict.
"""

import httpx
from loguru import logger

from sdn_map.lib.geocoder.base import (
    BaseReverseGeocoder,
    GeocodingProviderError,
    ReverseGeocodeResult,
)

DEFAULT_BASE_URL = "https://api.sphere.gistda.or.th"
DEFAULT_TIMEOUT = 10.0

# Property names seen for the province across GISTDA response variants, in priority order
_PROVINCE_KEYS = ("province_t", "province", "changwat_t", "CHANGWAT_T", "chwngwat_t")
_DISTRICT_KEYS = ("district", "amphoe_t", "AMPHOE_T")
_SUBDISTRICT_KEYS = ("subdistrict", "tambon_t", "TAMBON_T")


class GistdaReverseGeocoder(BaseReverseGeocoder):
    """GISTDA Sphere reverse geocoder provider."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "gistda"

    @property
    def requires_api_key(self) -> bool:
        return True

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def reverse_geocode(self, lat: float, lng: float) -> ReverseGeocodeResult | None:
        """Reverse geocode a coordinate using the GISTDA address service.

        Args:
            lat: WGS84 latitude.
            lng: WGS84 longitude.

        Returns:
            ReverseGeocodeResult or None if the response names no province.

        Raises:
            GeocodingProviderError: On missing configuration, transport or service errors.
        """
        if not self.is_configured:
            raise GeocodingProviderError("gistda", "API key not configured")

        url = f"{self._base_url}/services/geo/address"
        params: dict[str, str] = {
            "lon": f"{lng:.6f}",
            "lat": f"{lat:.6f}",
            "local": "t",
            "key": self._api_key or "",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("GISTDA reverse geocoder timeout")
            raise GeocodingProviderError("gistda", "Reverse geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"GISTDA reverse geocoder HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "gistda",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.ConnectError as e:
            logger.warning("GISTDA reverse geocoder connection error")
            raise GeocodingProviderError("gistda", "Connection to geocoding provider failed") from e
        except GeocodingProviderError:
            raise
        except Exception as e:
            logger.exception("GISTDA reverse geocoder unexpected error")
            raise GeocodingProviderError("gistda", f"Unexpected error: {e}") from e

    def _parse_response(self, data: dict) -> ReverseGeocodeResult | None:
        """Parse a GISTDA address response.

        The service answers either with a flat address object or with a
        FeatureCollection whose first feature carries the address properties.

        Args:
            data: Decoded JSON body.

        Returns:
            ReverseGeocodeResult or None if no province is present.
        """
        if not isinstance(data, dict):
            raise GeocodingProviderError("gistda", f"Unexpected response type: {type(data).__name__}")

        properties: dict = data
        if "features" in data:
            features = data.get("features") or []
            if not features:
                return None
            properties = features[0].get("properties") or {}

        province = _first_value(properties, _PROVINCE_KEYS)
        if province is None:
            logger.debug("GISTDA response carries no province")
            return None

        return ReverseGeocodeResult(
            province=province,
            district=_first_value(properties, _DISTRICT_KEYS),
            subdistrict=_first_value(properties, _SUBDISTRICT_KEYS),
            geocode=_parse_geocode(properties.get("geocode")),
            raw_response=data,
        )


def _first_value(properties: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = properties.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


def _parse_geocode(value: object) -> int | None:
    if value is None:
        return None
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
