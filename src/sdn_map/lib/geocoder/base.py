"""Abstract reverse geocoder interface for pluggable provider support."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ReverseGeocodeResult:
    """Administrative address of a coordinate as reported by a provider."""

    province: str
    district: str | None = None
    subdistrict: str | None = None
    geocode: int | None = None
    raw_response: dict | None = None

    def __post_init__(self) -> None:
        if not self.province.strip():
            msg = "province must not be empty"
            raise ValueError(msg)


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no match (which returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseReverseGeocoder(ABC):
    """Abstract reverse geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def requires_api_key(self) -> bool:
        """Whether this provider requires an API key to function."""
        return False

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def reverse_geocode(self, lat: float, lng: float) -> ReverseGeocodeResult | None:
        """Resolve a coordinate to its administrative address.

        Args:
            lat: WGS84 latitude.
            lng: WGS84 longitude.

        Returns:
            ReverseGeocodeResult or None if the provider has no province for the point.
        """
