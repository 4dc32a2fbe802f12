"""Geocoder library — reverse geocoding against external providers.

Public API:
    - BaseReverseGeocoder: Abstract provider interface
    - ReverseGeocodeResult: Result dataclass
    - GeocodingProviderError: Provider transport/service failure
    - GistdaReverseGeocoder: GISTDA Sphere provider
    - get_reverse_geocoder: Build the configured provider, if any
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sdn_map.lib.geocoder.base import (
    BaseReverseGeocoder,
    GeocodingProviderError,
    ReverseGeocodeResult,
)
from sdn_map.lib.geocoder.gistda import GistdaReverseGeocoder

if TYPE_CHECKING:
    from sdn_map.core.config import Settings


def get_reverse_geocoder(settings: Settings) -> BaseReverseGeocoder | None:
    """Return the configured reverse geocoder, or None when disabled.

    Args:
        settings: Application settings.

    Returns:
        A configured provider instance, or None if GISTDA is disabled or has no API key.
    """
    if not settings.gistda_enabled:
        return None
    geocoder = GistdaReverseGeocoder(
        api_key=settings.gistda_api_key,
        base_url=settings.gistda_base_url,
        timeout=settings.gistda_timeout,
    )
    if not geocoder.is_configured:
        return None
    return geocoder


__all__ = [
    "BaseReverseGeocoder",
    "GeocodingProviderError",
    "GistdaReverseGeocoder",
    "ReverseGeocodeResult",
    "get_reverse_geocoder",
]
