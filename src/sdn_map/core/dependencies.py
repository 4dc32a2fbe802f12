"""FastAPI dependency injection for the boundary locator, zone classifier, and geocoder."""

from typing import Annotated

from fastapi import Depends, Request

from sdn_map.core.config import Settings, get_settings
from sdn_map.lib.geocoder import BaseReverseGeocoder, get_reverse_geocoder
from sdn_map.lib.locator import ProvinceLocator
from sdn_map.lib.zones import DEFAULT_CLASSIFIER, ZoneClassifier


def get_locator(request: Request) -> ProvinceLocator:
    """Return the province locator loaded at startup.

    An application started without its lifespan, such as a router-only test
    app, has no locator; such requests get an empty one and every lookup is
    unmatched. Application state is never written here.
    """
    locator = getattr(request.app.state, "locator", None)
    if locator is None:
        return ProvinceLocator([])
    return locator


def get_zone_classifier() -> ZoneClassifier:
    return DEFAULT_CLASSIFIER


def get_geocoder(
    settings: Annotated[Settings, Depends(get_settings)],
) -> BaseReverseGeocoder | None:
    """Return the configured reverse geocoder, or None when disabled."""
    return get_reverse_geocoder(settings)
