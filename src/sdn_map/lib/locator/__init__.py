"""Locator library — resolves coordinates to Thai provinces.

Public API:
    - ProvinceLocator: First-match point-location over boundary features
    - LocateResult: Matched / unmatched lookup outcome
    - point_in_ring: Even-odd ray casting test on a (lng, lat) ring
    - is_within_thailand: Map-bounds check for external lookups
    - THAILAND_CENTER: Default map center (lat, lng)
"""

from sdn_map.lib.locator.bounds import THAILAND_CENTER, is_within_thailand
from sdn_map.lib.locator.ray_casting import point_in_ring
from sdn_map.lib.locator.resolver import LocateResult, ProvinceLocator

__all__ = [
    "THAILAND_CENTER",
    "LocateResult",
    "ProvinceLocator",
    "is_within_thailand",
    "point_in_ring",
]
