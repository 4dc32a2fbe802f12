"""Zones library — health-zone classification of Thai provinces.

Public API:
    - HealthZone: The ten zone ids
    - ZoneClassifier: Table-backed classifier (custom tables for tests/tools)
    - ZoneAssignment / ZoneSummary: Result types
    - zone_of, provinces_in_zone, count_provinces_in_zone, zone_summary:
      Lookups against the built-in table
    - all_zones, zone_display_name, zone_color: Static zone metadata
    - PROVINCE_ZONES, ZONE_NAMES, ZONE_COLORS: Read-only tables
"""

from sdn_map.lib.zones.classifier import (
    DEFAULT_CLASSIFIER,
    ZoneClassifier,
    all_zones,
    count_provinces_in_zone,
    provinces_in_zone,
    zone_color,
    zone_display_name,
    zone_of,
    zone_summary,
)
from sdn_map.lib.zones.tables import PROVINCE_ZONES, ZONE_COLORS, ZONE_NAMES
from sdn_map.lib.zones.types import DEFAULT_ZONE, HealthZone, ZoneAssignment, ZoneSummary

__all__ = [
    "DEFAULT_CLASSIFIER",
    "DEFAULT_ZONE",
    "PROVINCE_ZONES",
    "ZONE_COLORS",
    "ZONE_NAMES",
    "HealthZone",
    "ZoneAssignment",
    "ZoneClassifier",
    "ZoneSummary",
    "all_zones",
    "count_provinces_in_zone",
    "provinces_in_zone",
    "zone_color",
    "zone_display_name",
    "zone_of",
    "zone_summary",
]
