"""Health-zone identifiers and result types."""

from dataclasses import dataclass
from enum import StrEnum


class HealthZone(StrEnum):
    """Regional health-zone grouping of Thai provinces, in display order."""

    NORTH_UPPER = "north-upper"
    NORTH_LOWER = "north-lower"
    NORTHEAST_UPPER = "northeast-upper"
    NORTHEAST_LOWER = "northeast-lower"
    CENTRAL = "central"
    EAST = "east"
    WEST = "west"
    SOUTH_UPPER = "south-upper"
    SOUTH_LOWER = "south-lower"
    BANGKOK = "bangkok"


# Zone assigned to any province missing from the table
DEFAULT_ZONE = HealthZone.CENTRAL


@dataclass(frozen=True)
class ZoneAssignment:
    """Zone lookup result for one province.

    ``is_fallback`` is True when the province is not in the table and the
    zone is the default rather than an explicit entry.
    """

    province: str
    zone: HealthZone
    is_fallback: bool


@dataclass(frozen=True)
class ZoneSummary:
    """Display summary of one zone."""

    id: HealthZone
    name: str
    province_count: int
    color: str
