"""Province-to-zone classification over the static zone table."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from loguru import logger

from sdn_map.lib.zones.tables import PROVINCE_ZONES, ZONE_COLORS, ZONE_NAMES
from sdn_map.lib.zones.types import DEFAULT_ZONE, HealthZone, ZoneAssignment, ZoneSummary


def all_zones() -> list[HealthZone]:
    """Return every zone id in display order."""
    return list(HealthZone)


def zone_display_name(zone: HealthZone | str) -> str:
    """Return the Thai display name of a zone.

    Raises:
        ValueError: If ``zone`` is not a zone id.
    """
    return ZONE_NAMES[HealthZone(zone)]


def zone_color(zone: HealthZone | str) -> str:
    """Return the map color of a zone.

    Raises:
        ValueError: If ``zone`` is not a zone id.
    """
    return ZONE_COLORS[HealthZone(zone)]


@dataclass(frozen=True)
class ZoneClassifier:
    """Classify provinces into health zones.

    Args:
        province_zones: Read-only province → zone table. Defaults to the
            built-in table of all 77 provinces.
    """

    province_zones: Mapping[str, HealthZone] = field(default_factory=lambda: PROVINCE_ZONES, compare=False)

    def zone_of(self, province: str) -> HealthZone:
        """Return the zone of ``province``; unknown provinces fall back to central."""
        return self.classify(province).zone

    def classify(self, province: str) -> ZoneAssignment:
        """Return the zone of ``province`` and whether it came from the fallback."""
        zone = self.province_zones.get(province)
        if zone is None:
            logger.debug(f"Province {province!r} not in zone table, defaulting to {DEFAULT_ZONE}")
            return ZoneAssignment(province=province, zone=DEFAULT_ZONE, is_fallback=True)
        return ZoneAssignment(province=province, zone=HealthZone(zone), is_fallback=False)

    def provinces_in_zone(self, zone: HealthZone | str) -> list[str]:
        """Return the provinces explicitly assigned to ``zone``, sorted."""
        target = HealthZone(zone)
        return sorted(name for name, z in self.province_zones.items() if z == target)

    def count_provinces(self, zone: HealthZone | str) -> int:
        return len(self.provinces_in_zone(zone))

    def filter_provinces(self, provinces: Iterable[str], zone: HealthZone | str | None) -> list[str]:
        """Keep the provinces that classify into ``zone``.

        ``None`` keeps every province. Order is preserved.
        """
        if zone is None:
            return list(provinces)
        target = HealthZone(zone)
        return [name for name in provinces if self.zone_of(name) == target]

    def summary(self) -> list[ZoneSummary]:
        """Return a summary row for every zone in display order."""
        return [
            ZoneSummary(
                id=zone,
                name=zone_display_name(zone),
                province_count=self.count_provinces(zone),
                color=zone_color(zone),
            )
            for zone in all_zones()
        ]


DEFAULT_CLASSIFIER = ZoneClassifier()


def zone_of(province: str) -> HealthZone:
    """Return the zone of ``province`` using the built-in table."""
    return DEFAULT_CLASSIFIER.zone_of(province)


def provinces_in_zone(zone: HealthZone | str) -> list[str]:
    """Return the provinces of ``zone`` from the built-in table, sorted."""
    return DEFAULT_CLASSIFIER.provinces_in_zone(zone)


def count_provinces_in_zone(zone: HealthZone | str) -> int:
    return DEFAULT_CLASSIFIER.count_provinces(zone)


def zone_summary() -> list[ZoneSummary]:
    return DEFAULT_CLASSIFIER.summary()
