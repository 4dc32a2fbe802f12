"""Province point-location over the static boundary dataset."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sdn_map.lib.boundary_loader import load_boundaries
from sdn_map.lib.boundary_loader.geojson import DEFAULT_ENGLISH_NAME_PROPERTY, DEFAULT_NAME_PROPERTY
from sdn_map.lib.locator.ray_casting import point_in_ring

if TYPE_CHECKING:
    from pathlib import Path

    from sdn_map.lib.boundary_loader.models import BoundaryFeature, Ring


@dataclass(frozen=True)
class LocateResult:
    """Outcome of a province lookup.

    Attributes:
        matched: Whether any province contains the point.
        name: Thai province name when matched.
        name_english: English province name when matched and known.
    """

    matched: bool
    name: str | None = None
    name_english: str | None = None

    @classmethod
    def unmatched(cls) -> LocateResult:
        return cls(matched=False)


@dataclass(frozen=True)
class _IndexedFeature:
    feature: BoundaryFeature
    bounds: tuple[float, float, float, float]
    rings: tuple[Ring, ...]

    def contains(self, lat: float, lng: float) -> bool:
        min_lng, min_lat, max_lng, max_lat = self.bounds
        if not (min_lat <= lat <= max_lat and min_lng <= lng <= max_lng):
            return False
        return any(point_in_ring(lat, lng, ring) for ring in self.rings)


class ProvinceLocator:
    """Resolve coordinates to the province whose outline contains them.

    Features are scanned in dataset order and the first containing feature
    wins. Administrative boundaries partition the map, so the first match is
    in practice the only one. The locator holds no mutable state after
    construction and can be shared between concurrent callers.
    """

    def __init__(self, features: Iterable[BoundaryFeature]) -> None:
        self._entries = tuple(
            _IndexedFeature(feature=f, bounds=f.bounds, rings=f.rings) for f in features
        )

    @classmethod
    def from_path(
        cls,
        file_path: Path,
        name_property: str = DEFAULT_NAME_PROPERTY,
        english_name_property: str = DEFAULT_ENGLISH_NAME_PROPERTY,
    ) -> ProvinceLocator:
        """Build a locator from a boundary dataset file."""
        return cls(load_boundaries(file_path, name_property, english_name_property))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BoundaryFeature]:
        return (entry.feature for entry in self._entries)

    @property
    def features(self) -> tuple[BoundaryFeature, ...]:
        return tuple(self)

    @property
    def names(self) -> list[str]:
        """Province names in dataset order."""
        return [entry.feature.name_local for entry in self._entries]

    def locate(self, lat: float, lng: float) -> LocateResult:
        """Find the province containing ``(lat, lng)``.

        Args:
            lat: WGS84 latitude.
            lng: WGS84 longitude.

        Returns:
            LocateResult; ``matched`` is False when no province contains the point.
        """
        for entry in self._entries:
            if entry.contains(lat, lng):
                feature = entry.feature
                return LocateResult(matched=True, name=feature.name_local, name_english=feature.name_english)
        return LocateResult.unmatched()
