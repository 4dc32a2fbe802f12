"""In-memory province boundary record."""

from dataclasses import dataclass, field

from shapely.geometry import MultiPolygon

Coordinate = tuple[float, float]
Ring = tuple[Coordinate, ...]


@dataclass(frozen=True)
class BoundaryFeature:
    """One province outline loaded from the boundary dataset.

    Attributes:
        name_local: Thai province name, the lookup key.
        name_english: Optional English province name.
        geometry: Province outline. Outer rings only, vertices in
            GeoJSON ``(longitude, latitude)`` order.
        properties: Raw feature properties as read from the dataset.
    """

    name_local: str
    name_english: str | None
    geometry: MultiPolygon
    properties: dict = field(default_factory=dict, compare=False, hash=False)

    @property
    def rings(self) -> tuple[Ring, ...]:
        """Outer ring of every member polygon as ``(lng, lat)`` tuples."""
        return tuple(tuple((x, y) for x, y, *_ in poly.exterior.coords) for poly in self.geometry.geoms)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as ``(min_lng, min_lat, max_lng, max_lat)``."""
        return self.geometry.bounds
