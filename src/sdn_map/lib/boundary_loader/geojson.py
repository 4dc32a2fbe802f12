"""GeoJSON reader — parses province FeatureCollections into BoundaryFeature records."""

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from loguru import logger
from shapely.geometry import MultiPolygon, Polygon

from sdn_map.lib.boundary_loader.models import BoundaryFeature, Coordinate

DEFAULT_NAME_PROPERTY = "name_th"
DEFAULT_ENGLISH_NAME_PROPERTY = "name_en"

# A ring needs three distinct vertices to enclose any area
MIN_RING_VERTICES = 3


def read_geojson(
    file_path: Path,
    name_property: str = DEFAULT_NAME_PROPERTY,
    english_name_property: str = DEFAULT_ENGLISH_NAME_PROPERTY,
) -> list[BoundaryFeature]:
    """Read a GeoJSON file and return the province boundaries it contains.

    Args:
        file_path: Path to .geojson or .json file.
        name_property: Feature property holding the Thai province name.
        english_name_property: Feature property holding the English name.

    Returns:
        List of BoundaryFeature objects in dataset order.

    Raises:
        ValueError: If the file is not a GeoJSON FeatureCollection.
    """
    logger.info(f"Reading GeoJSON: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_feature_collection(data, name_property, english_name_property)


def parse_feature_collection(
    data: Mapping[str, Any],
    name_property: str = DEFAULT_NAME_PROPERTY,
    english_name_property: str = DEFAULT_ENGLISH_NAME_PROPERTY,
) -> list[BoundaryFeature]:
    """Parse a decoded GeoJSON FeatureCollection.

    Features without a name, with a non-polygonal geometry, or with no usable
    ring are skipped so that one bad feature cannot spoil the whole dataset.

    Raises:
        ValueError: If ``data`` is not a FeatureCollection.
    """
    if not isinstance(data, Mapping) or data.get("type") != "FeatureCollection":
        got = data.get("type") if isinstance(data, Mapping) else type(data).__name__
        msg = f"Expected FeatureCollection, got {got}"
        raise ValueError(msg)

    features = data.get("features") or []
    boundaries: list[BoundaryFeature] = []

    for i, feature in enumerate(features):
        if not isinstance(feature, Mapping):
            logger.warning(f"Skipping feature {i}: not an object")
            continue

        props = feature.get("properties")
        if not isinstance(props, Mapping):
            props = {}
        name = _clean_name(props.get(name_property))
        if name is None:
            logger.debug(f"Skipping feature {i}: missing '{name_property}' property")
            continue

        try:
            geometry = _build_geometry(feature.get("geometry"))
        except (TypeError, ValueError, IndexError, KeyError) as e:
            logger.warning(f"Skipping feature {i} ({name}): malformed geometry: {e}")
            continue

        if geometry is None:
            logger.warning(f"Skipping feature {i} ({name}): no usable polygon")
            continue

        if not geometry.is_valid:
            logger.debug(f"Feature {i} ({name}) has self-intersecting rings")

        boundaries.append(
            BoundaryFeature(
                name_local=name,
                name_english=_clean_name(props.get(english_name_property)),
                geometry=geometry,
                properties=dict(props),
            )
        )

    logger.info(f"Parsed {len(boundaries)} of {len(features)} features from GeoJSON")
    return boundaries


def _clean_name(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_geometry(geom_data: Any) -> MultiPolygon | None:
    """Convert a GeoJSON geometry to a MultiPolygon of outer rings.

    Returns None for unsupported geometry types or when every ring is degenerate.
    """
    if not isinstance(geom_data, Mapping):
        return None

    geom_type = geom_data.get("type")
    coordinates = geom_data.get("coordinates")

    if geom_type not in ("Polygon", "MultiPolygon"):
        logger.warning(f"Unsupported geometry type: {geom_type}")
        return None
    if not _is_array(coordinates):
        msg = "coordinates must be an array"
        raise ValueError(msg)

    if geom_type == "Polygon":
        polygon_coords = [coordinates]
    else:
        polygon_coords = list(coordinates)

    polygons: list[Polygon] = []
    for rings in polygon_coords:
        if not _is_array(rings):
            msg = "polygon must be an array of rings"
            raise ValueError(msg)
        if not rings:
            continue
        outer = _normalize_ring(rings[0])
        if len(outer) < MIN_RING_VERTICES:
            continue
        polygons.append(Polygon(outer))

    if not polygons:
        return None
    return MultiPolygon(polygons)


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _normalize_ring(raw_ring: Any) -> list[Coordinate]:
    """Return ring vertices as floats without the repeated closing vertex."""
    if not _is_array(raw_ring) or not all(_is_array(pt) for pt in raw_ring):
        msg = "ring must be an array of positions"
        raise ValueError(msg)
    ring = [(float(pt[0]), float(pt[1])) for pt in raw_ring]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return ring
