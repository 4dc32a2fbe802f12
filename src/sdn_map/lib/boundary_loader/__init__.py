"""Boundary loader library — reads the static province boundary dataset.

Public API:
    - load_boundaries: Suffix-checked entry point for boundary files
    - read_geojson: Direct GeoJSON reader
    - parse_feature_collection: Parse an already decoded FeatureCollection
    - BoundaryFeature: Parsed province boundary record
"""

from pathlib import Path

from sdn_map.lib.boundary_loader.geojson import (
    DEFAULT_ENGLISH_NAME_PROPERTY,
    DEFAULT_NAME_PROPERTY,
    parse_feature_collection,
    read_geojson,
)
from sdn_map.lib.boundary_loader.models import BoundaryFeature

SUPPORTED_SUFFIXES = (".geojson", ".json")


def load_boundaries(
    file_path: Path,
    name_property: str = DEFAULT_NAME_PROPERTY,
    english_name_property: str = DEFAULT_ENGLISH_NAME_PROPERTY,
) -> list[BoundaryFeature]:
    """Load province boundaries from a file.

    Args:
        file_path: Path to the boundary file.
        name_property: Feature property holding the Thai province name.
        english_name_property: Feature property holding the English name.

    Returns:
        List of BoundaryFeature objects.

    Raises:
        ValueError: If the file format is not supported.
    """
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"Unsupported boundary file format: {suffix}. Supported: .geojson, .json"
        raise ValueError(msg)
    return read_geojson(file_path, name_property, english_name_property)


__all__ = [
    "BoundaryFeature",
    "load_boundaries",
    "parse_feature_collection",
    "read_geojson",
]
