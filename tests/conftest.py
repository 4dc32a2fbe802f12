"""Shared test fixtures: settings, sample boundary dataset, and locator."""

from pathlib import Path

import pytest

from sdn_map.core.config import Settings
from sdn_map.lib.boundary_loader import BoundaryFeature, read_geojson
from sdn_map.lib.locator import ProvinceLocator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_geojson_path() -> Path:
    """Sample dataset: Bangkok, Chon Buri (unclosed ring), Chiang Mai, Phuket
    (two islands), one unnamed feature, and one degenerate ring."""
    return FIXTURES_DIR / "provinces_sample.geojson"


@pytest.fixture
def settings(sample_geojson_path: Path) -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        boundaries_path=str(sample_geojson_path),
        gistda_enabled=False,
    )


@pytest.fixture
def sample_features(sample_geojson_path: Path) -> list[BoundaryFeature]:
    return read_geojson(sample_geojson_path)


@pytest.fixture
def locator(sample_features: list[BoundaryFeature]) -> ProvinceLocator:
    return ProvinceLocator(sample_features)
