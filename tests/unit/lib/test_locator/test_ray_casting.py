"""Unit tests for the even-odd ray casting test."""

import pytest

from sdn_map.lib.locator import point_in_ring

# (lng, lat) order
SQUARE_CLOSED = [(100.0, 13.0), (101.0, 13.0), (101.0, 14.0), (100.0, 14.0), (100.0, 13.0)]
SQUARE_OPEN = SQUARE_CLOSED[:-1]

# U shape opening north: the notch between x=1..2 above y=1 is outside
U_SHAPE = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]


class TestPointInRing:
    @pytest.mark.parametrize("ring", [SQUARE_CLOSED, SQUARE_OPEN])
    def test_inside(self, ring) -> None:
        assert point_in_ring(13.5, 100.5, ring)

    @pytest.mark.parametrize("ring", [SQUARE_CLOSED, SQUARE_OPEN])
    def test_outside(self, ring) -> None:
        assert not point_in_ring(15.0, 100.5, ring)
        assert not point_in_ring(13.5, 99.0, ring)

    def test_argument_order_is_lat_then_lng(self) -> None:
        """The ring is (lng, lat); swapping the query arguments misses."""
        ring = [(100.0, 10.0), (102.0, 10.0), (102.0, 11.0), (100.0, 11.0)]
        assert point_in_ring(10.5, 101.0, ring)
        assert not point_in_ring(101.0, 10.5, ring)

    def test_concave_notch_is_outside(self) -> None:
        assert point_in_ring(0.5, 0.5, U_SHAPE)
        assert point_in_ring(2.0, 0.5, U_SHAPE)
        assert point_in_ring(2.0, 2.5, U_SHAPE)
        assert not point_in_ring(2.0, 1.5, U_SHAPE)

    def test_too_few_vertices(self) -> None:
        assert not point_in_ring(0.5, 0.5, [(0, 0), (1, 1)])
        assert not point_in_ring(0.5, 0.5, [])

    def test_nan_is_outside(self) -> None:
        assert not point_in_ring(float("nan"), 100.5, SQUARE_CLOSED)
