"""Unit tests for category color assignment."""

import re

import pytest

from sdn_map.lib.colors import COLOR_PALETTE, color_for, color_for_name, shade_color

_HEX7 = re.compile(r"^#[0-9A-Fa-f]{6}$")


class TestColorFor:
    def test_first_category(self) -> None:
        scheme = color_for(1)
        assert scheme.id == 1
        assert scheme.primary == "#FF3B30"
        assert scheme.light == "#FF3B3020"
        assert scheme.dark == "#cc2f26"
        assert scheme.text == scheme.primary

    def test_wraps_around_palette(self) -> None:
        assert color_for(1).primary == color_for(1 + len(COLOR_PALETTE)).primary
        assert color_for(16).primary == COLOR_PALETTE[-1]

    @pytest.mark.parametrize("category_id", [1, 2, 15, 16, 17, 100, 10_000, 0, -3])
    def test_always_well_formed(self, category_id: int) -> None:
        scheme = color_for(category_id)
        assert _HEX7.match(scheme.primary)
        assert _HEX7.match(scheme.dark)
        assert scheme.light.startswith(scheme.primary)

    def test_deterministic(self) -> None:
        assert color_for(42) == color_for(42)


class TestColorForName:
    def test_stable(self) -> None:
        assert color_for_name("Reports") == color_for_name("Reports")

    def test_single_character(self) -> None:
        # hash("a") == 97, 97 % 16 == 1
        scheme = color_for_name("a")
        assert scheme.id == 2
        assert scheme.primary == COLOR_PALETTE[1]

    def test_id_maps_back_to_same_color(self) -> None:
        for name in ("Reports", "แผนงาน", "นโยบาย", "x" * 500):
            scheme = color_for_name(name)
            assert color_for(scheme.id).primary == scheme.primary

    def test_empty_name(self) -> None:
        assert color_for_name("").primary == COLOR_PALETTE[0]


class TestShadeColor:
    def test_darken(self) -> None:
        assert shade_color("#FFFFFF", -20) == "#cccccc"

    def test_lighten_clamps(self) -> None:
        assert shade_color("#FF8000", 50) == "#ffc000"

    def test_black_stays_black(self) -> None:
        assert shade_color("#000000", -20) == "#000000"
