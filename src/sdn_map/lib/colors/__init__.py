"""Colors library — deterministic category color schemes.

Public API:
    - color_for: Scheme for a numeric category id
    - color_for_name: Scheme for a category name (hash fallback)
    - shade_color: Darken/lighten a hex color by a percentage
    - CategoryColorScheme: primary/light/dark/text color record
    - COLOR_PALETTE: The 16 palette colors
"""

from sdn_map.lib.colors.palette import (
    COLOR_PALETTE,
    CategoryColorScheme,
    color_for,
    color_for_name,
    shade_color,
)

__all__ = [
    "COLOR_PALETTE",
    "CategoryColorScheme",
    "color_for",
    "color_for_name",
    "shade_color",
]
