"""Deterministic category colors drawn from a fixed palette.

Colors are keyed by category id, wrapping around the palette once the id
exceeds its length, so two categories sixteen ids apart share a color.
Names are accepted as a fallback for categories without an id. The name hash
reproduces the 32-bit arithmetic of the portal's browser code so server and
client agree on the color of a category.
"""

from dataclasses import dataclass

COLOR_PALETTE: tuple[str, ...] = (
    "#FF3B30",  # vivid red
    "#FF9500",  # orange
    "#FFCC00",  # yellow
    "#34C759",  # green
    "#00C7BE",  # turquoise
    "#007AFF",  # blue
    "#5856D6",  # purple
    "#AF52DE",  # violet
    "#FF2D55",  # pink
    "#5AC8FA",  # sky blue
    "#4CD964",  # lime
    "#FF6B22",  # deep orange
    "#FF453A",  # coral
    "#32ADE6",  # cyan
    "#BF5AF2",  # lavender
    "#FF375F",  # rose
)

# Hex alpha appended to the primary color for the translucent variant (~12.5%)
LIGHT_ALPHA_SUFFIX = "20"
DARK_SHADE_PERCENT = -20


@dataclass(frozen=True)
class CategoryColorScheme:
    """Primary/light/dark color triple for one category."""

    id: int
    primary: str
    light: str
    dark: str
    text: str


def color_for(category_id: int) -> CategoryColorScheme:
    """Return the color scheme of a category id.

    Args:
        category_id: Category id, normally positive. Any integer is accepted.

    Returns:
        CategoryColorScheme derived from the palette slot ``(id - 1) mod 16``.
    """
    return _scheme(category_id, COLOR_PALETTE[(category_id - 1) % len(COLOR_PALETTE)])


def color_for_name(name: str) -> CategoryColorScheme:
    """Return a color scheme for a category known only by name.

    The scheme id is the palette slot plus one, so ``color_for(scheme.id)``
    yields the same colors.
    """
    index = abs(_string_hash(name)) % len(COLOR_PALETTE)
    return _scheme(index + 1, COLOR_PALETTE[index])


def shade_color(color: str, percent: int) -> str:
    """Scale every RGB channel of ``#RRGGBB`` by ``(100 + percent)%``.

    Channels are floored and clamped to ``[0, 255]``; output hex is lowercase.
    """
    channels = (int(color[i : i + 2], 16) for i in (1, 3, 5))
    shaded = (min(255, max(0, channel * (100 + percent) // 100)) for channel in channels)
    return "#" + "".join(f"{channel:02x}" for channel in shaded)


def _scheme(scheme_id: int, primary: str) -> CategoryColorScheme:
    return CategoryColorScheme(
        id=scheme_id,
        primary=primary,
        light=f"{primary}{LIGHT_ALPHA_SUFFIX}",
        dark=shade_color(primary, DARK_SHADE_PERCENT),
        text=primary,
    )


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def _string_hash(name: str) -> int:
    """Polynomial hash ``hash = code + ((hash << 5) - hash)`` over UTF-16 code units.

    The shift wraps to a signed 32-bit integer while the subtraction does not,
    matching JavaScript number semantics.
    """
    encoded = name.encode("utf-16-le")
    value = 0
    for i in range(0, len(encoded), 2):
        code = int.from_bytes(encoded[i : i + 2], "little")
        value = code + (_to_int32(_to_int32(value) << 5) - value)
    return value
