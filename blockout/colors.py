"""Palette helpers for 4, 8 and 16 bits-per-pixel colour modes."""

from enum import IntEnum

COLOR_ALPHA_MASK = 1 << 5


class Color(IntEnum):
    """The sixteen standard palette indices."""

    BLACK = 0
    DARK_RED = 1
    DARK_GREEN = 2
    BROWN = 3
    DARK_BLUE = 4
    DARK_MAGENTA = 5
    DARK_CYAN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    RED = 9
    GREEN = 10
    YELLOW = 11
    BLUE = 12
    MAGENTA = 13
    CYAN = 14
    WHITE = 15


_RGB5 = {
    Color.DARK_RED: (15, 0, 0),
    Color.DARK_GREEN: (0, 15, 0),
    Color.BROWN: (15, 15, 0),
    Color.DARK_BLUE: (0, 0, 15),
    Color.DARK_MAGENTA: (15, 0, 15),
    Color.DARK_CYAN: (0, 15, 15),
    Color.LIGHT_GRAY: (20, 20, 20),
    Color.DARK_GRAY: (15, 15, 15),
    Color.RED: (31, 0, 0),
    Color.GREEN: (0, 31, 0),
    Color.YELLOW: (31, 31, 0),
    Color.BLUE: (0, 0, 31),
    Color.MAGENTA: (31, 0, 31),
    Color.CYAN: (0, 31, 31),
    Color.WHITE: (31, 31, 31),
}


def color_from_rgb5(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue components into a 16-bit pixel value."""
    for name, value in (("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{name} component out of range: {value}")
    return ((b << 11) | (g << 6) | r) & 0xFFFF


def color(index: int, bpp16: bool) -> int:
    """Return the pixel value for a palette index.

    In 16 bpp mode the result is an opaque RGB value, or transparent black
    for index 0 and anything out of range. Otherwise the index itself is
    returned, with out-of-range indices mapped to black.
    """
    if bpp16:
        if Color.BLACK < index <= Color.WHITE:
            r, g, b = _RGB5[Color(index)]
            return color_from_rgb5(r, g, b) | COLOR_ALPHA_MASK
        return color_from_rgb5(0, 0, 0) & ~COLOR_ALPHA_MASK
    return index if 0 <= index <= Color.WHITE else int(Color.BLACK)