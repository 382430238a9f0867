"""Scanline polygon filling and the pit's face-visibility and level-indicator drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from blockout.canvas import Canvas
from blockout.colors import Color
from blockout.pit import LAYER_COLORS, Pit

SCREEN_HEIGHT = 180
MAX_SCREEN_X = 255
FILL_STRIDE = 1
LEVEL_INDICATOR_WIDTH = 14

Point = tuple[int, int]
Span = tuple[int, int, int]


class Face(Enum):
    """Faces of a settled cube that may need drawing."""

    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BACK = "back"
    FRONT = "front"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def poly_spans(points: Sequence[Point], stride: int = FILL_STRIDE) -> list[Span]:
    """Return the horizontal spans ``(y, left, right)`` that fill a polygon.

    Vertices are clamped to the screen (y to 0..179, x to 0..255). Edges
    are walked with integer stepping, so the result matches what is drawn
    line by line. Every ``stride``-th row from the top is returned; a
    polygon with no non-horizontal edge yields no spans.
    """
    if stride < 1:
        raise ValueError(f"stride must be at least 1: {stride}")
    if not points:
        raise ValueError("a polygon needs at least one point")
    clamped = [
        (_clamp(x, 0, MAX_SCREEN_X), _clamp(y, 0, SCREEN_HEIGHT - 1))
        for x, y in points
    ]
    min_y = min(y for _, y in clamped)
    max_y = max(y for _, y in clamped)
    left = {y: MAX_SCREEN_X for y in range(min_y, max_y + 1)}
    right = {y: 0 for y in range(min_y, max_y + 1)}

    for (x_s, y_s), (x_e, y_e) in zip(clamped, clamped[1:] + clamped[:1]):
        if y_s == y_e:
            continue
        if y_s > y_e:
            x_s, y_s, x_e, y_e = x_e, y_e, x_s, y_s
        dx = abs(x_e - x_s)
        dy = y_e - y_s
        sx = 1 if x_e >= x_s else -1
        err = dy >> 1
        cur_x = x_s
        for y in range(y_s, y_e + 1):
            left[y] = min(left[y], cur_x)
            right[y] = max(right[y], cur_x)
            err += dx
            while err >= dy:
                err -= dy
                cur_x += sx

    return [
        (y, left[y], right[y])
        for y in range(min_y, max_y + 1, stride)
        if left[y] <= right[y]
    ]


def fill_poly(
    canvas: Canvas, points: Sequence[Point], color: int, stride: int = FILL_STRIDE
) -> None:
    """Fill a polygon on the canvas, one horizontal line per span."""
    for y, x_left, x_right in poly_spans(points, stride):
        canvas.draw_hline(color, x_left, y, x_right - x_left + 1)


def cube_faces(pit: Pit, x: int, y: int, z: int) -> tuple[Face, ...]:
    """Faces of the cube at (x, y, z) not hidden by a neighbouring block.

    A face on the pit's boundary is always visible. Faces come in drawing
    order: top, left, right, back, front.
    """
    if not pit.in_bounds(x, y, z):
        raise IndexError(f"cell ({x}, {y}, {z}) is outside the pit")
    visible = {
        Face.TOP: z == 0 or not pit.is_occupied(x, y, z - 1),
        Face.LEFT: x == 0 or not pit.is_occupied(x - 1, y, z),
        Face.RIGHT: x == pit.width - 1 or not pit.is_occupied(x + 1, y, z),
        Face.BACK: y == pit.depth - 1 or not pit.is_occupied(x, y + 1, z),
        Face.FRONT: y == 0 or not pit.is_occupied(x, y - 1, z),
    }
    return tuple(face for face, shown in visible.items() if shown)


def _layer_has_blocks(rows: Iterable[Iterable[bool]]) -> bool:
    return any(any(row) for row in rows)


def draw_level_indicator(canvas: Canvas, pit: Pit, indicator_top: int) -> None:
    """Draw the column showing which pit layers hold blocks.

    Layer 0 sits at the top of the column. An occupied layer is a block in
    its layer colour; an empty one is marked by two dots at its edges.
    """
    width = LEVEL_INDICATOR_WIDTH
    column_height = pit.height * width
    canvas.draw_vline(Color.GREEN, 4, indicator_top - 3, column_height)
    canvas.draw_vline(Color.GREEN, 5 + width, indicator_top - 3, column_height)

    for z, layer in enumerate(pit.cells):
        row_y = z * width + indicator_top - 3
        if _layer_has_blocks(layer):
            canvas.fill_rect(LAYER_COLORS[z], 6, row_y, width - 2, width)
        else:
            canvas.set(5, row_y, Color.GREEN)
            canvas.set(width + 4, row_y, Color.GREEN)