"""Shape definitions, quarter-turn rotation and wall kicks."""

from __future__ import annotations

from dataclasses import dataclass

from blockout.pit import Pit

MAX_BLOCKS = 4
ROTATION_STEPS = 3
ANGLE_STEP_90 = 256 // 4

MASK_FACE_RIGHT = (1 << 1) | (1 << 5) | (1 << 9) | (1 << 10)
MASK_FACE_LEFT = (1 << 3) | (1 << 7) | (1 << 8) | (1 << 11)
MASK_FACE_TOP = (1 << 2) | (1 << 6) | (1 << 10) | (1 << 11)
MASK_FACE_BOTTOM = (1 << 0) | (1 << 4) | (1 << 8) | (1 << 9)
MASK_FACE_FRONT = (1 << 4) | (1 << 5) | (1 << 6) | (1 << 7)
MASK_FACE_BACK = (1 << 0) | (1 << 1) | (1 << 2) | (1 << 3)

Offset = tuple[int, int, int]


@dataclass(frozen=True)
class Shape:
    """A piece made of unit blocks.

    ``center`` is measured in half blocks; a non-zero centre makes the
    piece rotate about a point between blocks.
    """

    name: str
    offsets: tuple[Offset, ...]
    edge_masks: tuple[int, ...]
    center: Offset = (0, 0, 0)

    def __post_init__(self) -> None:
        if not 1 <= len(self.offsets) <= MAX_BLOCKS:
            raise ValueError(f"a shape needs 1 to {MAX_BLOCKS} blocks")
        if len(self.edge_masks) != len(self.offsets):
            raise ValueError("every block needs an edge mask")

    @property
    def num_blocks(self) -> int:
        return len(self.offsets)


SHAPES: tuple[Shape, ...] = (
    Shape("CUBE", ((0, 0, 0),), (0,)),
    Shape("I", ((0, 0, 0), (0, 1, 0)), (MASK_FACE_TOP, MASK_FACE_BOTTOM)),
    Shape(
        "I",
        ((0, -1, 0), (0, 0, 0), (0, 1, 0)),
        (MASK_FACE_TOP, MASK_FACE_TOP | MASK_FACE_BOTTOM, MASK_FACE_BOTTOM),
    ),
    Shape(
        "C",
        ((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)),
        (
            MASK_FACE_RIGHT | MASK_FACE_TOP,
            MASK_FACE_TOP | MASK_FACE_LEFT,
            MASK_FACE_RIGHT | MASK_FACE_BOTTOM,
            MASK_FACE_BOTTOM | MASK_FACE_LEFT,
        ),
        (1, 1, 1),
    ),
    Shape(
        "L",
        ((0, -1, 0), (0, 0, 0), (1, 0, 0)),
        (MASK_FACE_TOP, MASK_FACE_BOTTOM | MASK_FACE_RIGHT, MASK_FACE_LEFT),
    ),
    Shape(
        "T",
        ((-1, 0, 0), (0, 0, 0), (1, 0, 0), (0, -1, 0)),
        (
            MASK_FACE_RIGHT,
            MASK_FACE_LEFT | MASK_FACE_RIGHT | MASK_FACE_BOTTOM,
            MASK_FACE_LEFT,
            MASK_FACE_TOP,
        ),
    ),
    Shape(
        "S",
        ((0, -1, 0), (0, 0, 0), (1, 0, 0), (1, 1, 0)),
        (
            MASK_FACE_TOP,
            MASK_FACE_BOTTOM | MASK_FACE_RIGHT,
            MASK_FACE_LEFT | MASK_FACE_TOP,
            MASK_FACE_BOTTOM,
        ),
        (2, 0, 0),
    ),
    Shape(
        "L+",
        ((0, -1, 0), (0, 0, 0), (1, 0, 0), (0, 0, 1)),
        (
            MASK_FACE_TOP,
            MASK_FACE_BOTTOM | MASK_FACE_RIGHT | MASK_FACE_FRONT,
            MASK_FACE_LEFT,
            MASK_FACE_BACK,
        ),
    ),
)

NUM_SHAPES = len(SHAPES)

KICK_OFFSETS: tuple[Offset, ...] = (
    (1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1),
    (2, 0, 0), (-2, 0, 0), (0, 2, 0), (0, -2, 0),
    (1, 1, 0), (1, -1, 0), (-1, 1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (0, 1, 1), (0, -1, 1),
    (1, 0, -1), (-1, 0, -1), (0, 1, -1), (0, -1, -1),
)


def _quarter_turns(angle: int) -> int:
    return (angle & 0xFF) >> 6


def _halve(value: int) -> int:
    """Divide by two, rounding towards zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def rotated_offset(
    shape: Shape, block_idx: int, angle_x: int, angle_y: int, angle_z: int
) -> Offset:
    """Offset of one block after snapping each angle to quarter turns.

    Rotation is applied about Y, then X, then Z.
    """
    x, y, z = shape.offsets[block_idx]
    half_center = any(shape.center)
    if half_center:
        cx, cy, cz = shape.center
        x, y, z = 2 * x - cx, 2 * y - cy, 2 * z - cz
    for _ in range(_quarter_turns(angle_y)):
        x, z = z, -x
    for _ in range(_quarter_turns(angle_x)):
        y, z = -z, y
    for _ in range(_quarter_turns(angle_z)):
        x, y = -y, x
    if half_center:
        return _halve(x + cx), _halve(y + cy), _halve(z + cz)
    return x, y, z


def rotated_blocks(
    shape: Shape, angle_x: int, angle_y: int, angle_z: int
) -> list[Offset]:
    """Offsets of every block of the shape under the given rotation."""
    return [
        rotated_offset(shape, index, angle_x, angle_y, angle_z)
        for index in range(shape.num_blocks)
    ]


def is_rotation_valid_at(
    shape: Shape,
    pit: Pit,
    angle_x: int,
    angle_y: int,
    angle_z: int,
    x: int,
    y: int,
    z: int,
) -> bool:
    """True if the rotated shape at (x, y, z) fits inside the pit's free cells."""
    for rx, ry, rz in rotated_blocks(shape, angle_x, angle_y, angle_z):
        cell = (x + rx, y + ry, z + rz)
        if not pit.in_bounds(*cell) or pit.is_occupied(*cell):
            return False
    return True


def try_wall_kick(
    shape: Shape,
    pit: Pit,
    angle_x: int,
    angle_y: int,
    angle_z: int,
    x: int,
    y: int,
    z: int,
) -> Offset | None:
    """Find where the rotated shape fits, trying (x, y, z) and then each kick.

    Returns the position, or None if no kick makes the rotation fit.
    """
    candidates = [(0, 0, 0), *KICK_OFFSETS]
    for dx, dy, dz in candidates:
        position = (x + dx, y + dy, z + dz)
        if is_rotation_valid_at(shape, pit, angle_x, angle_y, angle_z, *position):
            return position
    return None