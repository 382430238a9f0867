"""The pit: a three-dimensional grid of settled blocks.

Layer 0 is the top of the pit, the one nearest the player. Higher layer
indices lie deeper, and the deepest layer is ``height - 1``.
"""

from __future__ import annotations

from blockout.colors import Color

MAX_PIT_WIDTH = 5
MAX_PIT_DEPTH = 5
MAX_PIT_HEIGHT = 8

LAYER_COLORS = (
    Color.DARK_GRAY,
    Color.DARK_BLUE,
    Color.BROWN,
    Color.DARK_MAGENTA,
    Color.DARK_CYAN,
    Color.DARK_RED,
    Color.DARK_GREEN,
    Color.DARK_BLUE,
)


class Pit:
    """Occupancy and colour of every cell in the pit."""

    def __init__(self, width: int, depth: int, height: int) -> None:
        for name, value, limit in (
            ("width", width, MAX_PIT_WIDTH),
            ("depth", depth, MAX_PIT_DEPTH),
            ("height", height, MAX_PIT_HEIGHT),
        ):
            if not 1 <= value <= limit:
                raise ValueError(f"pit {name} must be between 1 and {limit}: {value}")
        self.width = width
        self.depth = depth
        self.height = height
        self.cells: list[list[list[bool]]] = []
        self.colors: list[list[list[int]]] = []
        self.reset()

    def _empty_layer_cells(self) -> list[list[bool]]:
        return [[False] * self.width for _ in range(self.depth)]

    def _empty_layer_colors(self) -> list[list[int]]:
        return [[0] * self.width for _ in range(self.depth)]

    def _check(self, x: int, y: int, z: int) -> None:
        if not self.in_bounds(x, y, z):
            raise IndexError(f"cell ({x}, {y}, {z}) is outside the pit")

    def in_bounds(self, x: int, y: int, z: int) -> bool:
        """True if the cell lies inside the pit."""
        return 0 <= x < self.width and 0 <= y < self.depth and 0 <= z < self.height

    def is_occupied(self, x: int, y: int, z: int) -> bool:
        """True if a settled block fills the cell."""
        self._check(x, y, z)
        return self.cells[z][y][x]

    def fill(self, x: int, y: int, z: int) -> None:
        """Settle a block in the cell, coloured by its layer."""
        self._check(x, y, z)
        self.cells[z][y][x] = True
        self.colors[z][y][x] = int(LAYER_COLORS[z])

    def is_layer_complete(self, z: int) -> bool:
        """True if every cell of layer ``z`` is filled."""
        if not 0 <= z < self.height:
            raise IndexError(f"layer {z} is outside the pit")
        return all(all(row) for row in self.cells[z])

    def clear_layer(self, z: int) -> None:
        """Remove layer ``z``; the layers above it shift one step deeper."""
        if not 0 <= z < self.height:
            raise IndexError(f"layer {z} is outside the pit")
        del self.cells[z]
        del self.colors[z]
        self.cells.insert(0, self._empty_layer_cells())
        self.colors.insert(0, self._empty_layer_colors())

    def count_occupied_levels(self) -> int:
        """Number of layers holding at least one block."""
        return sum(1 for layer in self.cells if any(any(row) for row in layer))

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [self._empty_layer_cells() for _ in range(self.height)]
        self.colors = [self._empty_layer_colors() for _ in range(self.height)]