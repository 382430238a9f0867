"""An in-memory pixel canvas with the drawing primitives the game needs."""

from __future__ import annotations


class Canvas:
    """A rectangle of pixel values; drawing outside it is clipped."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        """Return the pixel value at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def set(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels outside the canvas are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color

    def draw_line(self, color: int, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a Bresenham line including both end points."""
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.set(y, x, color)
            else:
                self.set(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_hline(self, color: int, x: int, y: int, w: int) -> None:
        """Draw ``w`` pixels rightwards from (x, y)."""
        if not 0 <= y < self.height:
            return
        start = max(x, 0)
        end = min(x + w, self.width)
        if start < end:
            row = y * self.width
            self.pixels[row + start:row + end] = [color] * (end - start)

    def draw_vline(self, color: int, x: int, y: int, h: int) -> None:
        """Draw ``h`` pixels downwards from (x, y)."""
        for row in range(max(y, 0), min(y + h, self.height)):
            self.set(x, row, color)

    def fill_rect(self, color: int, x: int, y: int, w: int, h: int) -> None:
        """Fill a ``w`` by ``h`` rectangle whose top-left corner is (x, y)."""
        for row in range(y, y + h):
            self.draw_hline(color, x, row, w)

    def erase(self) -> None:
        """Set every pixel to zero."""
        self.pixels = [0] * (self.width * self.height)