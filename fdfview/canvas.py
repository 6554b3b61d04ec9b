"""An in-memory pixel canvas with a viewport offset."""

from __future__ import annotations

import math
import sys
from array import array

from fdfview.colors import MAX_ROTATION, RES_HEIGHT, RES_WIDTH, get_gradient_color
from fdfview.geometry import Point, degree_to_radians, line_points


class Canvas:
    """A ``res_h`` by ``res_w`` image of 32-bit pixels.

    Coordinates passed to drawing methods are shifted by ``offset``:
    ``offset.x`` moves along rows (height), ``offset.y`` along columns (width).
    """

    def __init__(self, res_w: int = RES_WIDTH, res_h: int = RES_HEIGHT) -> None:
        self.res_w = res_w
        self.res_h = res_h
        self.offset = Point(int(RES_HEIGHT * 0.4), int(RES_WIDTH * 0.5))
        self.rotation = degree_to_radians(30)
        self.max_rotation = degree_to_radians(MAX_ROTATION)
        self._pixels = array("I", bytes(4 * res_w * res_h))

    def _index(self, h: int, w: int) -> int | None:
        h += self.offset.x
        w += self.offset.y
        if h < 0 or w < 0 or h >= self.res_h or w >= self.res_w:
            return None
        return h * self.res_w + w

    def is_off_screen(self, point: Point) -> bool:
        """Tell whether a point falls outside the canvas after the offset."""
        x = point.x + self.offset.x
        y = point.y + self.offset.y
        return not (0 <= x < self.res_h and 0 <= y < self.res_w)

    def put_pixel(self, h: int, w: int, color: int) -> None:
        """Set one pixel; positions outside the canvas are ignored."""
        index = self._index(h, w)
        if index is not None:
            self._pixels[index] = color & 0xFFFFFFFF

    def pixel(self, h: int, w: int) -> int:
        """Return the colour at a position, shifted by the offset."""
        index = self._index(h, w)
        if index is None:
            raise IndexError(f"pixel ({h}, {w}) is outside the canvas")
        return self._pixels[index]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self._pixels = array("I", bytes(4 * self.res_w * self.res_h))

    def draw_line(self, start: Point, end: Point, color: int) -> None:
        """Draw a line in a single colour."""
        for point in line_points(start, end):
            self.put_pixel(point.x, point.y, color)

    def draw_line_gradient(
        self, start: Point, end: Point, start_color: int, end_color: int
    ) -> None:
        """Draw a line whose colour fades from ``start_color`` to ``end_color``."""
        length = math.floor(math.hypot(end.x - start.x, end.y - start.y) + 0.5)
        for step, point in enumerate(line_points(start, end)):
            perc = step / length if length else 0.0
            self.put_pixel(
                point.x, point.y, get_gradient_color(start_color, end_color, perc)
            )

    def to_bytes(self) -> bytes:
        """Return the pixels row by row, four little-endian bytes each (BGRA)."""
        if sys.byteorder == "little":
            return self._pixels.tobytes()
        swapped = array("I", self._pixels)
        swapped.byteswap()
        return swapped.tobytes()