"""Projecting a height map and drawing it onto the canvas."""

from __future__ import annotations

import math

from fdfview.colors import ALWAYS_DRAW_LINES, DEFAULT_COLOR
from fdfview.controls import Fdf
from fdfview.geometry import Point


class Renderer:
    """Draws frames of an :class:`Fdf` state, skipping work when nothing changed."""

    def __init__(self, fdf: Fdf) -> None:
        self.fdf = fdf
        self._last_rotation = 0.0
        self._last_tile_size = 0.0
        self._last_relief = 0.0
        self._last_offset = Point(0, 0)

    def recalc_needed(self) -> bool:
        """Tell whether rotation, zoom or relief changed since the last check."""
        heightmap = self.fdf.heightmap
        current = (
            self.fdf.canvas.rotation,
            heightmap.tile_size,
            heightmap.relief_factor,
        )
        if current == (self._last_rotation, self._last_tile_size, self._last_relief):
            return False
        self._last_rotation, self._last_tile_size, self._last_relief = current
        return True

    def redraw_needed(self) -> bool:
        """Tell whether the offset changed since the last check."""
        offset = self.fdf.canvas.offset
        if offset == self._last_offset:
            return False
        self._last_offset = offset
        return True

    def calculate_iso_coordinates(self) -> None:
        """Project every map point to its screen position."""
        heightmap = self.fdf.heightmap
        tile = heightmap.tile_size
        sin_rot = math.sin(self.fdf.canvas.rotation)
        cos_rot = math.cos(self.fdf.canvas.rotation)
        heightmap.iso_map = [
            [
                self._project(alt, h, w, tile, sin_rot, cos_rot)
                for w, alt in enumerate(row)
            ]
            for h, row in enumerate(heightmap.alts)
        ]

    def _project(
        self, alt: int, h: int, w: int, tile: float, sin_rot: float, cos_rot: float
    ) -> Point:
        z = int(alt * self.fdf.heightmap.relief_factor * tile)
        x = int(-z + (w * tile + h * tile) * sin_rot)
        y = int((w * tile - h * tile) * cos_rot)
        return Point(x, y)

    def _render_points(self) -> None:
        heightmap = self.fdf.heightmap
        canvas = self.fdf.canvas
        for iso_row, color_row in zip(heightmap.iso_map, heightmap.colors):
            for point, color in zip(iso_row, color_row):
                canvas.put_pixel(point.x, point.y, color or DEFAULT_COLOR)

    def _draw_line_between(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        heightmap = self.fdf.heightmap
        canvas = self.fdf.canvas
        (s_row, s_col), (e_row, e_col) = start, end
        s_point = heightmap.iso_map[s_row][s_col]
        e_point = heightmap.iso_map[e_row][e_col]
        if canvas.is_off_screen(s_point) and canvas.is_off_screen(e_point):
            return
        s_color = heightmap.colors[s_row][s_col] or DEFAULT_COLOR
        e_color = heightmap.colors[e_row][e_col] or DEFAULT_COLOR
        if s_color != DEFAULT_COLOR or e_color != DEFAULT_COLOR:
            canvas.draw_line_gradient(s_point, e_point, s_color, e_color)
        else:
            canvas.draw_line(s_point, e_point, DEFAULT_COLOR)

    def _draw_lines(self) -> None:
        heightmap = self.fdf.heightmap
        for row in range(heightmap.height):
            for col in range(heightmap.width):
                if col > 0:
                    self._draw_line_between((row, col), (row, col - 1))
                if row > 0:
                    self._draw_line_between((row, col), (row - 1, col))

    def render_next_frame(self, forced: bool = False) -> bool:
        """Render a frame if anything changed or ``forced``; return whether it did."""
        changed = False
        if forced or self.recalc_needed():
            self.calculate_iso_coordinates()
            changed = True
        if forced or changed or self.redraw_needed():
            self.fdf.canvas.clear()
            self._render_points()
            if ALWAYS_DRAW_LINES or not self.fdf.keys.any_pressed():
                self._draw_lines()
            changed = True
        return changed