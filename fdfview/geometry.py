"""Points, angles and line rasterisation."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An integer position on the canvas."""

    x: int
    y: int


def degree_to_radians(degree: int) -> float:
    """Convert degrees to radians; below 0 counts as 360, above 360 as 0."""
    if degree < 0:
        degree = 360
    elif degree > 360:
        degree = 0
    return degree * math.pi / 180


def line_points(start: Point, end: Point) -> Iterator[Point]:
    """Yield the points of a line from ``start`` to ``end`` (Bresenham)."""
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = 1 if start.x < end.x else -1
    sy = 1 if start.y < end.y else -1
    err = dx // 2 if dx > dy else -(dy // 2)
    x, y = start.x, start.y
    while True:
        yield Point(x, y)
        if x == end.x and y == end.y:
            return
        e2 = err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy