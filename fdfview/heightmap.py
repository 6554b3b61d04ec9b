"""Height maps: the ``.fdf`` file format, loading and debug output."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from fdfview.colors import DEFAULT_COLOR, DEFAULT_RELIEF_FACTOR, parse_hex
from fdfview.geometry import Point

_LEADING_INT = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")


class MapError(ValueError):
    """A map file could not be read or is malformed."""


@dataclass
class HeightMap:
    """A grid of altitudes with an optional colour per point.

    A colour of 0 means the point has no colour of its own.
    ``iso_map`` holds the projected screen position of every point.
    """

    alts: list[list[int]]
    colors: list[list[int]]
    default_color: int = DEFAULT_COLOR
    tile_size: float = 10
    relief_factor: float = DEFAULT_RELIEF_FACTOR
    iso_map: list[list[Point]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.colors) != len(self.alts):
            raise MapError("colour rows do not match altitude rows")
        width = self.width
        for alt_row, color_row in zip(self.alts, self.colors):
            if len(alt_row) != width or len(color_row) != width:
                raise MapError("rows of a map must all have the same width")
        if not self.iso_map:
            self.iso_map = [[Point(0, 0)] * width for _ in self.alts]

    @property
    def height(self) -> int:
        """The number of rows."""
        return len(self.alts)

    @property
    def width(self) -> int:
        """The number of points in each row."""
        return len(self.alts[0]) if self.alts else 0


def extension_valid(file_name: str, ext: str) -> bool:
    """Tell whether ``file_name`` ends with ``ext`` (case sensitive)."""
    return len(file_name) >= len(ext) and file_name.endswith(ext)


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def _parse_value(token: str) -> tuple[int, int]:
    altitude = _atoi(token)
    _, comma, color_text = token.partition(",")
    color = parse_hex(color_text) if comma else 0
    return altitude, color


def parse_map(text: str) -> HeightMap:
    """Parse the contents of a map file.

    Each non-empty line is a row of space-separated values, each an altitude
    optionally followed by ``,`` and a hex colour. Empty lines are skipped.
    Every row must hold as many values as the first.
    """
    alts: list[list[int]] = []
    colors: list[list[int]] = []
    width = 0
    for number, line in enumerate(filter(None, text.split("\n")), start=1):
        tokens = [token for token in line.split(" ") if token]
        if not tokens:
            raise MapError(f"row {number} holds no values")
        if not width:
            width = len(tokens)
        elif len(tokens) != width:
            raise MapError(
                f"row {number} has {len(tokens)} values, expected {width}"
            )
        values = [_parse_value(token) for token in tokens]
        alts.append([alt for alt, _ in values])
        colors.append([color for _, color in values])
    if not alts:
        raise MapError("map holds no rows")
    return HeightMap(alts=alts, colors=colors)


def load_map(path: str | Path) -> HeightMap:
    """Read and parse a map file, which must end in ``.fdf`` or ``.FDF``."""
    name = str(path)
    if not (extension_valid(name, ".fdf") or extension_valid(name, ".FDF")):
        raise MapError(f"{name}: map file must have the .fdf extension")
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise MapError(f"{name}: cannot open map file") from exc
    try:
        with handle:
            print("Reading config...")
            try:
                raw = handle.read()
            except OSError as exc:
                raise MapError(f"{name}: cannot read map file") from exc
        text = raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        print("Parsing config...")
        return parse_map(text)
    finally:
        print("Config parsed. Starting FdF now!")


def format_map(heightmap: HeightMap) -> str:
    """Render a map as text: ``alt (COLOR)`` per point, one row per line."""
    return "".join(
        "".join(f"{alt} ({color:X}) " for alt, color in zip(alt_row, color_row))
        + "\n"
        for alt_row, color_row in zip(heightmap.alts, heightmap.colors)
    )