"""Keyboard state and how held keys change the view."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum

from fdfview.canvas import Canvas
from fdfview.colors import DEFAULT_COLOR, DEFAULT_RELIEF_FACTOR, RES_HEIGHT, RES_WIDTH
from fdfview.geometry import Point, degree_to_radians
from fdfview.heightmap import HeightMap


class Key(IntEnum):
    """Keycodes the viewer responds to."""

    ZERO = 29
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126
    EQUALS = 24
    MIN = 27
    SQ_BRACKET_L = 33
    SQ_BRACKET_R = 30
    COMMA = 43
    DOT = 47
    ESC = 53


_HELD_KEYS = {
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.UP: "up",
    Key.DOWN: "down",
    Key.EQUALS: "plus",
    Key.MIN: "minus",
    Key.SQ_BRACKET_L: "sq_br_l",
    Key.SQ_BRACKET_R: "sq_br_r",
    Key.COMMA: "comma",
    Key.DOT: "dot",
}


@dataclass
class KeyStatus:
    """Which of the keys that act while held down are currently pressed."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    plus: bool = False
    minus: bool = False
    sq_br_l: bool = False
    sq_br_r: bool = False
    comma: bool = False
    dot: bool = False

    def reset(self) -> None:
        """Mark every key as released."""
        for item in fields(self):
            setattr(self, item.name, False)

    def _set(self, keycode: int, value: bool) -> bool:
        name = _HELD_KEYS.get(keycode)
        if name is None:
            return False
        setattr(self, name, value)
        return True

    def press(self, keycode: int) -> bool:
        """Mark a key as pressed; return False if it is not a held key."""
        return self._set(keycode, True)

    def release(self, keycode: int) -> bool:
        """Mark a key as released; return False if it is not a held key."""
        return self._set(keycode, False)

    def any_pressed(self) -> bool:
        """Tell whether any key is held down."""
        return any(getattr(self, item.name) for item in fields(self))


@dataclass
class Fdf:
    """The viewer's state: the map, the canvas and the keyboard."""

    heightmap: HeightMap
    canvas: Canvas
    keys: KeyStatus = field(default_factory=KeyStatus)


def _handle_offset_keys(fdf: Fdf) -> None:
    heightmap = fdf.heightmap
    step = 1 + heightmap.tile_size * 0.2 + heightmap.width * 0.05
    up_down = 0
    left_right = 0
    if fdf.keys.up:
        up_down = int(up_down + step)
    if fdf.keys.down:
        up_down = int(up_down - step)
    if fdf.keys.left:
        left_right = int(left_right + step)
    if fdf.keys.right:
        left_right = int(left_right - step)
    offset = fdf.canvas.offset
    fdf.canvas.offset = Point(offset.x + up_down, offset.y + left_right)


def _handle_zoom_and_relief(fdf: Fdf) -> None:
    zoom = 1.0
    relief = 0.0
    if fdf.keys.minus:
        zoom -= 0.05
    if fdf.keys.plus:
        zoom += 0.05
    if fdf.keys.sq_br_l:
        relief -= 0.01
    if fdf.keys.sq_br_r:
        relief += 0.01
    heightmap = fdf.heightmap
    heightmap.tile_size = min(max(heightmap.tile_size * zoom, 1), RES_WIDTH)
    heightmap.relief_factor += relief


def _handle_rotation(fdf: Fdf) -> None:
    rot = 0.0
    if fdf.keys.comma:
        rot += 0.01
    if fdf.keys.dot:
        rot -= 0.01
    canvas = fdf.canvas
    canvas.rotation = min(max(canvas.rotation + rot, 0), canvas.max_rotation)


def handle_key_presses(fdf: Fdf) -> None:
    """Move, zoom, raise and rotate the view according to the held keys."""
    _handle_offset_keys(fdf)
    _handle_zoom_and_relief(fdf)
    _handle_rotation(fdf)


def reset_viewport(fdf: Fdf) -> None:
    """Centre the map again with the default zoom, relief and rotation."""
    heightmap = fdf.heightmap
    heightmap.tile_size = (RES_HEIGHT // heightmap.height) * 0.5
    heightmap.relief_factor = DEFAULT_RELIEF_FACTOR
    heightmap.default_color = DEFAULT_COLOR
    fdf.canvas.offset = Point(int(RES_HEIGHT * 0.4), int(RES_WIDTH * 0.5))
    fdf.canvas.rotation = degree_to_radians(30)