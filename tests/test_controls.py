import pytest

from fdfview.canvas import Canvas
from fdfview.colors import DEFAULT_COLOR, DEFAULT_RELIEF_FACTOR, RES_WIDTH
from fdfview.controls import Fdf, Key, KeyStatus, handle_key_presses, reset_viewport
from fdfview.geometry import Point, degree_to_radians
from fdfview.heightmap import parse_map


def make_fdf(text="0 0 0\n0 10 0\n0 0 0\n"):
    return Fdf(heightmap=parse_map(text), canvas=Canvas(200, 100))


def test_raw_key_codes_match_layout():
    keys = KeyStatus()
    assert keys.press(123) is True
    assert keys.left is True
    assert keys.press(24) is True
    assert keys.plus is True
    assert keys.press(53) is False


def test_press_and_release_held_key():
    keys = KeyStatus()
    assert keys.press(Key.UP) is True
    assert keys.up is True
    assert keys.any_pressed() is True
    assert keys.release(Key.UP) is True
    assert keys.up is False
    assert keys.any_pressed() is False


@pytest.mark.parametrize("keycode", [Key.ESC, Key.ZERO, 0, 999])
def test_press_of_other_keys_changes_nothing(keycode):
    keys = KeyStatus()
    assert keys.press(keycode) is False
    assert keys.any_pressed() is False


def test_reset_releases_everything():
    keys = KeyStatus()
    for key in (Key.LEFT, Key.EQUALS, Key.COMMA, Key.SQ_BRACKET_R):
        keys.press(key)
    assert keys.any_pressed() is True
    keys.reset()
    assert keys == KeyStatus()


def test_no_keys_leaves_view_unchanged():
    fdf = make_fdf()
    offset = fdf.canvas.offset
    tile = fdf.heightmap.tile_size
    rotation = fdf.canvas.rotation
    handle_key_presses(fdf)
    assert fdf.canvas.offset == offset
    assert fdf.heightmap.tile_size == tile
    assert fdf.canvas.rotation == rotation


def test_up_moves_offset_x():
    fdf = make_fdf(" ".join(["0"] * 20) + "\n")
    fdf.heightmap.tile_size = 10
    fdf.canvas.offset = Point(0, 0)
    fdf.keys.press(Key.UP)
    handle_key_presses(fdf)
    assert fdf.canvas.offset == Point(4, 0)


def test_opposite_keys_cancel():
    fdf = make_fdf()
    start = fdf.canvas.offset
    fdf.keys.press(Key.LEFT)
    fdf.keys.press(Key.RIGHT)
    fdf.keys.press(Key.UP)
    fdf.keys.press(Key.DOWN)
    handle_key_presses(fdf)
    assert fdf.canvas.offset == start


def test_left_then_right_returns():
    fdf = make_fdf()
    start = fdf.canvas.offset
    fdf.keys.press(Key.LEFT)
    handle_key_presses(fdf)
    assert fdf.canvas.offset.y > start.y
    assert fdf.canvas.offset.x == start.x
    fdf.keys.reset()
    fdf.keys.press(Key.RIGHT)
    handle_key_presses(fdf)
    assert fdf.canvas.offset == start


def test_zoom_is_clamped():
    fdf = make_fdf()
    fdf.heightmap.tile_size = 1
    fdf.keys.press(Key.MIN)
    handle_key_presses(fdf)
    assert fdf.heightmap.tile_size == 1
    fdf.keys.reset()
    fdf.heightmap.tile_size = RES_WIDTH
    fdf.keys.press(Key.EQUALS)
    handle_key_presses(fdf)
    assert fdf.heightmap.tile_size == RES_WIDTH


def test_zoom_in_and_out_change_tile_size():
    fdf = make_fdf()
    fdf.heightmap.tile_size = 100
    fdf.keys.press(Key.EQUALS)
    handle_key_presses(fdf)
    bigger = fdf.heightmap.tile_size
    assert bigger > 100
    fdf.keys.reset()
    fdf.keys.press(Key.MIN)
    handle_key_presses(fdf)
    assert fdf.heightmap.tile_size < bigger


def test_relief_keys():
    fdf = make_fdf()
    relief = fdf.heightmap.relief_factor
    fdf.keys.press(Key.SQ_BRACKET_R)
    handle_key_presses(fdf)
    assert fdf.heightmap.relief_factor > relief
    fdf.keys.reset()
    fdf.keys.press(Key.SQ_BRACKET_L)
    handle_key_presses(fdf)
    assert fdf.heightmap.relief_factor == pytest.approx(relief)


def test_rotation_is_clamped():
    fdf = make_fdf()
    fdf.canvas.rotation = 0
    fdf.keys.press(Key.DOT)
    handle_key_presses(fdf)
    assert fdf.canvas.rotation == 0
    fdf.keys.reset()
    fdf.canvas.rotation = fdf.canvas.max_rotation
    fdf.keys.press(Key.COMMA)
    handle_key_presses(fdf)
    assert fdf.canvas.rotation == fdf.canvas.max_rotation


def test_reset_viewport_restores_defaults():
    fdf = make_fdf()
    default_offset = Canvas().offset
    fdf.canvas.offset = Point(1, 2)
    fdf.canvas.rotation = 0
    fdf.heightmap.relief_factor = 3.0
    fdf.heightmap.default_color = 0
    fdf.heightmap.tile_size = 2
    reset_viewport(fdf)
    assert fdf.canvas.offset == default_offset
    assert fdf.canvas.rotation == degree_to_radians(30)
    assert fdf.heightmap.relief_factor == DEFAULT_RELIEF_FACTOR
    assert fdf.heightmap.default_color == DEFAULT_COLOR
    assert fdf.heightmap.tile_size == 150.0