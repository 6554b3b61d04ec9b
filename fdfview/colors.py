"""Colour helpers and the viewer's default settings."""

from __future__ import annotations

DEFAULT_COLOR = 0x00FFFFFF
"""The default colour for lines and points."""

DEFAULT_RELIEF_FACTOR = 0.5
"""The default relief factor; a higher value gives more relief."""

RES_WIDTH = 1600
"""The window width in pixels."""

RES_HEIGHT = 900
"""The window height in pixels."""

ALWAYS_DRAW_LINES = False
"""Draw lines even while keys are held down."""

MAX_ROTATION = 45
"""The largest rotation, in degrees, reachable with the rotation keys."""

_MASK32 = 0xFFFFFFFF


def _split_argb(color: int) -> tuple[int, int, int, int]:
    return (
        0xFF & (color >> 24),
        0xFF & (color >> 16),
        0xFF & (color >> 8),
        0xFF & color,
    )


def get_gradient_color(color_s: int, color_e: int, perc: float) -> int:
    """Return the colour at position ``perc`` (0 to 1) between two colours.

    The alpha channel of the result is always zero.
    """
    _, r_s, g_s, b_s = _split_argb(color_s)
    _, r_e, g_e, b_e = _split_argb(color_e)
    red = int(r_s + perc * (r_e - r_s))
    green = int(g_s + perc * (g_e - g_s))
    blue = int(b_s + perc * (b_e - b_s))
    return ((red << 16) | (green << 8) | blue) & _MASK32


_HEX_DIGITS = "0123456789abcdefABCDEF"


def parse_hex(s: str | None) -> int:
    """Parse a hexadecimal colour such as ``0xFF00FF`` or ``ff00ff``.

    Parsing stops at the first character that is not a hex digit. Strings
    shorter than two characters give 0. The value wraps at 32 bits.
    """
    if not s or len(s) < 2:
        return 0
    digits = s[2:] if s[1] == "x" else s
    color = 0
    for char in digits:
        if char not in _HEX_DIGITS:
            break
        color = (color * 16 + int(char, 16)) & _MASK32
    return color