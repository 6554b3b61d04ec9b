"""The viewer's command: argument handling, the window and its event loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fdfview.canvas import Canvas
from fdfview.colors import RES_HEIGHT, RES_WIDTH
from fdfview.controls import Fdf, Key, handle_key_presses, reset_viewport
from fdfview.heightmap import HeightMap, MapError, load_map
from fdfview.renderer import Renderer

_FRAMES_PER_SECOND = 60


class FdfExit(Exception):
    """Ends the viewer with an exit code and an optional error message."""

    def __init__(
        self, message: str | None = None, code: int = 1, detail: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail

    def report(self) -> str:
        """Return the text written to standard error, or '' if there is none."""
        if self.message is None:
            return ""
        text = "Error\n" + self.message
        if self.detail:
            text += ": " + self.detail
        return text + "\n"


def get_file_name(path: str) -> str:
    """Return what follows the first '/' in ``path``, or ``path`` itself."""
    _, slash, rest = path.partition("/")
    return rest if slash else path


def window_title(map_path: str, program: str) -> str:
    """Build the window title from the map path and the program path."""
    return f"{get_file_name(map_path)} - {get_file_name(program)}"


def setup_args(argv: Sequence[str]) -> HeightMap:
    """Load the map named by the single argument and size its tiles to fit."""
    if len(argv) > 1:
        raise FdfExit("Too many arguments")
    if len(argv) < 1:
        raise FdfExit("Missing config file")
    try:
        heightmap = load_map(argv[0])
    except MapError as exc:
        raise FdfExit("Failed to load config", detail=str(exc)) from exc
    heightmap.tile_size = (RES_HEIGHT // heightmap.height) * 0.5
    if heightmap.tile_size <= 0:
        heightmap.tile_size = 1
    return heightmap


def _key_table(pygame) -> dict[int, Key]:
    return {
        pygame.K_0: Key.ZERO,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_UP: Key.UP,
        pygame.K_EQUALS: Key.EQUALS,
        pygame.K_MINUS: Key.MIN,
        pygame.K_LEFTBRACKET: Key.SQ_BRACKET_L,
        pygame.K_RIGHTBRACKET: Key.SQ_BRACKET_R,
        pygame.K_COMMA: Key.COMMA,
        pygame.K_PERIOD: Key.DOT,
        pygame.K_ESCAPE: Key.ESC,
    }


def _create_canvas() -> Canvas:
    """Initialise the display and make a canvas no larger than the screen."""
    import pygame

    try:
        pygame.display.init()
        info = pygame.display.Info()
    except pygame.error as exc:
        raise FdfExit("Failed to initialize mlx library", detail=str(exc)) from exc
    res_w = RES_WIDTH
    res_h = RES_HEIGHT
    if info.current_w > 0:
        res_w = min(res_w, info.current_w)
    if info.current_h > 0:
        res_h = min(res_h, info.current_h)
    return Canvas(res_w, res_h)


def run(fdf: Fdf, title: str) -> int:
    """Open a window showing ``fdf`` and run until it is closed or ESC is hit."""
    import pygame

    canvas = fdf.canvas
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((canvas.res_w, canvas.res_h))
    except pygame.error as exc:
        raise FdfExit("Could not open a window", detail=str(exc)) from exc
    pygame.display.set_caption(title)
    keys = _key_table(pygame)
    focus_events = {pygame.VIDEOEXPOSE, pygame.WINDOWFOCUSGAINED}
    renderer = Renderer(fdf)
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in focus_events:
                    fdf.keys.reset()
                elif event.type == pygame.KEYDOWN:
                    key = keys.get(event.key)
                    if key is Key.ESC:
                        return 0
                    if key is Key.ZERO:
                        reset_viewport(fdf)
                    elif key is not None:
                        fdf.keys.press(key)
                elif event.type == pygame.KEYUP:
                    key = keys.get(event.key)
                    if key is not None:
                        fdf.keys.release(key)
                    renderer.render_next_frame(True)
            handle_key_presses(fdf)
            renderer.render_next_frame(False)
            frame = pygame.image.frombuffer(
                canvas.to_bytes(), (canvas.res_w, canvas.res_h), "BGRA"
            ).convert()
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map file named in ``argv``; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = sys.argv[0] if sys.argv and sys.argv[0] else "fdf"
    try:
        heightmap = setup_args(args)
        fdf = Fdf(heightmap=heightmap, canvas=_create_canvas())
        return run(fdf, window_title(args[0], program))
    except FdfExit as exc:
        sys.stderr.write(exc.report())
        return exc.code