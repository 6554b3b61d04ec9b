# fdfview

An isometric wireframe viewer for `.fdf` height maps.

## Map files

A map file is plain text. Each line is one row of the grid, and its values
are altitudes separated by spaces. Any value may carry a colour after a
comma, written in hex with or without a leading `0x`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

Every row must hold as many values as the first. Empty lines are skipped, but
a line made only of spaces is an error, as is a file with no rows at all. The
file name must end in `.fdf` or `.FDF`.

## Installing

```
pip install .
```

## Running

```
fdfview path/to/map.fdf
```

The command takes exactly one argument, the map file. With none or more than
one, or when the map cannot be read, it writes `Error` and a message to
standard error and exits with code 1.

The window is 1600 by 900 pixels, or smaller if the screen is smaller, and
opens with the map centred. Points with a colour are drawn in that colour; a
line between two points fades from one colour to the other when either end
has a colour of its own. All other points and lines are white.

### Keys

| Key              | Action                                   |
|------------------|------------------------------------------|
| Arrow keys       | Move the map                             |
| `=` / `-`        | Zoom in / out                            |
| `]` / `[`        | More / less relief                       |
| `,` / `.`        | Increase / decrease the tilt (0 to 45°)  |
| `0`              | Reset the view                           |
| `Esc`            | Quit                                     |

Closing the window also quits. While keys are held only the points are drawn,
to keep motion smooth; the lines come back as soon as all keys are released.

## Using it as a library

```python
from fdfview.canvas import Canvas
from fdfview.controls import Fdf
from fdfview.heightmap import format_map, load_map, parse_map
from fdfview.renderer import Renderer

heightmap = parse_map("0 0 0\n0 5,0xFF0000 0\n0 0 0\n")
print(format_map(heightmap))          # "0 (0) 0 (0) 0 (0) \n0 (5) 0 (FF0000) ..."

fdf = Fdf(heightmap=heightmap, canvas=Canvas())
Renderer(fdf).render_next_frame(True)  # draw without a window
pixels = fdf.canvas.to_bytes()         # BGRA rows, four bytes per pixel
```

- `fdfview.heightmap`: `HeightMap`, `parse_map`, `load_map` (which also
  prints progress lines to standard output), `format_map`, `extension_valid`
  and `MapError`.
- `fdfview.colors`: `parse_hex`, `get_gradient_color` and the default
  settings.
- `fdfview.geometry`: `Point`, `degree_to_radians` and `line_points`, a
  Bresenham line generator.
- `fdfview.canvas`: `Canvas`, a 32-bit pixel buffer with a viewport offset.
- `fdfview.controls`: `Key`, `KeyStatus`, `Fdf`, `handle_key_presses` and
  `reset_viewport`.
- `fdfview.renderer`: `Renderer`, which projects a map onto its canvas and
  skips work when nothing has changed.

## Tests

```
pip install .[test]
pytest
```