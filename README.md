# wireframe

`wireframe` draws a height map as a 3D wireframe in a window. You can rotate
the map around each axis and zoom in or out while it is shown.

## Installing

```
pip install .
```

The viewer uses `pygame` to open its window.

## Running the viewer

```
wireframe path/to/map.fdf
```

Give exactly one map file. If you give none, more than one, a file that
cannot be opened, or a malformed map, the command prints the error to
standard error and exits with status 1.

The window is 3000 by 2000 pixels and titled "FdF".

### Map format

A map is a plain text file. Each line is one row of the grid. The values on
a line are separated by spaces, and each gives the height of one point:

```
0 0 0 0
0 5 5 0
0 5 5,0xFF0000 0
0 0 0 0
```

- Every row must have the same number of values as the first row.
- A value starts with an optional run of `+` or `-` signs followed by a digit.
- A value can carry a colour after it, written as `,0xRRGGBB`. A point with
  no colour is drawn in `#FF00FF` if its height is above zero, and in
  `#FF3070` otherwise.
- Heights are multiplied by 5.

The viewer rejects an empty file, an empty first line, a malformed value and
a row whose length differs from the first row.

### Controls

| Key       | Action                    |
|-----------|---------------------------|
| W / S     | rotate around the X axis  |
| A / D     | rotate around the Y axis  |
| Q / E     | rotate around the Z axis  |
| 2 / 1     | zoom in / zoom out        |
| Escape    | close the window          |

Each frame a held key turns the map by 4 degrees or scales it by 0.1.

## Using it as a library

```python
from wireframe.mapfile import load_map
from wireframe.geometry import rotate_x, rotate_z
from wireframe.canvas import Canvas, draw_map

wiremap = load_map("map.fdf")
rotate_x(wiremap.points, 30)
rotate_z(wiremap.points, 45)

canvas = Canvas()
draw_map(wiremap, canvas)
print(hex(canvas.get_pixel(1500, 1000)))
```

- `wireframe.mapfile`: `parse_map`, `load_map`, `get_color`, `count_row`,
  `check_args`, and the `WireMap`, `Point` and `MapError` types. Malformed
  input raises `MapError`.
- `wireframe.geometry`: `rotate_x`, `rotate_y`, `rotate_z` (angles in
  degrees, points changed in place) and `recenter`.
- `wireframe.canvas`: the `Canvas` pixel buffer (`put_pixel`, `get_pixel`,
  `clear`), `draw_line` (Bresenham) and `draw_map`.
- `wireframe.app`: the `Viewer` with its `Action` values (`press`, `render`),
  and `main`.

The package also includes some smaller helper modules:

- `wireframe.chars`: character classes and case conversion.
- `wireframe.numeric`: `atoi`, `atol`, `atoi_base`, `itoa`.
- `wireframe.strings`: splitting, trimming, searching and bounded copies.
- `wireframe.memory`: byte-buffer helpers.
- `wireframe.linkedlist`: `LinkedList` and `Node`.
- `wireframe.output`: `printf`, `FormatError` and the `put_*` writers.
- `wireframe.lines`: `LineReader`, `first_line_width`, `count_lines`.

## What it does not do

The `Canvas` is held in memory only; there is no way to save a rendered
image to a file. The viewer has no perspective projection and no mouse
controls.

## Running the tests

```
pip install .[test]
pytest
```