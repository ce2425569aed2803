"""An in-memory RGBA pixel canvas and wireframe line drawing."""

from __future__ import annotations

from .geometry import recenter
from .mapfile import HEIGHT, WIDTH, Point, WireMap
from .numeric import atoi_base

_COLOR_MASK = 0xFFFFFFFF


class Canvas:
    """A ``width`` by ``height`` grid of 32-bit RGBA colours, black by default."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: dict[tuple[int, int], int] = {}

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; coordinates are truncated and points outside are ignored."""
        col, row = int(x), int(y)
        if not self._inside(col, row):
            return
        color &= _COLOR_MASK
        if color:
            self.pixels[(col, row)] = color
        else:
            self.pixels.pop((col, row), None)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``; raises IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels.get((x, y), 0)

    def clear(self) -> None:
        """Reset every pixel to black."""
        self.pixels.clear()


def _walk_x(canvas: Canvas, x: float, y: float, stop: int, step: int, color: int) -> None:
    while int(x) != stop:
        canvas.put_pixel(x, y, color)
        x += step


def _walk_y(canvas: Canvas, x: float, y: float, stop: int, step: int, color: int) -> None:
    while int(y) != stop:
        canvas.put_pixel(x, y, color)
        y += step


def draw_line(canvas: Canvas, start: Point, end: Point) -> None:
    """Draw a line from ``start`` to ``end`` in the colour of ``start``."""
    color = atoi_base(start.color)
    dx = int(end.x - start.x)
    dy = int(end.y - start.y)
    step_x = -1 if dx < 0 else 1
    step_y = -1 if dy < 0 else 1
    dx, dy = abs(dx), abs(dy)
    stop_x = int(end.x) + step_x
    stop_y = int(end.y) + step_y
    x, y = start.x, start.y

    if dy == 0:
        _walk_x(canvas, x, y, stop_x, step_x, color)
    elif dx == 0:
        _walk_y(canvas, x, y, stop_y, step_y, color)
    elif dx >= dy:
        error = -dx
        while int(x) != stop_x:
            canvas.put_pixel(x, y, color)
            error += 2 * dy
            if error >= 0:
                y += step_y
                error -= 2 * dx
            x += step_x
    else:
        error = -dy
        while int(y) != stop_y:
            canvas.put_pixel(x, y, color)
            error += 2 * dx
            if error >= 0:
                x += step_x
                error -= 2 * dy
            y += step_y


def draw_map(wiremap: WireMap, canvas: Canvas) -> None:
    """Scale the points by the map's ratio, centre them and draw the grid edges.

    The points are changed in place.
    """
    points = wiremap.points
    for point in points:
        point.x *= wiremap.ratio
        point.y *= wiremap.ratio
    recenter(points, canvas.width, canvas.height)
    row = wiremap.width
    total = len(points)
    for index, point in enumerate(points[:-1]):
        if (index + 1) % row != 0:
            draw_line(canvas, point, points[index + 1])
        if total - row > index:
            draw_line(canvas, point, points[index + row])