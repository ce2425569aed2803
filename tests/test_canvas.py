import pytest

from wireframe.canvas import Canvas, draw_line, draw_map
from wireframe.mapfile import COLOR_RAISED, Point, WireMap
from wireframe.numeric import atoi_base

BLUE = "000000ff"


def lit(canvas):
    return set(canvas.pixels)


def square(spacing=10.0, ratio=1.0, color=BLUE):
    points = [
        Point(0.0, 0.0, 0.0, color),
        Point(spacing, 0.0, 0.0, color),
        Point(0.0, spacing, 0.0, color),
        Point(spacing, spacing, 0.0, color),
    ]
    return WireMap(points=points, width=2, height=2, ratio=ratio)


def test_put_and_get_round_trip():
    canvas = Canvas(8, 8)
    canvas.put_pixel(3, 4, 0x11223344)
    assert canvas.get_pixel(3, 4) == 0x11223344
    assert canvas.get_pixel(4, 3) == 0


def test_put_pixel_truncates_coordinates():
    canvas = Canvas(8, 8)
    canvas.put_pixel(2.9, 5.7, 7)
    assert canvas.get_pixel(2, 5) == 7


def test_put_pixel_outside_is_ignored():
    canvas = Canvas(8, 8)
    canvas.put_pixel(-1, 0, 5)
    canvas.put_pixel(8, 0, 5)
    canvas.put_pixel(0, 8, 5)
    assert lit(canvas) == set()


def test_get_pixel_outside_raises():
    canvas = Canvas(8, 8)
    with pytest.raises(IndexError):
        canvas.get_pixel(8, 0)


def test_negative_color_keeps_bit_pattern():
    canvas = Canvas(4, 4)
    canvas.put_pixel(0, 0, atoi_base(COLOR_RAISED))
    assert canvas.get_pixel(0, 0) == int(COLOR_RAISED, 16)


def test_clear_resets_pixels():
    canvas = Canvas(4, 4)
    canvas.put_pixel(1, 1, 9)
    canvas.clear()
    assert canvas.get_pixel(1, 1) == 0


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_horizontal_line():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(0, 2, 0, BLUE), Point(4, 2, 0, BLUE))
    assert lit(canvas) == {(x, 2) for x in range(5)}
    assert canvas.get_pixel(4, 2) == int(BLUE, 16)


def test_vertical_line_reversed():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(3, 6, 0, BLUE), Point(3, 1, 0, BLUE))
    assert lit(canvas) == {(3, y) for y in range(1, 7)}


@pytest.mark.parametrize("forward", [True, False])
def test_diagonal_line(forward):
    canvas = Canvas(10, 10)
    a, b = Point(0, 0, 0, BLUE), Point(3, 3, 0, BLUE)
    draw_line(canvas, *((a, b) if forward else (b, a)))
    assert lit(canvas) == {(i, i) for i in range(4)}


def test_steep_line_one_pixel_per_row_and_endpoints():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(0, 0, 0, BLUE), Point(2, 7, 0, BLUE))
    pixels = lit(canvas)
    assert len(pixels) == 8
    assert {y for _, y in pixels} == set(range(8))
    assert (0, 0) in pixels and (2, 7) in pixels


def test_shallow_line_one_pixel_per_column():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(0, 0, 0, BLUE), Point(7, 2, 0, BLUE))
    pixels = lit(canvas)
    assert {x for x, _ in pixels} == set(range(8))
    assert len(pixels) == 8
    assert (7, 2) in pixels


def test_line_is_clipped():
    canvas = Canvas(3, 3)
    draw_line(canvas, Point(-2, 0, 0, BLUE), Point(2, 0, 0, BLUE))
    assert lit(canvas) == {(0, 0), (1, 0), (2, 0)}


def test_line_uses_start_color():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(0, 0, 0, BLUE), Point(5, 0, 0, COLOR_RAISED))
    assert set(canvas.pixels.values()) == {int(BLUE, 16)}


def test_draw_map_outlines_square_centred():
    canvas = Canvas(40, 40)
    wiremap = square()
    draw_map(wiremap, canvas)
    points = wiremap.points
    mean_x = sum(p.x for p in points) / len(points)
    mean_y = sum(p.y for p in points) / len(points)
    assert mean_x == pytest.approx(canvas.width // 2)
    assert mean_y == pytest.approx(canvas.height // 2)
    corners = {(int(p.x), int(p.y)) for p in points}
    for corner in corners:
        assert canvas.get_pixel(*corner) == int(BLUE, 16)
    xs = {x for x, _ in corners}
    ys = {y for _, y in corners}
    for x, y in lit(canvas):
        assert x in xs or y in ys
    assert canvas.get_pixel(canvas.width // 2, canvas.height // 2) == 0


def test_draw_map_applies_ratio():
    spacing = 10.0
    canvas = Canvas(60, 60)
    wiremap = square(spacing=spacing, ratio=2.0)
    draw_map(wiremap, canvas)
    points = wiremap.points
    assert points[1].x - points[0].x == pytest.approx(2 * spacing)
    assert points[2].y - points[0].y == pytest.approx(2 * spacing)


def test_draw_map_empty_draws_nothing():
    canvas = Canvas(10, 10)
    draw_map(WireMap(points=[], width=1, height=0), canvas)
    assert lit(canvas) == set()