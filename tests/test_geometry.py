import copy
import math

import pytest

from wireframe.geometry import recenter, rotate_x, rotate_y, rotate_z
from wireframe.mapfile import HEIGHT, WIDTH, Point


def _sample():
    return [
        Point(0.0, 0.0, 0.0, "ff"),
        Point(10.0, 0.0, 5.0, "ff"),
        Point(3.0, 7.0, -2.0, "ff"),
        Point(-4.0, 12.0, 9.0, "ff"),
    ]


def _coords(points):
    return [(p.x, p.y, p.z) for p in points]


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_zero_angle_is_noop(rotate):
    points = _sample()
    before = _coords(points)
    rotate(points, 0)
    assert _coords(points) == before


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_undone_by_opposite(rotate):
    points = _sample()
    before = _coords(points)
    rotate(points, 36)
    rotate(points, -36)
    for got, want in zip(_coords(points), before):
        assert got == pytest.approx(want, abs=1e-9)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_full_turn_is_identity(rotate):
    points = _sample()
    before = _coords(points)
    rotate(points, 360)
    for got, want in zip(_coords(points), before):
        assert got == pytest.approx(want, abs=1e-9)


def test_rotate_x_keeps_x_and_radius():
    points = _sample()
    before = copy.deepcopy(points)
    rotate_x(points, 50)
    for got, want in zip(points, before):
        assert got.x == want.x
        assert math.hypot(got.y, got.z) == pytest.approx(math.hypot(want.y, want.z))


def test_rotate_y_keeps_y_and_radius():
    points = _sample()
    before = copy.deepcopy(points)
    rotate_y(points, 75)
    for got, want in zip(points, before):
        assert got.y == want.y
        assert math.hypot(got.x, got.z) == pytest.approx(math.hypot(want.x, want.z))


def test_rotate_z_keeps_z_and_radius():
    points = _sample()
    before = copy.deepcopy(points)
    rotate_z(points, 120)
    for got, want in zip(points, before):
        assert got.z == want.z
        assert math.hypot(got.x, got.y) == pytest.approx(math.hypot(want.x, want.y))


def test_rotate_z_quarter_turn():
    points = [Point(1.0, 0.0, 4.0, "ff")]
    rotate_z(points, 90)
    assert points[0].x == pytest.approx(0.0, abs=1e-12)
    assert points[0].y == pytest.approx(1.0)


def test_recenter_moves_mean_to_middle():
    points = _sample()
    recenter(points)
    mean_x = sum(p.x for p in points) / len(points)
    mean_y = sum(p.y for p in points) / len(points)
    assert mean_x == pytest.approx(WIDTH // 2)
    assert mean_y == pytest.approx(HEIGHT // 2)


def test_recenter_preserves_offsets_and_z():
    points = _sample()
    before = copy.deepcopy(points)
    recenter(points, 640, 480)
    for got, want in zip(points, before):
        assert got.x - points[0].x == pytest.approx(want.x - before[0].x)
        assert got.y - points[0].y == pytest.approx(want.y - before[0].y)
        assert got.z == want.z


def test_recenter_custom_area():
    points = _sample()
    recenter(points, 640, 480)
    assert sum(p.x for p in points) / len(points) == pytest.approx(320)
    assert sum(p.y for p in points) / len(points) == pytest.approx(240)


def test_recenter_empty():
    points = []
    recenter(points)
    assert points == []