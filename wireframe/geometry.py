"""Rotating and recentring wireframe points in place."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .mapfile import HEIGHT, WIDTH, Point


def _radians(angle: float) -> float:
    return angle * (math.pi / 180.0)


def rotate_x(points: Sequence[Point], angle: float) -> None:
    """Rotate every point about the x axis by ``angle`` degrees."""
    if angle == 0:
        return
    radian = _radians(angle)
    cos, sin = math.cos(radian), math.sin(radian)
    for point in points:
        y, z = point.y, point.z
        point.y = y * cos - z * sin
        point.z = y * sin + z * cos


def rotate_y(points: Sequence[Point], angle: float) -> None:
    """Rotate every point about the y axis by ``angle`` degrees."""
    if angle == 0:
        return
    radian = _radians(angle)
    cos, sin = math.cos(radian), math.sin(radian)
    for point in points:
        x, z = point.x, point.z
        point.x = x * cos + z * sin
        point.z = -x * sin + z * cos


def rotate_z(points: Sequence[Point], angle: float) -> None:
    """Rotate every point about the z axis by ``angle`` degrees."""
    if angle == 0:
        return
    radian = _radians(angle)
    cos, sin = math.cos(radian), math.sin(radian)
    for point in points:
        x, y = point.x, point.y
        point.x = x * cos - y * sin
        point.y = x * sin + y * cos


def recenter(points: Sequence[Point], width: int = WIDTH, height: int = HEIGHT) -> None:
    """Shift the points so their mean lies at the middle of a ``width`` by ``height`` area."""
    if not points:
        return
    count = len(points)
    mean_x = sum(point.x for point in points) / count
    mean_y = sum(point.y for point in points) / count
    for point in points:
        point.x = (point.x - mean_x) + width // 2
        point.y = (point.y - mean_y) + height // 2