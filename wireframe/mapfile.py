"""Loading height maps: one row of space-separated heights per line.

Each token is a decimal height with optional leading signs, optionally
followed by a colour of the form ``,0xRRGGBB``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

from .chars import is_digit, str_lower
from .lines import LineReader
from .numeric import atoi
from .strings import count_words, split

WIDTH = 3000
HEIGHT = 2000
HEIGHT_OF_Z = 5
COLOR_RAISED = "ff00ffff"
COLOR_FLAT = "ff3070ff"


class MapError(Exception):
    """Raised when a map cannot be read or is malformed."""


@dataclass
class Point:
    """One vertex of the wireframe, with its colour as hex digits."""

    x: float
    y: float
    z: float
    color: str


@dataclass
class WireMap:
    """A grid of points laid out row by row."""

    points: list[Point] = field(default_factory=list)
    width: int = 0
    height: int = 0
    zoom: float = 0.0
    height_of_z: int = HEIGHT_OF_Z
    ratio: float = 1.0

    @property
    def total(self) -> int:
        """Number of points in the grid."""
        return self.width * self.height


def get_color(token: str | None) -> str | None:
    """Return the text after the first ``x`` of ``token`` with ``ff`` appended.

    Returns ``None`` when the token holds no ``x``.
    """
    if token is None:
        return None
    pos = token.find("x")
    if pos < 0:
        return None
    return token[pos + 1:] + "ff"


def count_row(line: str, sep: str) -> int:
    """Count the non-empty fields of ``line`` separated by ``sep``."""
    return count_words(line, sep)


def _check_token(token: str) -> None:
    body = token.lstrip("+-")
    if not body or not is_digit(ord(body[0])):
        raise MapError("Bad digit.")


def _make_point(column: int, row: int, token: str, zoom: float) -> Point:
    z = float(atoi(token) * HEIGHT_OF_Z)
    color = str_lower(get_color(token))
    if color is None:
        color = COLOR_RAISED if z > 0 else COLOR_FLAT
    return Point(x=column * zoom, y=row * zoom, z=z, color=color)


def parse_map(lines: Iterable[str]) -> WireMap:
    """Build a ``WireMap`` from the lines of a map file.

    The first line fixes the row width; every row must match it.
    Raises MapError for an empty map, a bad token or a row of the wrong width.
    """
    rows = list(lines)
    if not rows:
        raise MapError("Empty file.")
    width = count_row(rows[0], " ")
    height = len(rows)
    if width == 0:
        raise MapError("Bad line.")
    zoom = float(min(HEIGHT // width, WIDTH // height))
    points: list[Point] = []
    for row_index, line in enumerate(rows):
        tokens = split(line, " ")
        for token in tokens:
            _check_token(token)
        if len(tokens) != width:
            raise MapError("Bad line.")
        points.extend(
            _make_point(column, row_index, token, zoom)
            for column, token in enumerate(tokens)
        )
    return WireMap(points=points, width=width, height=height, zoom=zoom)


def load_map(path: str | PathLike[str]) -> WireMap:
    """Read and parse the map file at ``path``."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MapError("File descriptor error.") from exc
    with handle:
        lines = [line.decode("latin-1") for line in LineReader(handle)]
    return parse_map(lines)


def check_args(argv: Sequence[str]) -> str:
    """Return the single map path from the command-line arguments."""
    args = list(argv)
    if len(args) < 1:
        raise MapError("Add map please.")
    if len(args) > 1:
        raise MapError("Too many arguments.")
    return args[0]