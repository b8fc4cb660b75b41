"""Height maps for the wireframe viewer: points, view settings and file parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

WIDTH = 1920
HEIGHT = 1080
MOVE_SPEED = 10
DEFAULT_COLOR = 0xFFFFFF

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class MapError(ValueError):
    """A map file cannot be read or its rows are malformed."""


@dataclass
class Point:
    """A map vertex: screen position, height and colour (0xRRGGBB)."""

    x: int = 0
    y: int = 0
    z: int = 0
    color: int = DEFAULT_COLOR


@dataclass
class ViewSettings:
    """How the map is projected and which interaction modes are active."""

    scale: float = 10.0
    z_scale: float = 20.0
    offset_x: int = WIDTH // 2
    offset_y: int = HEIGHT // 2
    rotation_angle_x: float = 0.0
    rotation_angle_y: float = 0.0
    control: bool = False
    color_mode: bool = False
    scale_mode: bool = False
    mouse_pressed: bool = False
    prev_mouse_x: int = 0
    prev_mouse_y: int = 0


@dataclass
class HeightMap:
    """A grid of points, row by row, with the lowest and highest height seen."""

    points: list[list[Point]] = field(default_factory=list)
    z_min: int = 0
    z_max: int = 0

    @property
    def width(self) -> int:
        return len(self.points[0]) if self.points else 0

    @property
    def height(self) -> int:
        return len(self.points)

    def scale_heights(self, factor: float) -> None:
        """Multiply every height and the height range by ``factor``, truncating."""
        for row in self.points:
            for point in row:
                point.z = int(point.z * factor)
        self.z_min = int(self.z_min * factor)
        self.z_max = int(self.z_max * factor)


def _atoi(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    if match is None:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    return value & 0xFFFFFFFF


def _parse_point(token: str, column: int, row: int, columns: int, rows: int,
                 settings: ViewSettings, heightmap: HeightMap) -> Point:
    parts = [part for part in token.split(",") if part]
    if len(parts) >= 2:
        z = int(_atoi(parts[0]) * settings.z_scale)
        color = _parse_hex(parts[1])
    else:
        z = int(_atoi(token) * settings.z_scale)
        color = DEFAULT_COLOR
    if z < heightmap.z_min:
        heightmap.z_min = z
    elif z > heightmap.z_max:
        heightmap.z_max = z
    x = int(settings.scale * column - columns * settings.scale / 2 + settings.offset_x)
    y = int(settings.scale * row - rows * settings.scale / 2 + settings.offset_y)
    return Point(x, y, z, color)


def parse_map(path: str | PathLike[str], settings: ViewSettings) -> HeightMap:
    """Read a map of space-separated heights, each optionally followed by ``,colour``.

    Every row must hold as many values as the first one.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MapError(f"cannot read map {path!s}: {exc.strerror or exc}") from exc
    if not lines:
        raise MapError("map is empty")
    heightmap = HeightMap()
    rows = len(lines)
    columns = 0
    for row, line in enumerate(lines):
        tokens = [token for token in line.split(" ") if token]
        if row == 0:
            columns = len(tokens)
            if columns == 0:
                raise MapError("first row of the map has no values")
        elif len(tokens) != columns:
            raise MapError(f"row {row + 1} has {len(tokens)} values, expected {columns}")
        heightmap.points.append([
            _parse_point(token, column, row, columns, rows, settings, heightmap)
            for column, token in enumerate(tokens)
        ])
    return heightmap