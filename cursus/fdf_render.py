"""Projection of height maps and line drawing onto a pixel canvas."""

from __future__ import annotations

import math
from array import array

from cursus.fdf_map import HEIGHT, WIDTH, HeightMap, Point, ViewSettings

_OPAQUE = 0xFF000000


class Canvas:
    """A width x height grid of 0xAARRGGBB pixels, row by row in ``pixels``."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._blank = array("I", [0]) * (width * height)
        self.pixels = array("I", self._blank)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; positions outside the canvas are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour of a pixel; IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.pixels[:] = self._blank


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


def color_from_z(z: int, z_min: int, z_max: int) -> int:
    """Opaque colour for height ``z``: white through yellow and red to purple."""
    span = z_max - z_min
    percentage = (z - z_min) / span if span else 0.0
    percentage = min(max(percentage, 0.0), 1.0)
    if percentage <= 0.33:
        red, green = 255, 255
        blue = _channel(255 * (1 - percentage / 0.33))
    elif percentage <= 0.66:
        red, blue = 255, 0
        green = _channel(255 * (1 - (percentage - 0.33) / 0.33))
    else:
        red = _channel(255 * (1 - (percentage - 0.66) / 0.34))
        green = 0
        blue = _channel(255 * ((percentage - 0.66) / 0.34) * 0.8)
    return _OPAQUE | (red << 16) | (green << 8) | blue


def _line_color(percentage: float, settings: ViewSettings, heightmap: HeightMap,
                start: Point, end: Point) -> int:
    if settings.color_mode:
        current_z = int(percentage * start.z + (1 - percentage) * end.z)
        return color_from_z(current_z, heightmap.z_min, heightmap.z_max)
    channels = [
        _channel((1 - percentage) * ((end.color >> shift) & 0xFF)
                 + percentage * ((start.color >> shift) & 0xFF))
        for shift in (16, 8, 0)
    ]
    red, green, blue = channels
    return _OPAQUE | (red << 16) | (green << 8) | blue


def draw_line(canvas: Canvas, settings: ViewSettings, heightmap: HeightMap,
              p0: Point, p1: Point) -> None:
    """Draw from ``p0`` towards ``p1``, the end point excluded, blending colours."""
    x, y = p0.x, p0.y
    dx = abs(p1.x - x)
    dy = abs(p1.y - y)
    sx = 1 if x < p1.x else -1
    sy = 1 if y < p1.y else -1
    err = dx - dy
    while x != p1.x or y != p1.y:
        percentage = (abs(p1.x - x) + abs(p1.y - y)) / (dx + dy)
        canvas.put_pixel(x, y, _line_color(percentage, settings, heightmap, p0, p1))
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_map(canvas: Canvas, settings: ViewSettings, heightmap: HeightMap) -> None:
    """Clear the canvas and join every point to its right and lower neighbours."""
    canvas.clear()
    rows = heightmap.points
    last_row = len(rows) - 1
    for row_index, row in enumerate(rows):
        last_column = len(row) - 1
        for column, point in enumerate(row):
            if column < last_column:
                draw_line(canvas, settings, heightmap, point, row[column + 1])
            if row_index < last_row:
                draw_line(canvas, settings, heightmap, point, rows[row_index + 1][column])


def rotate_point(point: Point, angle_x: float, angle_y: float) -> None:
    """Rotate a point in place about the x axis, then the y axis."""
    temp_z = point.y * math.sin(angle_x) + point.z * math.cos(angle_x)
    point.x = int(point.x * math.cos(angle_y) + temp_z * math.sin(angle_y))
    point.y = int(point.y * math.cos(angle_x) - point.z * math.sin(angle_x))


def rotate_map(heightmap: HeightMap, settings: ViewSettings) -> None:
    """Recompute every point's screen position from its grid position and the view."""
    scale = settings.scale
    half_width = heightmap.width * scale / 2
    half_height = heightmap.height * scale / 2
    for row_index, row in enumerate(heightmap.points):
        for column, point in enumerate(row):
            point.x = int(scale * column - half_width + scale / 2)
            point.y = int(scale * row_index - half_height + scale / 2)
            rotate_point(point, settings.rotation_angle_x, settings.rotation_angle_y)
            point.x += settings.offset_x
            point.y += settings.offset_y