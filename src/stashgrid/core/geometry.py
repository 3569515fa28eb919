"""Grid dimensions and pixel/cell conversion.

The engine itself works in cell coordinates. Pixel values only appear at the
edge where the presentation layer hands over pointer positions and the
bounding boxes of the grid surface and its outer container.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class GridCoordinate:
    """Integer (column, row) address of a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class Point:
    """A pixel coordinate in the caller's frame."""

    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle. Edges count as inside."""

    x: float
    y: float
    w: float
    h: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.x + self.w and self.y <= point.y <= self.y + self.h

    def grown(self, margin: float) -> "Rect":
        return Rect(self.x - margin, self.y - margin, self.w + 2 * margin, self.h + 2 * margin)


@dataclass(frozen=True)
class SurfaceLayout:
    """Pixel bounding boxes supplied by the presentation layer for one event."""

    container: Rect
    grid: Rect


@dataclass(frozen=True)
class GridGeometry:
    width: int = 10
    height: int = 10
    cell_size: int = 40

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid dimensions must be positive")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")

    @property
    def pixel_width(self) -> int:
        return self.width * self.cell_size

    @property
    def pixel_height(self) -> int:
        return self.height * self.cell_size

    def to_cell(self, offset: Point) -> GridCoordinate:
        """Snap a pixel offset (relative to the grid origin) to the cell it falls in.

        Floors toward negative infinity, so offsets left of or above the grid
        produce negative coordinates; bounds are enforced by placement checks,
        not here.
        """
        return GridCoordinate(
            math.floor(offset.x / self.cell_size),
            math.floor(offset.y / self.cell_size),
        )

    def snap_offset(self, offset: Point) -> Point:
        """Round a pixel offset down to whole cells, still in pixels."""
        cell = self.to_cell(offset)
        return Point(cell.x * self.cell_size, cell.y * self.cell_size)

    def cell_origin(self, cell: GridCoordinate) -> Point:
        return Point(cell.x * self.cell_size, cell.y * self.cell_size)

    def cells(self) -> Iterator[GridCoordinate]:
        """Iterate every cell in row-major order (row 0 left to right, then row 1...)."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridCoordinate(x, y)

    def surface_rect(self, origin: Point) -> Rect:
        return Rect(origin.x, origin.y, self.pixel_width, self.pixel_height)

    def layout_at(self, origin: Point, margin: float = 0) -> SurfaceLayout:
        """Standard layout: grid surface at ``origin`` inside a container grown by ``margin``."""
        grid = self.surface_rect(origin)
        return SurfaceLayout(container=grid.grown(margin), grid=grid)
