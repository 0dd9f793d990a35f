"""
Obstacle map building functions for connector routing.

Converts shape rectangles into grid-cell rectangles and answers blocked-cell
queries against them. The rectangles are kept as coordinate arrays rather than
rasterized, since a tiny anchor gap stretches the grid to billions of cells.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from geometry_utils import Rect, rect_contains_point
from routing_config import Grid

@dataclass(frozen=True)
class CellRect:
    """An obstacle rectangle in grid-cell units."""
    x: int
    y: int
    width: int
    height: int

    def contains(self, gx: int, gy: int) -> bool:
        return rect_contains_point(self, (gx, gy))

def convert_obstacle_to_cells(shape: Rect, grid: Grid, padding: float) -> CellRect:
    """Expand a shape by padding and convert it to cell units.

    The top-left corner is floored and the size rounded up independently, so
    the cell rectangle can extend past the padded shape on the left and top,
    and can fall short of its right or bottom edge by up to one cell (a shape
    at x 9..19 on a 10-unit grid becomes cells 0..1).
    """
    padded = shape.expanded(padding)
    gx, gy = grid.to_cell(padded.x, padded.y)
    return CellRect(
        x=gx,
        y=gy,
        width=math.ceil(padded.width / grid.cell_width),
        height=math.ceil(padded.height / grid.cell_height),
    )

def convert_obstacles_to_cells(shapes: Iterable[Rect], grid: Grid, padding: float) -> List[CellRect]:
    """Convert every shape to a padded cell rectangle."""
    return [convert_obstacle_to_cells(shape, grid, padding) for shape in shapes]

class ObstacleMap:
    """
    Blocked-cell lookup over a list of cell rectangles.

    A cell is blocked when it lies strictly inside at least one cell
    rectangle; cells on a rectangle edge stay open. Bounds are not checked
    here, the router does that separately.
    """

    def __init__(self, grid: Grid, rects: List[CellRect]):
        self.grid = grid
        self.rects = list(rects)
        # float64 holds cell indices exactly up to 2**53
        self.x0 = np.array([r.x for r in self.rects], dtype=np.float64)
        self.y0 = np.array([r.y for r in self.rects], dtype=np.float64)
        self.x1 = self.x0 + np.array([r.width for r in self.rects], dtype=np.float64)
        self.y1 = self.y0 + np.array([r.height for r in self.rects], dtype=np.float64)

    def is_blocked(self, gx: int, gy: int) -> bool:
        if not self.rects:
            return False
        inside = (self.x0 < gx) & (gx < self.x1) & (self.y0 < gy) & (gy < self.y1)
        return bool(inside.any())


def build_obstacle_map(shapes: Iterable[Rect], grid: Grid, padding: float) -> ObstacleMap:
    """Build the obstacle map for a list of shapes."""
    return ObstacleMap(grid, convert_obstacles_to_cells(shapes, grid, padding))
