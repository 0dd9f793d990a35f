"""
Configuration classes and coordinate utilities for connector routing.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import routing_defaults
from routing_constants import GRID_SNAP_DECIMALS
from routing_exceptions import ConfigurationError


@dataclass
class ConnectorRouteConfig:
    """Configuration for grid-based connector routing."""
    anchor_offset: float = routing_defaults.ANCHOR_OFFSET  # stand-off of search anchors
    step: float = routing_defaults.STEP  # nominal grid resolution
    map_width: float = routing_defaults.MAP_WIDTH  # search region, real units
    map_height: float = routing_defaults.MAP_HEIGHT
    max_iterations: int = routing_defaults.MAX_ITERATIONS
    verbose: bool = False  # print search statistics

    def validate(self) -> None:
        """Raise ConfigurationError if any parameter is out of range."""
        if self.step <= 0:
            raise ConfigurationError(f"step must be positive, got {self.step}")
        if self.anchor_offset < 0:
            raise ConfigurationError(f"anchor_offset must not be negative, got {self.anchor_offset}")
        if self.map_width <= 0 or self.map_height <= 0:
            raise ConfigurationError(
                f"map size must be positive, got {self.map_width} x {self.map_height}")
        if self.max_iterations < 0:
            raise ConfigurationError(f"max_iterations must not be negative, got {self.max_iterations}")


def compute_grid_dimension(diff: float, step: float) -> float:
    """
    Actual cell size along one axis.

    The anchor-to-anchor distance is rarely a multiple of the nominal step, so
    the step is stretched or shrunk evenly until a whole number of cells spans
    the distance exactly. The target anchor then lands on a cell boundary.
    """
    if not diff:
        return step
    dist = abs(diff)
    count = round(dist / step)
    # Less than half a step apart: one cell covers the whole gap
    if not count:
        return dist
    remainder = dist - count * step
    return step + remainder / count


@dataclass(frozen=True)
class Grid:
    """
    Mapping between real coordinates and integer cells for one search.

    The origin is the source search anchor, so the source is always cell
    (0, 0). Bounds are inclusive cell indices padded by one cell beyond the
    map so shapes touching the map edge stay reachable.
    """
    origin_x: float
    origin_y: float
    cell_width: float
    cell_height: float
    top: int
    right: int
    bottom: int
    left: int

    @property
    def origin(self) -> Tuple[float, float]:
        return (self.origin_x, self.origin_y)

    def to_cell(self, x: float, y: float) -> Tuple[int, int]:
        """Convert real coordinates to the cell containing them."""
        qx = round((x - self.origin_x) / self.cell_width, GRID_SNAP_DECIMALS)
        qy = round((y - self.origin_y) / self.cell_height, GRID_SNAP_DECIMALS)
        return (math.floor(qx), math.floor(qy))

    def to_real(self, gx: int, gy: int) -> Tuple[float, float]:
        """Convert cell coordinates to real coordinates of the cell corner."""
        return (gx * self.cell_width + self.origin_x, gy * self.cell_height + self.origin_y)

    def in_bounds(self, gx: int, gy: int) -> bool:
        return self.left <= gx <= self.right and self.top <= gy <= self.bottom


def build_grid(source: Tuple[float, float], target: Tuple[float, float],
               map_width: float, map_height: float, step: float) -> Grid:
    """Build the grid spanning source and target search anchors exactly."""
    sx, sy = source
    tx, ty = target
    dx = compute_grid_dimension(tx - sx, step)
    dy = compute_grid_dimension(ty - sy, step)
    return Grid(
        origin_x=sx,
        origin_y=sy,
        cell_width=dx,
        cell_height=dy,
        top=math.ceil(-sy / dy) - 1,
        right=math.ceil((map_width - sx) / dx) + 1,
        bottom=math.ceil((map_height - sy) / dy) + 1,
        left=math.ceil(-sx / dx) - 1,
    )
