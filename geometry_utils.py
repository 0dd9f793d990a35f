"""
Shared geometry utility functions for connector routing.

This module consolidates geometry calculations used across multiple modules:
- Rectangle descriptors for shapes and obstacles
- Anchor points on (or offset from) a shape side
- Open-interval point-in-rectangle test
- Manhattan distance between grid cells
"""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from routing_constants import ANCHOR_SIDES, SIDE_NORMALS
from routing_exceptions import ConfigurationError

Point = Tuple[float, float]
Cell = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: top-left corner plus size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def expanded(self, padding: float) -> 'Rect':
        """Return a copy grown by padding on all four sides."""
        return Rect(self.x - padding, self.y - padding,
                    self.width + 2 * padding, self.height + 2 * padding)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> 'Rect':
        """Create a Rect from any mapping with x, y, width and height keys."""
        return cls(
            x=float(d['x']),
            y=float(d['y']),
            width=float(d['width']),
            height=float(d['height']),
        )


def get_anchor(shape: Rect, side: str, offset: float = 0.0) -> Point:
    """
    Midpoint of a shape side, pushed outward by offset along the side normal.

    With offset 0 the point lies on the shape boundary (surface anchor); the
    router searches from anchors offset by the configured stand-off distance.

    Raises:
        ConfigurationError: side is not one of top/right/bottom/left
    """
    if side not in ANCHOR_SIDES:
        raise ConfigurationError(
            f"Unknown anchor side {side!r}, expected one of: {', '.join(ANCHOR_SIDES)}")
    nx, ny = SIDE_NORMALS[side]
    # The normal picks the side: -1 is the near edge, 0 the middle, 1 the far edge
    mid_x = shape.x + shape.width * (nx + 1) / 2
    mid_y = shape.y + shape.height * (ny + 1) / 2
    return (mid_x + nx * offset, mid_y + ny * offset)


def rect_contains_point(rect, point) -> bool:
    """
    Check if a point lies strictly inside a rectangle.

    All four sides are open: a point on an edge is not contained, which lets a
    route reach the surface of its own source and target shapes even though
    both are part of the obstacle set.

    rect needs x, y, width, height attributes; point is an (x, y) pair.
    """
    px, py = point
    return (rect.x < px < rect.x + rect.width and
            rect.y < py < rect.y + rect.height)


def manhattan_distance(a: Cell, b: Cell) -> int:
    """Manhattan distance between two grid cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
