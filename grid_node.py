"""
Search node for the connector router's A* grid search.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from geometry_utils import manhattan_distance
from routing_constants import NEIGHBOR_OFFSETS


@dataclass(frozen=True, eq=False)
class GridNode:
    """
    A grid cell reached during search.

    parent is the arena index of the node this one was expanded from (None for
    the start node). goal is the fixed goal cell used for the heuristic; all
    nodes of one search share the same tuple. g is fixed when the node is
    created as a neighbour of its parent.
    """
    x: int
    y: int
    parent: Optional[int] = None
    goal: Optional[Tuple[int, int]] = None
    g: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def h(self) -> int:
        """Manhattan distance to the goal (0 if the node has no goal)."""
        if self.goal is None:
            return 0
        return manhattan_distance(self.position, self.goal)

    @property
    def f(self) -> int:
        return self.g + self.h

    def neighbors(self, index: int) -> List['GridNode']:
        """Four adjacent cells in up, right, down, left order.

        index is this node's position in the search arena and becomes the
        parent of every neighbour.
        """
        return [GridNode(self.x + dx, self.y + dy, parent=index, goal=self.goal, g=self.g + 1)
                for dx, dy in NEIGHBOR_OFFSETS]

    def is_equal_to(self, other) -> bool:
        """Positional equality; parent and cost are ignored."""
        return self.x == other.x and self.y == other.y
