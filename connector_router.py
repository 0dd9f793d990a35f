"""
Connector Router - A* search for orthogonal connector routes between two shapes.

Derives the source and target anchors from the shape geometry, builds a grid
that fits exactly between the two search anchors, converts the obstacles to cells and
runs a 4-directional A* search. The resulting cell path is translated back to
real coordinates and framed by the two surface anchors.

Usage:
    router = ConnectorRouter(Rect(40, 150, 100, 50), "bottom",
                             Rect(800, 300, 200, 200), "bottom",
                             obstacles=[Rect(300, 100, 300, 300)],
                             config=ConnectorRouteConfig(anchor_offset=30, step=27))
    result = router.find_path()
"""

import heapq
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from geometry_utils import Rect, Point, Cell, get_anchor
from grid_node import GridNode
from obstacle_map import ObstacleMap, build_obstacle_map
from routing_config import ConnectorRouteConfig, build_grid
from routing_exceptions import ConfigurationError
from terminal_colors import status_text


@dataclass
class RouteResult:
    """Result of one connector search."""
    points: List[Point]  # real coordinates, surface anchor to surface anchor
    cells: List[Cell] = field(default_factory=list)  # grid waypoints
    found: bool = False  # False when the budget ran out before the goal
    iterations: int = 0

    @property
    def is_partial(self) -> bool:
        return not self.found

    def to_dict(self) -> dict:
        return {
            'found': self.found,
            'iterations': self.iterations,
            'points': [{'x': x, 'y': y} for x, y in self.points],
        }


class ConnectorRouter:
    """
    Grid A* router for one source/target shape pair.

    Anchors, grid and obstacle map are computed once in the constructor;
    find_path() can be called repeatedly and resets its own search state.
    Not safe for concurrent use from several threads.
    """

    def __init__(self, source_shape: Rect, source_side: str,
                 target_shape: Rect, target_side: str,
                 obstacles: Optional[Sequence[Rect]] = None,
                 config: Optional[ConnectorRouteConfig] = None):
        self.config = config if config is not None else ConnectorRouteConfig()
        self.config.validate()
        self.source_shape = source_shape
        self.target_shape = target_shape
        offset = self.config.anchor_offset

        # Surface anchors frame the final path, search anchors bound the grid
        self.source_surface = get_anchor(source_shape, source_side, 0)
        self.target_surface = get_anchor(target_shape, target_side, 0)
        self.source_anchor = get_anchor(source_shape, source_side, offset)
        self.target_anchor = get_anchor(target_shape, target_side, offset)

        self.grid = build_grid(self.source_anchor, self.target_anchor,
                               self.config.map_width, self.config.map_height,
                               self.config.step)
        self.source_cell = self.grid.to_cell(*self.source_anchor)
        self.target_cell = self.grid.to_cell(*self.target_anchor)

        shapes = [source_shape, *(obstacles or []), target_shape]
        self.obstacles: ObstacleMap = build_obstacle_map(shapes, self.grid, offset)

        self.nodes: List[GridNode] = []
        self.open_list: List[Tuple[int, int, int]] = []  # heap of (f, sequence, node index)
        self.close_list: List[int] = []
        self._discovered: Set[Cell] = set()
        self._sequence = 0

    def find_path(self, limit: Optional[int] = None) -> RouteResult:
        """
        Search from the source cell to the target cell.

        At most limit + 1 nodes are expanded. If the goal is not reached the
        path leads to the last expanded cell and result.found is False.
        """
        if limit is None:
            limit = self.config.max_iterations
        if limit < 0:
            raise ConfigurationError(f"limit must not be negative, got {limit}")

        self._reset()
        goal = self.target_cell
        start = self._add_node(GridNode(self.source_cell[0], self.source_cell[1], goal=goal))

        # Both search anchors share a cell: the start is the goal. Without this
        # the start would never be popped and the whole budget would be spent.
        if self.nodes[start].position == goal:
            self.close_list.append(start)
            return self._build_result(True, 0)

        self._push_neighbors(start)
        self.close_list.append(start)

        found = False
        iterations = 0
        while self.open_list and iterations <= limit:
            iterations += 1
            _, _, index = heapq.heappop(self.open_list)
            self.close_list.append(index)
            if self.nodes[index].position == goal:
                found = True
                break
            self._push_neighbors(index)

        result = self._build_result(found, iterations)
        if self.config.verbose:
            print(f"  Search {status_text(found, 'reached goal', 'budget exhausted')}: "
                  f"{iterations} iterations, {len(self.close_list)} closed, "
                  f"{len(self.open_list)} open, {len(result.cells)} waypoints")
        return result

    def _reset(self) -> None:
        self.nodes = []
        self.open_list = []
        self.close_list = []
        self._discovered = set()
        self._sequence = 0

    def _add_node(self, node: GridNode) -> int:
        """Append node to the arena and return its index."""
        self.nodes.append(node)
        self._discovered.add(node.position)
        return len(self.nodes) - 1

    def _is_walkable(self, node: GridNode) -> bool:
        # Positions are never revisited, even if a later arrival is cheaper
        if node.position in self._discovered:
            return False
        if not self.grid.in_bounds(node.x, node.y):
            return False
        return not self.obstacles.is_blocked(node.x, node.y)

    def _push_neighbors(self, index: int) -> None:
        for neighbor in self.nodes[index].neighbors(index):
            if not self._is_walkable(neighbor):
                continue
            neighbor_index = self._add_node(neighbor)
            # Insertion order breaks ties between equal f
            heapq.heappush(self.open_list, (neighbor.f, self._sequence, neighbor_index))
            self._sequence += 1

    def _reconstruct_cells(self) -> List[Cell]:
        cells = []
        index = self.close_list[-1]
        while index is not None:
            node = self.nodes[index]
            cells.append(node.position)
            index = node.parent
        cells.reverse()
        return cells

    def _build_result(self, found: bool, iterations: int) -> RouteResult:
        cells = self._reconstruct_cells()
        points = [self.source_surface]
        points.extend(self.grid.to_real(gx, gy) for gx, gy in cells)
        points.append(self.target_surface)
        return RouteResult(points=points, cells=cells, found=found, iterations=iterations)


def route_connector(source_shape: Rect, source_side: str,
                    target_shape: Rect, target_side: str,
                    obstacles: Optional[Sequence[Rect]] = None,
                    config: Optional[ConnectorRouteConfig] = None,
                    limit: Optional[int] = None) -> RouteResult:
    """Route a single connector with a throwaway router."""
    router = ConnectorRouter(source_shape, source_side, target_shape, target_side,
                             obstacles=obstacles, config=config)
    return router.find_path(limit)
