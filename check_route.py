"""
Route Checker - Verify that routed connectors are orthogonal, start and end on
their anchors, and never pass through the interior of a shape.
"""

import sys
import argparse
from typing import Dict, List, Optional, Tuple

from shapely.geometry import LineString, box

import routing_defaults
from geometry_utils import Point, Rect, get_anchor
from routing_exceptions import RoutingError
from scene_parser import Scene, parse_scene
from scene_writer import load_routes_json
from terminal_colors import GREEN, RED, YELLOW, RESET

# DE-9IM pattern: the interiors of the two geometries intersect
INTERIORS_INTERSECT = 'T********'


def points_match(a: Point, b: Point, tolerance: float) -> bool:
    """Check if two points are within tolerance."""
    return abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance


def find_diagonal_segments(points: List[Point], tolerance: float) -> List[int]:
    """Indices of segments that are not horizontal or vertical."""
    bad = []
    for i in range(len(points) - 1):
        (x1, y1), (x2, y2) = points[i], points[i + 1]
        if abs(x2 - x1) > tolerance and abs(y2 - y1) > tolerance:
            bad.append(i)
    return bad


def find_shape_crossings(points: List[Point], shapes: Dict[str, Rect],
                         tolerance: float) -> List[Tuple[int, str]]:
    """
    Find segments whose interior crosses the interior of a shape.

    Running along a shape edge or touching a corner is allowed.
    Returns (segment index, shape id) pairs.
    """
    polygons = {sid: box(s.x, s.y, s.right, s.bottom) for sid, s in shapes.items()}
    crossings = []
    for i in range(len(points) - 1):
        if points_match(points[i], points[i + 1], tolerance):
            continue
        line = LineString([points[i], points[i + 1]])
        for sid, polygon in polygons.items():
            if line.relate_pattern(polygon, INTERIORS_INTERSECT):
                crossings.append((i, sid))
    return crossings


def check_route(route: dict, scene: Scene, tolerance: float) -> List[str]:
    """Check one loaded route against its connector; returns issue descriptions."""
    issues = []
    name = route['name']
    points = route['points']
    connector = next((c for c in scene.connectors if c.name == name), None)
    if connector is None:
        return [f"no connector named '{name}' in scene"]
    if len(points) < 2:
        return [f"route has {len(points)} point(s)"]

    if not route['found']:
        issues.append(f"partial route (search stopped after {route['iterations']} iterations)")

    expected_start = get_anchor(scene.get_shape(connector.source), connector.source_side)
    expected_end = get_anchor(scene.get_shape(connector.target), connector.target_side)
    if not points_match(points[0], expected_start, tolerance):
        issues.append(f"starts at ({points[0][0]:.2f}, {points[0][1]:.2f}), "
                      f"expected ({expected_start[0]:.2f}, {expected_start[1]:.2f})")
    if not points_match(points[-1], expected_end, tolerance):
        issues.append(f"ends at ({points[-1][0]:.2f}, {points[-1][1]:.2f}), "
                      f"expected ({expected_end[0]:.2f}, {expected_end[1]:.2f})")

    for i in find_diagonal_segments(points, tolerance):
        (x1, y1), (x2, y2) = points[i], points[i + 1]
        issues.append(f"segment {i} is diagonal: ({x1:.2f}, {y1:.2f}) -> ({x2:.2f}, {y2:.2f})")

    for i, sid in find_shape_crossings(points, scene.shapes, tolerance):
        issues.append(f"segment {i} crosses shape '{sid}'")

    return issues


def run_route_check(scene_file: str, routes_file: str,
                    tolerance: float = routing_defaults.CHECK_TOLERANCE,
                    quiet: bool = False) -> Dict[str, List[str]]:
    """Check every route in routes_file; returns issues by route name."""
    scene = parse_scene(scene_file)
    routes = load_routes_json(routes_file)

    if not quiet:
        print(f"Checking {len(routes)} route(s) from {routes_file} against {scene_file}")

    all_issues = {}
    for route in routes:
        issues = check_route(route, scene, tolerance)
        if issues:
            all_issues[route['name']] = issues
            print(f"  {route['name']}: {RED}{len(issues)} issue(s){RESET}")
            for issue in issues:
                print(f"    - {issue}")
        elif not quiet:
            print(f"  {route['name']}: {GREEN}OK{RESET} ({len(route['points'])} points)")

    if all_issues:
        print(f"{YELLOW}{len(all_issues)}/{len(routes)} route(s) have issues{RESET}")
    elif not quiet:
        print("ALL ROUTES OK")
    return all_issues


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Check routed connectors against their scene')
    parser.add_argument('scene', help='Scene JSON file')
    parser.add_argument('routes', help='Routes JSON file written by route.py')
    parser.add_argument('--tolerance', '-t', type=float, default=routing_defaults.CHECK_TOLERANCE,
                        help=f'Coordinate tolerance (default: {routing_defaults.CHECK_TOLERANCE})')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only print routes with issues')
    args = parser.parse_args(argv)

    try:
        issues = run_route_check(args.scene, args.routes, args.tolerance, args.quiet)
    except RoutingError as e:
        print(f"{RED}ERROR: {e}{RESET}")
        return 1
    return 1 if issues else 0


if __name__ == "__main__":
    sys.exit(main())
