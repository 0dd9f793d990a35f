"""
Scene Writer - Writes routing results to JSON and renders scenes to SVG.
"""

import json
from html import escape
from typing import Dict, List, Tuple

from connector_router import RouteResult
from routing_exceptions import InputFileError, OutputFileError
from scene_parser import Scene

SHAPE_FILL = "#dddddd"
ROUTE_STROKE = "#000000"
PARTIAL_STROKE = "#cc0000"


def routes_to_dict(routes: Dict[str, RouteResult]) -> dict:
    """Serialize named route results, keeping insertion order."""
    entries = []
    for name, result in routes.items():
        entry = {'name': name}
        entry.update(result.to_dict())
        entries.append(entry)
    return {'routes': entries}


def write_routes_json(output_path: str, routes: Dict[str, RouteResult]) -> None:
    """Write route results to a JSON file."""
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(routes_to_dict(routes), f, indent=2)
    except OSError as e:
        raise OutputFileError(f"Cannot write {output_path}: {e}") from e


def load_routes_json(input_path: str) -> List[dict]:
    """
    Load routes written by write_routes_json.

    Returns a list of dicts with name, found, iterations and points, where
    points is a list of (x, y) tuples.
    """
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InputFileError(f"Cannot read {input_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputFileError(f"Invalid JSON in {input_path}: {e}") from e

    routes = []
    try:
        for entry in data['routes']:
            routes.append({
                'name': entry['name'],
                'found': bool(entry.get('found', True)),
                'iterations': int(entry.get('iterations', 0)),
                'points': [(float(p['x']), float(p['y'])) for p in entry['points']],
            })
    except (KeyError, TypeError, ValueError) as e:
        raise InputFileError(f"Malformed routes file {input_path}: {e}") from e
    return routes


def generate_rect_svg(shape_id: str, x: float, y: float, width: float, height: float) -> str:
    """Generate SVG for a scene shape."""
    return (f'  <rect id="{escape(shape_id)}" x="{x:.3f}" y="{y:.3f}" width="{width:.3f}" height="{height:.3f}" '
            f'fill="{SHAPE_FILL}" stroke="black" />')


def generate_polyline_svg(name: str, points: List[Tuple[float, float]], partial: bool = False) -> str:
    """Generate SVG for a routed connector; partial routes are dashed."""
    coords = " ".join(f"{x:.3f},{y:.3f}" for x, y in points)
    stroke = PARTIAL_STROKE if partial else ROUTE_STROKE
    dash = ' stroke-dasharray="6,4"' if partial else ''
    return (f'  <polyline id="{escape(name)}" points="{coords}" fill="none" stroke="{stroke}" '
            f'stroke-width="1.5"{dash} />')


def write_svg(output_path: str, scene: Scene, routes: Dict[str, RouteResult]) -> None:
    """Render scene shapes and routed connectors to an SVG file."""
    width = scene.config.map_width
    height = scene.config.map_height
    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}" '
             f'viewBox="0 0 {width:g} {height:g}">']
    for shape_id, shape in scene.shapes.items():
        lines.append(generate_rect_svg(shape_id, shape.x, shape.y, shape.width, shape.height))
    for name, result in routes.items():
        lines.append(generate_polyline_svg(name, result.points, partial=result.is_partial))
    lines.append('</svg>')

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        raise OutputFileError(f"Cannot write {output_path}: {e}") from e
