"""
Scene Parser - Loads shapes, connectors and routing parameters from JSON scene files.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from geometry_utils import Rect
from routing_config import ConnectorRouteConfig
from routing_constants import ANCHOR_SIDES
from routing_exceptions import ConfigurationError, InputFileError, ShapeNotFoundError


@dataclass
class Connector:
    """A source/target shape pair to be routed."""
    name: str
    source: str  # shape id
    source_side: str
    target: str
    target_side: str
    obstacles: Optional[List[str]] = None  # shape ids; None = every other shape


@dataclass
class Scene:
    """Parsed scene: shapes by id (in file order), connectors and routing config."""
    shapes: Dict[str, Rect] = field(default_factory=dict)
    connectors: List[Connector] = field(default_factory=list)
    config: ConnectorRouteConfig = field(default_factory=ConnectorRouteConfig)

    def get_shape(self, shape_id: str) -> Rect:
        shape = self.shapes.get(shape_id)
        if shape is None:
            raise ShapeNotFoundError(shape_id)
        return shape

    def connector_obstacles(self, connector: Connector) -> List[Rect]:
        """Obstacle shapes for a connector (its own source and target excluded)."""
        if connector.obstacles is not None:
            return [self.get_shape(sid) for sid in connector.obstacles]
        return [shape for sid, shape in self.shapes.items()
                if sid not in (connector.source, connector.target)]

    def find_connectors(self, names: Optional[List[str]] = None) -> List[Connector]:
        """Connectors matching names, or all of them when names is empty."""
        if not names:
            return list(self.connectors)
        wanted = set(names)
        return [c for c in self.connectors if c.name in wanted]


def _require(d: Dict[str, Any], key: str, where: str) -> Any:
    if key not in d:
        raise InputFileError(f"{where}: missing '{key}'")
    return d[key]


def _parse_shape(d: Dict[str, Any], index: int) -> Rect:
    where = f"shape #{index}"
    try:
        rect = Rect.from_dict(d)
    except KeyError as e:
        raise InputFileError(f"{where}: missing {e}") from e
    except (TypeError, ValueError) as e:
        raise InputFileError(f"{where}: {e}") from e
    if rect.width < 0 or rect.height < 0:
        raise InputFileError(f"{where}: negative size {rect.width} x {rect.height}")
    return rect


def _parse_side(value: Any, where: str) -> str:
    if value not in ANCHOR_SIDES:
        raise ConfigurationError(
            f"{where}: unknown anchor side {value!r}, expected one of: {', '.join(ANCHOR_SIDES)}")
    return value


def _parse_connector(d: Dict[str, Any], index: int, shapes: Dict[str, Rect]) -> Connector:
    where = f"connector #{index}"
    source = str(_require(d, 'source', where))
    target = str(_require(d, 'target', where))
    obstacles = d.get('obstacles')
    if obstacles is not None:
        obstacles = [str(sid) for sid in obstacles]

    for sid in [source, target] + (obstacles or []):
        if sid not in shapes:
            raise ShapeNotFoundError(sid, f"{where}: unknown shape '{sid}'")

    return Connector(
        name=str(d.get('name') or f"{source}->{target}"),
        source=source,
        source_side=_parse_side(_require(d, 'source_side', where), where),
        target=target,
        target_side=_parse_side(_require(d, 'target_side', where), where),
        obstacles=obstacles,
    )


def _parse_config(data: Dict[str, Any]) -> ConnectorRouteConfig:
    config = ConnectorRouteConfig()
    map_info = data.get('map') or {}
    routing = data.get('routing') or {}
    try:
        if 'width' in map_info:
            config.map_width = float(map_info['width'])
        if 'height' in map_info:
            config.map_height = float(map_info['height'])
        if 'anchor_offset' in routing:
            config.anchor_offset = float(routing['anchor_offset'])
        if 'step' in routing:
            config.step = float(routing['step'])
        if 'max_iterations' in routing:
            config.max_iterations = int(routing['max_iterations'])
    except (TypeError, ValueError) as e:
        raise InputFileError(f"Invalid routing parameter: {e}") from e
    config.validate()
    return config


def parse_scene_dict(data: Dict[str, Any]) -> Scene:
    """Build a Scene from an already decoded JSON document."""
    if not isinstance(data, dict):
        raise InputFileError("Scene must be a JSON object")

    shapes: Dict[str, Rect] = {}
    for index, d in enumerate(data.get('shapes') or []):
        shape_id = str(_require(d, 'id', f"shape #{index}"))
        if shape_id in shapes:
            raise InputFileError(f"shape #{index}: duplicate id '{shape_id}'")
        shapes[shape_id] = _parse_shape(d, index)

    connectors = [_parse_connector(d, index, shapes)
                  for index, d in enumerate(data.get('connectors') or [])]

    return Scene(shapes=shapes, connectors=connectors, config=_parse_config(data))


def parse_scene(filepath: str) -> Scene:
    """
    Parse a JSON scene file.

    Args:
        filepath: Path to the .json scene

    Returns:
        Scene with shapes, connectors and routing configuration

    Raises:
        InputFileError: file missing, unreadable or malformed
        ShapeNotFoundError: a connector names an undefined shape
        ConfigurationError: invalid anchor side or routing parameter
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InputFileError(f"Cannot read {filepath}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputFileError(f"Invalid JSON in {filepath}: {e}") from e
    return parse_scene_dict(data)


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python scene_parser.py <scene.json>")
        sys.exit(1)

    scene = parse_scene(sys.argv[1])
    print("Found:")
    print(f"  - {len(scene.shapes)} shapes")
    print(f"  - {len(scene.connectors)} connectors")
    for connector in scene.connectors:
        print(f"    {connector.name}: {connector.source}.{connector.source_side} -> "
              f"{connector.target}.{connector.target_side}")
    print(f"  - map {scene.config.map_width:g} x {scene.config.map_height:g}, "
          f"step {scene.config.step:g}, anchor offset {scene.config.anchor_offset:g}")
