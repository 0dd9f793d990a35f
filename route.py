"""
Connector Router CLI - Routes the connectors of a scene file.

Usage:
    python route.py scene.json [output.json] [--svg scene.svg]

Every connector in the scene (or only those named with --connectors) is routed
around the other shapes. Results are written as JSON, and optionally rendered
to SVG for inspection.
"""

import sys
import time
import argparse
from typing import Dict, List, Optional

import routing_defaults
from connector_router import ConnectorRouter, RouteResult
from routing_exceptions import RoutingError
from scene_parser import Scene, parse_scene
from scene_writer import write_routes_json, write_svg
from terminal_colors import RED, YELLOW, RESET, status_text


def route_scene(scene: Scene, connector_names: Optional[List[str]] = None,
                quiet: bool = False) -> Dict[str, RouteResult]:
    """Route connectors of a scene in file order; returns results by name."""
    connectors = scene.find_connectors(connector_names)
    if connector_names:
        missing = set(connector_names) - {c.name for c in connectors}
        for name in sorted(missing):
            print(f"  {YELLOW}WARNING: no connector named '{name}'{RESET}")

    results: Dict[str, RouteResult] = {}
    for connector in connectors:
        start_time = time.time()
        router = ConnectorRouter(
            scene.get_shape(connector.source), connector.source_side,
            scene.get_shape(connector.target), connector.target_side,
            obstacles=scene.connector_obstacles(connector),
            config=scene.config,
        )
        result = router.find_path()
        elapsed = time.time() - start_time
        results[connector.name] = result
        if not quiet or result.is_partial:
            print(f"  {connector.name}: {status_text(result.found)} "
                  f"{len(result.points)} points, {result.iterations} iterations "
                  f"({elapsed * 1000:.1f} ms)")
    return results


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Route orthogonal connectors between the shapes of a scene",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python route.py scenes/demo_scene.json
  python route.py scenes/demo_scene.json out.json --svg out.svg --step 20
  python route.py scenes/demo_scene.json --connectors box1-box3 --max-iterations 500
""")
    parser.add_argument("scene_file", help="Input scene JSON file")
    parser.add_argument("output_file", nargs="?", default=None,
                        help="Output routes JSON file (default: <scene>_routed.json)")
    parser.add_argument("--svg", default=None,
                        help="Also render the scene and routes to this SVG file")
    parser.add_argument("--connectors", "-c", nargs="+", default=None,
                        help="Only route the named connectors")

    # Routing parameters (override the scene's values)
    parser.add_argument("--step", type=float, default=None,
                        help=f"Nominal grid step (default: scene value or {routing_defaults.STEP})")
    parser.add_argument("--anchor-offset", type=float, default=None,
                        help=f"Stand-off of search anchors from shapes (default: scene value or {routing_defaults.ANCHOR_OFFSET})")
    parser.add_argument("--max-iterations", type=int, default=None,
                        help=f"Search iteration budget per connector (default: scene value or {routing_defaults.MAX_ITERATIONS})")
    parser.add_argument("--map-width", type=float, default=None,
                        help=f"Search region width (default: scene value or {routing_defaults.MAP_WIDTH})")
    parser.add_argument("--map-height", type=float, default=None,
                        help=f"Search region height (default: scene value or {routing_defaults.MAP_HEIGHT})")

    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 1 if any connector could only be routed partially")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print search statistics for every connector")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only print partial routes and the summary")
    return parser


def apply_overrides(scene: Scene, args: argparse.Namespace) -> None:
    config = scene.config
    if args.step is not None:
        config.step = args.step
    if args.anchor_offset is not None:
        config.anchor_offset = args.anchor_offset
    if args.max_iterations is not None:
        config.max_iterations = args.max_iterations
    if args.map_width is not None:
        config.map_width = args.map_width
    if args.map_height is not None:
        config.map_height = args.map_height
    config.verbose = args.verbose
    config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    output_file = args.output_file
    if output_file is None:
        base = args.scene_file[:-5] if args.scene_file.endswith('.json') else args.scene_file
        output_file = base + '_routed.json'

    try:
        print(f"Loading {args.scene_file}...")
        scene = parse_scene(args.scene_file)
        apply_overrides(scene, args)
        config = scene.config
        print(f"{len(scene.shapes)} shapes, {len(scene.connectors)} connectors; "
              f"step {config.step:g}, anchor offset {config.anchor_offset:g}, "
              f"max iterations {config.max_iterations}")

        start_time = time.time()
        results = route_scene(scene, args.connectors, quiet=args.quiet)
        elapsed = time.time() - start_time

        partial = [name for name, result in results.items() if result.is_partial]
        print(f"Routed {len(results) - len(partial)}/{len(results)} connectors "
              f"in {elapsed:.2f}s" + (f", {YELLOW}{len(partial)} partial{RESET}" if partial else ""))

        write_routes_json(output_file, results)
        print(f"Wrote {output_file}")
        if args.svg:
            write_svg(args.svg, scene, results)
            print(f"Wrote {args.svg}")
    except RoutingError as e:
        print(f"{RED}ERROR: {e}{RESET}")
        return 1

    if args.strict and partial:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
