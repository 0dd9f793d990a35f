#!/usr/bin/env python3
"""
Route the demo scene end to end.
Routes every connector of scenes/demo_scene.json, renders an SVG, then checks
the routes for diagonal segments, misplaced endpoints and shape crossings.
"""

import argparse
from run_utils import run


def main():
    parser = argparse.ArgumentParser(description='Route and check the demo scene')
    parser.add_argument('-u', '--unbuffered', action='store_true', default=False,
                        help='Run python commands with -u (unbuffered output)')
    parser.add_argument('--step', type=float, default=None,
                        help='Override the scene grid step')
    parser.add_argument('--no-checks', action='store_true', default=False,
                        help='Skip route checks after routing')
    args = parser.parse_args()

    unbuffered = args.unbuffered
    options = f'--step {args.step}' if args.step else ''

    # Step 1: Route all connectors
    run(f"python3 route.py scenes/demo_scene.json scenes/demo_scene_routed.json --svg scenes/demo_scene.svg {options}", unbuffered)

    if not args.no_checks:
        # Step 2: Check the routes
        run("python3 check_route.py scenes/demo_scene.json scenes/demo_scene_routed.json", unbuffered)

    print("\n=== Test completed ===")


if __name__ == "__main__":
    main()
