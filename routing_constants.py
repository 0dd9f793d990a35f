"""
Routing constants used throughout the connector router.

Centralizes anchor side names and numeric tolerances.
"""

# Anchor sides, in the same clockwise order neighbours are expanded
SIDE_TOP = 'top'
SIDE_RIGHT = 'right'
SIDE_BOTTOM = 'bottom'
SIDE_LEFT = 'left'
ANCHOR_SIDES = (SIDE_TOP, SIDE_RIGHT, SIDE_BOTTOM, SIDE_LEFT)

# Outward unit normal for each side (screen coordinates, y grows downwards)
SIDE_NORMALS = {
    SIDE_TOP: (0, -1),
    SIDE_RIGHT: (1, 0),
    SIDE_BOTTOM: (0, 1),
    SIDE_LEFT: (-1, 0),
}

# Neighbour offsets: up, right, down, left
NEIGHBOR_OFFSETS = ((0, -1), (1, 0), (0, 1), (-1, 0))

# Decimal places a real/cell quotient is snapped to before flooring, so an
# anchor exactly on a cell boundary stays on that boundary
GRID_SNAP_DECIMALS = 9

# Tolerance for comparing real coordinates (route checking, tests)
POINT_TOLERANCE = 1e-6
