"""
Default routing parameter values.

This module defines the default values for routing parameters, used by both
the CLI (route.py) and the library (routing_config.py) to ensure consistency.
"""

# Anchor parameters
ANCHOR_OFFSET = 10  # stand-off distance of the search anchor from the shape

# Grid parameters
STEP = 10  # nominal grid cell size, stretched per axis to fit the anchors

# Search region
MAP_WIDTH = 1920
MAP_HEIGHT = 1500

# Algorithm parameters
MAX_ITERATIONS = 2000

# Route checking
CHECK_TOLERANCE = 0.01  # max coordinate error when comparing route points
