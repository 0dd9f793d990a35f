"""
Shared pytest fixtures for the connector router tests
"""

import os

import pytest

from geometry_utils import Rect
from routing_config import ConnectorRouteConfig

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.dirname(TESTS_DIR)
DEMO_SCENE = os.path.join(ROOT_DIR, 'scenes', 'demo_scene.json')


@pytest.fixture
def demo_scene_path():
    return DEMO_SCENE


@pytest.fixture
def example_shapes():
    """Source and target boxes of the two-box bottom-to-bottom example"""
    return Rect(40, 150, 100, 50), Rect(800, 300, 200, 200)


@pytest.fixture
def example_config():
    return ConnectorRouteConfig(anchor_offset=30, step=27)


@pytest.fixture
def blocked_scene_dict():
    """Two boxes side by side with a tall obstacle centered between them"""
    return {
        'map': {'width': 1920, 'height': 1500},
        'routing': {'anchor_offset': 10, 'step': 10},
        'shapes': [
            {'id': 'left', 'x': 0, 'y': 100, 'width': 50, 'height': 50},
            {'id': 'wall', 'x': 150, 'y': 80, 'width': 40, 'height': 90},
            {'id': 'right', 'x': 300, 'y': 100, 'width': 50, 'height': 50},
        ],
        'connectors': [
            {'name': 'left-right', 'source': 'left', 'source_side': 'right',
             'target': 'right', 'target_side': 'left'},
        ],
    }
