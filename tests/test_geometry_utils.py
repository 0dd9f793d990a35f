"""
Tests for shape geometry: anchors and open-interval containment
"""

import pytest
from hypothesis import given, strategies as st

from geometry_utils import Rect, get_anchor, rect_contains_point, manhattan_distance
from routing_constants import ANCHOR_SIDES, SIDE_NORMALS
from routing_exceptions import ConfigurationError


class TestGetAnchor:

    @pytest.mark.parametrize('side,expected', [
        ('top', (90, 150)),
        ('right', (140, 175)),
        ('bottom', (90, 200)),
        ('left', (40, 175)),
    ])
    def test_surface_anchor_is_side_midpoint(self, side, expected):
        assert get_anchor(Rect(40, 150, 100, 50), side) == expected

    @pytest.mark.parametrize('side,expected', [
        ('top', (90, 120)),
        ('right', (170, 175)),
        ('bottom', (90, 230)),
        ('left', (10, 175)),
    ])
    def test_offset_pushes_outward(self, side, expected):
        assert get_anchor(Rect(40, 150, 100, 50), side, 30) == expected

    @pytest.mark.parametrize('side', ANCHOR_SIDES)
    def test_offset_follows_side_normal(self, side):
        shape = Rect(40, 150, 100, 50)
        sx, sy = get_anchor(shape, side)
        ox, oy = get_anchor(shape, side, 7)
        assert (ox - sx, oy - sy) == (7 * SIDE_NORMALS[side][0], 7 * SIDE_NORMALS[side][1])

    @pytest.mark.parametrize('side', ['center', 'TOP', '', None])
    def test_unknown_side_rejected(self, side):
        with pytest.raises(ConfigurationError):
            get_anchor(Rect(0, 0, 10, 10), side)


class TestRectContainsPoint:

    def test_interior_point_contained(self):
        assert rect_contains_point(Rect(0, 0, 10, 10), (5, 5))

    @pytest.mark.parametrize('point', [
        (0, 5), (10, 5), (5, 0), (5, 10),  # edges
        (0, 0), (10, 10), (0, 10), (10, 0),  # corners
    ])
    def test_boundary_not_contained(self, point):
        assert not rect_contains_point(Rect(0, 0, 10, 10), point)

    def test_outside_not_contained(self):
        assert not rect_contains_point(Rect(0, 0, 10, 10), (11, 5))

    @given(x=st.integers(-50, 50), y=st.integers(-50, 50),
           w=st.integers(0, 30), h=st.integers(0, 30), t=st.integers(0, 30))
    def test_edges_never_contained(self, x, y, w, h, t):
        rect = Rect(x, y, w, h)
        tx = x + min(t, w)
        ty = y + min(t, h)
        for point in [(x, ty), (x + w, ty), (tx, y), (tx, y + h)]:
            assert not rect_contains_point(rect, point)


class TestRect:

    def test_expanded(self):
        assert Rect(10, 20, 30, 40).expanded(5) == Rect(5, 15, 40, 50)

    def test_from_dict_accepts_extra_keys(self):
        attrs = {'x': 40, 'y': 150, 'width': 100, 'height': 50, 'fill': '#00D2FF', 'draggable': True}
        assert Rect.from_dict(attrs) == Rect(40.0, 150.0, 100.0, 50.0)

    def test_manhattan_distance(self):
        assert manhattan_distance((1, -2), (4, 2)) == 7
