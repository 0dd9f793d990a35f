"""
Tests for grid construction: cell sizes, bounds and coordinate mapping
"""

import math

import pytest
from hypothesis import given, assume, strategies as st

from routing_config import ConnectorRouteConfig, Grid, build_grid, compute_grid_dimension
from routing_exceptions import ConfigurationError

distances = st.floats(min_value=-5000, max_value=5000, allow_nan=False, allow_infinity=False)
steps = st.floats(min_value=0.5, max_value=200, allow_nan=False, allow_infinity=False)


class TestComputeGridDimension:

    def test_zero_distance_uses_step(self):
        assert compute_grid_dimension(0, 27) == 27

    def test_sub_step_distance_is_single_cell(self):
        assert compute_grid_dimension(4, 10) == 4
        assert compute_grid_dimension(-4, 10) == 4

    def test_exact_multiple_keeps_step(self):
        assert compute_grid_dimension(810, 27) == 27

    def test_stretched_step(self):
        assert compute_grid_dimension(300, 27) == pytest.approx(300 / 11)

    @given(diff=distances, step=steps)
    def test_cells_span_distance_exactly(self, diff, step):
        count = round(abs(diff) / step)
        assume(count > 0)
        size = compute_grid_dimension(diff, step)
        assert math.isclose(count * size, abs(diff), rel_tol=1e-9, abs_tol=1e-9)

    @given(diff=distances, step=steps)
    def test_target_anchor_lands_on_cell_boundary(self, diff, step):
        count = round(abs(diff) / step)
        assume(count > 0)
        grid = build_grid((0.0, 0.0), (diff, diff), 100, 100, step)
        sign = 1 if diff > 0 else -1
        assert grid.to_cell(diff, diff) == (sign * count, sign * count)


class TestBuildGrid:

    def test_example_grid(self):
        grid = build_grid((90, 230), (900, 530), 1920, 1500, 27)
        assert grid.origin == (90, 230)
        assert grid.cell_width == 27
        assert grid.cell_height == pytest.approx(300 / 11)
        assert grid.to_cell(90, 230) == (0, 0)
        assert grid.to_cell(900, 530) == (30, 11)

    def test_bounds_padded_by_one_cell(self):
        grid = build_grid((60, 125), (290, 125), 1920, 1500, 10)
        assert grid.top == -13
        assert grid.left == -7
        assert grid.right == 187
        assert grid.bottom == 139
        assert grid.in_bounds(-7, -13)
        assert grid.in_bounds(187, 139)
        assert not grid.in_bounds(-8, 0)
        assert not grid.in_bounds(0, 140)

    def test_to_real_inverts_to_cell_on_corners(self):
        grid = Grid(5.0, 7.0, 10.0, 20.0, top=-3, right=3, bottom=3, left=-3)
        assert grid.to_real(2, -1) == (25.0, -13.0)
        assert grid.to_cell(25.0, -13.0) == (2, -1)
        assert grid.to_cell(24.9, -13.1) == (1, -2)


class TestConnectorRouteConfig:

    def test_defaults_validate(self):
        ConnectorRouteConfig().validate()

    @pytest.mark.parametrize('kwargs', [
        {'step': 0},
        {'step': -5},
        {'anchor_offset': -1},
        {'map_width': 0},
        {'map_height': -10},
        {'max_iterations': -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            ConnectorRouteConfig(**kwargs).validate()
