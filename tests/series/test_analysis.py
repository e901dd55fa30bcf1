"""
Tests for the plot series.

Small bounds are traced by hand:
    2: 2 1                        depth 1
    3: 3 10 5 16 8 4 2 1          depth 7, above 3: 10 5 16 8 4
    4: 4 2 1                      depth 2
    5: 5 16 8 4 2 1               depth 5, above 5: 16 8
    6: 6 3 10 5 16 8 4 2 1        depth 8, above 6: 10 16 8
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from collatz_graph.core.graph import TrajectoryGraph
from collatz_graph.core.variant import ReductionVariant
from collatz_graph.series import (
    SERIES, valid_values, orbit_length_series, fraction_above_series,
    common_ancestor_dist_series, series_bounds,
)


class TestValidValues:
    def test_full(self):
        assert valid_values(ReductionVariant.FULL, 4) == [2, 3, 4]

    def test_odd(self):
        assert valid_values(ReductionVariant.ODD, 10) == [3, 5, 7, 9]

    def test_compact(self):
        assert valid_values(ReductionVariant.COMPACT, 20) == [5, 7, 11, 13, 17, 19]

    def test_empty_below_two(self):
        assert valid_values(ReductionVariant.FULL, 1) == []


class TestOrbitLength:
    def test_full(self):
        graph = TrajectoryGraph()
        assert orbit_length_series(graph, 6) == [(2, 1), (3, 7), (4, 2), (5, 5), (6, 8)]

    def test_odd(self):
        # 7 -> 11 -> 17 -> 13 -> 3 -> 5 -> 1 and 9 -> 7
        graph = TrajectoryGraph(ReductionVariant.ODD)
        assert orbit_length_series(graph, 9) == [(3, 2), (5, 1), (7, 6), (9, 7)]

    def test_fills_graph(self):
        graph = TrajectoryGraph()
        orbit_length_series(graph, 25)
        assert graph.filled_end == 26


class TestFractionAbove:
    def test_full(self):
        graph = TrajectoryGraph()
        points = fraction_above_series(graph, 6)
        assert [x for x, _ in points] == [2, 3, 4, 5, 6]
        assert [y for _, y in points] == pytest.approx([0.0, 5 / 7, 0.0, 2 / 5, 3 / 8])

    @given(st.integers(min_value=2, max_value=400))
    @settings(max_examples=20)
    def test_fractions_in_unit_interval(self, max_value):
        graph = TrajectoryGraph(ReductionVariant.SHORT)
        for _, y in fraction_above_series(graph, max_value):
            assert 0.0 <= y <= 1.0


class TestCommonAncestorDist:
    def test_full(self):
        graph = TrajectoryGraph()
        assert common_ancestor_dist_series(graph, 4) == [(0, 1), (0, 6), (5, 0)]

    @pytest.mark.parametrize("variant", list(ReductionVariant))
    def test_distances_non_negative(self, variant):
        graph = TrajectoryGraph(variant)
        points = common_ancestor_dist_series(graph, 200)
        assert len(points) == len(valid_values(variant, 200))
        assert all(x >= 0 and y >= 0 for x, y in points)

    def test_chains_consecutive_values(self):
        # x is the previous value's distance down to the shared ancestor
        graph = TrajectoryGraph()
        points = common_ancestor_dist_series(graph, 50)
        values = valid_values(graph.variant, 50)
        for i in range(1, len(points)):
            prev = values[i - 1]
            ancestor = graph.find_common_ancestor(values[i], prev)
            assert points[i][0] + graph.get_depth(ancestor) == graph.get_depth(prev)


class TestSeriesRegistry:
    def test_all_registered(self):
        assert set(SERIES) == {"orbit_length", "fraction_above", "common_ancestor_dist"}

    def test_entries_complete(self):
        for entry in SERIES.values():
            assert callable(entry["series_fn"])
            assert entry["x_label"] and entry["y_label"] and entry["description"]

    def test_bounds(self):
        assert series_bounds([(2, 1), (3, 7), (6, 8)]) == (0, 6, 0, 8)
        assert series_bounds([]) == (0, 0, 0, 0)
