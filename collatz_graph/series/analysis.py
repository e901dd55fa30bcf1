"""
Plot series: the numbers behind the three classic charts.

Each function fills the graph densely up to `max_value`, then walks the
in-domain values 2..max_value in order and returns a list of (x, y)
points. Drawing them is somebody else's job.

    orbit_length          (n, depth of n)
    fraction_above        (n, share of n's orbit that climbs above n)
    common_ancestor_dist  (steps from the previous value down to the
                           shared ancestor, steps from n down to it)
"""

from ..core.graph import TrajectoryGraph
from ..core.step import step_function


def valid_values(variant, max_value: int):
    """In-domain values 2..max_value for a variant, ascending."""
    step = step_function(variant)
    return [n for n in range(2, max_value + 1) if step.in_domain(n)]


def orbit_length_series(graph: TrajectoryGraph, max_value: int) -> list:
    graph.generate_fill_down(max_value)
    return [(n, graph.get_depth(n)) for n in valid_values(graph.variant, max_value)]


def fraction_above_series(graph: TrajectoryGraph, max_value: int) -> list:
    """
    For each n, how much of its orbit sits strictly above n.

    The orbit excludes the root, so its length equals n's depth.
    """
    graph.generate_fill_down(max_value)
    points = []
    for n in valid_values(graph.variant, max_value):
        orbit_length = graph.get_depth(n)
        above = sum(1 for data in graph.iter_orbit(n) if data.value > n)
        points.append((n, above / orbit_length))
    return points


def common_ancestor_dist_series(graph: TrajectoryGraph, max_value: int) -> list:
    """
    How far consecutive values travel before their orbits join.

    Starts from the root: the first value is compared against 1.
    """
    graph.generate_fill_down(max_value)
    points = []
    prev, prev_depth = 1, 0
    for n in valid_values(graph.variant, max_value):
        ancestor = graph.find_common_ancestor(n, prev)
        depth = graph.get_depth(n)
        ancestor_depth = graph.get_depth(ancestor)
        points.append((prev_depth - ancestor_depth, depth - ancestor_depth))
        prev, prev_depth = n, depth
    return points


def series_bounds(points: list):
    """(x_min, x_max, y_min, y_max), anchored at the origin."""
    x_min = x_max = y_min = y_max = 0
    for x, y in points:
        x_min, x_max = min(x_min, x), max(x_max, x)
        y_min, y_max = min(y_min, y), max(y_max, y)
    return x_min, x_max, y_min, y_max
