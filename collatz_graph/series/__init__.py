"""
Series registry.

Each series is a dict describing one chart's data:
    series_fn:    (graph, max_value) -> list of (x, y)
    x_label:      str
    y_label:      str
    description:  str
"""

from .analysis import (
    valid_values, orbit_length_series, fraction_above_series,
    common_ancestor_dist_series, series_bounds,
)


SERIES = {
    "orbit_length": {
        "series_fn":   orbit_length_series,
        "x_label":     "n",
        "y_label":     "orbit length",
        "description": "Steps from each value down to 1",
    },
    "fraction_above": {
        "series_fn":   fraction_above_series,
        "x_label":     "n",
        "y_label":     "fraction of orbit above n",
        "description": "Share of each orbit spent above its starting value",
    },
    "common_ancestor_dist": {
        "series_fn":   common_ancestor_dist_series,
        "x_label":     "previous value to ancestor",
        "y_label":     "value to ancestor",
        "description": "Where consecutive orbits rejoin",
    },
}

from .workspace import GraphWorkspace  # noqa: E402

__all__ = [
    "SERIES", "GraphWorkspace",
    "valid_values", "orbit_length_series", "fraction_above_series",
    "common_ancestor_dist_series", "series_bounds",
]
