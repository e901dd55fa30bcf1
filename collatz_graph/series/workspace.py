"""
A workspace that keeps one graph per variant between requests.

Graphs are created the first time a variant is asked for and reused after
that, so asking for a larger bound only builds the difference.
"""

from ..core.graph import TrajectoryGraph, DEFAULT_UP_BATCH_SIZE
from ..core.variant import ReductionVariant, parse_variant


class GraphWorkspace:
    def __init__(self, up_batch_size: int = DEFAULT_UP_BATCH_SIZE):
        self.up_batch_size = up_batch_size
        self.graphs = {variant: None for variant in ReductionVariant}

    def graph(self, variant) -> TrajectoryGraph:
        variant = parse_variant(variant)
        if self.graphs[variant] is None:
            self.graphs[variant] = TrajectoryGraph(
                variant, up_batch_size=self.up_batch_size)
        return self.graphs[variant]

    def has_graph(self, variant) -> bool:
        return self.graphs[parse_variant(variant)] is not None

    def series(self, name: str, variant, max_value: int) -> list:
        """Compute a named series (see SERIES) on the variant's graph."""
        from . import SERIES
        if name not in SERIES:
            raise ValueError(
                f"Unknown series: {name!r}. Choose from: {list(SERIES.keys())}"
            )
        return SERIES[name]["series_fn"](self.graph(variant), max_value)

    def length_string(self) -> str:
        """Node count per variant in variant order, 0 for graphs not built."""
        return " ".join(
            str(len(g)) if g is not None else "0"
            for g in self.graphs.values()
        )
