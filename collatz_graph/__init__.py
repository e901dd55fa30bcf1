"""
collatz_graph: the merged trajectory graph of generalized 3n+1 iteration.

Every visited integer is a node; applying the reduction links it to its
successor until the chain lands on the tree already rooted at 1. The graph
grows downward (generate_down, generate_fill_down) and upward
(generate_up), and answers depth, common ancestor and orbit queries.

Usage:
    python -m collatz_graph --series orbit_length --max 1000
    python -m collatz_graph --variant compact --series common_ancestor_dist --max 500
    python -m collatz_graph --orbit 27 --quiet
    python -m collatz_graph --up 64 --batch-size 50 --dot graph.dot
"""

from .core.variant import ReductionVariant, parse_variant
from .core.errors import CollatzGraphError, NotGenerated, InvalidDomain, DuplicateCreate
from .core.step import step_function, down, up
from .core.store import NodeData
from .core.graph import TrajectoryGraph
from .core.engine import GrowthReport, run_growth
from .series import (
    SERIES, GraphWorkspace, valid_values,
    orbit_length_series, fraction_above_series, common_ancestor_dist_series,
)
from .reporting import print_graph_summary, print_orbit, print_series, export_dot

__all__ = [
    "ReductionVariant", "parse_variant",
    "CollatzGraphError", "NotGenerated", "InvalidDomain", "DuplicateCreate",
    "step_function", "down", "up",
    "NodeData", "TrajectoryGraph",
    "GrowthReport", "run_growth",
    "SERIES", "GraphWorkspace", "valid_values",
    "orbit_length_series", "fraction_above_series", "common_ancestor_dist_series",
    "print_graph_summary", "print_orbit", "print_series", "export_dot",
]
