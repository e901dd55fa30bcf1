from .variant import ReductionVariant, parse_variant
from .errors import CollatzGraphError, NotGenerated, InvalidDomain, DuplicateCreate
from .step import (
    MAX_VALUE, StepFunction, FullStep, ShortStep, OddStep, CompactStep,
    step_function, down, up,
)
from .store import NodeData, Node, NodeStore
from .query import get_depth, find_common_ancestor, iter_orbit, iter_breadth_first, Orbit
from .graph import TrajectoryGraph, DEFAULT_UP_BATCH_SIZE
from .engine import GrowthReport, growth_round, run_growth

__all__ = [
    "ReductionVariant", "parse_variant",
    "CollatzGraphError", "NotGenerated", "InvalidDomain", "DuplicateCreate",
    "MAX_VALUE", "StepFunction", "FullStep", "ShortStep", "OddStep", "CompactStep",
    "step_function", "down", "up",
    "NodeData", "Node", "NodeStore",
    "get_depth", "find_common_ancestor", "iter_orbit", "iter_breadth_first", "Orbit",
    "TrajectoryGraph", "DEFAULT_UP_BATCH_SIZE",
    "GrowthReport", "growth_round", "run_growth",
]
