"""
The ascending growth loop.

generate_up is throttled to a batch of expansions per call. This loop calls
it repeatedly, recording how much each round added, until the frontier
stops moving, a stop condition fires, or the round budget runs out.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from .graph import TrajectoryGraph


@dataclass
class GrowthReport:
    """
    What a run_growth call did.

    history: one entry per round with the node counts before and after
    """
    rounds: int = 0
    history: list = field(default_factory=list)
    halted: bool = False
    halt_reason: str = ""

    @property
    def nodes_added(self):
        return sum(entry["added"] for entry in self.history)


def growth_round(
    graph: TrajectoryGraph,
    max_value: int,
    report: GrowthReport,
    batch_size: Optional[int] = None,
    verbose: bool = True,
) -> GrowthReport:
    """Run one generate_up batch and record it."""
    before = len(graph)
    graph.generate_up(max_value, batch_size=batch_size)
    after = len(graph)

    report.rounds += 1
    report.history.append({
        "round": report.rounds,
        "nodes_before": before,
        "nodes_after": after,
        "added": after - before,
    })
    if verbose:
        print(f"  Round {report.rounds}: +{after - before} nodes ({after} total)")
    if after == before:
        report.halted = True
        report.halt_reason = "frontier exhausted"
    return report


def run_growth(
    graph: TrajectoryGraph,
    max_value: int,
    max_rounds: int = 100,
    stop_fn: Optional[Callable] = None,
    batch_size: Optional[int] = None,
    verbose: bool = True,
) -> GrowthReport:
    """
    Grow the graph upward until nothing new appears.

    Args:
        graph:      graph to grow in place
        max_value:  no predecessor above this is created
        max_rounds: safety limit on generate_up calls
        stop_fn:    stop_fn(graph) -> bool; halt early if True
        batch_size: expansions per round (default: graph.up_batch_size)
        verbose:    print one line per round
    """
    report = GrowthReport()
    if verbose:
        print(f"Growing {graph.variant.name} graph up to {max_value}")
    for _ in range(max_rounds):
        if report.halted:
            break
        if stop_fn and stop_fn(graph):
            report.halted = True
            report.halt_reason = "stop condition met"
            break
        growth_round(graph, max_value, report,
                     batch_size=batch_size, verbose=verbose)
    return report
