"""
Console reports and Graphviz export.
"""

from .core.graph import TrajectoryGraph
from .series import SERIES, series_bounds


def print_graph_summary(graph: TrajectoryGraph):
    """Print a summary of a graph's size and depth profile."""
    records = list(graph.iter())
    deepest = max(records, key=lambda d: d.depth)
    highest = max(records, key=lambda d: d.highest_point)
    print(f"\n{'='*60}")
    print(f"Variant: {graph.variant.name}")
    print(f"Nodes: {len(graph)}")
    print(f"Filled through: {graph.filled_end - 1}")
    print(f"Deepest: {deepest.value} (depth {deepest.depth})")
    print(f"Highest point: {highest.highest_point} (reached from {highest.value})")
    print(f"{'='*60}")


def print_orbit(graph: TrajectoryGraph, n: int):
    """Print the descent of n, one step per line."""
    print(f"\n{'='*60}")
    print(f"Orbit of {n} ({graph.variant.name}):")
    print(f"{'='*60}")
    for data in graph.iter_orbit(n):
        print(f"  depth {data.depth:>4}  value {data.value:<20} highest {data.highest_point}")
    print(f"  depth {0:>4}  value 1")


def print_series(name: str, points: list):
    """Print a series as tab-separated columns with its bounds."""
    entry = SERIES[name]
    x_min, x_max, y_min, y_max = series_bounds(points)
    print(f"# {name}: {entry['description']}")
    print(f"# x in [{x_min}, {x_max}], y in [{y_min}, {y_max}]")
    print(f"{entry['x_label']}\t{entry['y_label']}")
    for x, y in points:
        print(f"{x}\t{y}")


def export_dot(graph: TrajectoryGraph, path="collatz_graph.dot"):
    """Export the graph as a DOT file, edges pointing down toward 1."""
    store = graph.store
    with open(path, "w") as f:
        f.write("digraph collatz {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=circle];\n")
        for data in graph.iter():
            color = "lightblue" if data.value == 1 else "lightgray"
            f.write(f'  "{data.value}" [fillcolor={color}, style=filled];\n')
            node = store[store.get(data.value)]
            if node.down is not None:
                f.write(f'  "{data.value}" -> "{store[node.down].value}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
