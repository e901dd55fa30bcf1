"""
CLI entry point. Run as: python -m collatz_graph --series <name> --max <n>
"""

import argparse

from .core.engine import run_growth
from .core.errors import InvalidDomain
from .core.graph import DEFAULT_UP_BATCH_SIZE
from .core.variant import ReductionVariant
from .reporting import print_graph_summary, print_orbit, print_series, export_dot
from .series import SERIES, GraphWorkspace


def main(argv=None):
    parser = argparse.ArgumentParser(description="Collatz trajectory graph explorer")
    parser.add_argument(
        "--variant",
        choices=[v.name.lower() for v in ReductionVariant],
        default="full",
        help="Which reduction variant to use",
    )
    parser.add_argument(
        "--series",
        choices=list(SERIES.keys()),
        default=None,
        help="Which series to print",
    )
    parser.add_argument("--max",    type=int, default=100,  help="Fill the graph down from this bound")
    parser.add_argument("--up",     type=int, default=None, help="Grow predecessors up to this value")
    parser.add_argument("--rounds", type=int, default=100,  help="Max ascending rounds")
    parser.add_argument("--batch-size", type=int, default=DEFAULT_UP_BATCH_SIZE,
                        help="Expansions per ascending round")
    parser.add_argument("--orbit",  type=int, default=None, help="Print the orbit of this value")
    parser.add_argument("--dot",    type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet",  action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    workspace = GraphWorkspace(up_batch_size=args.batch_size)
    graph = workspace.graph(args.variant)

    if args.orbit is not None and not graph.step.in_domain(args.orbit):
        parser.error(f"--orbit {args.orbit} is outside the {args.variant} domain")

    if args.series:
        points = workspace.series(args.series, args.variant, args.max)
        print_series(args.series, points)
    else:
        graph.generate_fill_down(args.max)

    if args.up is not None:
        report = run_growth(graph, args.up, max_rounds=args.rounds,
                            verbose=not args.quiet)
        if not args.quiet:
            print(f"Added {report.nodes_added} nodes in {report.rounds} rounds"
                  f" ({report.halt_reason or 'round limit'})")

    if args.orbit is not None:
        try:
            graph.generate_down(args.orbit)
        except InvalidDomain as e:
            parser.error(f"--orbit {args.orbit}: {e}")
        print_orbit(graph, args.orbit)

    if not args.quiet:
        print_graph_summary(graph)

    if args.dot:
        export_dot(graph, args.dot)


if __name__ == "__main__":
    main()
