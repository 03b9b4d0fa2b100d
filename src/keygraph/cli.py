"""keygraph CLI entry point.

Usage: keygraph bench [options]
"""
import argparse
import logging
import sys


def _add_bench_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "bench",
        help="Time every graph operation on a random DAG.",
    )
    p.add_argument(
        "--nodes", type=int, default=500,
        help="Number of nodes in the generated DAG (default: 500)",
    )
    p.add_argument(
        "--edge-prob", type=float, default=0.02,
        help="Probability of each forward edge (default: 0.02)",
    )
    p.add_argument(
        "--max-depth", type=int, default=None,
        help="Depth bound for the traversals (default: unbounded)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _run_bench(args: argparse.Namespace) -> int:
    from keygraph.profiling.harness import run_benchmark
    from keygraph.profiling.report import format_report

    result = run_benchmark(
        num_nodes=args.nodes,
        edge_prob=args.edge_prob,
        max_depth=args.max_depth,
        seed=args.seed,
        profile=args.cprofile,
    )
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0 if result.consistent else 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="keygraph",
        description="In-memory directed graph with mirrored back-edges.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log graph mutations at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_bench_parser(subparsers)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "bench":
        if args.nodes < 2:
            parser.error("--nodes must be at least 2")
        sys.exit(_run_bench(args))
