"""Command-line interface for capflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

import yaml

from capflow.algorithms.max_flow import max_flow
from capflow.config import SolverConfig
from capflow.errors import Aborted
from capflow.graph.capacity import CapacityGraph, build_graph
from capflow.graph.io import load_graph, result_to_dict
from capflow.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from capflow.report import format_capacity_matrix, format_flow_table, format_summary

logger = get_logger(__name__)

#: Six-vertex network used by the ``demo`` command; its maximum flow from 0 to 5 is 23.
DEMO_EDGES = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 2, 10),
    (1, 3, 12),
    (2, 1, 4),
    (2, 4, 14),
    (3, 2, 9),
    (3, 5, 20),
    (4, 3, 7),
    (4, 5, 4),
]


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load(path: Path) -> CapacityGraph:
    try:
        return load_graph(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _solve_and_print(
    graph: CapacityGraph,
    source: int,
    sink: int,
    *,
    as_json: bool,
    max_augmentations: Optional[int],
) -> None:
    start = perf_counter()
    try:
        config = SolverConfig(max_augmentations=max_augmentations)
        result = max_flow(graph, source, sink, config=config)
    except ValueError as e:
        logger.error(f"Invalid solve request: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)
    except Aborted as e:
        logger.error(str(e))
        print(f"ERROR: Aborted: {e}")
        sys.exit(1)
    elapsed = perf_counter() - start
    logger.info(
        f"Solved {graph.vertex_count}-vertex, {graph.edge_count}-edge graph "
        f"in {_format_duration(elapsed)}"
    )

    if as_json:
        print(json.dumps(result_to_dict(result), indent=2))
        return

    print(format_summary(result))
    table = format_flow_table(result)
    if table:
        print()
        print(table)


def _run_solve(args: argparse.Namespace) -> None:
    graph = _load(args.graph)
    _solve_and_print(
        graph,
        args.source,
        args.sink,
        as_json=args.json,
        max_augmentations=args.max_augmentations,
    )


def _run_matrix(args: argparse.Namespace) -> None:
    graph = _load(args.graph)
    print(format_capacity_matrix(graph))


def _run_demo(args: argparse.Namespace) -> None:
    graph = build_graph(6, DEMO_EDGES)
    if not args.json:
        print("Input graph (capacity matrix):")
        print(format_capacity_matrix(graph))
        print()
        print("Source vertex: 0")
        print("Sink vertex: 5")
        print()
    _solve_and_print(graph, 0, 5, as_json=args.json, max_augmentations=None)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``capflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="capflow",
        description="Compute maximum flows in capacitated directed graphs.",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging, including each augmenting path",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,matrix,demo}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Solve max flow for a graph file"
    )
    solve_parser.add_argument(
        "graph",
        type=Path,
        help="Graph file (.json, .yaml/.yml, or 'u v capacity' lines)",
    )
    solve_parser.add_argument(
        "--source", "-s", type=int, required=True, help="Source vertex"
    )
    solve_parser.add_argument(
        "--sink", "-t", type=int, required=True, help="Sink vertex"
    )
    solve_parser.add_argument(
        "--max-augmentations",
        type=int,
        default=None,
        help="Abort when more augmenting paths than this would be needed",
    )

    matrix_parser = subparsers.add_parser("matrix", help="Print the capacity matrix")
    matrix_parser.add_argument("graph", type=Path, help="Graph file")

    demo_parser = subparsers.add_parser(
        "demo", help="Solve the built-in six-vertex example network"
    )

    for p in (solve_parser, demo_parser):
        p.add_argument("--json", action="store_true", help="Print the result as JSON")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "solve":
        _run_solve(args)
    elif args.command == "matrix":
        _run_matrix(args)
    elif args.command == "demo":
        _run_demo(args)


if __name__ == "__main__":
    main()
