"""Command-line interface for flownet."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from flownet.algorithms.base import FlowAlgorithm
from flownet.algorithms.max_flow import max_flow_summary
from flownet.algorithms.min_cut import format_cut, min_cut
from flownet.config import SOLVER_CONFIG
from flownet.exceptions import FlowNetworkError
from flownet.graph.io import load_network
from flownet.graph.network import FlowNetwork
from flownet.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table."""
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load(path: Path) -> FlowNetwork:
    try:
        return load_network(path)
    except FileNotFoundError:
        logger.error(f"Network file not found: {path}")
        sys.exit(1)
    except (ValueError, FlowNetworkError) as e:
        logger.error(f"Failed to load network {path}: {e}")
        sys.exit(1)


def _run_max_flow(
    path: Path,
    source: int,
    sink: int,
    algorithm: str,
    paths: bool,
    cut: bool,
    as_json: bool,
) -> None:
    network = _load(path)
    logger.info(f"Computing max flow {source} -> {sink} with {algorithm}")
    start = perf_counter()
    try:
        summary = max_flow_summary(network, source, sink, algorithm)
    except (ValueError, FlowNetworkError) as e:
        logger.error(f"Max flow failed: {e}")
        sys.exit(1)
    elapsed = perf_counter() - start
    logger.info(f"Max flow {summary.total_flow} found in {_format_duration(elapsed)}")

    if as_json:
        payload: Dict[str, Any] = {
            "source": source,
            "sink": sink,
            "algorithm": algorithm,
            "max_flow": summary.total_flow,
        }
        if paths:
            payload["paths"] = [p.to_array() for p in summary.paths]
        if cut:
            payload["min_cut"] = [list(e) for e in summary.min_cut]
        print(json.dumps(payload, indent=2))
        return

    print(f"Max flow {source} -> {sink}: {summary.total_flow}")
    if paths:
        print("\nPaths:")
        for p in summary.paths:
            print(f"   {p.to_string()}")
    if cut:
        print("\nMinimum cut:")
        rows = [
            [SOLVER_CONFIG.format_edge(u, v), summary.edge_flow[(u, v)]]
            for u, v in summary.min_cut
        ]
        print(_format_table(["Edge", "Capacity"], rows))


def _run_min_cut(path: Path, source: int, sink: int, algorithm: str) -> None:
    network = _load(path)
    try:
        edges = min_cut(network, source, sink, algorithm)
    except (ValueError, FlowNetworkError) as e:
        logger.error(f"Min cut failed: {e}")
        sys.exit(1)
    for edge in format_cut(edges):
        print(edge)
    print(f"Cut capacity: {sum(edge.capacity for edge in edges)}")


def _inspect_network(path: Path) -> None:
    network = _load(path)
    print(f"Network: {path}")
    print(f"   Size: {network.size}")
    print(f"   Vertices: {network.num_vertices()}")
    print(f"   Edges: {network.num_edges()}")
    edges = network.get_edges()
    if edges:
        print()
        rows = [[e.u, e.v, e.capacity, e.flow] for e in edges]
        print(_format_table(["From", "To", "Capacity", "Flow"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flownet`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flownet",
        description="Compute maximum flows and minimum cuts of capacitated networks.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{maxflow,mincut,inspect}",
        help="Available commands",
    )
    algorithm_names = [a.name.lower() for a in FlowAlgorithm]

    maxflow_parser = subparsers.add_parser("maxflow", help="Compute a maximum flow")
    mincut_parser = subparsers.add_parser("mincut", help="Compute a minimum cut")
    for p, default in (
        (maxflow_parser, SOLVER_CONFIG.default_algorithm),
        (mincut_parser, SOLVER_CONFIG.min_cut_algorithm),
    ):
        p.add_argument("network", type=Path, help="Path to network YAML or JSON")
        p.add_argument("--source", "-s", type=int, required=True, help="Source vertex")
        p.add_argument("--sink", "-t", type=int, required=True, help="Sink vertex")
        p.add_argument(
            "--algorithm",
            "-a",
            choices=algorithm_names,
            default=default,
            help=f"Max-flow engine (default: {default})",
        )
    maxflow_parser.add_argument(
        "--paths", action="store_true", help="Print the flow decomposed into paths"
    )
    maxflow_parser.add_argument(
        "--cut", action="store_true", help="Print the minimum cut edges"
    )
    maxflow_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a network file and print its edges"
    )
    inspect_parser.add_argument("network", type=Path, help="Path to network YAML or JSON")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "maxflow":
        _run_max_flow(
            path=args.network,
            source=args.source,
            sink=args.sink,
            algorithm=args.algorithm,
            paths=args.paths,
            cut=args.cut,
            as_json=args.json,
        )
    elif args.command == "mincut":
        _run_min_cut(args.network, args.source, args.sink, args.algorithm)
    elif args.command == "inspect":
        _inspect_network(args.network)


if __name__ == "__main__":
    main()
