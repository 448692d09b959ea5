"""Command line interface for inspecting road network snapshots.

This module runs the analysis engine on a snapshot given in the editor's JSON
format and prints the result records as indented JSON.

The CLI supports the following commands:
    - route: Cheapest route between the origin and destination
    - euler: Eulerian path and circuit analysis
    - hamilton: Hamiltonian path and circuit analysis
    - analyze: All three of the above

JSON input can be provided either as a direct string or as a file path prefixed with '@'.
Relative file paths are resolved against the current directory.

Example Usage:
    python -m roadgraph route @data/city.json --algorithm bellman-ford
    python -m roadgraph -vv hamilton '{"nodes": [{"id": "A"}], "edges": []}'
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from .core.config import DEFAULT_EXHAUSTIVE_SEARCH_LIMIT, AnalysisConfig
from .core.enums import Algorithm
from .core.exceptions import ConfigurationError, ValidationError
from .core.graph_operations.serialization import GraphSerializer
from .engine import (
    compute_eulerian_analysis,
    compute_full_analysis,
    compute_hamiltonian_analysis,
    compute_shortest_path,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def configure_logging(verbosity: int) -> None:
    """Configure logging level based on verbosity.

    Args:
        verbosity: 0 = warning, 1 = info, 2 or more = debug
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="roadgraph", description="Route and structural analysis for road networks"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log output (-v, -vv)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_graph_argument(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("graph", help="JSON string or @filename containing the snapshot")

    def add_route_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--origin", help="Start node id (defaults to the origin role)")
        sub.add_argument("--destination", help="End node id (defaults to the destination role)")
        sub.add_argument(
            "--algorithm",
            choices=[algorithm.value for algorithm in Algorithm],
            default=Algorithm.AUTO.value,
            help="Shortest path strategy",
        )

    def add_search_limit(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--search-limit",
            type=int,
            default=DEFAULT_EXHAUSTIVE_SEARCH_LIMIT,
            help="Largest graph searched exhaustively for Hamiltonian paths",
        )

    route = subparsers.add_parser("route", help="Find the cheapest route")
    add_graph_argument(route)
    add_route_arguments(route)

    euler = subparsers.add_parser("euler", help="Eulerian path and circuit analysis")
    add_graph_argument(euler)

    hamilton = subparsers.add_parser("hamilton", help="Hamiltonian path and circuit analysis")
    add_graph_argument(hamilton)
    add_search_limit(hamilton)

    analyze = subparsers.add_parser("analyze", help="Run every analysis")
    add_graph_argument(analyze)
    add_route_arguments(analyze)
    add_search_limit(analyze)

    return parser


def run(args: argparse.Namespace) -> Any:
    """Execute a parsed command and return JSON-compatible output."""
    snapshot = GraphSerializer().snapshot_from_dict(parse_json_input(args.graph))
    config = AnalysisConfig(
        exhaustive_search_limit=getattr(args, "search_limit", DEFAULT_EXHAUSTIVE_SEARCH_LIMIT)
    )

    if args.command == "route":
        return compute_shortest_path(
            snapshot, args.origin, args.destination, args.algorithm, config
        ).to_dict()
    if args.command == "euler":
        return compute_eulerian_analysis(snapshot, config).to_dict()
    if args.command == "hamilton":
        return compute_hamiltonian_analysis(snapshot, config).to_dict()

    results = compute_full_analysis(
        snapshot, args.origin, args.destination, args.algorithm, config
    )
    return {name: result.to_dict() for name, result in results.items()}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit status: 0 on success, 2 on invalid input.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID_INPUT

    configure_logging(args.verbose)

    try:
        output = run(args)
    except (ValueError, ValidationError, ConfigurationError) as e:
        logger.debug("Rejected input", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(output, indent=2))
    return EXIT_OK
