"""Command-line interface for MStage."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from mstage.algorithms.dp import solve
from mstage.algorithms.highlight import annotate_edges, derive_highlight
from mstage.config import GraphBuildConfig
from mstage.errors import InvalidNodeCount
from mstage.graph.builder import MultistageGraph
from mstage.io import Problem, load_problem_file
from mstage.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from mstage.types.dto import PathResult
from mstage.utils.output_paths import ensure_parent_dir, results_path_for_problem

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Trims trailing zeros and the decimal point when not needed. Falls back to
    ``str(value)`` if the input cannot be parsed as a float.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _load_graph(
    path: Path, config: GraphBuildConfig
) -> Tuple[Problem, MultistageGraph]:
    """Load a problem file and build its graph, exiting with status 1 on failure."""
    logger.info(f"Loading problem from: {path}")
    try:
        problem = load_problem_file(path)
        graph = problem.build(config)
    except InvalidNodeCount as e:
        logger.error(str(e))
        raise SystemExit(1) from e
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load problem: {type(e).__name__}: {e}")
        raise SystemExit(1) from e

    logger.info(
        "Graph built: %d %s, %d %s, %d %s",
        graph.num_nodes,
        _plural(graph.num_nodes, "node"),
        graph.edge_count,
        _plural(graph.edge_count, "edge"),
        len(graph.stages),
        _plural(len(graph.stages), "stage"),
    )
    if graph.skipped_lines:
        logger.warning(
            "%d edge %s skipped while parsing",
            len(graph.skipped_lines),
            _plural(len(graph.skipped_lines), "line"),
        )
    return problem, graph


def _result_payload(
    graph: MultistageGraph,
    source: Any,
    destination: Any,
    result: PathResult,
    highlighted: List[Tuple[int, int]],
) -> Dict[str, Any]:
    return {
        "source": source,
        "destination": destination,
        "result": result.to_dict(),
        "reachable": result.reachable,
        "highlighted_edges": [list(pair) for pair in highlighted],
        "graph": graph.to_dict(),
        "edges": [view.to_dict() for view in annotate_edges(graph, highlighted)],
    }


def _print_result(
    result: PathResult, highlighted: List[Tuple[int, int]], separator: str
) -> None:
    print("\n" + "=" * 60)
    print("MULTISTAGE SHORTEST PATH")
    print("=" * 60)

    if not result.is_valid:
        print(f"Minimum Cost: {result.cost}")
        print("Shortest Path: No path")
        return
    if result.reachable:
        print(f"Minimum Cost: {_format_cost(result.cost)}")
        print(f"Shortest Path: {result.format_path(separator)}")
    else:
        print("Minimum Cost: unreachable")
        print("Shortest Path: No path")

    if highlighted and result.reachable:
        print("\nHighlighted edges:")
        rows = [[str(u), str(v)] for u, v in highlighted]
        print(_format_table(["From", "To"], rows))


def _solve_problem(
    path: Path,
    source: Optional[str],
    destination: Optional[str],
    as_json: bool,
    output: Optional[Path],
    config: GraphBuildConfig,
) -> None:
    """Build the graph from ``path``, solve it, and report the result.

    Args:
        path: Problem YAML file.
        source: Source override; falls back to the file's ``source``.
        destination: Destination override; falls back to the file's ``destination``.
        as_json: Print the JSON payload instead of the text report.
        output: Optional file or directory for the JSON payload.
        config: Build configuration.
    """
    problem, graph = _load_graph(path, config)

    src = source if source is not None else problem.source
    dst = destination if destination is not None else problem.destination
    if src is None or dst is None:
        logger.error(
            "Both source and destination must be given"
            " (in the problem file or via --source/--destination)"
        )
        raise SystemExit(1)

    result = solve(graph, src, dst)
    highlighted = derive_highlight(result.path) if result.reachable else []

    payload = _result_payload(graph, src, dst, result, highlighted)
    if output is not None:
        target = results_path_for_problem(path, output)
        ensure_parent_dir(target)
        logger.info(f"Writing result to: {target}")
        target.write_text(json.dumps(payload, indent=2))

    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        _print_result(result, highlighted, config.path_separator)

    if not result.is_valid:
        raise SystemExit(1)


def _inspect_problem(path: Path, detail: bool, config: GraphBuildConfig) -> None:
    """Show the parsed graph: counts, stages, edges and skipped lines."""
    problem, graph = _load_graph(path, config)

    print("\n" + "=" * 60)
    print("MULTISTAGE GRAPH INSPECTION")
    print("=" * 60)
    print(f"Nodes: {graph.num_nodes}")
    print(f"Edges: {graph.edge_count}")
    print(f"Stages: {len(graph.stages)}")
    print(f"Skipped edge lines: {len(graph.skipped_lines)}")
    if problem.source is not None or problem.destination is not None:
        print(f"Source: {problem.source}  Destination: {problem.destination}")

    if graph.stages:
        print("\nStages:")
        rows = [
            [str(index), " ".join(str(node) for node in stage) or "-"]
            for index, stage in enumerate(graph.stages)
        ]
        print(_format_table(["Stage", "Nodes"], rows))

    edges = list(graph.edges())
    if edges:
        shown = edges if detail else edges[:20]
        print("\nEdges:")
        rows = [[str(u), str(v), _format_cost(w)] for u, v, w in shown]
        print(_format_table(["From", "To", "Weight"], rows))
        if len(shown) < len(edges):
            print(f"   ... {len(edges) - len(shown)} more (use --detail)")

    if graph.skipped_lines:
        print("\nSkipped edge lines:")
        for line in graph.skipped_lines:
            print(f"   {line}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``mstage`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="mstage",
        description="Find minimum-cost paths in multistage graphs.",
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
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a problem file")
    solve_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    solve_parser.add_argument("--source", "-s", default=None, help="Source node id")
    solve_parser.add_argument(
        "--destination", "-d", default=None, help="Destination node id"
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    solve_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=(
            "Write the JSON result to this file, or to"
            " '<problem>.result.json' when a directory is given"
        ),
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect a problem file"
    )
    inspect_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    inspect_parser.add_argument(
        "--detail",
        "-D",
        action="store_true",
        help="List every edge instead of the first 20",
    )

    for p in (solve_parser, inspect_parser):
        p.add_argument(
            "--allow-zero-node",
            action="store_true",
            help="Accept node id 0 as an edge endpoint",
        )

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

    config = GraphBuildConfig(allow_zero_node=args.allow_zero_node)

    if args.command == "solve":
        _solve_problem(
            path=args.problem,
            source=args.source,
            destination=args.destination,
            as_json=args.json,
            output=args.output,
            config=config,
        )
    elif args.command == "inspect":
        _inspect_problem(args.problem, args.detail, config)


if __name__ == "__main__":
    main()
