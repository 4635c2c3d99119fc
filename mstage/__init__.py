"""MStage: shortest paths in multistage graphs.

MStage parses free-form descriptions of a stage-ordered directed graph, finds
a minimum-cost path with a single backward dynamic-programming pass, and
derives the edges on that path so a renderer can highlight them.

Primary API:
    build_graph() - Parse node count, edge lines and stage lines
    solve() - Minimum-cost path between two nodes, with input checks
    derive_highlight() - Consecutive edge pairs of a path
    annotate_edges() - Every graph edge with its highlight flag
    load_problem() - Read a YAML problem definition

Example:
    from mstage import build_graph, derive_highlight, solve

    graph = build_graph("4", "1 2 1\\n1 3 4\\n2 3 2\\n2 4 6\\n3 4 3", "1\\n2 3\\n4")
    result = solve(graph, 1, 4)          # cost=6, path=(1, 2, 3, 4)
    edges = derive_highlight(result.path)  # [(1, 2), (2, 3), (3, 4)]
"""

from __future__ import annotations

from mstage import cli, logging
from mstage._version import __version__
from mstage.algorithms.dp import shortest_path_dp, solve, validate_endpoint
from mstage.algorithms.highlight import annotate_edges, derive_highlight, is_highlighted
from mstage.config import BUILD_CONFIG, GraphBuildConfig
from mstage.errors import InvalidEndpoint, InvalidNodeCount
from mstage.graph.builder import MultistageGraph, build_graph
from mstage.graph.convert import to_digraph
from mstage.io import Problem, load_problem, load_problem_file
from mstage.types.dto import EdgeView, PathResult

__all__ = [
    # Version
    "__version__",
    # Graph
    "MultistageGraph",
    "build_graph",
    "to_digraph",
    # Solver
    "solve",
    "shortest_path_dp",
    "validate_endpoint",
    "PathResult",
    # Highlighting
    "derive_highlight",
    "is_highlighted",
    "annotate_edges",
    "EdgeView",
    # Errors
    "InvalidNodeCount",
    "InvalidEndpoint",
    # Configuration
    "GraphBuildConfig",
    "BUILD_CONFIG",
    # Problem files
    "Problem",
    "load_problem",
    "load_problem_file",
    # Utilities
    "cli",
    "logging",
]
