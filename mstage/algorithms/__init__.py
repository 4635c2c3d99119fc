"""Shortest-path algorithms over multistage graphs."""

from mstage.algorithms.dp import shortest_path_dp, solve, validate_endpoint
from mstage.algorithms.highlight import annotate_edges, derive_highlight, is_highlighted

__all__ = [
    "shortest_path_dp",
    "solve",
    "validate_endpoint",
    "derive_highlight",
    "is_highlighted",
    "annotate_edges",
]
