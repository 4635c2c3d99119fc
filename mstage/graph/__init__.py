"""Graph primitives and helpers.

This package provides the text parser producing `MultistageGraph`
(`builder`) and the NetworkX bridge (`convert`).
"""

from mstage.graph.builder import (
    MultistageGraph,
    build_graph,
    parse_edge_lines,
    parse_node_count,
    parse_stage_lines,
)
from mstage.graph.convert import to_digraph

__all__ = [
    "MultistageGraph",
    "build_graph",
    "parse_node_count",
    "parse_edge_lines",
    "parse_stage_lines",
    "to_digraph",
]
