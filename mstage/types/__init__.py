"""Shared typing constructs for MStage.

This package defines the type aliases and value objects passed between the
graph builder, the solver, and the highlight helpers.
"""

from mstage.types.base import (
    INF_COST,
    INVALID_INPUT,
    AdjEntry,
    Adjacency,
    Cost,
    EdgePair,
    NodeID,
)
from mstage.types.dto import EdgeView, PathResult

__all__ = [
    # Type aliases and constants
    "NodeID",
    "Cost",
    "AdjEntry",
    "Adjacency",
    "EdgePair",
    "INF_COST",
    "INVALID_INPUT",
    # DTOs
    "PathResult",
    "EdgeView",
]
