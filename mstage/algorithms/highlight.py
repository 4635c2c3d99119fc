"""Edge highlighting derived from a solved path."""

from __future__ import annotations

from typing import Collection, Iterable, List, Sequence, Union

from mstage.graph.builder import MultistageGraph
from mstage.types.base import Adjacency, EdgePair, NodeID
from mstage.types.dto import EdgeView


def derive_highlight(path: Sequence[NodeID]) -> List[EdgePair]:
    """Return the consecutive ``(from, to)`` pairs of ``path``.

    A path of ``k`` nodes yields ``k - 1`` pairs, in path order. Paths with
    fewer than two nodes yield an empty list.
    """
    return [(path[i], path[i + 1]) for i in range(len(path) - 1)]


def is_highlighted(u: NodeID, v: NodeID, highlighted: Collection[EdgePair]) -> bool:
    """Return True if the directed edge ``(u, v)`` is marked.

    Membership is tested on ``highlighted`` as given; pass a set when checking
    every edge of a large graph.
    """
    return (u, v) in highlighted


def annotate_edges(
    graph: Union[MultistageGraph, Adjacency],
    highlighted: Iterable[EdgePair],
) -> List[EdgeView]:
    """Pair every edge of ``graph`` with its highlight flag.

    Edges are listed in adjacency order. Parallel edges between the same two
    nodes are all flagged when that pair is on the path.
    """
    adjacency = graph.adjacency if isinstance(graph, MultistageGraph) else graph
    marked = set(highlighted)
    return [
        EdgeView(source=u, target=v, weight=w, highlighted=(u, v) in marked)
        for u, entries in enumerate(adjacency)
        for v, w in entries
    ]
