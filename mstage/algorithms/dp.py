"""Backward dynamic-programming shortest path for multistage graphs.

Nodes are processed in descending id order, so each node's successors are
already settled when it is relaxed. This is correct only when node ids follow
a topological order (every edge goes from a lower id to a higher id). The
order is not validated; other inputs give a silently wrong answer rather than
an error.

Notes:
    The relaxation loop covers ids ``N - 1`` down to ``1``. Node ``0`` is never
    relaxed, so it has a finite cost only when it is the destination.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from mstage.errors import InvalidEndpoint
from mstage.graph.builder import MultistageGraph
from mstage.logging import get_logger
from mstage.types.base import INF_COST, Adjacency, Cost, NodeID
from mstage.types.dto import PathResult
from mstage.utils.numbers import as_node_id

logger = get_logger(__name__)


def shortest_path_dp(
    adjacency: Adjacency, source: NodeID, destination: NodeID
) -> PathResult:
    """Compute the minimum cost from ``source`` to ``destination``.

    Runs one backward pass over the arena in O(V + E), recording for each node
    the next hop that achieved its minimum. Ties keep the first edge scanned.

    Args:
        adjacency: Arena of ``(target, weight)`` lists, indexed by node id.
        source: Start node; must index into ``adjacency``.
        destination: End node; must index into ``adjacency``.

    Returns:
        PathResult with ``cost`` equal to ``math.inf`` when the destination is
        unreachable. In that case the path stops short of the destination.
    """
    n = len(adjacency) - 1
    cost: List[Cost] = [INF_COST] * (n + 1)
    next_hop: List[Optional[NodeID]] = [None] * (n + 1)
    cost[destination] = 0

    for i in range(n - 1, 0, -1):
        for v, w in adjacency[i]:
            if cost[v] != INF_COST and w + cost[v] < cost[i]:
                cost[i] = w + cost[v]
                next_hop[i] = v

    path: List[NodeID] = []
    node: Optional[NodeID] = source
    while node is not None:
        path.append(node)
        if node == destination:
            break
        node = next_hop[node]

    return PathResult(cost=cost[source], path=tuple(path))


def validate_endpoint(role: str, value: Any, max_node: int) -> NodeID:
    """Parse a source or destination and check it lies in ``[0, max_node]``.

    Raises:
        InvalidEndpoint: If the value is not an integer or is out of range.
    """
    node = as_node_id(value)
    if node is None or not 0 <= node <= max_node:
        raise InvalidEndpoint(role, value, max_node)
    return node


def solve(
    graph: Union[MultistageGraph, Adjacency],
    source: Any,
    destination: Any,
) -> PathResult:
    """Solve one shortest-path query at the caller boundary.

    Endpoints are parsed and range-checked against the graph. Invalid input
    never raises: it yields the sentinel ``PathResult(cost="Invalid input",
    path=())``.

    Args:
        graph: A built graph or a raw adjacency arena.
        source: Source node id (int or numeric text).
        destination: Destination node id (int or numeric text).

    Returns:
        The solver result, or the invalid-input sentinel.
    """
    adjacency = graph.adjacency if isinstance(graph, MultistageGraph) else graph
    if not adjacency:
        logger.warning("Cannot solve: no graph has been built")
        return PathResult.invalid()

    max_node = len(adjacency) - 1
    try:
        src = validate_endpoint("source", source, max_node)
        dst = validate_endpoint("destination", destination, max_node)
    except InvalidEndpoint as exc:
        logger.warning("%s", exc)
        return PathResult.invalid()

    result = shortest_path_dp(adjacency, src, dst)
    if result.reachable:
        logger.debug(
            "Shortest path %d -> %d: cost=%s path=%s",
            src,
            dst,
            result.cost,
            list(result.path),
        )
    else:
        logger.info("Destination %d is unreachable from source %d", dst, src)
    return result
