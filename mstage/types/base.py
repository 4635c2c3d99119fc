"""Base type aliases and constants for multistage graph algorithms."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

#: Node identifier; contiguous integers index the adjacency arena.
NodeID = int

#: Represents numeric cost of an edge or a path.
Cost = Union[int, float]

#: Outgoing entry of a node: ``(target, weight)``.
AdjEntry = Tuple[NodeID, Cost]

#: Adjacency arena of size ``N + 1``; entry ``i`` lists node ``i``'s edges.
Adjacency = Sequence[Sequence[AdjEntry]]

#: Directed node pair ``(from, to)`` used to mark an edge.
EdgePair = Tuple[NodeID, NodeID]

#: Cost assigned to nodes that cannot reach the destination.
INF_COST: float = math.inf

#: Cost reported when the solve boundary rejects its endpoints.
INVALID_INPUT = "Invalid input"
