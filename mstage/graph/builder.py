"""Build a multistage graph from free-form text.

The builder turns three raw inputs into a :class:`MultistageGraph`:

- a node count ``N`` (text or number),
- edge lines of the form ``"u v w"``, one directed edge per line,
- stage lines, each a whitespace-separated list of node ids forming one column.

The adjacency structure is an arena: a list of size ``N + 1`` indexed by node
id, where entry ``u`` holds ``(v, w)`` pairs in input order. Node ids are
expected to follow a topological order (every edge goes from a lower id to a
higher id). This is not checked here.

Malformed or out-of-range edge lines are dropped and logged rather than
raised. Node id ``0`` is rejected as an edge endpoint unless
``GraphBuildConfig.allow_zero_node`` is set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from mstage.config import BUILD_CONFIG, GraphBuildConfig
from mstage.errors import InvalidNodeCount
from mstage.logging import get_logger
from mstage.types.base import AdjEntry, Cost, NodeID
from mstage.utils.numbers import as_node_id, parse_number

logger = get_logger(__name__)


@dataclass(frozen=True)
class MultistageGraph:
    """Adjacency arena plus stage grouping produced by one build action.

    Attributes:
        num_nodes: Highest node id ``N``; the arena has ``N + 1`` slots.
        adjacency: ``adjacency[u]`` holds ``(v, w)`` pairs in input order.
        stages: Ordered node-id groups, used only for layout.
        skipped_lines: Raw edge lines that were dropped during parsing.

    Both nested collections are stored as tuples, so a built graph cannot be
    changed in place.
    """

    num_nodes: int
    adjacency: Tuple[Tuple[AdjEntry, ...], ...]
    stages: Tuple[Tuple[NodeID, ...], ...] = ()
    skipped_lines: Tuple[str, ...] = ()

    @property
    def max_node(self) -> NodeID:
        return len(self.adjacency) - 1

    @property
    def edge_count(self) -> int:
        return sum(len(entries) for entries in self.adjacency)

    def node_ids(self) -> range:
        return range(len(self.adjacency))

    def edges(self) -> Iterator[Tuple[NodeID, NodeID, Cost]]:
        """Yield ``(u, v, w)`` triples in adjacency order."""
        for u, entries in enumerate(self.adjacency):
            for v, w in entries:
                yield u, v, w

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_nodes": self.num_nodes,
            "edges": [[u, v, w] for u, v, w in self.edges()],
            "stages": [list(stage) for stage in self.stages],
            "skipped_lines": list(self.skipped_lines),
        }


def _split_lines(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [line.strip() for line in text.strip().splitlines() if line.strip()]


def parse_node_count(value: Any, config: Optional[GraphBuildConfig] = None) -> int:
    """Parse the node count ``N``.

    Args:
        value: Raw count, as text or a number.
        config: Build configuration; defaults to ``BUILD_CONFIG``.

    Returns:
        The node count as an int.

    Raises:
        InvalidNodeCount: If the value is non-numeric, non-integral, or below
            ``config.min_nodes``.
    """
    cfg = config or BUILD_CONFIG
    count = as_node_id(value)
    if count is None or count < cfg.min_nodes:
        raise InvalidNodeCount(value, cfg.min_nodes)
    return count


def _parse_edge_tokens(
    tokens: List[str], num_nodes: int, config: GraphBuildConfig
) -> Tuple[Optional[str], Optional[Tuple[NodeID, NodeID, Cost]]]:
    if len(tokens) < 3:
        return "expected 'u v w'", None

    numbers = [parse_number(tok) for tok in tokens[:3]]
    if any(num is None for num in numbers):
        return "non-numeric token", None

    u = as_node_id(numbers[0])
    v = as_node_id(numbers[1])
    weight: Cost = numbers[2]  # type: ignore[assignment]
    if u is None or v is None:
        return "node ids must be integers", None
    if not config.allow_zero_node and (u == 0 or v == 0):
        return "node id 0 is not a valid endpoint", None
    if not (
        config.is_valid_endpoint(u, num_nodes)
        and config.is_valid_endpoint(v, num_nodes)
    ):
        lower = 0 if config.allow_zero_node else 1
        return f"endpoint outside [{lower}, {num_nodes}]", None
    return None, (u, v, weight)


def parse_edge_lines(
    text: Optional[str],
    num_nodes: int,
    config: Optional[GraphBuildConfig] = None,
) -> Tuple[List[List[AdjEntry]], Tuple[str, ...]]:
    """Parse ``"u v w"`` lines into an adjacency arena of size ``num_nodes + 1``.

    Lines with missing or non-numeric tokens, a zero endpoint (unless allowed),
    or an endpoint greater than ``num_nodes`` are skipped. Tokens after the
    third are ignored.

    Args:
        text: Raw edge text, one edge per line.
        num_nodes: Node count ``N``.
        config: Build configuration; defaults to ``BUILD_CONFIG``.

    Returns:
        A tuple of (adjacency, skipped_lines).
    """
    cfg = config or BUILD_CONFIG
    adjacency: List[List[AdjEntry]] = [[] for _ in range(num_nodes + 1)]
    skipped: List[str] = []
    log_skip = logger.warning if cfg.warn_on_skipped_edges else logger.debug

    for line in _split_lines(text):
        reason, edge = _parse_edge_tokens(line.split(), num_nodes, cfg)
        if edge is None:
            log_skip("Skipping edge line '%s': %s", line, reason)
            skipped.append(line)
            continue
        u, v, w = edge
        adjacency[u].append((v, w))

    return adjacency, tuple(skipped)


def parse_stage_lines(text: Optional[str]) -> List[List[NodeID]]:
    """Parse stage lines into ordered node-id groups.

    Non-numeric, non-integral and non-positive tokens are dropped. A line
    whose tokens are all dropped still yields an empty group.
    """
    stages: List[List[NodeID]] = []
    for line in _split_lines(text):
        group: List[NodeID] = []
        for token in line.split():
            node = as_node_id(token)
            if node is not None and node > 0:
                group.append(node)
        stages.append(group)
    return stages


def build_graph(
    node_count: Any,
    edges_text: Optional[str],
    stages_text: Optional[str] = None,
    config: Optional[GraphBuildConfig] = None,
) -> MultistageGraph:
    """Build a fresh :class:`MultistageGraph` from raw inputs.

    Args:
        node_count: Node count ``N`` as text or a number.
        edges_text: Edge lines ``"u v w"``.
        stages_text: Stage lines; optional.
        config: Build configuration; defaults to ``BUILD_CONFIG``.

    Returns:
        The new graph. Nothing from a previous build is reused.

    Raises:
        InvalidNodeCount: If ``node_count`` is invalid. No graph is produced.
    """
    cfg = config or BUILD_CONFIG
    num_nodes = parse_node_count(node_count, cfg)
    adjacency, skipped = parse_edge_lines(edges_text, num_nodes, cfg)
    stages = parse_stage_lines(stages_text)

    graph = MultistageGraph(
        num_nodes=num_nodes,
        adjacency=tuple(tuple(entries) for entries in adjacency),
        stages=tuple(tuple(stage) for stage in stages),
        skipped_lines=skipped,
    )
    logger.debug(
        "Built graph: nodes=%d, edges=%d, stages=%d, skipped=%d",
        num_nodes,
        graph.edge_count,
        len(stages),
        len(skipped),
    )
    return graph
