"""Graph conversion utilities between MultistageGraph and NetworkX graphs.

Parallel edges between the same pair of nodes are consolidated into a single
NetworkX edge carrying the minimum weight.
"""

from typing import Union

import networkx as nx

from mstage.graph.builder import MultistageGraph
from mstage.types.base import Adjacency


def to_digraph(
    graph: Union[MultistageGraph, Adjacency],
    weight_attr: str = "weight",
) -> nx.DiGraph:
    """Convert a MultistageGraph (or a raw adjacency arena) to a NetworkX DiGraph.

    Every node id of the arena becomes a node, including isolated ones. Stage
    groupings, when present, are stored as a ``stage`` node attribute holding
    the index of the first group listing the node.

    Args:
        graph: The graph or adjacency arena to convert.
        weight_attr: Edge attribute name used for weights.

    Returns:
        A NetworkX DiGraph representing the input graph.
    """
    adjacency = graph.adjacency if isinstance(graph, MultistageGraph) else graph

    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(range(len(adjacency)))

    for u, entries in enumerate(adjacency):
        for v, w in entries:
            if nx_graph.has_edge(u, v):
                current = nx_graph.edges[u, v][weight_attr]
                if w >= current:
                    continue
            nx_graph.add_edge(u, v, **{weight_attr: w})

    if isinstance(graph, MultistageGraph):
        for index, stage in enumerate(graph.stages):
            for node in stage:
                if node in nx_graph and "stage" not in nx_graph.nodes[node]:
                    nx_graph.nodes[node]["stage"] = index
    return nx_graph
