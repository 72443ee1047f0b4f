"""NetworkX graph conversion utilities.

Convert between `WeightedGraph` and NetworkX multigraphs, e.g. to draw a
graph or to cross-check results against NetworkX's own algorithms.

Example:
    >>> from handlegraph.graph.weighted_graph import WeightedGraph
    >>> from handlegraph.lib.nx import to_networkx
    >>>
    >>> g = WeightedGraph()
    >>> a, b = g.add_node("A"), g.add_node("B")
    >>> _ = g.add_edge(7, a, b)
    >>> G = to_networkx(g)
    >>> G.edges[a, b, 0]["weight"]
    7
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Tuple, Union

import networkx as nx

from handlegraph.graph.weighted_graph import WeightedGraph
from handlegraph.types import Directedness, Handle

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


def to_networkx(
    graph: WeightedGraph,
    *,
    weight_attr: str = "weight",
) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """Convert a `WeightedGraph` to a NetworkX multigraph.

    Node handles become node names and edge handles become multigraph keys;
    node and edge weights are stored under ``weight_attr``.

    Args:
        graph: Graph to convert.
        weight_attr: Attribute name used for node and edge weights.

    Returns:
        ``nx.MultiDiGraph`` for directed graphs, ``nx.MultiGraph`` otherwise.
    """
    G: Union[nx.MultiDiGraph, nx.MultiGraph] = (
        nx.MultiDiGraph() if graph.is_directed else nx.MultiGraph()
    )
    for node in graph.nodes():
        G.add_node(node.index, **{weight_attr: node.weight})
    for edge in graph.edges():
        G.add_edge(edge.head, edge.tail, key=edge.index, **{weight_attr: edge.weight})
    return G


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Any = 1,
) -> Tuple[WeightedGraph, Dict[Hashable, Handle]]:
    """Convert a NetworkX graph to a `WeightedGraph`.

    Directedness follows ``G.is_directed()``. Nodes are added in NetworkX
    iteration order. A node carrying ``weight_attr`` keeps that value as its
    weight, otherwise its name becomes the weight, so a graph written by
    `to_networkx` comes back with its node weights intact. Edges take
    ``weight_attr`` or ``default_weight`` when the attribute is missing.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Node and edge attribute holding the weight.
        default_weight: Cost used when an edge lacks ``weight_attr``.

    Returns:
        Tuple of (graph, handles) where ``handles`` maps NetworkX node names
        to node handles in the new graph.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}.")

    directedness = Directedness.DIRECTED if G.is_directed() else Directedness.UNDIRECTED
    graph: WeightedGraph = WeightedGraph(directedness)
    handles: Dict[Hashable, Handle] = {}
    for name, data in G.nodes(data=True):
        handles[name] = graph.add_node(data.get(weight_attr, name))
    for u, v, data in G.edges(data=True):
        graph.add_edge(data.get(weight_attr, default_weight), handles[u], handles[v])
    return graph, handles
