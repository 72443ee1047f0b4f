"""handlegraph: handle-addressed weighted graphs and shortest paths.

Primary API:
    WeightedGraph - Node/edge container with handle recycling
    SparseIndexStore - Arena mapping recyclable integer handles to payloads
    AdjacencyListGraph - Plain list-of-lists graph for the shortest-path engine
    project_dense() - Renumber a container with handle gaps for the engine
    shortest_paths() - Single-source distances (Dijkstra)

Example:
    from handlegraph import WeightedGraph, shortest_paths

    g = WeightedGraph()
    a, b, c = (g.add_node(name) for name in "ABC")
    g.add_edge(2, a, b)
    g.add_edge(3, b, c)

    shortest_paths(g, a)  # [0, 2, 5]
"""

from __future__ import annotations

from handlegraph import logging
from handlegraph.algorithms.frontier import Frontier
from handlegraph.algorithms.spf import resolve_path, shortest_path, shortest_paths, spf
from handlegraph.config import SPF_CONFIG, ShortestPathConfig
from handlegraph.graph.adjacency import (
    AdjacencyEdge,
    AdjacencyGraph,
    AdjacencyListGraph,
    Arc,
)
from handlegraph.graph.convert import NodeMap, project_dense
from handlegraph.graph.index_store import SparseIndexStore
from handlegraph.graph.weighted_graph import Edge, Node, WeightedGraph
from handlegraph.lib.nx import from_networkx, to_networkx
from handlegraph.types import Directedness, Handle, SupportsWeight

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Containers
    "SparseIndexStore",
    "WeightedGraph",
    "Node",
    "Edge",
    "Directedness",
    # Adjacency capability
    "AdjacencyEdge",
    "AdjacencyGraph",
    "AdjacencyListGraph",
    "Arc",
    "NodeMap",
    "project_dense",
    # Shortest paths
    "Frontier",
    "spf",
    "shortest_paths",
    "shortest_path",
    "resolve_path",
    # Configuration and types
    "ShortestPathConfig",
    "SPF_CONFIG",
    "Handle",
    "SupportsWeight",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
