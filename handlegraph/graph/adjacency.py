"""Adjacency capability consumed by the shortest-path engine.

Any graph representation can feed the engine by providing ``node_count()``
and ``adjacencies(u)``, where each yielded edge exposes ``target`` and
``weight``. Nodes are assumed to be numbered densely ``0..node_count()``.

Two providers ship with the package: `AdjacencyListGraph` below, a plain
list of adjacency lists, and `handlegraph.graph.weighted_graph.WeightedGraph`
while its node handles have no gaps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    runtime_checkable,
)

from handlegraph.types import Handle, W, is_handle


@runtime_checkable
class AdjacencyEdge(Protocol):
    """Outgoing edge as seen by graph algorithms."""

    @property
    def target(self) -> Handle: ...

    @property
    def weight(self) -> Any: ...


@runtime_checkable
class AdjacencyGraph(Protocol):
    """Graph exposing dense node numbering and per-node outgoing edges."""

    def node_count(self) -> int: ...

    def adjacencies(self, u: Handle) -> Iterable[AdjacencyEdge]: ...


@dataclass(frozen=True)
class Arc(Generic[W]):
    """Outgoing edge record: the node it leads to and its cost.

    Attributes:
        target: Dense index of the node the edge points to.
        weight: Cost of traversing the edge.
    """

    target: Handle
    weight: W


class AdjacencyListGraph(Generic[W]):
    """Directed weighted graph stored as one list of `Arc` per node.

    Example:
        >>> g = AdjacencyListGraph.with_nodes(3)
        >>> g.add_edge(0, 1, 5)
        >>> g.add_edge(1, 2, 1)
        >>> [a.target for a in g.adjacencies(0)]
        [1]
    """

    def __init__(self, adjacency: Optional[Iterable[Iterable[Arc[W]]]] = None) -> None:
        """Initialize from an optional iterable of adjacency lists.

        Args:
            adjacency: One iterable of arcs per node, in node order.

        Raises:
            ValueError: If any arc points outside the resulting node range.
        """
        self._adj: List[List[Arc[W]]] = [list(arcs) for arcs in adjacency or ()]
        n = len(self._adj)
        for u, arcs in enumerate(self._adj):
            for arc in arcs:
                if not 0 <= arc.target < n:
                    raise ValueError(
                        f"Arc from node {u} targets {arc.target}, outside 0..{n}."
                    )

    @classmethod
    def with_nodes(cls, n: int) -> "AdjacencyListGraph[W]":
        """Create a graph with ``n`` isolated nodes."""
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}.")
        graph: AdjacencyListGraph[W] = cls()
        graph._adj = [[] for _ in range(n)]
        return graph

    def add_node(self) -> Handle:
        """Append an isolated node and return its index."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, u: Handle, v: Handle, weight: W) -> None:
        """Add a directed edge ``u -> v`` with cost ``weight``.

        Raises:
            ValueError: If either node index is out of range.
        """
        n = len(self._adj)
        if not is_handle(u) or not 0 <= u < n:
            raise ValueError(f"Source node '{u}' does not exist.")
        if not is_handle(v) or not 0 <= v < n:
            raise ValueError(f"Target node '{v}' does not exist.")
        self._adj[u].append(Arc(v, weight))

    def adjacencies(self, u: Handle) -> Iterator[Arc[W]]:
        """Iterate the arcs leaving ``u`` in insertion order.

        Raises:
            KeyError: If ``u`` is not a node index of this graph.
        """
        if not is_handle(u) or not 0 <= u < len(self._adj):
            raise KeyError(f"Node '{u}' does not exist.")
        return iter(self._adj[u])

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(arcs) for arcs in self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )
