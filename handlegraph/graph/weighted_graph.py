"""Weighted multigraph addressed by recyclable integer handles.

`WeightedGraph` keeps nodes and edges in two `SparseIndexStore` instances and
maintains a per-node index of incident edges. Directedness is a runtime flag
fixed at construction and consulted by edge queries and adjacency iteration.

Absence is reported with ``None`` rather than exceptions: removing or looking
up a handle that is not live returns ``None``, and `add_edge` returns ``None``
when an endpoint does not exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar

from handlegraph.graph.adjacency import Arc
from handlegraph.graph.index_store import SparseIndexStore
from handlegraph.logging import debug_lazy, get_logger
from handlegraph.types import Directedness, Handle, W

logger = get_logger(__name__)

N = TypeVar("N")


@dataclass(frozen=True)
class Node(Generic[N]):
    """Node record.

    Attributes:
        index: Handle of the node in its graph.
        weight: Caller payload.
    """

    index: Handle
    weight: N


@dataclass(frozen=True)
class Edge(Generic[W]):
    """Edge record.

    Attributes:
        index: Handle of the edge in its graph.
        weight: Caller payload; the path cost for shortest-path queries.
        head: Handle of the node the edge starts at.
        tail: Handle of the node the edge ends at.
    """

    index: Handle
    weight: W
    head: Handle
    tail: Handle

    def other(self, node: Handle) -> Handle:
        """Return the endpoint opposite ``node`` (``node`` itself for a self-loop)."""
        return self.tail if node == self.head else self.head


class WeightedGraph(Generic[N, W]):
    """Node/edge container with handle recycling and cascading deletion.

    This class enforces:
      - Edges are only created between live nodes.
      - Removing a node removes every edge that has it as head or tail.
      - Parallel edges and self-loops are allowed.

    It also satisfies the adjacency capability (``node_count()`` and
    ``adjacencies(u)``) so it can be handed to the shortest-path engine
    directly while `is_dense()` holds.
    """

    def __init__(self, directedness: Directedness = Directedness.DIRECTED) -> None:
        """Initialize an empty graph.

        Args:
            directedness: Whether edges are one-way or symmetric.

        Attributes:
            _incident: Map node handle to the handles of edges touching it.
        """
        self._directedness = Directedness(directedness)
        self._nodes: SparseIndexStore[Node[N]] = SparseIndexStore()
        self._edges: SparseIndexStore[Edge[W]] = SparseIndexStore()
        self._incident: Dict[Handle, Set[Handle]] = {}

    @property
    def directedness(self) -> Directedness:
        return self._directedness

    @property
    def is_directed(self) -> bool:
        return self._directedness is Directedness.DIRECTED

    def copy(self) -> WeightedGraph[N, W]:
        """Return a deep copy of this graph (pickle-based), handles preserved."""
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, weight: N) -> Handle:
        """Add a node carrying ``weight`` and return its handle."""
        handle = self._nodes.insert(Node(-1, weight))
        self._nodes[handle] = Node(handle, weight)
        self._incident[handle] = set()
        return handle

    def remove_node(self, handle: Handle) -> Optional[N]:
        """Remove a node and every edge incident to it.

        Args:
            handle: The node to remove.

        Returns:
            The node's weight, or None if ``handle`` is not a live node.
        """
        node = self._nodes.remove(handle)
        if node is None:
            return None
        incident = self._incident.pop(handle)
        for e_id in incident:
            edge = self._edges.remove(e_id)
            assert edge is not None
            other = edge.other(handle)
            if other != handle:
                self._incident[other].discard(e_id)
        if incident:
            debug_lazy(
                logger,
                "Removed node %d together with %d incident edge(s): %s",
                handle,
                len(incident),
                lambda: sorted(incident),
            )
        return node.weight

    #
    # Edge management
    #
    def add_edge(self, weight: W, head: Handle, tail: Handle) -> Optional[Handle]:
        """Add an edge from ``head`` to ``tail``.

        Args:
            weight: Edge payload.
            head: Start node. Must be live.
            tail: End node. Must be live; may equal ``head``.

        Returns:
            The new edge handle, or None if either endpoint is not a live node
            (the graph is left unchanged).
        """
        if head not in self._nodes or tail not in self._nodes:
            logger.debug("Rejected edge %r -> %r: endpoint does not exist", head, tail)
            return None
        handle = self._edges.insert(Edge(-1, weight, head, tail))
        self._edges[handle] = Edge(handle, weight, head, tail)
        self._incident[head].add(handle)
        self._incident[tail].add(handle)
        return handle

    def remove_edge(self, handle: Handle) -> Optional[W]:
        """Remove an edge by handle.

        Returns:
            The edge's weight, or None if ``handle`` is not a live edge.
        """
        edge = self._edges.remove(handle)
        if edge is None:
            return None
        self._incident[edge.head].discard(handle)
        self._incident[edge.tail].discard(handle)
        return edge.weight

    #
    # Queries
    #
    def find_n_edges(self, n: int, head: Handle, tail: Handle) -> List[Handle]:
        """List up to ``n`` edges connecting ``head`` to ``tail``.

        For undirected graphs an edge stored as ``(tail, head)`` matches too.

        Args:
            n: Maximum number of handles to return; 0 means no limit.
            head: Start node of the query.
            tail: End node of the query.

        Returns:
            Matching edge handles in ascending order; empty if none match or
            either node is not live.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Edge limit must be non-negative, got {n}.")
        if head not in self._nodes or tail not in self._nodes:
            return []
        undirected = not self.is_directed
        found: List[Handle] = []
        for e_id in sorted(self._incident[head]):
            edge = self._edges[e_id]
            if (edge.head == head and edge.tail == tail) or (
                undirected and edge.head == tail and edge.tail == head
            ):
                found.append(e_id)
                if len(found) == n:
                    break
        return found

    def find_edges(self, head: Handle, tail: Handle) -> List[Handle]:
        """List every edge connecting ``head`` to ``tail``, ascending by handle."""
        return self.find_n_edges(0, head, tail)

    def find_edge(self, head: Handle, tail: Handle) -> Optional[Handle]:
        """Return the lowest-handle edge connecting ``head`` to ``tail``, or None."""
        found = self.find_n_edges(1, head, tail)
        return found[0] if found else None

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def has_node(self, handle: Handle) -> bool:
        return handle in self._nodes

    def has_edge(self, handle: Handle) -> bool:
        return handle in self._edges

    def node(self, handle: Handle) -> Optional[Node[N]]:
        return self._nodes.get(handle)

    def edge(self, handle: Handle) -> Optional[Edge[W]]:
        return self._edges.get(handle)

    def node_weight(self, handle: Handle) -> Optional[N]:
        node = self._nodes.get(handle)
        return None if node is None else node.weight

    def edge_weight(self, handle: Handle) -> Optional[W]:
        edge = self._edges.get(handle)
        return None if edge is None else edge.weight

    def edge_endpoints(self, handle: Handle) -> Optional[Tuple[Handle, Handle]]:
        """Return ``(head, tail)`` of an edge, or None if it is not live."""
        edge = self._edges.get(handle)
        return None if edge is None else (edge.head, edge.tail)

    def nodes(self) -> Iterator[Node[N]]:
        """Iterate live nodes in ascending handle order."""
        for _, node in self._nodes.items():
            yield node

    def edges(self) -> Iterator[Edge[W]]:
        """Iterate live edges in ascending handle order."""
        for _, edge in self._edges.items():
            yield edge

    def incident_edges(self, handle: Handle) -> List[Handle]:
        """Handles of edges with ``handle`` as head or tail, ascending."""
        if handle not in self._nodes:
            return []
        return sorted(self._incident[handle])

    def neighbors(self, handle: Handle) -> List[Handle]:
        """Distinct nodes reachable over one outgoing edge, in edge order."""
        return list(dict.fromkeys(arc.target for arc in self.adjacencies(handle)))

    def is_dense(self) -> bool:
        """Return True if node handles are exactly ``0..node_count()``."""
        return self._nodes.is_dense()

    def clear(self) -> None:
        """Remove all nodes and edges; handle numbering restarts at 0."""
        self._nodes.clear()
        self._edges.clear()
        self._incident.clear()

    #
    # Adjacency capability
    #
    def adjacencies(self, u: Handle) -> Iterator[Arc[W]]:
        """Iterate outgoing arcs of ``u`` in ascending edge-handle order.

        Undirected edges are traversable from either endpoint; a self-loop
        yields a single arc.

        Raises:
            KeyError: If ``u`` is not a live node.
        """
        if u not in self._nodes:
            raise KeyError(f"Node '{u}' does not exist.")
        return self._iter_arcs(u)

    def _iter_arcs(self, u: Handle) -> Iterator[Arc[W]]:
        directed = self.is_directed
        for e_id in sorted(self._incident[u]):
            edge = self._edges[e_id]
            if edge.head == u:
                yield Arc(edge.tail, edge.weight)
            elif not directed:
                yield Arc(edge.head, edge.weight)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._directedness.name.lower()}, "
            f"nodes={self.node_count()}, edges={self.edge_count()})"
        )
