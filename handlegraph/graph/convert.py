"""Projection of a `WeightedGraph` into a densely numbered adjacency list.

Handle recycling leaves gaps in node numbering after removals, while the
shortest-path engine indexes nodes ``0..node_count()``. `project_dense`
renumbers live nodes in ascending handle order and returns the mapping
needed to translate results back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple, TypeVar

from handlegraph.graph.adjacency import AdjacencyListGraph, Arc
from handlegraph.graph.weighted_graph import WeightedGraph
from handlegraph.types import Handle, W

V = TypeVar("V")


@dataclass
class NodeMap:
    """Bidirectional mapping between container handles and dense indices.

    Attributes:
        to_index: Maps container node handles to dense indices.
        to_handle: Maps dense indices back to container node handles.

    Example:
        >>> node_map = NodeMap.from_handles([0, 2, 5])
        >>> node_map.to_index[5]
        2
        >>> node_map.to_handle[1]
        2
    """

    to_index: Dict[Handle, int] = field(default_factory=dict)
    to_handle: Dict[int, Handle] = field(default_factory=dict)

    @classmethod
    def from_handles(cls, handles: Sequence[Handle]) -> "NodeMap":
        """Create a NodeMap from handles listed in dense-index order."""
        to_index = {h: i for i, h in enumerate(handles)}
        to_handle = {i: h for i, h in enumerate(handles)}
        return cls(to_index=to_index, to_handle=to_handle)

    def expand(self, table: Sequence[V]) -> Dict[Handle, V]:
        """Re-key a per-index result table by container handle.

        Args:
            table: Sequence indexed by dense index, such as a distance table.

        Returns:
            Dict mapping each container handle to its table entry.

        Raises:
            ValueError: If the table length differs from the mapping size.
        """
        if len(table) != len(self.to_handle):
            raise ValueError(
                f"Table has {len(table)} entries, mapping covers "
                f"{len(self.to_handle)} nodes."
            )
        return {self.to_handle[i]: value for i, value in enumerate(table)}

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def project_dense(
    graph: WeightedGraph[Any, W],
) -> Tuple[AdjacencyListGraph[W], NodeMap]:
    """Build a dense adjacency-list view of ``graph``.

    Arcs follow ``graph.adjacencies()``, so undirected edges appear in both
    directions. The projection is a snapshot: later edits to ``graph`` are not
    reflected.

    Args:
        graph: Container to project; may have gaps in node handles.

    Returns:
        Tuple of (adjacency_graph, node_map).
    """
    node_map = NodeMap.from_handles([node.index for node in graph.nodes()])
    to_index = node_map.to_index
    adjacency: List[List[Arc[W]]] = []
    for i in range(len(node_map)):
        handle = node_map.to_handle[i]
        adjacency.append(
            [Arc(to_index[arc.target], arc.weight) for arc in graph.adjacencies(handle)]
        )
    return AdjacencyListGraph(adjacency), node_map
