"""Shortest-path-first (SPF) over the adjacency capability.

Implements Dijkstra's single-source algorithm against any graph providing
``node_count()`` and ``adjacencies(u)`` (see `handlegraph.graph.adjacency`).
The frontier is an ordered set keyed by ``(distance, node)``: improving a
node's distance discards its previous entry before the new one is added.

Notes:
    Weights must be totally ordered, support ``+`` and be non-negative; the
    additive identity is passed as ``zero``. NaN weights are always rejected.
    Negative weights are rejected unless
    ``ShortestPathConfig.check_negative_weights`` is disabled, in which case
    results for such graphs are unspecified.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from handlegraph.algorithms.frontier import Frontier
from handlegraph.config import SPF_CONFIG, ShortestPathConfig
from handlegraph.graph.adjacency import AdjacencyGraph
from handlegraph.graph.weighted_graph import WeightedGraph
from handlegraph.logging import debug_lazy, get_logger
from handlegraph.types import Handle, is_handle

logger = get_logger(__name__)

DistanceTable = List[Optional[Any]]
PredTable = List[Optional[Handle]]


def _check_source(graph: AdjacencyGraph, source: Handle) -> int:
    """Validate the graph numbering and the source; return the node count."""
    if isinstance(graph, WeightedGraph) and not graph.is_dense():
        raise ValueError(
            "Graph node handles are not dense; use project_dense() before "
            "running shortest paths."
        )
    n = graph.node_count()
    if not is_handle(source) or not 0 <= source < n:
        raise KeyError(f"Source node '{source}' is not in the graph.")
    return n


def _check_weight(
    weight: Any, zero: Any, u: Handle, v: Handle, config: ShortestPathConfig
) -> None:
    # NaN is the only value unequal to itself; it breaks the total order
    if weight != weight:
        raise ValueError(f"Edge {u} -> {v} has NaN weight.")
    if config.check_negative_weights and weight < zero:
        raise ValueError(f"Edge {u} -> {v} has negative weight {weight!r}.")


def spf(
    graph: AdjacencyGraph,
    source: Handle,
    *,
    zero: Any = 0,
    dst: Optional[Handle] = None,
    config: Optional[ShortestPathConfig] = None,
) -> Tuple[DistanceTable, PredTable]:
    """Compute shortest distances and predecessors from ``source``.

    Args:
        graph: Any object satisfying the adjacency capability, numbered
            densely ``0..graph.node_count()``.
        source: Index of the source node.
        zero: Additive identity of the weight type.
        dst: Optional destination. If given, the search stops as soon as
            ``dst`` is settled; entries for other nodes may then be upper
            bounds rather than final distances.
        config: Overrides the module-level `SPF_CONFIG`.

    Returns:
        A tuple of (dist, pred):
          - dist: ``dist[v]`` is the minimal cost from ``source`` to ``v``, or
            None if ``v`` is unreached.
          - pred: ``pred[v]`` is the node preceding ``v`` on one shortest path,
            None for the source and for unreached nodes.

    Raises:
        KeyError: If ``source`` (or ``dst``) is not an int in
            ``0..node_count()``; bools are refused.
        ValueError: If an arc targets a node outside that range, a weight is
            NaN or negative, or a `WeightedGraph` with handle gaps is passed.
    """
    config = config or SPF_CONFIG
    n = _check_source(graph, source)
    if dst is not None and (not is_handle(dst) or not 0 <= dst < n):
        raise KeyError(f"Destination node '{dst}' is not in the graph.")

    dist: DistanceTable = [None] * n
    pred: PredTable = [None] * n
    dist[source] = zero

    frontier: Frontier[Any] = Frontier()
    frontier.push(zero, source)
    pops = 0

    while frontier:
        u_dist, u = frontier.pop_min()
        pops += 1
        if u == dst:
            break

        for arc in graph.adjacencies(u):
            v = arc.target
            weight = arc.weight
            if not 0 <= v < n:
                raise ValueError(f"Edge {u} -> {v} targets a node outside 0..{n}.")
            _check_weight(weight, zero, u, v, config)

            alt = u_dist + weight
            v_dist = dist[v]
            if v_dist is None or alt < v_dist:
                if v_dist is not None:
                    # Drop the stale entry before recording the better one
                    frontier.discard(v_dist, v)
                dist[v] = alt
                pred[v] = u
                frontier.push(alt, v)

    if config.log_summary:
        debug_lazy(
            logger,
            "SPF from %d: reached %d of %d nodes after %d frontier pops",
            source,
            lambda: sum(d is not None for d in dist),
            n,
            pops,
        )
    return dist, pred


def shortest_paths(
    graph: AdjacencyGraph,
    source: Handle,
    *,
    zero: Any = 0,
    config: Optional[ShortestPathConfig] = None,
) -> DistanceTable:
    """Return the distance table from ``source``; see `spf` for arguments.

    Example:
        >>> from handlegraph.graph.adjacency import AdjacencyListGraph
        >>> g = AdjacencyListGraph.with_nodes(3)
        >>> g.add_edge(0, 1, 4)
        >>> g.add_edge(1, 2, 1)
        >>> shortest_paths(g, 0)
        [0, 4, 5]
    """
    dist, _ = spf(graph, source, zero=zero, config=config)
    return dist


def resolve_path(
    pred: Sequence[Optional[Handle]], source: Handle, target: Handle
) -> Optional[List[Handle]]:
    """Rebuild the node sequence ``source .. target`` from a predecessor table.

    Returns:
        The path including both endpoints, or None if ``target`` was not
        reached from ``source``.

    Raises:
        KeyError: If ``target`` is outside the table.
    """
    if not is_handle(target) or not 0 <= target < len(pred):
        raise KeyError(f"Target node '{target}' is not in the graph.")
    path = [target]
    node = target
    while node != source:
        prev = pred[node]
        if prev is None:
            return None
        path.append(prev)
        node = prev
    path.reverse()
    return path


def shortest_path(
    graph: AdjacencyGraph,
    source: Handle,
    target: Handle,
    *,
    zero: Any = 0,
    config: Optional[ShortestPathConfig] = None,
) -> Optional[Tuple[Any, List[Handle]]]:
    """Return ``(cost, nodes)`` of one shortest path, or None if unreachable.

    The search stops once ``target`` is settled.
    """
    dist, pred = spf(graph, source, zero=zero, dst=target, config=config)
    path = resolve_path(pred, source, target)
    if path is None:
        return None
    return dist[target], path
