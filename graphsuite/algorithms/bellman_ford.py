"""Single-pair shortest path with Bellman-Ford and negative-cycle detection."""

from __future__ import annotations

from typing import Dict, List, Tuple

from graphsuite.algorithms.base import Cost, walk_predecessors
from graphsuite.algorithms.types import ShortestPath
from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import NegativeCycleDetected, NoPathFound
from graphsuite.graph.store import Graph, Label, VertexIndex
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(graph: Graph, source: Label, target: Label) -> ShortestPath:
    """Compute the shortest path from ``source`` to ``target``.

    Performs exactly ``V - 1`` relaxation passes over every stored edge, then
    one more pass: if any edge still relaxes, a negative cycle is reachable
    from ``source`` and no distance is reported.

    Args:
        graph: Graph to search; negative weights are allowed.
        source: Start vertex.
        target: End vertex.

    Returns:
        ShortestPath: Distance and the path rebuilt from recorded predecessors.

    Raises:
        VertexNotFound: If ``source`` or ``target`` is absent.
        NegativeCycleDetected: If a negative cycle is reachable from ``source``.
        NoPathFound: If ``target`` is unreachable from ``source``.
    """
    src = graph.index_of(source)
    dst = graph.index_of(target)

    edges: List[Tuple[VertexIndex, VertexIndex, Cost]] = [
        (u, v, GRAPH_CONFIG.edge_cost(graph.weighted, w))
        for u, v, w in graph.index_view().edges(data="weight")
    ]
    dist: Dict[VertexIndex, Cost] = {src: 0}
    pred: Dict[VertexIndex, VertexIndex] = {}

    for _ in range(len(graph) - 1):
        for u, v, cost in edges:
            if u in dist and (v not in dist or dist[u] + cost < dist[v]):
                dist[v] = dist[u] + cost
                pred[v] = u

    for u, v, cost in edges:
        if u in dist and (v not in dist or dist[u] + cost < dist[v]):
            raise NegativeCycleDetected(
                f"Negative-weight cycle reachable from '{source}'."
            )

    if dst not in dist:
        raise NoPathFound(f"No path from '{source}' to '{target}'.")

    path = walk_predecessors(pred, src, dst)
    logger.debug(f"Bellman-Ford '{source}' -> '{target}': distance {dist[dst]}")
    return ShortestPath(
        source=source,
        target=target,
        distance=dist[dst],
        path=[graph.label_of(i) for i in path],
    )
