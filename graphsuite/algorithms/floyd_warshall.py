"""All-pairs shortest paths (Floyd-Warshall) on dense numpy matrices."""

from __future__ import annotations

import numpy as np

from graphsuite.algorithms.types import AllPairsResult
from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import NegativeCycleDetected
from graphsuite.graph.store import Graph
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def floyd_warshall(graph: Graph) -> AllPairsResult:
    """Compute shortest distances and predecessors between every pair of vertices.

    The distance matrix starts from direct edge costs (``inf`` where no edge,
    0 on the diagonal). For each intermediate vertex ``k`` every pair is
    relaxed through ``k``; whenever a pair improves, its predecessor becomes
    the predecessor recorded for ``k -> j``.

    Negative edge weights are supported.

    Args:
        graph: Graph to analyse.

    Returns:
        AllPairsResult: Matrices indexed by vertex insertion order.

    Raises:
        NegativeCycleDetected: If a negative cycle exists; distances would be
            meaningless and path reconstruction would not terminate.
    """
    vertices = graph.vertex_objects()
    n = len(vertices)
    pos = {v.index: i for i, v in enumerate(vertices)}

    dist = np.full((n, n), np.inf, dtype=float)
    pred = np.full((n, n), -1, dtype=np.int64)
    np.fill_diagonal(dist, 0.0)
    for u_idx, v_idx, weight in graph.index_view().edges(data="weight"):
        i, j = pos[u_idx], pos[v_idx]
        cost = GRAPH_CONFIG.edge_cost(graph.weighted, weight)
        if i == j:
            # Only a negative self-loop beats the zero diagonal
            dist[i, i] = min(dist[i, i], cost)
            continue
        dist[i, j] = cost
        pred[i, j] = i

    for k in range(n):
        through_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        improved = through_k < dist
        if not improved.any():
            continue
        dist = np.where(improved, through_k, dist)
        pred = np.where(improved, np.broadcast_to(pred[k, :], (n, n)), pred)

    if n and (np.diag(dist) < 0).any():
        raise NegativeCycleDetected("Graph contains a negative-weight cycle.")

    logger.debug(f"Floyd-Warshall computed {n}x{n} distance matrix")
    return AllPairsResult(
        labels=tuple(v.label for v in vertices),
        dist=dist,
        pred=pred,
    )
