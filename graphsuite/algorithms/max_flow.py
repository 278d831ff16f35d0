"""Maximum-flow computation via BFS augmenting paths (Edmonds-Karp).

Edge weights are read as capacities. Capacity and flow live in dense numpy
matrices; the residual capacity of ``u -> v`` is ``C[u, v] - F[u, v]``.
Pushing flow along ``u -> v`` also lowers ``F[v, u]``, which is what lets a
later augmenting path cancel earlier flow.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Literal, Tuple, Union, overload

import numpy as np

from graphsuite.algorithms.types import Edge, FlowSummary
from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import NegativeWeightError
from graphsuite.graph.store import Graph, Label
from graphsuite.logging import get_logger

logger = get_logger(__name__)

# Bottleneck of the source: larger than any residual capacity an int64 matrix can hold.
_UNBOUNDED = np.iinfo(np.int64).max


def _capacity_matrix(graph: Graph, pos: Dict[int, int]) -> np.ndarray:
    n = len(pos)
    capacity = np.zeros((n, n), dtype=np.int64)
    for u_idx, v_idx, weight in graph.index_view().edges(data="weight"):
        cap = GRAPH_CONFIG.edge_capacity(graph.weighted, weight)
        if cap < 0:
            raise NegativeWeightError(
                f"Edge '{graph.label_of(u_idx)}' -> '{graph.label_of(v_idx)}' "
                f"has negative capacity {cap}."
            )
        capacity[pos[u_idx], pos[v_idx]] = cap
    return capacity


def _augmenting_bfs(
    capacity: np.ndarray, flow: np.ndarray, s: int, t: int
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Search the residual graph from ``s`` until ``t`` is reached.

    Returns:
        A tuple of (visited, pred, push):
          - visited: Boolean mask of vertices reached.
          - pred: BFS predecessor of each reached vertex (-1 otherwise).
          - push: Bottleneck residual capacity on the BFS path to each vertex.
    """
    n = capacity.shape[0]
    visited = np.zeros(n, dtype=bool)
    pred = np.full(n, -1, dtype=np.int64)
    push = np.zeros(n, dtype=np.int64)
    visited[s] = True
    pred[s] = s
    push[s] = _UNBOUNDED
    queue = deque([s])
    while queue and not visited[t]:
        u = queue.popleft()
        residual = capacity[u] - flow[u]
        for v in np.flatnonzero((residual > 0) & ~visited):
            visited[v] = True
            pred[v] = u
            push[v] = min(push[u], residual[v])
            queue.append(int(v))
    return visited, pred, push


@overload
def max_flow(
    graph: Graph,
    source: Label,
    sink: Label,
    *,
    return_summary: Literal[False] = False,
) -> int: ...


@overload
def max_flow(
    graph: Graph,
    source: Label,
    sink: Label,
    *,
    return_summary: Literal[True],
) -> Tuple[int, FlowSummary]: ...


def max_flow(
    graph: Graph,
    source: Label,
    sink: Label,
    *,
    return_summary: bool = False,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``source`` to ``sink``.

    Repeats until the sink is unreachable in the residual graph:
      1. BFS from ``source`` over edges with positive residual capacity,
         recording predecessors and the bottleneck to each vertex.
      2. Push the sink's bottleneck along the predecessor chain, adding it
         to each forward entry and subtracting it from the reverse entry.

    Args:
        graph: Graph whose edge weights are capacities. Unweighted edges get
            the configured unit capacity.
        source: Source vertex.
        sink: Sink vertex.
        return_summary: If True, also return a FlowSummary with per-edge flow,
            residual capacities, the residual-reachable set and the min cut.

    Returns:
        The total flow, or ``(total_flow, summary)`` when ``return_summary``.

    Raises:
        VertexNotFound: If ``source`` or ``sink`` is absent.
        ValueError: If ``source`` and ``sink`` are the same vertex.
        NegativeWeightError: If any capacity is negative.
    """
    src_idx = graph.index_of(source)
    dst_idx = graph.index_of(sink)
    if src_idx == dst_idx:
        raise ValueError(f"Source and sink must differ, got '{source}' twice.")

    vertices = graph.vertex_objects()
    pos = {v.index: i for i, v in enumerate(vertices)}
    s, t = pos[src_idx], pos[dst_idx]

    capacity = _capacity_matrix(graph, pos)
    flow = np.zeros_like(capacity)
    total = 0
    augmentations = 0

    while True:
        visited, pred, push = _augmenting_bfs(capacity, flow, s, t)
        if not visited[t]:
            break
        add = int(push[t])
        v = t
        while v != s:
            u = int(pred[v])
            flow[u, v] += add
            flow[v, u] -= add
            v = u
        total += add
        augmentations += 1

    logger.debug(
        f"Max flow '{source}' -> '{sink}': {total} after {augmentations} augmentations"
    )
    if not return_summary:
        return total

    labels = [v.label for v in vertices]
    reachable = {labels[i] for i in np.flatnonzero(visited)}
    edge_flow: Dict[Edge, int] = {}
    residual_cap: Dict[Edge, int] = {}
    min_cut: List[Edge] = []
    for u_idx, v_idx in graph.index_view().edges():
        i, j = pos[u_idx], pos[v_idx]
        edge = (labels[i], labels[j])
        if flow[i, j] > 0:
            edge_flow[edge] = int(flow[i, j])
        residual_cap[edge] = int(capacity[i, j] - flow[i, j])
        if labels[i] in reachable and labels[j] not in reachable:
            min_cut.append(edge)

    summary = FlowSummary(
        total_flow=total,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
    )
    return total, summary
