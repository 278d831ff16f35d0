"""Single-source shortest paths with Dijkstra, plus eccentricity and radius.

Notes:
    Dijkstra requires non-negative edge costs. A negative weight anywhere in
    the graph is reported before the search starts rather than producing
    distances that depend on visiting order. Unweighted graphs use the
    configured unit cost per edge.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from graphsuite.algorithms.base import Cost
from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import NegativeWeightError
from graphsuite.graph.store import Graph, Label, VertexIndex
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def dijkstra(graph: Graph, source: Label) -> Dict[Label, Optional[Cost]]:
    """Compute shortest distances from ``source`` to every vertex.

    Repeatedly settles the unvisited vertex with the smallest tentative
    distance and relaxes its outgoing edges, until no unvisited vertex has a
    finite tentative distance. Ties are broken by vertex insertion order.

    Args:
        graph: Graph with non-negative weights.
        source: Start vertex.

    Returns:
        Maps every label to its shortest distance from ``source``, or None if
        the vertex is unreachable. ``source`` maps to 0.

    Raises:
        VertexNotFound: If ``source`` is not in the graph.
        NegativeWeightError: If any edge has a negative weight.
    """
    src = graph.index_of(source)
    if graph.has_negative_weight():
        raise NegativeWeightError("Dijkstra requires non-negative edge weights.")

    succ = graph.index_view().succ
    weighted = graph.weighted
    costs: Dict[VertexIndex, Cost] = {src: 0}
    settled: Set[VertexIndex] = set()
    min_pq: List[Tuple[Cost, VertexIndex]] = [(0, src)]

    while min_pq:
        current_cost, node = heappop(min_pq)
        if node in settled or current_cost > costs[node]:
            continue
        settled.add(node)
        for neighbor, attr in succ[node].items():
            if neighbor in settled:
                continue
            new_cost = current_cost + GRAPH_CONFIG.edge_cost(weighted, attr["weight"])
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                heappush(min_pq, (new_cost, neighbor))

    logger.debug(f"Dijkstra from '{source}' settled {len(settled)} of {len(graph)} vertices")
    return {v.label: costs.get(v.index) for v in graph.vertex_objects()}


def eccentricity(graph: Graph, label: Label) -> Optional[Cost]:
    """Return the greatest shortest distance from ``label`` to any other vertex.

    Returns:
        The eccentricity, 0 for a graph with a single vertex, or None when
        some vertex cannot be reached from ``label``.

    Raises:
        VertexNotFound: If ``label`` is not in the graph.
        NegativeWeightError: If any edge has a negative weight.
    """
    distances = dijkstra(graph, label)
    others = [d for other, d in distances.items() if other != label]
    if any(d is None for d in others):
        return None
    return max(others, default=0)


def radius(graph: Graph) -> Optional[Cost]:
    """Return the graph radius: the smallest eccentricity over all vertices.

    Returns:
        The radius, or None when no vertex reaches every other vertex.

    Raises:
        ValueError: If the graph has no vertices.
        NegativeWeightError: If any edge has a negative weight.
    """
    if len(graph) == 0:
        raise ValueError("Radius is undefined for an empty graph.")
    finite = [
        e for e in (eccentricity(graph, label) for label in graph.vertices()) if e is not None
    ]
    return min(finite) if finite else None
