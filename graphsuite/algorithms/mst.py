"""Minimum spanning tree with Prim's algorithm."""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from graphsuite.algorithms.base import Cost
from graphsuite.algorithms.traversal import bfs
from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import Disconnected
from graphsuite.graph.store import Graph, Label, Weight
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def _crossing_candidates(graph: Graph) -> Dict[Label, Dict[Label, Weight]]:
    """Return ``{u: {v: weight}}`` over both stored directions of every edge.

    When a directed graph stores both ``u -> v`` and ``v -> u`` the lighter
    weight wins.
    """
    candidates: Dict[Label, Dict[Label, Weight]] = {u: {} for u in graph.vertices()}
    for u, v, w in graph.edges():
        if u == v:
            continue
        for a, b in ((u, v), (v, u)):
            current = candidates[a].get(b)
            if current is None or w < current:
                candidates[a][b] = w
    return candidates


def prim(graph: Graph, start: Label) -> Graph:
    """Build a minimum spanning tree grown from ``start``.

    The graph must be connected from ``start`` (a BFS from it must visit every
    vertex); otherwise nothing is built. At each step the lightest edge with
    exactly one endpoint in the tree joins the tree, ties going to the
    earliest tree vertex and then its earliest neighbor.

    Args:
        graph: Graph to span.
        start: Root of the growing tree.

    Returns:
        Graph: An undirected graph with every vertex and ``V - 1`` edges. It
        is weighted exactly when ``graph`` is.

    Raises:
        VertexNotFound: If ``start`` is absent.
        Disconnected: If some vertex is unreachable from ``start``.
    """
    reached = bfs(graph, start)
    if len(reached) != len(graph):
        raise Disconnected(
            f"Graph is not connected from '{start}': "
            f"reached {len(reached)} of {len(graph)} vertices."
        )

    candidates = _crossing_candidates(graph)
    tree = Graph(directed=False, weighted=graph.weighted)
    tree.add_vertex(start)
    frontier: List[Label] = [start]
    in_tree: Set[Label] = {start}
    total: Cost = 0

    while len(frontier) < len(graph):
        best: Optional[Tuple[Cost, Label, Label, Weight]] = None
        for inside in frontier:
            for outside, weight in candidates[inside].items():
                if outside in in_tree:
                    continue
                cost = GRAPH_CONFIG.edge_cost(graph.weighted, weight)
                if best is None or cost < best[0]:
                    best = (cost, inside, outside, weight)
        # Connectivity was checked up front, so a crossing edge always exists
        assert best is not None
        cost, inside, outside, weight = best
        tree.add_edge(inside, outside, weight if graph.weighted else None)
        frontier.append(outside)
        in_tree.add(outside)
        total += cost

    logger.debug(f"Prim from '{start}': {len(graph) - 1} edges, total weight {total}")
    return tree
