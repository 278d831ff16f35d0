"""Breadth-first and depth-first traversal.

Traversals walk the index-keyed adjacency of a :class:`Graph` and return labels
in visitation order. Neighbors are visited in edge insertion order, so results
are deterministic for a given construction sequence.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Set, Tuple

from graphsuite.graph.store import Graph, Label, VertexIndex
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def bfs_tree(graph: Graph, start: Label) -> Tuple[List[Label], Dict[Label, Label]]:
    """Breadth-first search that also records first-discovery parents.

    Args:
        graph: Graph to traverse.
        start: Label of the start vertex.

    Returns:
        A tuple of (order, parents):
          - order: Labels in visitation order, starting with ``start``.
          - parents: Maps every reached vertex except ``start`` to the vertex
            it was first discovered from.

    Raises:
        VertexNotFound: If ``start`` is not in the graph.
    """
    src = graph.index_of(start)
    succ = graph.index_view().succ
    visited: Set[VertexIndex] = {src}
    parents: Dict[VertexIndex, VertexIndex] = {}
    order: List[VertexIndex] = []
    queue = deque([src])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in succ[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = node
                queue.append(neighbor)

    label_of = graph.label_of
    return (
        [label_of(i) for i in order],
        {label_of(child): label_of(parent) for child, parent in parents.items()},
    )


def bfs(graph: Graph, start: Label) -> List[Label]:
    """Breadth-first traversal from ``start``.

    Each vertex is enqueued at most once.

    Raises:
        VertexNotFound: If ``start`` is not in the graph.
    """
    order, _ = bfs_tree(graph, start)
    logger.debug(f"BFS from '{start}' visited {len(order)} of {len(graph)} vertices")
    return order


def dfs(graph: Graph, start: Label) -> List[Label]:
    """Recursive depth-first traversal from ``start`` in pre-order.

    Recursion depth grows with the longest simple path explored, so very deep
    graphs are bounded by the interpreter's recursion limit.

    Raises:
        VertexNotFound: If ``start`` is not in the graph.
    """
    src = graph.index_of(start)
    succ = graph.index_view().succ
    visited: Set[VertexIndex] = set()
    order: List[VertexIndex] = []

    def _visit(node: VertexIndex) -> None:
        visited.add(node)
        order.append(node)
        for neighbor in succ[node]:
            if neighbor not in visited:
                _visit(neighbor)

    _visit(src)
    logger.debug(f"DFS from '{start}' visited {len(order)} of {len(graph)} vertices")
    return [graph.label_of(i) for i in order]
