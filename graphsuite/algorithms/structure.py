"""Structural queries: adjacency, odd-degree pruning, avoiding paths, tree/forest.

Every function here leaves the caller's graph untouched. Operations that need
to delete vertices or edges do so on a deep copy.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from graphsuite.algorithms.base import Classification, walk_predecessors
from graphsuite.algorithms.traversal import bfs_tree
from graphsuite.exceptions import GraphKindError, NoPathFound
from graphsuite.graph.store import Graph, Label
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def non_adjacent_vertices(graph: Graph, label: Label) -> List[Label]:
    """Return every other vertex with no edge to or from ``label``.

    Args:
        graph: A directed graph.
        label: The reference vertex.

    Returns:
        Labels in insertion order; empty when every vertex is adjacent.

    Raises:
        GraphKindError: If the graph is undirected.
        VertexNotFound: If ``label`` is not in the graph.
    """
    graph.get_vertex(label)
    if not graph.directed:
        raise GraphKindError("Non-adjacency queries are defined for directed graphs only.")
    outgoing = graph.neighbors(label)
    incoming = graph.predecessors(label)
    return [
        other
        for other in graph.vertices()
        if other != label and other not in outgoing and other not in incoming
    ]


def odd_degree_vertices(graph: Graph) -> List[Label]:
    """Return the labels whose degree is odd, in insertion order."""
    return [label for label in graph.vertices() if graph.degree(label) % 2 != 0]


def prune_odd_degree_vertices(graph: Graph) -> Graph:
    """Return a copy of ``graph`` without its odd-degree vertices.

    The odd set is computed once from the input degrees; degrees that turn
    odd after the removals are not pruned again.
    """
    odd = odd_degree_vertices(graph)
    pruned = graph.copy()
    for label in odd:
        pruned.remove_vertex(label)
    logger.debug(f"Pruned {len(odd)} odd-degree vertices: {odd}")
    return pruned


def path_avoiding(graph: Graph, u1: Label, u2: Label, v: Label) -> List[Label]:
    """Find a path from ``u1`` to ``u2`` that does not pass through ``v``.

    The search runs BFS on a copy of the graph with ``v`` removed, so the
    result uses the fewest edges among all such paths.

    Args:
        graph: Graph to search.
        u1: Path start.
        u2: Path end.
        v: Vertex the path must avoid.

    Returns:
        Labels from ``u1`` to ``u2`` inclusive.

    Raises:
        VertexNotFound: If any of the three labels is absent.
        NoPathFound: If no such path exists (always the case when ``v`` is
            ``u1`` or ``u2``).
    """
    for label in (u1, u2, v):
        graph.get_vertex(label)
    if v in (u1, u2):
        raise NoPathFound(f"Path endpoints '{u1}' and '{u2}' cannot avoid '{v}'.")

    work = graph.copy()
    work.remove_vertex(v)
    _, parents = bfs_tree(work, u1)
    if u2 != u1 and u2 not in parents:
        raise NoPathFound(f"No path from '{u1}' to '{u2}' avoiding '{v}'.")
    return walk_predecessors(parents, u1, u2)


def _tree_shaped_from(graph: Graph, root: Label) -> Tuple[bool, int]:
    """Run the destructive tree check rooted at ``root`` on a private copy.

    Returns:
        A tuple of (tree_shaped, reached) where ``reached`` is the number of
        vertices the DFS visited.
    """
    work = graph.copy()
    total = len(work)
    visited: List[Label] = [root]
    seen: Set[Label] = {root}
    has_cycle = False
    edge_count = 0

    def _visit(current: Label) -> None:
        nonlocal has_cycle, edge_count
        if len(visited) == total:
            return
        # Back edge to the root, or a self-loop on it
        if work.has_edge(current, root):
            has_cycle = True
        for nxt in list(work.neighbors(current)):
            if nxt in seen:
                continue
            visited.append(nxt)
            seen.add(nxt)
            work.remove_edge(current, nxt)
            if any(t in seen for t in work.neighbors(nxt)):
                has_cycle = True
            edge_count += 1
            _visit(nxt)

    _visit(root)
    tree_shaped = not has_cycle and len(visited) == edge_count + 1
    return tree_shaped, len(visited)


def classify_tree_or_forest(graph: Graph) -> Classification:
    """Classify the graph as a tree, a forest, or neither.

    Every vertex is tried as a DFS root. A root is tree-shaped when its DFS
    met no cycle and visited exactly one more vertex than it traversed edges.

    Returns:
        ``TREE`` when every root is tree-shaped and reaches every vertex,
        ``FOREST`` when every root is tree-shaped but some root does not reach
        every vertex (the empty graph is an empty forest), ``NEITHER``
        otherwise.
    """
    if len(graph) == 0:
        return Classification.FOREST

    several_components = False
    for root in graph.vertices():
        tree_shaped, reached = _tree_shaped_from(graph, root)
        if not tree_shaped:
            logger.debug(f"Component rooted at '{root}' is not tree-shaped")
            return Classification.NEITHER
        if reached != len(graph):
            several_components = True

    return Classification.FOREST if several_components else Classification.TREE
