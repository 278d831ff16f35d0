"""Tests for Prim's minimum spanning tree."""

from __future__ import annotations

import networkx as nx
import pytest

from graphsuite.algorithms import Classification, classify_tree_or_forest, prim
from graphsuite.exceptions import Disconnected, VertexNotFound
from graphsuite.graph import Graph
from graphsuite.nx import to_networkx


def _total_weight(tree: Graph) -> int:
    # every undirected edge is stored twice
    return sum(w for _, _, w in tree.edges()) // 2


def test_triangle(triangle):
    tree = prim(triangle, "A")
    assert not tree.directed
    assert tree.weighted
    assert tree.vertices() == ["A", "B", "C"]
    assert tree.weight("A", "B") == 4
    assert tree.weight("B", "C") == 1
    assert not tree.has_edge("A", "C")
    assert _total_weight(tree) == 5


def test_spanning_tree_shape(triangle):
    tree = prim(triangle, "C")
    assert tree.number_of_edges() // 2 == len(triangle) - 1
    assert classify_tree_or_forest(tree) is Classification.TREE


def test_start_vertex_does_not_change_total(triangle):
    assert {_total_weight(prim(triangle, s)) for s in triangle} == {5}


def test_directed_input_uses_both_directions(directed_chain):
    tree = prim(directed_chain, "A")
    assert not tree.directed
    assert _total_weight(tree) == 3
    assert tree.has_edge("D", "C")


def test_unweighted_input():
    tree = prim(Graph.complete(["A", "B", "C", "D"]), "A")
    assert not tree.weighted
    assert tree.number_of_edges() == 6
    assert classify_tree_or_forest(tree) is Classification.TREE


def test_single_vertex():
    g = Graph()
    g.add_vertex("A")
    tree = prim(g, "A")
    assert tree.vertices() == ["A"]
    assert tree.number_of_edges() == 0


def test_disconnected(two_paths):
    with pytest.raises(Disconnected):
        prim(two_paths, "A")


def test_unreachable_in_directed_graph(directed_chain):
    with pytest.raises(Disconnected):
        prim(directed_chain, "D")


def test_missing_start(triangle):
    with pytest.raises(VertexNotFound):
        prim(triangle, "Z")


def test_input_not_modified(triangle):
    before = triangle.copy()
    prim(triangle, "A")
    assert triangle == before


def test_total_matches_networkx():
    g = Graph(directed=False)
    edges = [
        ("A", "B", 2), ("A", "D", 6), ("B", "C", 3), ("B", "D", 8),
        ("B", "E", 5), ("C", "E", 7), ("D", "E", 9),
    ]
    for u, v, w in edges:
        g.add_edge(u, v, w)
    expected = nx.minimum_spanning_tree(to_networkx(g)).size(weight="weight")
    assert _total_weight(prim(g, "A")) == expected == 16
