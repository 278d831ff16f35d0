"""Tests for structural queries: adjacency, odd-degree pruning, avoiding paths, tree/forest."""

from __future__ import annotations

import pytest

from graphsuite.algorithms import (
    Classification,
    classify_tree_or_forest,
    non_adjacent_vertices,
    odd_degree_vertices,
    path_avoiding,
    prune_odd_degree_vertices,
)
from graphsuite.exceptions import GraphKindError, NoPathFound, VertexNotFound
from graphsuite.graph import Graph


@pytest.fixture
def square() -> Graph:
    # A ─ B
    # │   │
    # D ─ C
    g = Graph(directed=False, weighted=False)
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "D")
    g.add_edge("D", "A")
    return g


class TestNonAdjacent:
    def test_outgoing_and_incoming_both_count(self, directed_chain):
        assert non_adjacent_vertices(directed_chain, "A") == ["D"]
        assert non_adjacent_vertices(directed_chain, "D") == ["A", "B"]

    def test_every_vertex_adjacent(self):
        g = Graph(directed=True)
        g.add_edge("A", "B", 1)
        g.add_edge("C", "A", 1)
        assert non_adjacent_vertices(g, "A") == []

    def test_undirected_graph_rejected(self, triangle):
        with pytest.raises(GraphKindError):
            non_adjacent_vertices(triangle, "A")

    def test_missing_vertex(self, directed_chain):
        with pytest.raises(VertexNotFound):
            non_adjacent_vertices(directed_chain, "Z")


class TestPruneOdd:
    def test_odd_degree_vertices(self, directed_chain):
        assert odd_degree_vertices(directed_chain) == ["C", "D"]

    def test_prune_returns_new_graph(self, directed_chain):
        pruned = prune_odd_degree_vertices(directed_chain)
        assert pruned.vertices() == ["A", "B"]
        assert pruned.adjacency() == {"A": {"B": 1}, "B": {}}
        # the input keeps every vertex
        assert directed_chain.vertices() == ["A", "B", "C", "D"]

    def test_single_pass(self):
        # A ─ B ─ C ─ D: only the two ends start odd
        g = Graph(directed=False, weighted=False)
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        g.add_edge("C", "D")
        pruned = prune_odd_degree_vertices(g)
        assert pruned.vertices() == ["B", "C"]
        # B and C are now odd but stay
        assert odd_degree_vertices(pruned) == ["B", "C"]

    def test_all_even_is_unchanged(self, square):
        assert prune_odd_degree_vertices(square) == square


class TestPathAvoiding:
    def test_detour(self, square):
        assert path_avoiding(square, "A", "C", "B") == ["A", "D", "C"]
        assert path_avoiding(square, "A", "C", "D") == ["A", "B", "C"]

    def test_direct_edge(self, triangle):
        assert path_avoiding(triangle, "A", "C", "B") == ["A", "C"]

    def test_path_never_contains_avoided_vertex(self, square):
        for avoid in ("B", "D"):
            assert avoid not in path_avoiding(square, "A", "C", avoid)

    def test_cut_vertex_blocks_path(self, path3):
        with pytest.raises(NoPathFound):
            path_avoiding(path3, "A", "C", "B")

    def test_avoiding_an_endpoint(self, square):
        with pytest.raises(NoPathFound):
            path_avoiding(square, "A", "C", "A")
        with pytest.raises(NoPathFound):
            path_avoiding(square, "A", "C", "C")

    def test_same_endpoints(self, square):
        assert path_avoiding(square, "A", "A", "C") == ["A"]

    def test_respects_direction(self):
        g = Graph(directed=True, weighted=False)
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        g.add_edge("C", "D")
        g.add_edge("A", "D")
        assert path_avoiding(g, "A", "C", "D") == ["A", "B", "C"]
        with pytest.raises(NoPathFound):
            path_avoiding(g, "D", "A", "B")

    def test_input_not_modified(self, square):
        before = square.copy()
        path_avoiding(square, "A", "C", "B")
        assert square == before

    def test_missing_vertex(self, square):
        with pytest.raises(VertexNotFound):
            path_avoiding(square, "A", "Z", "B")


class TestClassify:
    def test_tree(self, path3):
        assert classify_tree_or_forest(path3) is Classification.TREE

    def test_star_is_tree(self):
        g = Graph(directed=False, weighted=False)
        for leaf in ("B", "C", "D"):
            g.add_edge("A", leaf)
        assert classify_tree_or_forest(g) is Classification.TREE

    def test_forest(self, two_paths):
        assert classify_tree_or_forest(two_paths) is Classification.FOREST

    def test_isolated_vertex_makes_forest(self, path3):
        path3.add_vertex("Z")
        assert classify_tree_or_forest(path3) is Classification.FOREST

    def test_cycle_is_neither(self, triangle, square):
        assert classify_tree_or_forest(triangle) is Classification.NEITHER
        assert classify_tree_or_forest(square) is Classification.NEITHER

    def test_cycle_in_one_component_is_neither(self, two_paths):
        two_paths.add_edge("C", "E")
        assert classify_tree_or_forest(two_paths) is Classification.NEITHER

    def test_self_loop_is_neither(self):
        g = Graph(directed=False, weighted=False)
        g.add_edge("A", "B")
        g.add_edge("A", "A")
        assert classify_tree_or_forest(g) is Classification.NEITHER

    def test_directed_two_cycle_is_neither(self):
        g = Graph(directed=True, weighted=False)
        g.add_edge("A", "B")
        g.add_edge("B", "A")
        assert classify_tree_or_forest(g) is Classification.NEITHER

    def test_single_vertex_is_tree(self):
        g = Graph()
        g.add_vertex("A")
        assert classify_tree_or_forest(g) is Classification.TREE

    def test_empty_graph_is_forest(self):
        assert classify_tree_or_forest(Graph()) is Classification.FOREST

    def test_input_not_modified(self, triangle):
        before = triangle.copy()
        classify_tree_or_forest(triangle)
        assert triangle == before


class TestClassification:
    def test_from_string(self):
        assert Classification.from_string("tree") is Classification.TREE
        assert Classification.from_string("Forest") is Classification.FOREST

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Invalid classification"):
            Classification.from_string("bush")
