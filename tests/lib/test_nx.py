"""Tests for NetworkX conversion."""

from __future__ import annotations

import networkx as nx
import pytest

from graphsuite.graph import Graph
from graphsuite.nx import from_networkx, to_networkx


class TestToNetworkx:
    def test_directed_weighted(self, diamond):
        G = to_networkx(diamond)
        assert isinstance(G, nx.DiGraph)
        assert set(G.nodes) == {"S", "A", "B", "T"}
        assert G["S"]["A"]["weight"] == 3
        assert G.number_of_edges() == 4

    def test_undirected(self, triangle):
        G = to_networkx(triangle)
        assert not G.is_directed()
        assert G.number_of_edges() == 3
        assert G["C"]["B"]["weight"] == 1

    def test_unweighted_has_no_weight_attr(self, two_paths):
        G = to_networkx(two_paths)
        assert all("weight" not in d for _, _, d in G.edges(data=True))

    def test_custom_weight_attr(self, diamond):
        G = to_networkx(diamond, weight_attr="capacity")
        assert G["B"]["T"]["capacity"] == 3

    def test_isolated_vertex_kept(self):
        g = Graph()
        g.add_vertex("A")
        assert list(to_networkx(g).nodes) == ["A"]


class TestFromNetworkx:
    def test_infers_weighted(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=5)
        g = from_networkx(G)
        assert not g.directed
        assert g.weighted
        assert g.weight("B", "A") == 5

    def test_infers_unweighted(self):
        G = nx.DiGraph()
        G.add_edge(1, 2)
        g = from_networkx(G)
        assert g.directed
        assert not g.weighted
        assert g.vertices() == ["1", "2"]
        assert g.weight("1", "2") == -1

    def test_integral_float_weights_accepted(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=4.0)
        assert from_networkx(G).weight("A", "B") == 4

    def test_fractional_weight_rejected(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=0.5)
        with pytest.raises(ValueError, match="non-integer"):
            from_networkx(G)

    def test_forced_weighted_needs_attr(self):
        G = nx.DiGraph()
        G.add_edge("A", "B")
        with pytest.raises(ValueError, match="no 'weight' attribute"):
            from_networkx(G, weighted=True)

    def test_multigraph_collapses_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", weight=1)
        G.add_edge("A", "B", weight=2)
        g = from_networkx(G)
        assert g.number_of_edges() == 1
        assert g.weight("A", "B") == 2

    def test_round_trip(self, triangle, diamond, two_paths):
        for g in (triangle, diamond, two_paths):
            assert from_networkx(to_networkx(g), weighted=g.weighted) == g
