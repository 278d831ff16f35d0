"""Tests for Edmonds-Karp maximum flow."""

from __future__ import annotations

from collections import defaultdict

import networkx as nx
import pytest

from graphsuite.algorithms import FlowSummary, max_flow
from graphsuite.exceptions import NegativeWeightError, VertexNotFound
from graphsuite.graph import Graph
from graphsuite.nx import to_networkx


@pytest.fixture
def clrs() -> Graph:
    g = Graph(directed=True)
    edges = [
        ("s", "v1", 16), ("s", "v2", 13), ("v1", "v3", 12), ("v2", "v1", 4),
        ("v2", "v4", 14), ("v3", "v2", 9), ("v3", "t", 20), ("v4", "v3", 7),
        ("v4", "t", 4),
    ]
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


class TestMaxFlowValue:
    def test_diamond(self, diamond):
        assert max_flow(diamond, "S", "T") == 4

    def test_textbook_network(self, clrs):
        assert max_flow(clrs, "s", "t") == 23

    def test_matches_networkx(self, clrs):
        G = to_networkx(clrs)
        assert max_flow(clrs, "s", "t") == nx.maximum_flow_value(G, "s", "t", capacity="weight")

    def test_unweighted_edges_have_unit_capacity(self):
        g = Graph.complete(["A", "B", "C", "D"])
        assert max_flow(g, "A", "B") == 3

    def test_undirected_edges_carry_flow_both_ways(self, path3):
        assert max_flow(path3, "A", "C") == 1
        assert max_flow(path3, "C", "A") == 1

    def test_no_path_gives_zero(self, directed_chain):
        assert max_flow(directed_chain, "D", "A") == 0

    def test_input_not_modified(self, diamond):
        before = diamond.copy()
        max_flow(diamond, "S", "T", return_summary=True)
        assert diamond == before


class TestMaxFlowSummary:
    def test_summary_fields(self, diamond):
        total, summary = max_flow(diamond, "S", "T", return_summary=True)
        assert isinstance(summary, FlowSummary)
        assert total == summary.total_flow == 4
        assert summary.edge_flow == {
            ("S", "A"): 2,
            ("S", "B"): 2,
            ("A", "T"): 2,
            ("B", "T"): 2,
        }
        assert summary.residual_cap == {
            ("S", "A"): 1,
            ("S", "B"): 0,
            ("A", "T"): 0,
            ("B", "T"): 1,
        }
        assert summary.reachable == {"S", "A"}
        assert sorted(summary.min_cut) == [("A", "T"), ("S", "B")]

    def test_min_cut_capacity_equals_flow(self, clrs):
        total, summary = max_flow(clrs, "s", "t", return_summary=True)
        assert sum(clrs.weight(u, v) for u, v in summary.min_cut) == total
        assert "s" in summary.reachable
        assert "t" not in summary.reachable

    def test_flow_is_conserved(self, clrs):
        _, summary = max_flow(clrs, "s", "t", return_summary=True)
        balance = defaultdict(int)
        for (u, v), f in summary.edge_flow.items():
            assert 0 < f <= clrs.weight(u, v)
            balance[u] -= f
            balance[v] += f
        assert balance["s"] == -23
        assert balance["t"] == 23
        assert all(balance[v] == 0 for v in clrs if v not in ("s", "t"))


class TestMaxFlowErrors:
    def test_source_equals_sink(self, diamond):
        with pytest.raises(ValueError):
            max_flow(diamond, "S", "S")

    def test_negative_capacity(self, negative_cycle):
        with pytest.raises(NegativeWeightError):
            max_flow(negative_cycle, "A", "D")

    def test_missing_vertex(self, diamond):
        with pytest.raises(VertexNotFound):
            max_flow(diamond, "S", "Z")
