"""Shared graph fixtures.

Drawings use ``(w)`` for edge weights. Undirected fixtures are stored with
both mirrored entries by the graph itself.
"""

from __future__ import annotations

import pytest

from graphsuite.graph import Graph


@pytest.fixture
def path3() -> Graph:
    #    (1)   (2)
    #  A ─── B ─── C
    g = Graph(directed=False, weighted=True)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    return g


@pytest.fixture
def triangle() -> Graph:
    #       (4)
    #    A ───── B
    #     \     /
    #   (7) \ / (1)
    #        C
    g = Graph(directed=False, weighted=True)
    g.add_edge("A", "B", 4)
    g.add_edge("B", "C", 1)
    g.add_edge("A", "C", 7)
    return g


@pytest.fixture
def diamond() -> Graph:
    #        (3)  A  (2)
    #     S ──►        ──► T
    #        (2)  B  (3)
    g = Graph(directed=True, weighted=True)
    g.add_edge("S", "A", 3)
    g.add_edge("S", "B", 2)
    g.add_edge("A", "T", 2)
    g.add_edge("B", "T", 3)
    return g


@pytest.fixture
def directed_chain() -> Graph:
    # A ──► B ──► C ──► D, plus A ──► C
    g = Graph(directed=True, weighted=True)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("A", "C", 5)
    return g


@pytest.fixture
def two_paths() -> Graph:
    # A ─ B    C ─ D ─ E   (unweighted forest)
    g = Graph(directed=False, weighted=False)
    g.add_edge("A", "B")
    g.add_edge("C", "D")
    g.add_edge("D", "E")
    return g


@pytest.fixture
def negative_cycle() -> Graph:
    # A ──(1)──► B ──(-3)──► C ──(1)──► A, plus C ──(2)──► D
    g = Graph(directed=True, weighted=True)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", -3)
    g.add_edge("C", "A", 1)
    g.add_edge("C", "D", 2)
    return g
