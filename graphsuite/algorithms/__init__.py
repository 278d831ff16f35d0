"""Graph algorithms operating on :class:`graphsuite.graph.Graph`.

Each algorithm is a plain function that takes the graph and returns a result
value. Algorithms that need to delete parts of the graph work on a copy.
"""

from graphsuite.algorithms.base import Classification, Cost
from graphsuite.algorithms.bellman_ford import bellman_ford
from graphsuite.algorithms.floyd_warshall import floyd_warshall
from graphsuite.algorithms.max_flow import max_flow
from graphsuite.algorithms.mst import prim
from graphsuite.algorithms.spf import dijkstra, eccentricity, radius
from graphsuite.algorithms.structure import (
    classify_tree_or_forest,
    non_adjacent_vertices,
    odd_degree_vertices,
    path_avoiding,
    prune_odd_degree_vertices,
)
from graphsuite.algorithms.traversal import bfs, bfs_tree, dfs
from graphsuite.algorithms.types import AllPairsResult, FlowSummary, ShortestPath

__all__ = [
    "AllPairsResult",
    "Classification",
    "Cost",
    "FlowSummary",
    "ShortestPath",
    "bellman_ford",
    "bfs",
    "bfs_tree",
    "classify_tree_or_forest",
    "dfs",
    "dijkstra",
    "eccentricity",
    "floyd_warshall",
    "max_flow",
    "non_adjacent_vertices",
    "odd_degree_vertices",
    "path_avoiding",
    "prim",
    "prune_odd_degree_vertices",
    "radius",
]
