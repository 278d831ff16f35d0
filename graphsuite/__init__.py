"""graphsuite: labelled graphs and classic graph algorithms.

graphsuite stores directed or undirected, weighted or unweighted graphs over
string-labelled vertices and runs traversal, shortest-path, spanning-tree,
structural and max-flow algorithms over them.

Primary API:
    Graph - Labelled graph store
    load_graph() / save_graph() - Flat text file format
    bfs(), dfs(), dijkstra(), floyd_warshall(), bellman_ford(), prim(),
    max_flow(), ... - Algorithms returning plain result values
    GuardedGraph - Lock-guarded handle for sharing a graph between threads

Example:
    from graphsuite import Graph, dijkstra, prim

    g = Graph(directed=False, weighted=True)
    g.add_edge("A", "B", 4)
    g.add_edge("B", "C", 1)
    g.add_edge("A", "C", 7)

    dijkstra(g, "A")          # {"A": 0, "B": 4, "C": 5}
    prim(g, "A").weight("A", "B")  # 4
"""

from __future__ import annotations

from graphsuite import cli, logging
from graphsuite._version import __version__
from graphsuite.algorithms import (
    AllPairsResult,
    Classification,
    FlowSummary,
    ShortestPath,
    bellman_ford,
    bfs,
    classify_tree_or_forest,
    dfs,
    dijkstra,
    eccentricity,
    floyd_warshall,
    max_flow,
    non_adjacent_vertices,
    odd_degree_vertices,
    path_avoiding,
    prim,
    prune_odd_degree_vertices,
    radius,
)
from graphsuite.config import GRAPH_CONFIG, GraphConfig
from graphsuite.exceptions import (
    Disconnected,
    GraphError,
    GraphKindError,
    NegativeCycleDetected,
    NegativeWeightError,
    NoPathFound,
    ParseError,
    ValidationError,
    VertexNotFound,
)
from graphsuite.graph import Graph, Vertex
from graphsuite.guard import GuardedGraph
from graphsuite.io import graph_to_lines, load_graph, read_graph, save_graph, write_graph
from graphsuite.nx import from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Store
    "Graph",
    "Vertex",
    "GuardedGraph",
    # Algorithms
    "bfs",
    "dfs",
    "non_adjacent_vertices",
    "odd_degree_vertices",
    "prune_odd_degree_vertices",
    "path_avoiding",
    "classify_tree_or_forest",
    "dijkstra",
    "eccentricity",
    "radius",
    "floyd_warshall",
    "bellman_ford",
    "prim",
    "max_flow",
    # Result types
    "AllPairsResult",
    "Classification",
    "FlowSummary",
    "ShortestPath",
    # Errors
    "GraphError",
    "ValidationError",
    "ParseError",
    "VertexNotFound",
    "Disconnected",
    "NegativeCycleDetected",
    "NoPathFound",
    "NegativeWeightError",
    "GraphKindError",
    # Serialization
    "read_graph",
    "load_graph",
    "graph_to_lines",
    "write_graph",
    "save_graph",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Configuration and utilities
    "GRAPH_CONFIG",
    "GraphConfig",
    "cli",
    "logging",
]
