"""Graph store primitives.

This package provides the labelled graph store `Graph` and the `Vertex`
handle it hands out.
"""

from graphsuite.graph.store import EdgeTuple, Graph, Label, Vertex, Weight

__all__ = ["EdgeTuple", "Graph", "Label", "Vertex", "Weight"]
