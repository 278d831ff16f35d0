"""Configuration classes for graphsuite components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Numeric conventions shared by the graph store and the algorithms."""

    # Weight stored on every edge of an unweighted graph
    unweighted_sentinel: int = -1

    # Cost of one edge of an unweighted graph in shortest-path searches
    unweighted_cost: int = 1

    # Capacity of one edge of an unweighted graph in max-flow computations
    unweighted_capacity: int = 1

    # Text encoding of serialized graph files
    encoding: str = "utf-8"

    def edge_cost(self, weighted: bool, weight: int) -> int:
        """Return the traversal cost of an edge with the given stored weight."""
        return weight if weighted else self.unweighted_cost

    def edge_capacity(self, weighted: bool, weight: int) -> int:
        """Return the flow capacity of an edge with the given stored weight."""
        return weight if weighted else self.unweighted_capacity


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
