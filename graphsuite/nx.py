"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from graphsuite.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=5)
    >>> graph = from_networkx(G)
    >>> graph.weight("B", "A")
    5
    >>> to_networkx(graph)["A"]["B"]["weight"]
    5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

import networkx as nx

from graphsuite.graph.store import Graph

if TYPE_CHECKING:
    NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]
else:
    NxGraph = Any


def to_networkx(graph: Graph, weight_attr: str = "weight") -> Union[nx.Graph, nx.DiGraph]:
    """Convert a graph to a NetworkX ``DiGraph`` (directed) or ``Graph`` (undirected).

    Edge weights are written to ``weight_attr`` for weighted graphs only;
    unweighted graphs produce edges without attributes.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name for weights.

    Returns:
        A NetworkX graph with the same labels as nodes.
    """
    G: Union[nx.Graph, nx.DiGraph] = nx.DiGraph() if graph.directed else nx.Graph()
    G.add_nodes_from(graph.vertices())
    for u, v, w in graph.edges():
        if graph.weighted:
            G.add_edge(u, v, **{weight_attr: w})
        else:
            G.add_edge(u, v)
    return G


def _as_int_weight(value: Any, u: Any, v: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Edge ({u!r}, {v!r}) has non-numeric weight {value!r}.")
    if isinstance(value, int):
        return value
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Edge ({u!r}, {v!r}) has non-numeric weight {value!r}.") from None
    if not as_float.is_integer():
        raise ValueError(f"Edge ({u!r}, {v!r}) has non-integer weight {value!r}.")
    return int(as_float)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    weighted: Optional[bool] = None,
) -> Graph:
    """Build a graph from a NetworkX graph.

    Node names are converted with ``str``. Parallel edges of multigraphs
    collapse into one edge; the last one seen wins.

    Args:
        G: NetworkX graph (``Graph``, ``DiGraph`` or their multigraph variants).
        weight_attr: Edge attribute holding integer weights.
        weighted: Force the weighted flag. By default the result is weighted
            when every edge carries ``weight_attr`` (and the graph has edges).

    Returns:
        Graph: Directed exactly when ``G`` is directed.

    Raises:
        ValueError: If a weight is missing on a weighted conversion or is not
            an integer.
    """
    edge_data = list(G.edges(data=True))
    if weighted is None:
        weighted = bool(edge_data) and all(weight_attr in d for _, _, d in edge_data)

    graph = Graph(directed=G.is_directed(), weighted=weighted)
    for node in G.nodes:
        graph.add_vertex(str(node))
    for u, v, data in edge_data:
        if weighted:
            if weight_attr not in data:
                raise ValueError(f"Edge ({u!r}, {v!r}) has no '{weight_attr}' attribute.")
            graph.add_edge(str(u), str(v), _as_int_weight(data[weight_attr], u, v))
        else:
            graph.add_edge(str(u), str(v))
    return graph
