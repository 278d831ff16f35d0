"""Labelled graph store with directed/weighted modes.

`Graph` keeps vertices as stable integer indices in an arena, a separate
label-to-index table, and the weighted adjacency relation in a
``networkx.DiGraph`` keyed by index. Undirected graphs are stored as two
mirrored entries per logical edge; the mutation API keeps the mirror in sync.
Unweighted graphs store the sentinel weight on every edge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pickle import dumps, loads
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import VertexNotFound

Label = str
VertexIndex = int
Weight = int
EdgeTuple = Tuple[Label, Label, Weight]


@dataclass(frozen=True)
class Vertex:
    """A vertex handle.

    Equality and hashing use the label only; ``index`` is the arena slot the
    vertex occupies in the graph that created it.

    Attributes:
        label: Unique vertex label.
        index: Arena index inside the owning graph.
    """

    label: Label
    index: VertexIndex = field(compare=False)

    def __str__(self) -> str:
        return self.label


class Graph:
    """A mutable graph over string-labelled vertices.

    This class enforces:
      - Unique labels; ``add_vertex`` is idempotent.
      - No multi-edges; inserting an existing pair overwrites its weight.
      - Symmetric adjacency (same weight both ways) for undirected graphs.
      - The unweighted sentinel weight on every edge of an unweighted graph.
      - Removing a vertex removes every incident edge.

    Removal of absent vertices or edges is a no-op rather than an error.
    """

    def __init__(self, directed: bool = True, weighted: bool = True) -> None:
        """Initialize an empty graph.

        Args:
            directed: Whether edges are one-way.
            weighted: Whether edges carry real integer weights.
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._adj = nx.DiGraph()
        self._index: Dict[Label, VertexIndex] = {}
        # Arena indices only advance; removed vertices do not free their slot.
        self._next_index: VertexIndex = 0

    #
    # Constructors
    #
    @classmethod
    def complete(cls, labels: Iterable[Label]) -> Graph:
        """Build an undirected, unweighted complete graph without self-loops.

        Args:
            labels: Vertex labels; duplicates collapse into one vertex.

        Returns:
            Graph: A graph where every pair of distinct vertices is adjacent.
        """
        graph = cls(directed=False, weighted=False)
        names: List[Label] = []
        for label in labels:
            if label not in graph:
                graph.add_vertex(label)
                names.append(label)
        for i, u in enumerate(names):
            for v in names[i + 1 :]:
                graph.add_edge(u, v)
        return graph

    def copy(self) -> Graph:
        """Return a deep copy of this graph (pickle based).

        Returns:
            Graph: An independent graph with the same flags, vertices and edges.
        """
        return loads(dumps(self))

    #
    # Flags
    #
    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    #
    # Vertex management
    #
    def add_vertex(self, label: Label) -> Vertex:
        """Add a vertex, or return the existing one with the same label.

        Args:
            label: The vertex label.

        Returns:
            Vertex: The vertex registered under ``label``.

        Raises:
            TypeError: If ``label`` is not a string.
        """
        if not isinstance(label, str):
            raise TypeError(f"Vertex label must be a string, got {type(label).__name__}.")
        existing = self._index.get(label)
        if existing is not None:
            return Vertex(label, existing)
        idx = self._next_index
        self._next_index += 1
        self._index[label] = idx
        self._adj.add_node(idx, label=label)
        return Vertex(label, idx)

    def remove_vertex(self, label: Label) -> None:
        """Remove a vertex and every edge where it appears as an endpoint.

        Does nothing if the vertex does not exist.

        Args:
            label: The vertex label.
        """
        idx = self._index.pop(label, None)
        if idx is None:
            return
        # DiGraph.remove_node drops both incoming and outgoing entries
        self._adj.remove_node(idx)

    def lookup(self, label: Label) -> Optional[Vertex]:
        """Return the vertex with ``label``, or None if it is absent."""
        idx = self._index.get(label)
        if idx is None:
            return None
        return Vertex(label, idx)

    def get_vertex(self, label: Label) -> Vertex:
        """Return the vertex with ``label``.

        Raises:
            VertexNotFound: If the label is not in the graph.
        """
        vertex = self.lookup(label)
        if vertex is None:
            raise VertexNotFound(label)
        return vertex

    def index_of(self, label: Label) -> VertexIndex:
        """Return the arena index of ``label``.

        Raises:
            VertexNotFound: If the label is not in the graph.
        """
        try:
            return self._index[label]
        except KeyError:
            raise VertexNotFound(label) from None

    def label_of(self, idx: VertexIndex) -> Label:
        """Return the label stored at arena index ``idx``."""
        return self._adj.nodes[idx]["label"]

    #
    # Edge management
    #
    def add_edge(self, label1: Label, label2: Label, weight: Optional[Weight] = None) -> None:
        """Add or overwrite the edge ``label1 -> label2``.

        Missing vertices are created. On undirected graphs the mirrored entry
        ``label2 -> label1`` is written with the same weight. On unweighted
        graphs ``weight`` is ignored and the sentinel is stored.

        Args:
            label1: Source vertex label.
            label2: Target vertex label.
            weight: Integer edge weight; required on weighted graphs.

        Raises:
            ValueError: If the graph is weighted and no weight is given.
            TypeError: If the weight is not an integer.
        """
        if self._weighted:
            if weight is None:
                raise ValueError(
                    f"Edge '{label1}' -> '{label2}' needs a weight in a weighted graph."
                )
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise TypeError(f"Edge weight must be an integer, got {weight!r}.")
            stored = weight
        else:
            stored = GRAPH_CONFIG.unweighted_sentinel

        u = self.add_vertex(label1).index
        v = self.add_vertex(label2).index
        self._adj.add_edge(u, v, weight=stored)
        if not self._directed:
            self._adj.add_edge(v, u, weight=stored)

    def remove_edge(self, label1: Label, label2: Label) -> None:
        """Remove the edge ``label1 -> label2`` (and its mirror if undirected).

        Does nothing if either vertex or the edge is missing.
        """
        u = self._index.get(label1)
        v = self._index.get(label2)
        if u is None or v is None:
            return
        if self._adj.has_edge(u, v):
            self._adj.remove_edge(u, v)
        if not self._directed and self._adj.has_edge(v, u):
            self._adj.remove_edge(v, u)

    def has_edge(self, label1: Label, label2: Label) -> bool:
        u = self._index.get(label1)
        v = self._index.get(label2)
        if u is None or v is None:
            return False
        return self._adj.has_edge(u, v)

    def weight(self, label1: Label, label2: Label) -> Optional[Weight]:
        """Return the stored weight of ``label1 -> label2``, or None if absent."""
        if not self.has_edge(label1, label2):
            return None
        return self._adj[self._index[label1]][self._index[label2]]["weight"]

    #
    # Degree queries
    #
    def degree(self, label: Label) -> int:
        """Return the number of edges incident to ``label``.

        Directed graphs count incoming and outgoing edges, with a self-loop
        counted once. Undirected graphs count stored outgoing entries, which
        equals the total by symmetry.

        Raises:
            VertexNotFound: If the label is not in the graph.
        """
        idx = self.index_of(label)
        if not self._directed:
            return self._adj.out_degree(idx)
        count = self._adj.out_degree(idx) + self._adj.in_degree(idx)
        if self._adj.has_edge(idx, idx):
            count -= 1
        return count

    def in_degree(self, label: Label) -> int:
        """Return the number of vertices with an edge pointing at ``label``.

        Raises:
            VertexNotFound: If the label is not in the graph.
        """
        return self._adj.in_degree(self.index_of(label))

    #
    # Read helpers
    #
    def vertices(self) -> List[Label]:
        """Return all labels in insertion order."""
        return list(self._index)

    def vertex_objects(self) -> List[Vertex]:
        return [Vertex(label, idx) for label, idx in self._index.items()]

    def neighbors(self, label: Label) -> Dict[Label, Weight]:
        """Return the outgoing adjacency mapping ``{neighbor: weight}`` of ``label``.

        Raises:
            VertexNotFound: If the label is not in the graph.
        """
        idx = self.index_of(label)
        return {
            self.label_of(nbr): attr["weight"] for nbr, attr in self._adj.succ[idx].items()
        }

    def predecessors(self, label: Label) -> Dict[Label, Weight]:
        """Return the incoming adjacency mapping ``{neighbor: weight}`` of ``label``."""
        idx = self.index_of(label)
        return {
            self.label_of(nbr): attr["weight"] for nbr, attr in self._adj.pred[idx].items()
        }

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield every stored adjacency entry as ``(u, v, weight)``.

        Undirected graphs yield both mirrored entries of each logical edge.
        """
        for u, v, w in self._adj.edges(data="weight"):
            yield self.label_of(u), self.label_of(v), w

    def adjacency(self) -> Dict[Label, Dict[Label, Weight]]:
        """Return a plain nested-dict snapshot of the adjacency relation."""
        return {label: self.neighbors(label) for label in self._index}

    def number_of_vertices(self) -> int:
        return len(self._index)

    def number_of_edges(self) -> int:
        """Return the number of stored adjacency entries."""
        return self._adj.number_of_edges()

    def has_negative_weight(self) -> bool:
        """Return True if a weighted graph stores any negative weight."""
        if not self._weighted:
            return False
        return any(w < 0 for _, _, w in self._adj.edges(data="weight"))

    def index_view(self) -> nx.DiGraph:
        """Return the underlying index-keyed adjacency (read-only view).

        Algorithms use this to walk the graph by arena index without label
        translation on every step.
        """
        return self._adj.copy(as_view=True)

    #
    # Dunder helpers
    #
    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Label]:
        return iter(list(self._index))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._directed == other._directed
            and self._weighted == other._weighted
            and self.adjacency() == other.adjacency()
        )

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        weights = "weighted" if self._weighted else "unweighted"
        return (
            f"Graph({kind}, {weights}, vertices={len(self._index)}, "
            f"entries={self._adj.number_of_edges()})"
        )
