"""Types and data structures for algorithm results.

Defines immutable result containers returned by the algorithms. The CLI and
other callers render these; the algorithms never print.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from graphsuite.algorithms.base import Cost
from graphsuite.exceptions import VertexNotFound
from graphsuite.graph.store import Label

# Directed adjacency entry: (source_label, target_label)
Edge = Tuple[Label, Label]


@dataclass(frozen=True)
class ShortestPath:
    """Shortest distance and path between a source/target pair.

    Attributes:
        source: Path start label.
        target: Path end label.
        distance: Total cost of ``path``.
        path: Labels from ``source`` to ``target`` inclusive.
    """

    source: Label
    target: Label
    distance: Cost
    path: List[Label]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of max-flow computation results.

    Captures edge flows, residual capacities, reachable set, and min-cut.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Positive net flow per stored edge, indexed by ``(src, dst)``.
        residual_cap: Remaining capacity per stored edge after placement.
        reachable: Vertices reachable from the source in the residual graph.
        min_cut: Saturated edges crossing from ``reachable`` to the rest.
    """

    total_flow: int
    edge_flow: Dict[Edge, int]
    residual_cap: Dict[Edge, int]
    reachable: Set[Label]
    min_cut: List[Edge]


@dataclass(frozen=True, eq=False)
class AllPairsResult:
    """All-pairs shortest distances with a path-reconstruction matrix.

    Row/column ``i`` of both matrices refers to ``labels[i]``. Instances compare and
    hash by identity.

    Attributes:
        labels: Vertex labels in matrix order.
        dist: Float matrix of shortest distances; ``inf`` when unreachable.
        pred: Integer matrix; ``pred[i, j]`` is the position of the vertex
            preceding ``j`` on the best ``i -> j`` path, or -1 if there is none.
    """

    labels: Tuple[Label, ...]
    dist: np.ndarray = field(repr=False)
    pred: np.ndarray = field(repr=False)

    def _pos(self, label: Label) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise VertexNotFound(label) from None

    def distance(self, source: Label, target: Label) -> Optional[Cost]:
        """Return the shortest distance, or None if ``target`` is unreachable."""
        value = self.dist[self._pos(source), self._pos(target)]
        if np.isinf(value):
            return None
        return int(value)

    def path(self, source: Label, target: Label) -> Optional[List[Label]]:
        """Return the shortest path as labels, or None if ``target`` is unreachable."""
        i = self._pos(source)
        j = self._pos(target)
        if i == j:
            return [source]
        if self.pred[i, j] < 0:
            return None
        return [self.labels[k] for k in self._unwind(i, j)]

    def _unwind(self, i: int, j: int) -> List[int]:
        prev = int(self.pred[i, j])
        if prev == i:
            return [i, j]
        return self._unwind(i, prev) + [j]

    def to_dict(self) -> Dict[Label, Dict[Label, Optional[Cost]]]:
        """Return ``{source: {target: distance or None}}`` for every pair."""
        return {
            u: {v: self.distance(u, v) for v in self.labels} for u in self.labels
        }
