"""Lock-guarded access to a shared graph.

A :class:`Graph` is not safe for concurrent mutation. Callers that share one
between threads go through a :class:`GuardedGraph`, which holds a single
re-entrant lock for the duration of each operation.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar

from graphsuite.graph.store import Graph

T = TypeVar("T")


class GuardedGraph:
    """A graph handle whose operations run under one whole-structure lock.

    Example:
        >>> guarded = GuardedGraph()
        >>> guarded.run(Graph.add_edge, "A", "B", 3)
        >>> with guarded.locked() as g:
        ...     g.weight("A", "B")
        3
    """

    def __init__(self, graph: Optional[Graph] = None) -> None:
        self._graph = graph if graph is not None else Graph()
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[Graph]:
        """Hold the lock for a block and yield the underlying graph.

        The lock is released when the block exits, including by exception.
        The yielded graph must not be used after the block ends.
        """
        with self._lock:
            yield self._graph

    def run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call ``func(graph, *args, **kwargs)`` while holding the lock.

        ``func`` is any mutation method (e.g. ``Graph.add_edge``) or algorithm
        function (e.g. ``dijkstra``) taking the graph first.
        """
        with self._lock:
            return func(self._graph, *args, **kwargs)

    def snapshot(self) -> Graph:
        """Return a deep copy taken under the lock, safe to read without it."""
        with self._lock:
            return self._graph.copy()
