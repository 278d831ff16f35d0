"""Error types raised by the graph store, the algorithms and the serializer.

Every error derives from :class:`GraphError`, so callers that only need to
know that a graph operation failed can catch the base class.
"""

from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """Base class for all graphsuite errors."""


class ValidationError(GraphError):
    """Serialized graph header is missing or not one of the recognized tokens."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class ParseError(GraphError):
    """Serialized edge line could not be parsed (e.g. non-integer weight)."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class VertexNotFound(GraphError, KeyError):
    """An operation referenced a label that is not in the graph."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Vertex '{label}' does not exist.")

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes
        return str(self.args[0])


class Disconnected(GraphError):
    """The graph is not connected from the requested start vertex."""


class NegativeCycleDetected(GraphError):
    """A negative-weight cycle makes shortest distances undefined."""


class NoPathFound(GraphError):
    """The target cannot be reached from the source."""


class NegativeWeightError(GraphError):
    """An algorithm that requires non-negative weights found a negative one."""


class GraphKindError(GraphError):
    """The operation is not defined for this kind of graph (directed/undirected)."""
