"""Reading and writing graphs in the flat text format.

Format::

    oriented|unoriented
    suspended|unsuspended
    <label1> <label2> <integer-weight>
    ...

Line 1 selects directed/undirected, line 2 weighted/unweighted. Every later
line is one stored adjacency entry, so an undirected edge appears twice.
Unweighted graphs always write ``-1`` as the weight.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Tuple, Union

from graphsuite.config import GRAPH_CONFIG
from graphsuite.exceptions import ParseError, ValidationError
from graphsuite.graph.store import Graph
from graphsuite.logging import get_logger

logger = get_logger(__name__)

DIRECTED_TOKENS = {"oriented": True, "unoriented": False}
WEIGHTED_TOKENS = {"suspended": True, "unsuspended": False}

PathLike = Union[str, Path]


def _header_flag(token: str, choices: dict, line_no: int, what: str) -> bool:
    try:
        return choices[token]
    except KeyError:
        valid = ", ".join(repr(c) for c in choices)
        raise ValidationError(
            f"Invalid {what} token {token!r}; expected one of {valid}.", line_no
        ) from None


def _parse_edge(line: str, line_no: int) -> Tuple[str, str, int]:
    tokens = line.split()
    if len(tokens) != 3:
        raise ParseError(
            f"Expected '<label1> <label2> <weight>', got {len(tokens)} fields: {line!r}.",
            line_no,
        )
    label1, label2, raw_weight = tokens
    try:
        weight = int(raw_weight)
    except ValueError:
        raise ParseError(f"Weight {raw_weight!r} is not an integer.", line_no) from None
    return label1, label2, weight


def read_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from lines in the flat text format.

    Blank lines are skipped. Edges of an unweighted graph ignore the weight
    field, though it must still be an integer.

    Args:
        lines: Text lines, with or without trailing newlines.

    Returns:
        Graph: The parsed graph.

    Raises:
        ValidationError: If a header line is missing or unrecognized.
        ParseError: If an edge line is malformed or its weight is not an integer.
    """
    numbered = (
        (line_no, line.strip())
        for line_no, line in enumerate(lines, start=1)
    )
    content = ((n, line) for n, line in numbered if line)

    header: List[Tuple[int, str]] = []
    for item in content:
        header.append(item)
        if len(header) == 2:
            break
    if len(header) < 2:
        raise ValidationError("Missing header: expected orientation and weighting lines.")

    directed = _header_flag(header[0][1], DIRECTED_TOKENS, header[0][0], "orientation")
    weighted = _header_flag(header[1][1], WEIGHTED_TOKENS, header[1][0], "weighting")
    graph = Graph(directed=directed, weighted=weighted)

    for line_no, line in content:
        label1, label2, weight = _parse_edge(line, line_no)
        graph.add_edge(label1, label2, weight)

    logger.debug(f"Read {graph!r}")
    return graph


def load_graph(path: PathLike) -> Graph:
    """Read a graph file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValidationError: If a header line is missing or unrecognized.
        ParseError: If an edge line is malformed.
    """
    with open(path, "r", encoding=GRAPH_CONFIG.encoding) as fh:
        graph = read_graph(fh)
    logger.info(f"Loaded graph from {path}: {graph.number_of_vertices()} vertices")
    return graph


def _check_label(label: str) -> None:
    if label.split() != [label]:
        raise ValidationError(
            f"Vertex {label!r} cannot be written: labels must be non-empty and "
            f"contain no whitespace."
        )


def graph_to_lines(graph: Graph) -> List[str]:
    """Convert a graph into lines of the flat text format (without newlines).

    Vertices with no incident edge have no line of their own and are not
    represented.

    Raises:
        ValidationError: If a label is empty or contains whitespace, since
            such a line could not be read back.
    """
    lines = [
        "oriented" if graph.directed else "unoriented",
        "suspended" if graph.weighted else "unsuspended",
    ]
    for u, v, w in graph.edges():
        _check_label(u)
        _check_label(v)
        weight = w if graph.weighted else GRAPH_CONFIG.unweighted_sentinel
        lines.append(f"{u} {v} {weight}")
    return lines


def write_graph(graph: Graph, stream: IO[str]) -> None:
    """Write a graph to an open text stream."""
    _write_lines(graph_to_lines(graph), stream)


def _write_lines(lines: List[str], stream: IO[str]) -> None:
    for line in lines:
        stream.write(line + "\n")


def save_graph(graph: Graph, path: PathLike) -> None:
    """Write a graph to ``path``, replacing any existing file.

    Labels are checked before the file is opened, so an unwritable graph
    leaves any existing file untouched.

    Raises:
        ValidationError: If a label is empty or contains whitespace.
        OSError: If the file cannot be written.
    """
    lines = graph_to_lines(graph)
    with open(path, "w", encoding=GRAPH_CONFIG.encoding) as fh:
        _write_lines(lines, fh)
    logger.info(f"Saved graph to {path}")
