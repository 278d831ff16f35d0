"""Command-line interface for graphsuite.

Every subcommand except ``complete`` loads one graph file, runs one algorithm
and prints its result. The algorithms themselves return values only; all
rendering happens here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, NoReturn, Optional, Tuple

from graphsuite.algorithms import (
    bellman_ford,
    bfs,
    classify_tree_or_forest,
    dfs,
    dijkstra,
    floyd_warshall,
    max_flow,
    non_adjacent_vertices,
    odd_degree_vertices,
    path_avoiding,
    prim,
    prune_odd_degree_vertices,
    radius,
)
from graphsuite.exceptions import GraphError
from graphsuite.graph.store import Graph
from graphsuite.io import load_graph, save_graph
from graphsuite.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this, ending with "..."

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(cell: Any) -> str:
        text = str(cell)
        if max_col_width is None or len(text) <= max_col_width:
            return text
        return text[: max_col_width - 3] + "..."

    table = [[clip(cell) for cell in row] for row in [headers, *rows]]
    widths = [max(min_width, *(len(cell) for cell in column)) for column in zip(*table)]

    def render(row: List[str]) -> str:
        return "   " + " | ".join(cell.ljust(width) for cell, width in zip(row, widths))

    rule = "   " + "-+-".join("-" * width for width in widths)
    return "\n".join([render(table[0]), rule, *(render(row) for row in table[1:])])


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _format_distance(value: Optional[int]) -> str:
    return "unreachable" if value is None else str(value)


def _format_path(path: List[str]) -> str:
    return " -> ".join(path)


def _logical_edges(graph: Graph) -> List[Tuple[str, str, int]]:
    """Return stored edges with the mirrored half of undirected edges dropped."""
    if graph.directed:
        return list(graph.edges())
    order = {label: i for i, label in enumerate(graph.vertices())}
    return [(u, v, w) for u, v, w in graph.edges() if order[u] <= order[v]]


def _describe(graph: Graph, detail: bool = False) -> str:
    """Return a multi-line summary of a graph."""
    kind = "directed" if graph.directed else "undirected"
    weights = "weighted" if graph.weighted else "unweighted"
    n = graph.number_of_vertices()
    edges = _logical_edges(graph)
    logical = len(edges)
    lines = [
        f"Graph: {kind}, {weights}",
        f"  {n} {_plural(n, 'vertex', 'vertices')}, {logical} {_plural(logical, 'edge')}",
    ]
    if not detail:
        return "\n".join(lines)

    vertex_rows = [
        [label, str(graph.degree(label)), str(graph.in_degree(label))]
        for label in graph.vertices()
    ]
    if vertex_rows:
        lines.append("Vertices:")
        lines.append(_format_table(["Vertex", "Degree", "In-degree"], vertex_rows))
    edge_rows = [[u, v, str(w) if graph.weighted else "-"] for u, v, w in edges]
    if edge_rows:
        lines.append("Edges:")
        lines.append(_format_table(["From", "To", "Weight"], edge_rows))
    return "\n".join(lines)


def _maybe_save(graph: Graph, output: Optional[Path]) -> None:
    if output is not None:
        save_graph(graph, output)
        print(f"✅ Graph written to: {output}")


#
# Subcommand handlers
#
def _cmd_info(graph: Graph, args: argparse.Namespace) -> None:
    print(_describe(graph, detail=args.detail))


def _cmd_bfs(graph: Graph, args: argparse.Namespace) -> None:
    print(_format_path(bfs(graph, args.start)))


def _cmd_dfs(graph: Graph, args: argparse.Namespace) -> None:
    print(_format_path(dfs(graph, args.start)))


def _cmd_degree(graph: Graph, args: argparse.Namespace) -> None:
    print(f"Degree of {args.vertex}: {graph.degree(args.vertex)}")
    print(f"In-degree of {args.vertex}: {graph.in_degree(args.vertex)}")


def _cmd_non_adjacent(graph: Graph, args: argparse.Namespace) -> None:
    others = non_adjacent_vertices(graph, args.vertex)
    if not others:
        print(f"Every vertex is adjacent to {args.vertex}")
        return
    print(f"Vertices not adjacent to {args.vertex}:")
    for label in others:
        print(f"  {label}")


def _cmd_prune_odd(graph: Graph, args: argparse.Namespace) -> None:
    removed = odd_degree_vertices(graph)
    pruned = prune_odd_degree_vertices(graph)
    unit = _plural(len(removed), "vertex", "vertices")
    print(f"Removed {len(removed)} odd-degree {unit}: {', '.join(removed) or '-'}")
    print(_describe(pruned, detail=True))
    _maybe_save(pruned, args.output)


def _cmd_avoid(graph: Graph, args: argparse.Namespace) -> None:
    path = path_avoiding(graph, args.u1, args.u2, args.avoid)
    print(_format_path(path))


def _cmd_classify(graph: Graph, args: argparse.Namespace) -> None:
    print(classify_tree_or_forest(graph).name.lower())


def _cmd_dijkstra(graph: Graph, args: argparse.Namespace) -> None:
    distances = dijkstra(graph, args.source)
    rows = [[label, _format_distance(d)] for label, d in distances.items()]
    print(f"Shortest distances from {args.source}:")
    print(_format_table(["Vertex", "Distance"], rows))


def _cmd_radius(graph: Graph, args: argparse.Namespace) -> None:
    print(f"Radius: {_format_distance(radius(graph))}")


def _cmd_floyd(graph: Graph, args: argparse.Namespace) -> None:
    result = floyd_warshall(graph)
    rows = []
    for u in result.labels:
        for v in result.labels:
            if u == v:
                continue
            path = result.path(u, v)
            if path is None:
                continue
            rows.append([u, v, str(result.distance(u, v)), _format_path(path)])
    if not rows:
        print("No vertex pair is connected")
        return
    print(_format_table(["From", "To", "Distance", "Path"], rows, max_col_width=60))


def _cmd_bellman_ford(graph: Graph, args: argparse.Namespace) -> None:
    result = bellman_ford(graph, args.source, args.target)
    print(f"Distance from {args.source} to {args.target}: {result.distance}")
    print(f"Path: {_format_path(result.path)}")


def _cmd_prim(graph: Graph, args: argparse.Namespace) -> None:
    tree = prim(graph, args.start)
    edges = _logical_edges(tree)
    rows = [[u, v, str(w) if tree.weighted else "-"] for u, v, w in edges]
    total = sum(w for _, _, w in edges)
    print(f"Minimum spanning tree from {args.start}:")
    if rows:
        print(_format_table(["From", "To", "Weight"], rows))
    if tree.weighted:
        print(f"Total weight: {total}")
    _maybe_save(tree, args.output)


def _cmd_max_flow(graph: Graph, args: argparse.Namespace) -> None:
    total, summary = max_flow(graph, args.source, args.sink, return_summary=True)
    print(f"Maximum flow from {args.source} to {args.sink}: {total}")
    if args.cut and summary.min_cut:
        print("Minimum cut:")
        print(_format_table(["From", "To"], [[u, v] for u, v in summary.min_cut]))


_HANDLERS: Dict[str, Callable[[Graph, argparse.Namespace], None]] = {
    "info": _cmd_info,
    "bfs": _cmd_bfs,
    "dfs": _cmd_dfs,
    "degree": _cmd_degree,
    "non-adjacent": _cmd_non_adjacent,
    "prune-odd": _cmd_prune_odd,
    "avoid": _cmd_avoid,
    "classify": _cmd_classify,
    "dijkstra": _cmd_dijkstra,
    "radius": _cmd_radius,
    "floyd": _cmd_floyd,
    "bellman-ford": _cmd_bellman_ford,
    "prim": _cmd_prim,
    "max-flow": _cmd_max_flow,
}


def _fail(command: str, message: str) -> NoReturn:
    logger.error(f"{command} failed: {message}")
    print(f"❌ ERROR: {message}")
    sys.exit(1)


@contextmanager
def _report_errors(command: str) -> Iterator[None]:
    """Turn library and file-system errors into an error line and exit status 1."""
    try:
        yield
    except GraphError as e:
        _fail(command, f"{type(e).__name__}: {e}")
    except ValueError as e:
        _fail(command, str(e))
    except OSError as e:
        _fail(command, f"{type(e).__name__}: {e}")


def _run_on_file(command: str, path: Path, args: argparse.Namespace) -> None:
    """Load ``path`` and dispatch ``command``; exit with status 1 on failure."""
    with _report_errors(command):
        try:
            graph = load_graph(path)
        except FileNotFoundError:
            _fail(command, f"Graph file not found: {path}")
        _HANDLERS[command](graph, args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsuite",
        description="Run graph algorithms on graph files.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="COMMAND",
        help="Available commands",
    )

    def file_command(name: str, help_text: str) -> argparse.ArgumentParser:
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("graph", type=Path, help="Path to graph file")
        return p

    info = file_command("info", "Describe a graph")
    info.add_argument(
        "--detail", "-d", action="store_true", help="List vertices and edges"
    )

    file_command("bfs", "Breadth-first traversal").add_argument("start")
    file_command("dfs", "Depth-first traversal").add_argument("start")
    file_command("degree", "Degree and in-degree of a vertex").add_argument("vertex")
    file_command(
        "non-adjacent", "Vertices not adjacent to a vertex (directed graphs)"
    ).add_argument("vertex")

    prune = file_command("prune-odd", "Remove every odd-degree vertex")

    avoid = file_command("avoid", "Path between two vertices avoiding a third")
    avoid.add_argument("u1")
    avoid.add_argument("u2")
    avoid.add_argument("avoid", metavar="v")

    file_command("classify", "Classify as tree, forest or neither")
    file_command("dijkstra", "Shortest distances from a vertex").add_argument("source")
    file_command("radius", "Graph radius")
    file_command("floyd", "Shortest paths between all pairs")

    bf = file_command("bellman-ford", "Shortest path between two vertices")
    bf.add_argument("source")
    bf.add_argument("target")

    prim_parser = file_command("prim", "Minimum spanning tree")
    prim_parser.add_argument("start")

    flow = file_command("max-flow", "Maximum flow between two vertices")
    flow.add_argument("source")
    flow.add_argument("sink")
    flow.add_argument("--cut", action="store_true", help="Also print the minimum cut")

    complete = subparsers.add_parser("complete", help="Generate a complete graph file")
    complete.add_argument("labels", nargs="+", help="Vertex labels")

    for p in (prune, prim_parser, complete):
        p.add_argument(
            "--output",
            "-o",
            type=Path,
            default=None,
            required=p is complete,
            help="Write the resulting graph to this file",
        )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphsuite`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "complete":
        with _report_errors(args.command):
            graph = Graph.complete(args.labels)
            save_graph(graph, args.output)
        print(f"✅ Complete graph on {len(graph)} vertices written to: {args.output}")
        return

    _run_on_file(args.command, args.graph, args)


if __name__ == "__main__":
    main()
