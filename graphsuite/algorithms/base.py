"""Base definitions shared by the algorithm modules."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Hashable, List, TypeVar

#: Accumulated path cost. Distances are exact integers; ``None`` marks
#: "unreachable" in label-keyed results.
Cost = int

NodeT = TypeVar("NodeT", bound=Hashable)


class Classification(IntEnum):
    """Outcome of tree/forest classification."""

    #: Acyclic and connected: a single tree-shaped component.
    TREE = 1
    #: Acyclic but split into several tree-shaped components.
    FOREST = 2
    #: Contains a cycle (or a component that is not tree-shaped).
    NEITHER = 3

    @classmethod
    def from_string(cls, value: str) -> "Classification":
        """Parse a case-insensitive name into a Classification member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid classification '{value}'. Valid values are: {valid}"
            ) from None


def walk_predecessors(pred: Dict[NodeT, NodeT], source: NodeT, target: NodeT) -> List[NodeT]:
    """Rebuild ``source .. target`` by following predecessor links back from ``target``.

    Args:
        pred: Maps each reached vertex (except ``source``) to its predecessor.
        source: First vertex of the path.
        target: Last vertex of the path; must be ``source`` or a key of ``pred``.

    Returns:
        The path in source-to-target order.
    """
    path = [target]
    node = target
    while node != source:
        node = pred[node]
        path.append(node)
    path.reverse()
    return path
