from __future__ import annotations

from enum import IntEnum
from typing import List

#: Distance label of a vertex not reached by a residual breadth-first search.
UNREACHABLE = -1

#: A path is the sequence of vertices from source to sink.
Path = List[int]


class FlowAlgorithm(IntEnum):
    """
    Max-flow engines available to max_flow() and min_cut()
    """

    #: Shortest augmenting paths found by breadth-first search.
    EDMONDS_KARP = 1
    #: Augmenting paths found by depth-first search.
    FORD_FULKERSON = 2
    #: Breadth-first augmenting paths restricted to residual >= delta, delta halving.
    CAPACITY_SCALING = 3
    #: Layered blocking flows with current-arc depth-first search.
    DINIC = 4
    #: FIFO preflow push-relabel.
    PUSH_RELABEL = 5

    @classmethod
    def from_name(cls, name: str) -> FlowAlgorithm:
        """Parse a case-insensitive name such as ``"dinic"`` or ``"push-relabel"``."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(a.name.lower() for a in cls)
            raise ValueError(
                f"Unknown flow algorithm '{name}'. Expected one of: {choices}."
            ) from None
