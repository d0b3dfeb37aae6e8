"""Types and data structures for max-flow results.

Defines immutable path and summary containers returned by the algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from flownet.config import SOLVER_CONFIG

# Ordered vertex pair identifying an edge: (tail, head)
EdgeKey = Tuple[int, int]


@dataclass(frozen=True)
class FlowPath:
    """A source-to-sink path carrying ``amount`` units of flow.

    Attributes:
        amount: Flow carried by the path.
        vertices: Vertex sequence from source to sink.
    """

    amount: int
    vertices: Tuple[int, ...]

    def to_string(self) -> str:
        """Return ``"amount: v0 -> v1 -> ... -> vk"``."""
        return SOLVER_CONFIG.format_path(self.amount, self.vertices)

    def to_array(self) -> List[int]:
        """Return ``[amount, v0, v1, ..., vk]``."""
        return [self.amount, *self.vertices]

    @property
    def edges(self) -> List[EdgeKey]:
        return list(zip(self.vertices[:-1], self.vertices[1:]))


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Flow added by the computation.
        edge_flow: Final flow per edge, indexed by ``(u, v)``.
        residual_cap: Forward slack ``capacity - flow`` per edge.
        reachable: Vertices reachable from the source in the residual graph.
        min_cut: Original edges leaving ``reachable``, ordered by ``(u, v)``.
        paths: Decomposition of the final flow into source-to-sink paths.
        augmentations: Augmenting paths in the order they were pushed; empty
            for push-relabel.
    """

    total_flow: int
    edge_flow: Dict[EdgeKey, int]
    residual_cap: Dict[EdgeKey, int]
    reachable: Set[int]
    min_cut: List[EdgeKey]
    paths: List[FlowPath] = field(default_factory=list)
    augmentations: List[FlowPath] = field(default_factory=list)

    @property
    def cut_capacity(self) -> int:
        """Sum of the capacities of the min-cut edges."""
        return sum(self.edge_flow[e] + self.residual_cap[e] for e in self.min_cut)
