"""Maximum flow via repeated augmentation along residual paths.

`augment_max_flow` is the shared driver: it asks a `PathSearch` strategy for
the augmenting paths of each phase and pushes every path's bottleneck through
the residual graph (cancelling reverse flow before adding forward flow). It
stops at the first phase that yields no path; by the max-flow min-cut theorem
the flow is then maximum.

Edmonds-Karp uses breadth-first (fewest-edges) paths, which bounds the number
of augmentations by O(V * E). Ford-Fulkerson and capacity scaling are offered
with the same contract.
"""

from __future__ import annotations

from typing import List, Tuple

from flownet.algorithms.residual import (
    BreadthFirstSearch,
    CapacityScalingSearch,
    DepthFirstSearch,
    PathSearch,
    ResidualGraph,
    check_terminals,
)
from flownet.algorithms.types import FlowPath
from flownet.graph.network import FlowNetwork
from flownet.logging import get_logger

logger = get_logger(__name__)


def augment_max_flow(
    network: FlowNetwork, source: int, sink: int, search: PathSearch
) -> Tuple[int, List[FlowPath]]:
    """Augment ``network`` to a maximum flow using ``search`` to find paths.

    The network's edge flows are modified in place.

    Args:
        network: Network whose current flow is the starting point.
        source: Source vertex.
        sink: Sink vertex.
        search: Strategy yielding augmenting paths per phase.

    Returns:
        Tuple of (flow added, augmenting paths with the amount pushed on each,
        in push order).

    Raises:
        VertexBoundsError: If source or sink is out of range.
        VertexNotFoundError: If source or sink is absent (and they differ).
    """
    check_terminals(network, source, sink)
    # Degenerate case (s == t): conservation forces the net surplus to zero.
    if source == sink:
        return 0, []

    residual = ResidualGraph(network)
    total = 0
    phases = 0
    augmentations: List[FlowPath] = []
    while True:
        pushed = 0
        for path in search.find_augmentations(residual, source, sink):
            amount = residual.bottleneck(path)
            residual.augment(path, amount)
            augmentations.append(FlowPath(amount, tuple(path)))
            pushed += amount
        if not pushed:
            break
        phases += 1
        total += pushed

    logger.debug(
        "%s: %d -> %d carried %d units in %d augmentations over %d phases",
        search.name,
        source,
        sink,
        total,
        len(augmentations),
        phases,
    )
    return total, augmentations


def edmonds_karp(network: FlowNetwork, source: int, sink: int) -> int:
    """Max flow with shortest (breadth-first) augmenting paths.

    Examples:
        >>> net = FlowNetwork(3)
        >>> for u, v, capacity in [(0, 1, 5), (1, 2, 3)]:
        ...     _ = net.add_edge(u, v, capacity)
        >>> edmonds_karp(net, 0, 2)
        3
    """
    return augment_max_flow(network, source, sink, BreadthFirstSearch())[0]


def ford_fulkerson(network: FlowNetwork, source: int, sink: int) -> int:
    """Max flow with depth-first augmenting paths."""
    return augment_max_flow(network, source, sink, DepthFirstSearch())[0]


def capacity_scaling(network: FlowNetwork, source: int, sink: int) -> int:
    """Max flow augmenting only along paths with residual >= delta, delta halving."""
    return augment_max_flow(network, source, sink, CapacityScalingSearch())[0]
