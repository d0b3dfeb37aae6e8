"""Decompose a computed flow into source-to-sink paths.

The decomposition works on a private copy of the positive edge flows, so the
network's recorded flow stays intact. Each round walks depth-first from the
source along edges with remaining flow, preferring lower vertex indices and
backtracking out of dead ends, until it reaches the sink. The path's
bottleneck is subtracted from every edge on it and the path is reported.
Every round empties at least one edge, so there are at most ``E`` rounds.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from flownet.algorithms.base import Path
from flownet.algorithms.residual import check_terminals
from flownet.algorithms.types import FlowPath
from flownet.graph.network import FlowNetwork
from flownet.logging import get_logger

logger = get_logger(__name__)

FlowDict = Dict[int, Dict[int, int]]


def find_flow_path(remaining: FlowDict, source: int, sink: int) -> Optional[Path]:
    """Find a path with positive remaining flow using iterative DFS.

    Successors are tried in the order of ``remaining[u]``, which
    `decompose_flow` keeps ascending.
    """
    visited = {source}
    path = [source]
    stack = [(source, iter(remaining.get(source, {})))]

    while stack:
        _, successors = stack[-1]
        next_node = next(successors, None)
        if next_node is None:
            stack.pop()
            path.pop()
            continue
        if next_node in visited or remaining[path[-1]][next_node] <= 0:
            continue
        path.append(next_node)
        if next_node == sink:
            return path
        visited.add(next_node)
        stack.append((next_node, iter(remaining.get(next_node, {}))))

    return None


def decompose_flow(network: FlowNetwork, source: int, sink: int) -> List[FlowPath]:
    """Split the network's current flow into source-to-sink paths.

    Args:
        network: Network carrying a flow, typically a maximum flow. The flow
            should be acyclic; flow on cycles is left unreported.
        source: Source vertex.
        sink: Sink vertex.

    Returns:
        Paths in discovery order, each with the amount it carries.
    """
    check_terminals(network, source, sink)
    if source == sink:
        return []

    # Edges come ordered by (u, v), so each successor dict is ascending
    remaining: FlowDict = {}
    for edge in network.get_edges():
        if edge.flow > 0:
            remaining.setdefault(edge.u, {})[edge.v] = edge.flow

    paths: List[FlowPath] = []
    while remaining.get(source):
        path = find_flow_path(remaining, source, sink)
        if path is None:
            logger.debug(
                "%d units leave %d without reaching %d; stopping decomposition",
                sum(remaining[source].values()),
                source,
                sink,
            )
            break

        amount = min(remaining[u][v] for u, v in zip(path[:-1], path[1:]))
        for u, v in zip(path[:-1], path[1:]):
            remaining[u][v] -= amount
            if remaining[u][v] == 0:
                del remaining[u][v]
                if not remaining[u]:
                    del remaining[u]
        paths.append(FlowPath(amount, tuple(path)))

    return paths


def format_paths(paths: List[FlowPath]) -> List[str]:
    """Render paths as ``"amount: v0 -> v1 -> ... -> vk"`` strings."""
    return [path.to_string() for path in paths]


def paths_to_arrays(paths: List[FlowPath]) -> List[List[int]]:
    """Render paths as ``[amount, v0, v1, ..., vk]`` lists."""
    return [path.to_array() for path in paths]
