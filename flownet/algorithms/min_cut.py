"""Minimum s-t cut extraction from a maximum flow.

Given a network carrying a maximum flow, the vertices reachable from the
source through positive residual pairs form the source side ``S``. The cut is
every original edge ``(u, v)`` with positive capacity, ``u`` in ``S`` and
``v`` outside it. The sum of their capacities equals the max-flow value.

The set reachable from the source is the same for every maximum flow, so the
reported cut does not depend on which engine produced the flow.
"""

from __future__ import annotations

from typing import List, Optional, Union

from flownet.algorithms.base import FlowAlgorithm
from flownet.algorithms.residual import ResidualGraph, check_terminals
from flownet.config import SOLVER_CONFIG
from flownet.graph.network import Edge, FlowNetwork
from flownet.logging import get_logger

logger = get_logger(__name__)


def min_cut_edges(network: FlowNetwork, source: int, sink: int) -> List[Edge]:
    """Return the original edges crossing the residual cut of ``network``.

    The network's current flow must already be maximum for (source, sink);
    nothing is recomputed here.

    Returns:
        Cut edges ordered by ``(u, v)``; empty if ``source == sink``.
    """
    check_terminals(network, source, sink)
    if source == sink:
        return []
    reachable = ResidualGraph(network).reachable(source)
    return [
        edge
        for edge in network.get_edges()
        if edge.capacity > 0 and edge.u in reachable and edge.v not in reachable
    ]


def min_cut(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: Optional[Union[FlowAlgorithm, str]] = None,
    *,
    copy_network: bool = True,
) -> List[Edge]:
    """Compute a maximum flow with ``algorithm`` and return the min-cut edges.

    Args:
        network: Network to cut.
        source: Source vertex.
        sink: Sink vertex.
        algorithm: Engine for the max-flow step; defaults to
            ``SOLVER_CONFIG.min_cut_algorithm``.
        copy_network: If True (default), work on a copy so the caller's flow
            is left untouched; the returned edges then belong to the copy.

    Returns:
        Cut edges ordered by ``(u, v)``.
    """
    # Import here to avoid circular import
    from flownet.algorithms.max_flow import resolve_algorithm, run_max_flow

    algorithm = resolve_algorithm(algorithm or SOLVER_CONFIG.min_cut_algorithm)
    check_terminals(network, source, sink)
    if source == sink:
        return []

    work = network.copy() if copy_network else network
    run_max_flow(work, source, sink, algorithm)
    edges = min_cut_edges(work, source, sink)
    logger.debug(
        "min_cut(%s): %d -> %d cut %d edges of total capacity %d",
        algorithm.name.lower(),
        source,
        sink,
        len(edges),
        sum(edge.capacity for edge in edges),
    )
    return edges


def format_cut(edges: List[Edge]) -> List[str]:
    """Render cut edges as ``"(u, v)"`` strings."""
    return [SOLVER_CONFIG.format_edge(edge.u, edge.v) for edge in edges]


def min_cuts_edmonds_karp(network: FlowNetwork, source: int, sink: int) -> List[str]:
    """Min cut after an Edmonds-Karp max flow on a private copy of ``network``."""
    return format_cut(min_cut(network, source, sink, FlowAlgorithm.EDMONDS_KARP))


def min_cuts_push_relabel(network: FlowNetwork, source: int, sink: int) -> List[str]:
    """Min cut after a push-relabel max flow on a private copy of ``network``."""
    return format_cut(min_cut(network, source, sink, FlowAlgorithm.PUSH_RELABEL))
