"""Maximum flow via FIFO preflow push-relabel.

The source is raised to height ``|V|`` and every residual pair leaving it is
saturated, creating excess on its neighbors. Active vertices (positive excess,
neither source nor sink) are discharged in FIFO order: excess is pushed over
admissible pairs (positive residual, ``height[u] == height[v] + 1``) found
through a per-vertex current-arc index, and a vertex that runs out of arcs is
relabeled to one more than its lowest residual neighbor. Excess that cannot
reach the sink eventually flows back to the source, leaving a valid maximum
flow on the network.

Pushes go through `ResidualGraph.push`, the same cancel-then-forward step used
by the augmenting-path algorithms.
"""

from __future__ import annotations

from collections import deque

from flownet.algorithms.residual import ResidualGraph, check_terminals
from flownet.graph.network import FlowNetwork
from flownet.logging import get_logger

logger = get_logger(__name__)


def push_relabel(network: FlowNetwork, source: int, sink: int) -> int:
    """Compute a maximum flow in place with FIFO push-relabel.

    Args:
        network: Network whose current flow is the starting point. That flow
            must be conserved at every vertex other than source and sink.
        source: Source vertex.
        sink: Sink vertex.

    Returns:
        Net flow gained by the sink.

    Raises:
        VertexBoundsError: If source or sink is out of range.
        VertexNotFoundError: If source or sink is absent (and they differ).
        ValueError: If the starting flow is not conserved.
    """
    check_terminals(network, source, sink)
    if source == sink:
        return 0

    vertices = network.get_vertices()
    for vertex in vertices:
        if vertex not in (source, sink) and network.net_outflow(vertex) != 0:
            raise ValueError(
                f"Flow is not conserved at vertex {vertex}; "
                "push-relabel needs a feasible starting flow."
            )
    initial = -network.net_outflow(sink)

    residual = ResidualGraph(network)
    size = network.size
    height = [0] * size
    excess = [0] * size
    arcs = [0] * size
    queued = [False] * size
    active: deque = deque()

    def activate(v: int) -> None:
        if v != source and v != sink and not queued[v]:
            queued[v] = True
            active.append(v)

    height[source] = len(vertices)
    for v in residual.neighbors(source):
        amount = residual.residual_capacity(source, v)
        if amount > 0:
            residual.push(source, v, amount)
            excess[v] += amount
            excess[source] -= amount
            activate(v)

    pushes = relabels = 0
    while active:
        u = active.popleft()
        queued[u] = False
        nbrs = residual.neighbors(u)
        while excess[u] > 0:
            if arcs[u] == len(nbrs):
                # Excess at u arrived over some pair, so a residual way back exists
                height[u] = 1 + min(
                    height[v] for v in nbrs if residual.residual_capacity(u, v) > 0
                )
                arcs[u] = 0
                relabels += 1
                continue

            v = nbrs[arcs[u]]
            available = residual.residual_capacity(u, v)
            if available > 0 and height[u] == height[v] + 1:
                amount = min(excess[u], available)
                residual.push(u, v, amount)
                excess[u] -= amount
                excess[v] += amount
                pushes += 1
                activate(v)
            else:
                arcs[u] += 1

    total = -network.net_outflow(sink) - initial
    logger.debug(
        "push_relabel: %d -> %d carried %d units with %d pushes and %d relabels",
        source,
        sink,
        total,
        pushes,
        relabels,
    )
    return total
