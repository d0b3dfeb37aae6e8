"""Dinic's maximum flow: layered blocking flows.

Each phase labels vertices with their breadth-first distance from the source
in the residual graph. If the sink is unlabeled the phase yields nothing and
the flow is maximum. Otherwise a depth-first search restricted to the level
graph (pairs ``(u, v)`` with ``level[v] == level[u] + 1`` and positive
residual) finds source-to-sink paths. Every vertex keeps a current-arc index
into its neighbor list; arcs that fail are never rescanned during the phase,
and a vertex with no usable arc left is retracted from the search.

The worst case is O(V^2 * E), and O(E * sqrt(E)) on unit-capacity networks.
"""

from __future__ import annotations

from typing import Iterator

from flownet.algorithms.augmenting import augment_max_flow
from flownet.algorithms.base import UNREACHABLE, Path
from flownet.algorithms.residual import PathSearch, ResidualGraph
from flownet.graph.network import FlowNetwork


class BlockingFlowSearch(PathSearch):
    """Yield the paths of one blocking flow on the current level graph."""

    name = "dinic"

    def find_augmentations(
        self, residual: ResidualGraph, source: int, sink: int
    ) -> Iterator[Path]:
        level = residual.levels(source)
        if level[sink] == UNREACHABLE:
            return

        arcs = [0] * residual.network.size
        path = [source]
        while path:
            u = path[-1]
            if u == sink:
                yield list(path)
                # Saturated arcs are skipped via the current-arc indices
                path = [source]
                continue

            nbrs = residual.neighbors(u)
            while arcs[u] < len(nbrs):
                v = nbrs[arcs[u]]
                if level[v] == level[u] + 1 and residual.residual_capacity(u, v) > 0:
                    path.append(v)
                    break
                arcs[u] += 1
            else:
                # Dead end: retract u and advance its predecessor's arc
                path.pop()
                if path:
                    arcs[path[-1]] += 1


def dinic(network: FlowNetwork, source: int, sink: int) -> int:
    """Max flow by repeated blocking flows on level graphs.

    Examples:
        >>> net = FlowNetwork(4)
        >>> for u, v, capacity in [(0, 1, 2), (0, 2, 2), (1, 3, 1), (2, 3, 3)]:
        ...     _ = net.add_edge(u, v, capacity)
        >>> dinic(net, 0, 3)
        3
    """
    return augment_max_flow(network, source, sink, BlockingFlowSearch())[0]
