"""Residual-graph view and augmenting-path search strategies.

`ResidualGraph` wraps a `FlowNetwork` for the duration of one algorithm call.
It precomputes, per vertex, the ascending list of vertices joined to it by an
edge in either direction; every residual pair ``(u, v)`` with positive
capacity appears there. Working arrays (predecessors, distance labels,
current-arc indices) are allocated per query, sized by the network, and never
stored on the network or its edges.

Search strategies implement `PathSearch.find_augmentations`, a generator that
yields augmenting paths for one phase. The caller pushes each yielded path's
bottleneck before resuming the generator, so strategies that find several
paths per phase (blocking flow, capacity scaling) observe the updated
residual capacities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Optional, Sequence, Set

from flownet.algorithms.base import UNREACHABLE, Path
from flownet.exceptions import VertexNotFoundError
from flownet.graph.network import FlowNetwork

# Predecessor of the search root and of undiscovered vertices
_NIL = -1


def check_terminals(network: FlowNetwork, source: int, sink: int) -> None:
    """Validate the source and sink of a flow computation.

    Both must be in range; unless they are equal, both must be present.

    Raises:
        VertexBoundsError: If either index is out of range.
        VertexNotFoundError: If ``source != sink`` and either is absent.
    """
    network.check_vertex(source)
    network.check_vertex(sink)
    if source == sink:
        return
    for role, vertex in (("Source", source), ("Sink", sink)):
        if not network.has_vertex(vertex):
            raise VertexNotFoundError(f"{role} vertex {vertex} does not exist.")


class ResidualGraph:
    """Residual view over a network's current flow assignment."""

    def __init__(self, network: FlowNetwork) -> None:
        self.network = network
        self._adj: Dict[int, List[int]] = {
            u: network.get_neighbors(u) for u in network.get_vertices()
        }

    def neighbors(self, u: int) -> List[int]:
        """Return candidate residual heads of ``u`` in ascending order."""
        return self._adj[u]

    def residual_capacity(self, u: int, v: int) -> int:
        return self.network.residual_capacity(u, v)

    def push(self, u: int, v: int, amount: int) -> None:
        """Send ``amount`` units from ``u`` to ``v`` through the residual pair.

        Flow on the reverse edge ``(v, u)`` is cancelled first; whatever is
        left is added to the forward edge ``(u, v)``.

        Raises:
            ValueError: If ``amount`` is not positive or exceeds the residual
                capacity of ``(u, v)``.
        """
        if amount <= 0:
            raise ValueError(f"Push amount must be positive (got {amount}).")
        available = self.residual_capacity(u, v)
        if amount > available:
            raise ValueError(
                f"Cannot push {amount} units over ({u}, {v}) with residual {available}."
            )

        network = self.network
        remaining = amount
        if network.has_edge(v, u):
            backward = network.get_edge(v, u)
            cancelled = min(backward.flow, remaining)
            if cancelled:
                backward.subtract_flow(cancelled)
                remaining -= cancelled
        if remaining:
            network.get_edge(u, v).add_flow(remaining)

    def bottleneck(self, path: Sequence[int]) -> int:
        """Return the minimum residual capacity over consecutive pairs of ``path``."""
        return min(self.residual_capacity(u, v) for u, v in zip(path[:-1], path[1:]))

    def augment(self, path: Sequence[int], amount: int) -> None:
        """Push ``amount`` along every pair of ``path``."""
        for u, v in zip(path[:-1], path[1:]):
            self.push(u, v, amount)

    #
    # Searches
    #
    def shortest_path(
        self, source: int, sink: int, threshold: int = 1
    ) -> Optional[Path]:
        """Breadth-first search for a fewest-edges augmenting path.

        Only pairs with residual capacity of at least ``threshold`` are
        followed. Neighbors are explored in ascending order, so the result is
        deterministic.

        Returns:
            The vertex list from ``source`` to ``sink``, or None if the sink
            is not reachable.
        """
        size = self.network.size
        pred = [_NIL] * size
        visited = [False] * size
        visited[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if visited[v] or self.residual_capacity(u, v) < threshold:
                    continue
                visited[v] = True
                pred[v] = u
                if v == sink:
                    return _trace(pred, source, sink)
                queue.append(v)
        return None

    def depth_first_path(self, source: int, sink: int) -> Optional[Path]:
        """Depth-first search for any augmenting path, ascending neighbor order."""
        size = self.network.size
        visited = [False] * size
        arcs = [0] * size
        visited[source] = True
        path = [source]
        while path:
            u = path[-1]
            if u == sink:
                return path
            nbrs = self._adj[u]
            while arcs[u] < len(nbrs):
                v = nbrs[arcs[u]]
                arcs[u] += 1
                if not visited[v] and self.residual_capacity(u, v) > 0:
                    visited[v] = True
                    path.append(v)
                    break
            else:
                path.pop()
        return None

    def levels(self, source: int) -> List[int]:
        """Return breadth-first distance labels from ``source``.

        The list is indexed by vertex; the source gets 0 and vertices not
        reachable through positive residual pairs get ``UNREACHABLE``.
        """
        level = [UNREACHABLE] * self.network.size
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if level[v] == UNREACHABLE and self.residual_capacity(u, v) > 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level

    def reachable(self, source: int) -> Set[int]:
        """Return the vertices reachable from ``source`` in the residual graph."""
        level = self.levels(source)
        return {v for v in self._adj if level[v] != UNREACHABLE}


def _trace(pred: List[int], source: int, sink: int) -> Path:
    path = [sink]
    while path[-1] != source:
        path.append(pred[path[-1]])
    path.reverse()
    return path


class PathSearch(ABC):
    """Strategy locating augmenting paths in a residual graph."""

    #: Short name used in log messages.
    name: str = "search"

    @abstractmethod
    def find_augmentations(
        self, residual: ResidualGraph, source: int, sink: int
    ) -> Iterator[Path]:
        """Yield the augmenting paths of one phase.

        The caller must push the bottleneck of each yielded path before
        resuming. A phase that yields nothing means the flow is maximum.
        """


class BreadthFirstSearch(PathSearch):
    """One shortest augmenting path per phase (Edmonds-Karp)."""

    name = "edmonds_karp"

    def find_augmentations(
        self, residual: ResidualGraph, source: int, sink: int
    ) -> Iterator[Path]:
        path = residual.shortest_path(source, sink)
        if path is not None:
            yield path


class DepthFirstSearch(PathSearch):
    """One depth-first augmenting path per phase (Ford-Fulkerson)."""

    name = "ford_fulkerson"

    def find_augmentations(
        self, residual: ResidualGraph, source: int, sink: int
    ) -> Iterator[Path]:
        path = residual.depth_first_path(source, sink)
        if path is not None:
            yield path


class CapacityScalingSearch(PathSearch):
    """Shortest paths with residual capacity of at least delta, delta halving.

    Delta starts at the largest power of two not above the largest edge
    capacity. Each phase walks the whole delta schedule, so the phase after
    the last productive one yields nothing.
    """

    name = "capacity_scaling"

    def find_augmentations(
        self, residual: ResidualGraph, source: int, sink: int
    ) -> Iterator[Path]:
        largest = max((e.capacity for e in residual.network.get_edges()), default=0)
        if largest <= 0:
            return
        delta = 1 << (largest.bit_length() - 1)
        while delta >= 1:
            while True:
                path = residual.shortest_path(source, sink, threshold=delta)
                if path is None:
                    break
                yield path
            delta //= 2
