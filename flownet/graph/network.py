"""Capacitated directed network with per-edge flow.

`FlowNetwork` stores at most one `Edge` per ordered vertex pair. Vertices are
dense integer indices in ``[0, size)`` whose presence is tracked explicitly.
Every mutator validates its arguments before touching any state, so a failed
call never leaves an edge outside ``0 <= flow <= capacity``.

Residual capacity is derived on demand and never stored:

    residual(u, v) = capacity(u, v) - flow(u, v) + flow(v, u)

where a missing edge contributes nothing.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from flownet.exceptions import (
    CapacityDomainError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    SelfLoopError,
    VertexBoundsError,
    VertexNotFoundError,
)


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise CapacityDomainError(
            f"Capacity constraint: capacity cannot be negative (got {capacity})."
        )


def _check_flow(flow: int) -> None:
    if flow < 0:
        raise CapacityDomainError(f"Flow cannot be negative (got {flow}).")


def _check_within(capacity: int, flow: int) -> None:
    if flow > capacity:
        raise CapacityDomainError(
            f"Capacity constraint: flow {flow} exceeds capacity {capacity}."
        )


class Edge:
    """A directed edge ``(u, v)`` carrying ``capacity`` and ``flow``.

    Endpoints are fixed at construction. ``capacity`` and ``flow`` are
    validated on every assignment.
    """

    __slots__ = ("_u", "_v", "_capacity", "_flow")

    def __init__(self, u: int, v: int, capacity: int = 0, flow: int = 0) -> None:
        _check_capacity(capacity)
        _check_flow(flow)
        _check_within(capacity, flow)
        self._u = u
        self._v = v
        self._capacity = capacity
        self._flow = flow

    @property
    def u(self) -> int:
        return self._u

    @property
    def v(self) -> int:
        return self._v

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, capacity: int) -> None:
        _check_capacity(capacity)
        _check_within(capacity, self._flow)
        self._capacity = capacity

    @property
    def flow(self) -> int:
        return self._flow

    @flow.setter
    def flow(self, flow: int) -> None:
        _check_flow(flow)
        _check_within(self._capacity, flow)
        self._flow = flow

    @property
    def residual(self) -> int:
        """Capacity still available in the forward direction."""
        return self._capacity - self._flow

    def is_saturated(self) -> bool:
        return self._flow == self._capacity

    def get_vertices(self) -> Tuple[int, int]:
        return self._u, self._v

    def update(self, capacity: int, flow: int) -> None:
        """Set capacity and flow together, validating both first."""
        _check_capacity(capacity)
        _check_flow(flow)
        _check_within(capacity, flow)
        self._capacity = capacity
        self._flow = flow

    def add_flow(self, amount: int) -> None:
        """Increase flow by ``amount``.

        Raises:
            CapacityDomainError: If ``amount`` is negative or the new flow
                would exceed capacity.
        """
        _check_flow(amount)
        _check_within(self._capacity, self._flow + amount)
        self._flow += amount

    def subtract_flow(self, amount: int) -> None:
        """Decrease flow by ``amount``.

        Raises:
            CapacityDomainError: If ``amount`` is negative or larger than the
                current flow.
        """
        _check_flow(amount)
        if amount > self._flow:
            raise CapacityDomainError(
                f"Cannot cancel {amount} units on edge ({self._u}, {self._v}) "
                f"carrying {self._flow}."
            )
        self._flow -= amount

    def copy(self) -> Edge:
        return Edge(self._u, self._v, self._capacity, self._flow)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return ``(u, v, capacity, flow)``."""
        return self._u, self._v, self._capacity, self._flow

    def __repr__(self) -> str:
        return (
            f"Edge(u={self._u}, v={self._v}, "
            f"capacity={self._capacity}, flow={self._flow})"
        )


class FlowNetwork:
    """A directed capacitated network over vertex indices ``[0, size)``.

    This class enforces:
      - Vertex arguments in ``[0, size)`` (``VertexBoundsError`` otherwise).
      - Non-negative capacity and flow with ``flow <= capacity``
        (``CapacityDomainError``).
      - At most one edge per ordered pair (``DuplicateEdgeError``); the
        reverse pair is a separate edge and is never created implicitly.
      - No self-loops (``SelfLoopError``).
      - Queries and removals on absent vertices or edges raise
        ``VertexNotFoundError`` / ``EdgeNotFoundError``.

    Adding an edge inserts any missing endpoint. Removing a vertex removes
    every edge incident to it in both directions.

    Max-flow algorithms mutate ``flow`` on the existing edges in place; use
    ``copy()`` to run independent computations on the same topology.
    """

    def __init__(self, size: int) -> None:
        """Initialize an empty network.

        Args:
            size: Number of addressable vertex indices.

        Raises:
            ValueError: If ``size`` is negative.
        """
        if size < 0:
            raise ValueError(f"Network size cannot be negative (got {size}).")
        self._size = size
        # Outgoing and incoming adjacency; keys of _succ are the live vertices
        self._succ: Dict[int, Dict[int, Edge]] = {}
        self._pred: Dict[int, Dict[int, Edge]] = {}
        self._num_edges = 0

    @property
    def size(self) -> int:
        """Upper bound (exclusive) of valid vertex indices."""
        return self._size

    #
    # Validation
    #
    def check_vertex(self, vertex: int) -> None:
        """Raise ``VertexBoundsError`` unless ``0 <= vertex < size``."""
        if vertex < 0:
            raise VertexBoundsError(f"Vertex cannot be negative (got {vertex}).")
        if vertex >= self._size:
            raise VertexBoundsError(
                f"Vertex {vertex} is out of range for network of size {self._size}."
            )

    def _require_vertex(self, vertex: int) -> None:
        self.check_vertex(vertex)
        if vertex not in self._succ:
            raise VertexNotFoundError(f"Vertex {vertex} does not exist.")

    def _require_edge(self, u: int, v: int) -> Edge:
        self.check_vertex(u)
        self.check_vertex(v)
        edge = self._succ.get(u, {}).get(v)
        if edge is None:
            raise EdgeNotFoundError(f"Edge ({u}, {v}) does not exist.")
        return edge

    #
    # Vertex management
    #
    def add_vertex(self, vertex: int) -> None:
        """Add ``vertex`` if it is not already present."""
        self.check_vertex(vertex)
        if vertex not in self._succ:
            self._succ[vertex] = {}
            self._pred[vertex] = {}

    def has_vertex(self, vertex: int) -> bool:
        self.check_vertex(vertex)
        return vertex in self._succ

    def remove_vertex(self, vertex: int) -> None:
        """Remove ``vertex`` and all edges entering or leaving it.

        Raises:
            VertexNotFoundError: If the vertex is not present.
        """
        self._require_vertex(vertex)
        for v in self._succ[vertex]:
            del self._pred[v][vertex]
        for u in self._pred[vertex]:
            del self._succ[u][vertex]
        self._num_edges -= len(self._succ[vertex]) + len(self._pred[vertex])
        del self._succ[vertex]
        del self._pred[vertex]

    def get_vertices(self) -> List[int]:
        """Return the live vertices in ascending order."""
        return sorted(self._succ)

    def get_adjacent_vertices(self, vertex: int) -> List[int]:
        """Return the heads of edges leaving ``vertex``, ascending."""
        self._require_vertex(vertex)
        return sorted(self._succ[vertex])

    def get_neighbors(self, vertex: int) -> List[int]:
        """Return vertices joined to ``vertex`` by an edge in either direction."""
        self._require_vertex(vertex)
        return sorted(set(self._succ[vertex]) | set(self._pred[vertex]))

    def num_vertices(self) -> int:
        return len(self._succ)

    #
    # Edge management
    #
    def add_edge(self, u: int, v: int, capacity: int, flow: int = 0) -> Edge:
        """Add the directed edge ``(u, v)``, inserting missing endpoints.

        Args:
            u: Tail vertex.
            v: Head vertex.
            capacity: Non-negative edge capacity.
            flow: Initial flow, ``0 <= flow <= capacity``.

        Returns:
            The new edge.

        Raises:
            VertexBoundsError: If ``u`` or ``v`` is out of range.
            SelfLoopError: If ``u == v``.
            DuplicateEdgeError: If ``(u, v)`` already exists.
            CapacityDomainError: If capacity or flow is invalid.
        """
        self.check_vertex(u)
        self.check_vertex(v)
        if u == v:
            raise SelfLoopError(f"Self-loop ({u}, {v}) is not allowed.")
        if v in self._succ.get(u, {}):
            raise DuplicateEdgeError(f"Edge ({u}, {v}) already exists.")
        edge = Edge(u, v, capacity, flow)

        self.add_vertex(u)
        self.add_vertex(v)
        self._succ[u][v] = edge
        self._pred[v][u] = edge
        self._num_edges += 1
        return edge

    def has_edge(self, u: int, v: int) -> bool:
        self.check_vertex(u)
        self.check_vertex(v)
        return v in self._succ.get(u, {})

    def get_edge(self, u: int, v: int) -> Edge:
        """Return the edge ``(u, v)``.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        return self._require_edge(u, v)

    def set_edge(self, u: int, v: int, capacity: int, flow: int) -> None:
        """Replace capacity and flow of the existing edge ``(u, v)``."""
        self._require_edge(u, v).update(capacity, flow)

    def set_capacity(self, u: int, v: int, capacity: int) -> None:
        self._require_edge(u, v).capacity = capacity

    def set_flow(self, u: int, v: int, flow: int) -> None:
        self._require_edge(u, v).flow = flow

    def get_capacity(self, u: int, v: int) -> int:
        return self._require_edge(u, v).capacity

    def get_flow(self, u: int, v: int) -> int:
        return self._require_edge(u, v).flow

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge ``(u, v)``; the reverse edge is left untouched."""
        self._require_edge(u, v)
        del self._succ[u][v]
        del self._pred[v][u]
        self._num_edges -= 1

    def get_edges(self, vertex: Optional[int] = None) -> List[Edge]:
        """Return edges ordered by ``(u, v)``.

        Args:
            vertex: If given, only the edges leaving this vertex.

        Raises:
            VertexNotFoundError: If ``vertex`` is given but not present.
        """
        if vertex is not None:
            self._require_vertex(vertex)
            return [self._succ[vertex][v] for v in sorted(self._succ[vertex])]
        return list(self._iter_edges())

    def get_in_edges(self, vertex: int) -> List[Edge]:
        """Return the edges entering ``vertex``, ordered by tail."""
        self._require_vertex(vertex)
        return [self._pred[vertex][u] for u in sorted(self._pred[vertex])]

    def _iter_edges(self) -> Iterator[Edge]:
        for u in sorted(self._succ):
            out = self._succ[u]
            for v in sorted(out):
                yield out[v]

    def num_edges(self) -> int:
        return self._num_edges

    #
    # Flow queries
    #
    def residual_capacity(self, u: int, v: int) -> int:
        """Return how much more flow can be sent from ``u`` to ``v``.

        Forward slack on ``(u, v)`` plus cancellable flow on ``(v, u)``; zero
        when neither edge exists.
        """
        self.check_vertex(u)
        self.check_vertex(v)
        residual = 0
        forward = self._succ.get(u, {}).get(v)
        if forward is not None:
            residual += forward.capacity - forward.flow
        backward = self._succ.get(v, {}).get(u)
        if backward is not None:
            residual += backward.flow
        return residual

    def is_saturated(self, u: int, v: int) -> bool:
        return self.residual_capacity(u, v) == 0

    def net_outflow(self, vertex: int) -> int:
        """Return flow leaving ``vertex`` minus flow entering it."""
        self._require_vertex(vertex)
        out_flow = sum(e.flow for e in self._succ[vertex].values())
        in_flow = sum(e.flow for e in self._pred[vertex].values())
        return out_flow - in_flow

    def reset_flow(self) -> None:
        """Set the flow of every edge to zero."""
        for edge in self._iter_edges():
            edge.flow = 0

    #
    # Copies
    #
    def copy(self, size: Optional[int] = None) -> FlowNetwork:
        """Return a deep copy, optionally with a larger vertex range.

        Args:
            size: New size; defaults to the current one.

        Raises:
            ValueError: If ``size`` is smaller than the current size.
        """
        if size is None:
            size = self._size
        elif size < self._size:
            raise ValueError(
                f"New network size {size} cannot be less than the original {self._size}."
            )
        network = FlowNetwork(size)
        for vertex in self._succ:
            network.add_vertex(vertex)
        for edge in self._iter_edges():
            network.add_edge(edge.u, edge.v, edge.capacity, edge.flow)
        return network

    def transpose(self) -> FlowNetwork:
        """Return a new network with every edge reversed.

        Capacities and flows travel with their edges; isolated vertices are
        kept.
        """
        network = FlowNetwork(self._size)
        for vertex in self._succ:
            network.add_vertex(vertex)
        for edge in self._iter_edges():
            network.add_edge(edge.v, edge.u, edge.capacity, edge.flow)
        return network

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(size={self._size}, vertices={self.num_vertices()}, "
            f"edges={self._num_edges})"
        )
