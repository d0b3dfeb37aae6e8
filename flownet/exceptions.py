"""Error types raised by flow networks and max-flow algorithms.

Every error derives from ``FlowNetworkError`` and also from the builtin
exception callers would naturally catch (``IndexError`` for out-of-range
vertices, ``ValueError`` for invalid values, ``KeyError`` for missing
vertices or edges).
"""

from __future__ import annotations


class FlowNetworkError(Exception):
    """Base class for all flownet errors."""

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes
        return Exception.__str__(self)


class VertexBoundsError(FlowNetworkError, IndexError):
    """Vertex index is negative or not below the network size."""


class CapacityDomainError(FlowNetworkError, ValueError):
    """Capacity or flow value is negative, or flow would exceed capacity."""


class DuplicateEdgeError(FlowNetworkError, ValueError):
    """An edge already exists for the ordered vertex pair."""


class SelfLoopError(FlowNetworkError, ValueError):
    """An edge would start and end at the same vertex."""


class VertexNotFoundError(FlowNetworkError, KeyError):
    """Vertex index is in range but the vertex is not present."""


class EdgeNotFoundError(FlowNetworkError, KeyError):
    """No edge exists for the ordered vertex pair."""
