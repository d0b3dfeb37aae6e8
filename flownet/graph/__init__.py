"""Flow network primitives and helpers.

This package provides the capacitated network type `FlowNetwork` with its
`Edge` records, plus helper modules for NetworkX conversion (`convert`) and
serialization (`io`).
"""

from flownet.graph.network import Edge, FlowNetwork

__all__ = ["Edge", "FlowNetwork"]
