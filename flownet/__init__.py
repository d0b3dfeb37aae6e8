"""flownet: capacitated flow networks and maximum-flow algorithms.

flownet provides a directed capacitated network model, several max-flow
engines sharing one residual-graph abstraction, minimum-cut extraction and
decomposition of a flow into source-to-sink paths.

Primary API:
    FlowNetwork, Edge - Network model with validated capacity and flow
    max_flow() - Saturate a network with a chosen engine
    max_flow_paths(), max_flow_array() - Max flow reported as paths
    min_cuts_edmonds_karp(), min_cuts_push_relabel() - Minimum cut edges
    to_digraph(), from_digraph() - Conversion to and from NetworkX

Example:
    from flownet import FlowNetwork, max_flow, min_cuts_edmonds_karp

    net = FlowNetwork(4)
    net.add_edge(0, 1, 3)
    net.add_edge(1, 3, 2)
    net.add_edge(0, 2, 2)
    net.add_edge(2, 3, 3)

    cut = min_cuts_edmonds_karp(net, 0, 3)   # ['(0, 2)', '(1, 3)']
    total = max_flow(net, 0, 3, "dinic")     # 4
"""

from __future__ import annotations

from flownet import logging
from flownet._version import __version__
from flownet.algorithms import (
    FlowAlgorithm,
    FlowPath,
    FlowSummary,
    decompose_flow,
    dinic,
    edmonds_karp,
    max_flow,
    max_flow_array,
    max_flow_paths,
    max_flow_summary,
    min_cut,
    min_cuts_edmonds_karp,
    min_cuts_push_relabel,
    push_relabel,
)
from flownet.exceptions import (
    CapacityDomainError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    FlowNetworkError,
    SelfLoopError,
    VertexBoundsError,
    VertexNotFoundError,
)
from flownet.graph.convert import from_digraph, to_digraph
from flownet.graph.io import load_network, network_from_dict, network_to_dict
from flownet.graph.network import Edge, FlowNetwork

__all__ = [
    # Version
    "__version__",
    # Model
    "FlowNetwork",
    "Edge",
    # Algorithms
    "FlowAlgorithm",
    "max_flow",
    "max_flow_paths",
    "max_flow_array",
    "max_flow_summary",
    "edmonds_karp",
    "dinic",
    "push_relabel",
    "min_cut",
    "min_cuts_edmonds_karp",
    "min_cuts_push_relabel",
    "decompose_flow",
    # Results
    "FlowPath",
    "FlowSummary",
    # Errors
    "FlowNetworkError",
    "VertexBoundsError",
    "CapacityDomainError",
    "DuplicateEdgeError",
    "SelfLoopError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    # Serialization and NetworkX integration
    "load_network",
    "network_from_dict",
    "network_to_dict",
    "to_digraph",
    "from_digraph",
    # Utilities
    "logging",
]
