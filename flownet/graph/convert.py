"""Conversion utilities between FlowNetwork and NetworkX graphs.

Edges carry ``capacity`` and ``flow`` attributes on the NetworkX side, which
matches the attribute names expected by ``networkx.algorithms.flow``.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from flownet.graph.network import FlowNetwork


def to_digraph(
    network: FlowNetwork,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.DiGraph:
    """Convert a FlowNetwork to a NetworkX DiGraph.

    Isolated vertices are preserved. The network size is stored in the graph
    attribute ``size`` so that ``from_digraph`` can restore it.

    Args:
        network: The network to convert.
        capacity_attr: Edge attribute receiving the capacity.
        flow_attr: Edge attribute receiving the flow.

    Returns:
        A NetworkX DiGraph mirroring the network.
    """
    nx_graph = nx.DiGraph(size=network.size)
    nx_graph.add_nodes_from(network.get_vertices())
    nx_graph.add_edges_from(
        (edge.u, edge.v, {capacity_attr: edge.capacity, flow_attr: edge.flow})
        for edge in network.get_edges()
    )
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    size: Optional[int] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> FlowNetwork:
    """Convert a NetworkX DiGraph with integer nodes to a FlowNetwork.

    Args:
        nx_graph: Source graph; nodes must be non-negative integers.
        size: Network size. Defaults to the graph's ``size`` attribute, or one
            more than the largest node.
        capacity_attr: Edge attribute holding the capacity (required).
        flow_attr: Edge attribute holding the flow (defaults to 0 if absent).

    Returns:
        A new FlowNetwork.

    Raises:
        ValueError: If a node is not an integer or an edge lacks a capacity.
    """
    for node in nx_graph.nodes:
        if isinstance(node, bool) or not isinstance(node, int):
            raise ValueError(f"Node '{node}' is not an integer vertex index.")

    if size is None:
        size = nx_graph.graph.get("size")
    if size is None:
        size = max(nx_graph.nodes, default=-1) + 1

    network = FlowNetwork(size)
    for node in nx_graph.nodes:
        network.add_vertex(node)
    for u, v, data in nx_graph.edges(data=True):
        if capacity_attr not in data:
            raise ValueError(f"Edge ({u}, {v}) has no '{capacity_attr}' attribute.")
        network.add_edge(u, v, int(data[capacity_attr]), int(data.get(flow_attr, 0)))
    return network
