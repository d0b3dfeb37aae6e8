import networkx as nx
import pytest

from flownet.graph.convert import from_digraph, to_digraph
from flownet.graph.network import FlowNetwork


def build_sample_network() -> FlowNetwork:
    net = FlowNetwork(6)
    net.add_edge(0, 1, 4, 1)
    net.add_edge(1, 0, 2)
    net.add_edge(1, 3, 3, 1)
    net.add_vertex(4)
    return net


def test_to_digraph_basic():
    nxg = to_digraph(build_sample_network())

    assert isinstance(nxg, nx.DiGraph)
    assert sorted(nxg.nodes) == [0, 1, 3, 4]
    assert nxg.graph["size"] == 6
    assert nxg.edges[0, 1] == {"capacity": 4, "flow": 1}
    assert nxg.has_edge(1, 0)
    assert nxg.degree(4) == 0


def test_roundtrip():
    net = build_sample_network()
    restored = from_digraph(to_digraph(net))

    assert restored.size == net.size
    assert restored.get_vertices() == net.get_vertices()
    assert [e.to_tuple() for e in restored.get_edges()] == [
        e.to_tuple() for e in net.get_edges()
    ]


def test_custom_attribute_names():
    net = build_sample_network()
    nxg = to_digraph(net, capacity_attr="cap", flow_attr="used")
    assert nxg.edges[1, 3] == {"cap": 3, "used": 1}
    restored = from_digraph(nxg, capacity_attr="cap", flow_attr="used")
    assert restored.get_flow(1, 3) == 1


def test_from_plain_digraph():
    nxg = nx.DiGraph()
    nxg.add_edge(0, 2, capacity=5)
    nxg.add_edge(2, 3, capacity=1.0)
    net = from_digraph(nxg)

    assert net.size == 4
    assert net.get_flow(0, 2) == 0
    assert net.get_capacity(2, 3) == 1


def test_explicit_size():
    nxg = nx.DiGraph()
    nxg.add_edge(0, 1, capacity=1)
    assert from_digraph(nxg, size=8).size == 8


def test_from_digraph_rejects_bad_input():
    labelled = nx.DiGraph()
    labelled.add_edge("A", "B", capacity=1)
    with pytest.raises(ValueError, match="not an integer"):
        from_digraph(labelled)

    missing = nx.DiGraph()
    missing.add_edge(0, 1, weight=3)
    with pytest.raises(ValueError, match="no 'capacity' attribute"):
        from_digraph(missing)


def test_networkx_agrees_on_max_flow(clrs_network):
    assert nx.maximum_flow_value(to_digraph(clrs_network), 0, 5) == 23
