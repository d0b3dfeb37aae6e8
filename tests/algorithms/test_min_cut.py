import logging

import pytest

from flownet.algorithms.base import FlowAlgorithm
from flownet.algorithms.max_flow import max_flow
from flownet.algorithms.min_cut import (
    format_cut,
    min_cut,
    min_cut_edges,
    min_cuts_edmonds_karp,
    min_cuts_push_relabel,
)
from flownet.graph.network import FlowNetwork

CLRS_CUT = ["(1, 3)", "(4, 3)", "(4, 5)"]


def test_clrs_cut_both_variants(clrs_network):
    assert min_cuts_edmonds_karp(clrs_network, 0, 5) == CLRS_CUT
    assert min_cuts_push_relabel(clrs_network, 0, 5) == CLRS_CUT


def test_variants_leave_network_untouched(clrs_network):
    min_cuts_edmonds_karp(clrs_network, 0, 5)
    min_cuts_push_relabel(clrs_network, 0, 5)
    assert all(edge.flow == 0 for edge in clrs_network.get_edges())
    # Order of calls does not matter
    assert max_flow(clrs_network, 0, 5) == 23
    assert min_cuts_edmonds_karp(clrs_network, 0, 5) == CLRS_CUT


@pytest.mark.parametrize("algorithm", list(FlowAlgorithm))
def test_cut_capacity_equals_max_flow(clrs_network, algorithm):
    edges = min_cut(clrs_network, 0, 5, algorithm)
    assert sum(edge.capacity for edge in edges) == 23
    assert format_cut(edges) == CLRS_CUT


def test_min_cut_in_place(clrs_network):
    edges = min_cut(clrs_network, 0, 5, copy_network=False)
    assert [edge.to_tuple() for edge in edges] == [
        (1, 3, 12, 12),
        (4, 3, 7, 7),
        (4, 5, 4, 4),
    ]
    assert edges[0] is clrs_network.get_edge(1, 3)


def test_min_cut_edges_on_existing_flow(clrs_network):
    max_flow(clrs_network, 0, 5, "dinic")
    edges = min_cut_edges(clrs_network, 0, 5)
    assert [(e.u, e.v) for e in edges] == [(1, 3), (4, 3), (4, 5)]
    assert all(edge.is_saturated() for edge in edges)


def test_zero_capacity_edges_excluded():
    net = FlowNetwork(4)
    net.add_edge(0, 1, 0)
    net.add_edge(0, 2, 1)
    net.add_edge(1, 3, 5)
    net.add_edge(2, 3, 1)
    assert min_cuts_edmonds_karp(net, 0, 3) == ["(0, 2)"]


def test_no_path_gives_empty_cut(disconnected):
    assert min_cuts_edmonds_karp(disconnected, 0, 3) == []
    assert min_cuts_push_relabel(disconnected, 0, 3) == []


def test_source_equals_sink(clrs_network):
    assert min_cuts_edmonds_karp(clrs_network, 1, 1) == []
    assert min_cuts_push_relabel(clrs_network, 1, 1) == []


def test_variants_agree_on_random_networks(random_network):
    sink = random_network.size - 1
    expected = max_flow(random_network, 0, sink, copy_network=True)
    by_ek = min_cuts_edmonds_karp(random_network, 0, sink)
    by_pr = min_cuts_push_relabel(random_network, 0, sink)
    assert by_ek == by_pr

    edges = min_cut(random_network, 0, sink)
    assert format_cut(edges) == by_ek
    assert sum(edge.capacity for edge in edges) == expected


def test_debug_log(diamond, caplog):
    caplog.set_level(logging.DEBUG, logger="flownet")
    min_cut(diamond, 0, 3, "dinic")
    assert "min_cut(dinic): 0 -> 3 cut 2 edges of total capacity 4" in caplog.text
