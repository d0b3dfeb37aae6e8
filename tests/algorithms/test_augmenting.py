import logging

import pytest

from flownet.algorithms.augmenting import (
    augment_max_flow,
    capacity_scaling,
    edmonds_karp,
    ford_fulkerson,
)
from flownet.algorithms.residual import (
    BreadthFirstSearch,
    CapacityScalingSearch,
    DepthFirstSearch,
)
from flownet.graph.network import FlowNetwork

CLRS_AUGMENTATIONS = [
    (12, (0, 1, 3, 5)),
    (4, (0, 2, 4, 5)),
    (7, (0, 2, 4, 3, 5)),
]


def augmentations(result):
    total, paths = result
    return total, [(p.amount, p.vertices) for p in paths]


class TestEdmondsKarp:
    def test_clrs(self, clrs_network):
        total, paths = augmentations(
            augment_max_flow(clrs_network, 0, 5, BreadthFirstSearch())
        )
        assert total == 23
        assert paths == CLRS_AUGMENTATIONS

    def test_final_flows(self, clrs_network):
        assert edmonds_karp(clrs_network, 0, 5) == 23
        flows = {(e.u, e.v): e.flow for e in clrs_network.get_edges()}
        assert flows == {
            (0, 1): 12,
            (0, 2): 11,
            (1, 3): 12,
            (2, 1): 0,
            (2, 4): 11,
            (3, 2): 0,
            (3, 5): 19,
            (4, 3): 7,
            (4, 5): 4,
        }

    def test_shortest_paths_first(self, cross_network):
        total, paths = augmentations(
            augment_max_flow(cross_network, 0, 3, BreadthFirstSearch())
        )
        assert total == 2
        assert paths == [(1, (0, 1, 3)), (1, (0, 2, 3))]
        assert cross_network.get_flow(1, 2) == 0

    def test_single_edge(self):
        net = FlowNetwork(2)
        net.add_edge(0, 1, 7)
        assert edmonds_karp(net, 0, 1) == 7
        assert net.get_edge(0, 1).is_saturated()

    def test_source_equals_sink_leaves_network_alone(self, clrs_network):
        assert augment_max_flow(clrs_network, 0, 0, BreadthFirstSearch()) == (0, [])
        assert all(edge.flow == 0 for edge in clrs_network.get_edges())

    def test_debug_log(self, clrs_network, caplog):
        caplog.set_level(logging.DEBUG, logger="flownet")
        edmonds_karp(clrs_network, 0, 5)
        assert "edmonds_karp: 0 -> 5 carried 23 units in 3 augmentations" in caplog.text


class TestFordFulkerson:
    def test_clrs(self, clrs_network):
        assert ford_fulkerson(clrs_network, 0, 5) == 23

    def test_cancels_reverse_flow(self, cross_network):
        total, paths = augmentations(
            augment_max_flow(cross_network, 0, 3, DepthFirstSearch())
        )
        assert total == 2
        # The second path travels (2, 1) against the flow placed on (1, 2)
        assert paths == [(1, (0, 1, 2, 3)), (1, (0, 2, 1, 3))]
        assert cross_network.get_flow(1, 2) == 0
        assert cross_network.get_flow(1, 3) == 1
        assert cross_network.get_flow(2, 3) == 1


class TestCapacityScaling:
    def test_clrs(self, clrs_network):
        total, paths = augmentations(
            augment_max_flow(clrs_network, 0, 5, CapacityScalingSearch())
        )
        assert total == 23
        assert paths == CLRS_AUGMENTATIONS

    def test_large_path_first(self):
        # A thin shortcut and a wide detour; scaling takes the detour first
        net = FlowNetwork(4)
        net.add_edge(0, 3, 1)
        net.add_edge(0, 1, 8)
        net.add_edge(1, 2, 8)
        net.add_edge(2, 3, 8)
        total, paths = augmentations(
            augment_max_flow(net, 0, 3, CapacityScalingSearch())
        )
        assert total == 9
        assert paths == [(8, (0, 1, 2, 3)), (1, (0, 3))]

    def test_zero_capacities(self):
        net = FlowNetwork(2)
        net.add_edge(0, 1, 0)
        assert capacity_scaling(net, 0, 1) == 0


@pytest.mark.parametrize("engine", [edmonds_karp, ford_fulkerson, capacity_scaling])
def test_no_path(disconnected, engine):
    assert engine(disconnected, 0, 3) == 0
