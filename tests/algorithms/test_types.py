"""Tests for result containers and the engine enum."""

import dataclasses

import pytest

from flownet.algorithms.base import FlowAlgorithm
from flownet.algorithms.types import FlowPath, FlowSummary


def test_flow_path_renderings():
    path = FlowPath(7, (0, 2, 4, 3, 5))
    assert path.to_string() == "7: 0 -> 2 -> 4 -> 3 -> 5"
    assert path.to_array() == [7, 0, 2, 4, 3, 5]
    assert path.edges == [(0, 2), (2, 4), (4, 3), (3, 5)]


def test_flow_path_is_frozen():
    path = FlowPath(1, (0, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        path.amount = 2


def test_summary_cut_capacity():
    summary = FlowSummary(
        total_flow=5,
        edge_flow={(0, 1): 3, (0, 2): 2},
        residual_cap={(0, 1): 0, (0, 2): 1},
        reachable={0},
        min_cut=[(0, 1), (0, 2)],
    )
    assert summary.cut_capacity == 6
    assert summary.paths == []
    assert summary.augmentations == []


@pytest.mark.parametrize(
    "name, expected",
    [
        ("edmonds_karp", FlowAlgorithm.EDMONDS_KARP),
        ("Ford-Fulkerson", FlowAlgorithm.FORD_FULKERSON),
        (" dinic ", FlowAlgorithm.DINIC),
        ("PUSH_RELABEL", FlowAlgorithm.PUSH_RELABEL),
        ("capacity-scaling", FlowAlgorithm.CAPACITY_SCALING),
    ],
)
def test_algorithm_from_name(name, expected):
    assert FlowAlgorithm.from_name(name) is expected


def test_algorithm_from_unknown_name():
    with pytest.raises(ValueError, match="Expected one of: edmonds_karp"):
        FlowAlgorithm.from_name("bellman_ford")
