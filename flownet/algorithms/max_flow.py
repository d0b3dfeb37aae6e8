"""Maximum-flow entry points with selectable engine.

All functions mutate the edge flows of ``network`` in place unless
``copy_network=True``. The returned totals count the flow added by the call;
with ``reset_flow=True`` every edge starts from zero flow, so the total is the
max-flow value.

Path reporting decomposes the final flow on the network (see
`flownet.algorithms.decomposition`); for a network that started with zero
flow the reported amounts sum to the returned total.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

from flownet.algorithms.augmenting import augment_max_flow
from flownet.algorithms.base import FlowAlgorithm
from flownet.algorithms.decomposition import (
    decompose_flow,
    format_paths,
    paths_to_arrays,
)
from flownet.algorithms.dinic import BlockingFlowSearch
from flownet.algorithms.min_cut import min_cut_edges
from flownet.algorithms.push_relabel import push_relabel
from flownet.algorithms.residual import (
    BreadthFirstSearch,
    CapacityScalingSearch,
    DepthFirstSearch,
    PathSearch,
    ResidualGraph,
    check_terminals,
)
from flownet.algorithms.types import FlowPath, FlowSummary
from flownet.config import SOLVER_CONFIG
from flownet.graph.network import FlowNetwork

AlgorithmLike = Optional[Union[FlowAlgorithm, str]]

_SEARCHES: Dict[FlowAlgorithm, Callable[[], PathSearch]] = {
    FlowAlgorithm.EDMONDS_KARP: BreadthFirstSearch,
    FlowAlgorithm.FORD_FULKERSON: DepthFirstSearch,
    FlowAlgorithm.CAPACITY_SCALING: CapacityScalingSearch,
    FlowAlgorithm.DINIC: BlockingFlowSearch,
}


def resolve_algorithm(algorithm: AlgorithmLike) -> FlowAlgorithm:
    """Return the engine for an enum member, a name, or None (configured default)."""
    if algorithm is None:
        algorithm = SOLVER_CONFIG.default_algorithm
    if isinstance(algorithm, FlowAlgorithm):
        return algorithm
    return FlowAlgorithm.from_name(algorithm)


def run_max_flow(
    network: FlowNetwork, source: int, sink: int, algorithm: AlgorithmLike = None
) -> Tuple[int, List[FlowPath]]:
    """Run one engine in place.

    Returns:
        Tuple of (flow added, augmenting paths in push order). Push-relabel
        reports no augmenting paths.
    """
    algorithm = resolve_algorithm(algorithm)
    if algorithm == FlowAlgorithm.PUSH_RELABEL:
        return push_relabel(network, source, sink), []
    return augment_max_flow(network, source, sink, _SEARCHES[algorithm]())


def _prepare(network: FlowNetwork, copy_network: bool, reset_flow: bool) -> FlowNetwork:
    if copy_network:
        network = network.copy()
    if reset_flow:
        network.reset_flow()
    return network


def max_flow(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: AlgorithmLike = None,
    *,
    reset_flow: bool = False,
    copy_network: bool = False,
) -> int:
    """Compute a maximum flow from ``source`` to ``sink``.

    Args:
        network: Network to saturate; its edge flows are updated in place
            unless ``copy_network`` is True.
        source: Source vertex.
        sink: Sink vertex.
        algorithm: ``FlowAlgorithm`` member or name (``"edmonds_karp"``,
            ``"dinic"``, ...). Defaults to ``SOLVER_CONFIG.default_algorithm``.
        reset_flow: If True, zero all flows before computing.
        copy_network: If True, work on a copy and leave ``network`` untouched.

    Returns:
        Flow added by this call; 0 when ``source == sink``.

    Raises:
        VertexBoundsError: If source or sink is out of range.
        VertexNotFoundError: If source or sink is absent (and they differ).
        ValueError: If the algorithm name is unknown.

    Examples:
        >>> net = FlowNetwork(4)
        >>> for u, v, capacity in [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)]:
        ...     _ = net.add_edge(u, v, capacity)
        >>> max_flow(net, 0, 3, "dinic")
        4
    """
    algorithm = resolve_algorithm(algorithm)
    work = _prepare(network, copy_network, reset_flow)
    return run_max_flow(work, source, sink, algorithm)[0]


def _max_flow_decomposed(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: AlgorithmLike,
    reset_flow: bool,
    copy_network: bool,
) -> List[FlowPath]:
    algorithm = resolve_algorithm(algorithm)
    work = _prepare(network, copy_network, reset_flow)
    run_max_flow(work, source, sink, algorithm)
    return decompose_flow(work, source, sink)


def max_flow_paths(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: AlgorithmLike = None,
    *,
    reset_flow: bool = False,
    copy_network: bool = False,
) -> List[str]:
    """Compute a maximum flow and report it as ``"amount: v0 -> ... -> vk"`` paths."""
    return format_paths(
        _max_flow_decomposed(network, source, sink, algorithm, reset_flow, copy_network)
    )


def max_flow_array(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: AlgorithmLike = None,
    *,
    reset_flow: bool = False,
    copy_network: bool = False,
) -> List[List[int]]:
    """Compute a maximum flow and report it as ``[amount, v0, ..., vk]`` lists."""
    return paths_to_arrays(
        _max_flow_decomposed(network, source, sink, algorithm, reset_flow, copy_network)
    )


def max_flow_summary(
    network: FlowNetwork,
    source: int,
    sink: int,
    algorithm: AlgorithmLike = None,
    *,
    reset_flow: bool = False,
    copy_network: bool = False,
) -> FlowSummary:
    """Compute a maximum flow and collect flows, residuals, cut and paths."""
    algorithm = resolve_algorithm(algorithm)
    work = _prepare(network, copy_network, reset_flow)
    total, augmentations = run_max_flow(work, source, sink, algorithm)

    check_terminals(work, source, sink)
    edges = work.get_edges()
    if source == sink:
        reachable = {source} if work.has_vertex(source) else set()
    else:
        reachable = ResidualGraph(work).reachable(source)

    return FlowSummary(
        total_flow=total,
        edge_flow={(e.u, e.v): e.flow for e in edges},
        residual_cap={(e.u, e.v): e.residual for e in edges},
        reachable=reachable,
        min_cut=[(e.u, e.v) for e in min_cut_edges(work, source, sink)],
        paths=decompose_flow(work, source, sink),
        augmentations=augmentations,
    )
