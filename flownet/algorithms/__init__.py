"""Max-flow engines, residual search, min-cut and flow decomposition."""

from flownet.algorithms.augmenting import (
    augment_max_flow,
    capacity_scaling,
    edmonds_karp,
    ford_fulkerson,
)
from flownet.algorithms.base import UNREACHABLE, FlowAlgorithm
from flownet.algorithms.decomposition import decompose_flow
from flownet.algorithms.dinic import BlockingFlowSearch, dinic
from flownet.algorithms.max_flow import (
    max_flow,
    max_flow_array,
    max_flow_paths,
    max_flow_summary,
)
from flownet.algorithms.min_cut import (
    min_cut,
    min_cut_edges,
    min_cuts_edmonds_karp,
    min_cuts_push_relabel,
)
from flownet.algorithms.push_relabel import push_relabel
from flownet.algorithms.residual import (
    BreadthFirstSearch,
    CapacityScalingSearch,
    DepthFirstSearch,
    PathSearch,
    ResidualGraph,
)
from flownet.algorithms.types import FlowPath, FlowSummary

__all__ = [
    "UNREACHABLE",
    "FlowAlgorithm",
    "FlowPath",
    "FlowSummary",
    "ResidualGraph",
    "PathSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "CapacityScalingSearch",
    "BlockingFlowSearch",
    "augment_max_flow",
    "edmonds_karp",
    "ford_fulkerson",
    "capacity_scaling",
    "dinic",
    "push_relabel",
    "max_flow",
    "max_flow_paths",
    "max_flow_array",
    "max_flow_summary",
    "min_cut",
    "min_cut_edges",
    "min_cuts_edmonds_karp",
    "min_cuts_push_relabel",
    "decompose_flow",
]
