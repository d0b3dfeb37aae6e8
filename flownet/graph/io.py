"""Serialization of FlowNetwork to and from plain dicts, YAML and JSON.

The dict layout is::

    {
        "size": 6,
        "vertices": [0, 1, 2, 3, 4, 5],
        "edges": [
            {"source": 0, "target": 1, "capacity": 16, "flow": 0},
            ...
        ],
    }

``vertices`` is optional (endpoints of edges are inserted automatically) and
so is ``flow``. ``size`` defaults to one more than the largest vertex
mentioned.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from flownet.graph.network import FlowNetwork
from flownet.logging import get_logger

logger = get_logger(__name__)

_TOP_LEVEL_KEYS = {"size", "vertices", "edges"}
_EDGE_KEYS = {"source", "target", "capacity", "flow"}


def network_to_dict(network: FlowNetwork) -> Dict[str, Any]:
    """Return the dict representation of ``network``."""
    return {
        "size": network.size,
        "vertices": network.get_vertices(),
        "edges": [
            {
                "source": edge.u,
                "target": edge.v,
                "capacity": edge.capacity,
                "flow": edge.flow,
            }
            for edge in network.get_edges()
        ],
    }


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer (got {value!r}).")
    return value


def network_from_dict(data: Dict[str, Any]) -> FlowNetwork:
    """Build a FlowNetwork from its dict representation.

    Raises:
        ValueError: On unknown keys, missing fields or non-integer values.
        FlowNetworkError: On invalid vertices, capacities or duplicate edges.
    """
    if not isinstance(data, dict):
        raise ValueError("Network definition must be a mapping.")
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ValueError(f"Unrecognized network keys: {', '.join(sorted(unknown))}.")

    vertices: List[int] = [
        _as_int(v, "Vertex") for v in data.get("vertices") or []
    ]
    edges: List[Dict[str, Any]] = data.get("edges") or []
    for i, edge in enumerate(edges):
        if not isinstance(edge, dict):
            raise ValueError(f"Edge #{i} must be a mapping.")
        unknown = set(edge) - _EDGE_KEYS
        if unknown:
            raise ValueError(
                f"Edge #{i} has unrecognized keys: {', '.join(sorted(unknown))}."
            )
        for key in ("source", "target", "capacity"):
            if key not in edge:
                raise ValueError(f"Edge #{i} is missing '{key}'.")

    if "size" in data:
        size = _as_int(data["size"], "Network size")
    else:
        mentioned = vertices + [
            _as_int(e[key], "Edge endpoint") for e in edges for key in ("source", "target")
        ]
        size = max(mentioned, default=-1) + 1

    network = FlowNetwork(size)
    for vertex in vertices:
        network.add_vertex(vertex)
    for edge in edges:
        network.add_edge(
            _as_int(edge["source"], "Edge source"),
            _as_int(edge["target"], "Edge target"),
            _as_int(edge["capacity"], "Edge capacity"),
            _as_int(edge.get("flow", 0), "Edge flow"),
        )
    return network


def load_network(path: Union[str, Path]) -> FlowNetwork:
    """Load a network from a ``.json`` file or a YAML file (any other suffix)."""
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    network = network_from_dict(data)
    logger.debug(
        "Loaded %s from %s: %d vertices, %d edges",
        type(network).__name__,
        path,
        network.num_vertices(),
        network.num_edges(),
    )
    return network


def dump_network(network: FlowNetwork, path: Union[str, Path]) -> None:
    """Write ``network`` as JSON (``.json`` suffix) or YAML (any other suffix)."""
    path = Path(path)
    data = network_to_dict(network)
    if path.suffix.lower() == ".json":
        path.write_text(json.dumps(data, indent=2))
    else:
        path.write_text(yaml.safe_dump(data, sort_keys=False))
