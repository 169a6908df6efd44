"""capflow: maximum flow in capacitated directed graphs.

capflow computes the maximum flow between a source and a sink with the
Edmonds-Karp method (shortest augmenting paths found by breadth-first search)
and reports the per-edge flow assignment and a minimum cut.

Primary API:
    build_graph() - Validate (u, v, capacity) triples into a CapacityGraph
    max_flow() - Solve a CapacityGraph for a source/sink pair
    MaxFlowResult - Total flow, edge flows, residual graph and minimum cut
    from_networkx() / to_networkx() - Convert to and from NetworkX graphs

Example:
    from capflow import build_graph, max_flow

    graph = build_graph(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
    result = max_flow(graph, 0, 3)
    result.total_flow       # 4
    result.edge_flows       # {(0, 1): 2, (0, 2): 2, (1, 3): 2, (2, 3): 2}
"""

from __future__ import annotations

from capflow import cli, logging
from capflow._version import __version__
from capflow.algorithms.bfs import find_augmenting_path
from capflow.algorithms.max_flow import (
    MaxFlowSolver,
    max_flow,
    run_sensitivity,
    saturated_edges,
)
from capflow.config import DEFAULT_CONFIG, SolverConfig
from capflow.errors import (
    Aborted,
    CapflowError,
    DuplicateEdge,
    InvalidCapacity,
    InvalidEndpoints,
    InvalidVertex,
    SelfLoop,
)
from capflow.graph.capacity import CapacityGraph, build_graph
from capflow.graph.io import graph_from_dict, graph_to_dict, load_graph, save_graph
from capflow.graph.path import AugmentingPath
from capflow.graph.residual import ResidualGraph
from capflow.lib.nx import NodeMap, from_networkx, to_networkx
from capflow.types.base import SolveState
from capflow.types.dto import MaxFlowResult

__all__ = [
    # Version
    "__version__",
    # Graphs
    "CapacityGraph",
    "ResidualGraph",
    "AugmentingPath",
    "build_graph",
    # Solving (primary API)
    "max_flow",
    "MaxFlowSolver",
    "MaxFlowResult",
    "SolveState",
    "find_augmenting_path",
    "saturated_edges",
    "run_sensitivity",
    # Configuration
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CapflowError",
    "InvalidVertex",
    "InvalidCapacity",
    "SelfLoop",
    "DuplicateEdge",
    "InvalidEndpoints",
    "Aborted",
    # Serialization
    "graph_to_dict",
    "graph_from_dict",
    "load_graph",
    "save_graph",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
