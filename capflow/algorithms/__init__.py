"""Flow algorithms: augmenting-path search and the max-flow engine."""

from capflow.algorithms.bfs import find_augmenting_path, reachable_from
from capflow.algorithms.max_flow import (
    MaxFlowSolver,
    bottleneck,
    max_flow,
    run_sensitivity,
    saturated_edges,
)

__all__ = [
    "MaxFlowSolver",
    "bottleneck",
    "find_augmenting_path",
    "max_flow",
    "reachable_from",
    "run_sensitivity",
    "saturated_edges",
]
