"""Graph primitives and helpers.

This package provides the read-only `CapacityGraph` input type, the per-solve
`ResidualGraph`, the parent-pointer `AugmentingPath`, and serialization helpers
in `io`.
"""

from capflow.graph.capacity import CapacityGraph, build_graph
from capflow.graph.path import AugmentingPath
from capflow.graph.residual import ResidualGraph

__all__ = [
    "AugmentingPath",
    "CapacityGraph",
    "ResidualGraph",
    "build_graph",
]
