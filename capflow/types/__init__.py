"""Shared type aliases, enums and result containers."""

from capflow.types.base import Capacity, Edge, EdgeTriple, SolveState, Vertex
from capflow.types.dto import MaxFlowResult

__all__ = [
    "Capacity",
    "Edge",
    "EdgeTriple",
    "MaxFlowResult",
    "SolveState",
    "Vertex",
]
