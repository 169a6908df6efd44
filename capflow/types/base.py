"""Base aliases and enums for flow computations."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

#: Vertex identifier, an integer in ``[0, n)``.
Vertex = int

#: Non-negative integer edge capacity.
Capacity = int

#: Ordered vertex pair ``(u, v)``.
Edge = Tuple[Vertex, Vertex]

#: Edge with its capacity, ``(u, v, capacity)``.
EdgeTriple = Tuple[Vertex, Vertex, Capacity]


class SolveState(IntEnum):
    """Lifecycle of a single max-flow solve."""

    #: Residual graph built, no augmentation attempted yet.
    INITIALIZED = 1
    #: Augmenting paths are being searched and applied.
    RUNNING = 2
    #: No augmenting path remains; the result is final.
    TERMINATED = 3
