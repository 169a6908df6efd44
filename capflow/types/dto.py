"""Result containers for max-flow computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Tuple

from capflow.types.base import Edge, Vertex

if TYPE_CHECKING:
    from capflow.graph.residual import ResidualGraph


@dataclass(frozen=True)
class MaxFlowResult:
    """Result of a max-flow solve between a source and a sink.

    Attributes:
        source: Source vertex of the solve.
        sink: Sink vertex of the solve.
        total_flow: Maximum flow value.
        edge_flows: Flow carried by each original edge ``(u, v)``. Every value
            lies in ``[0, capacity(u, v)]``.
        residual: Final residual graph. Per-edge net flow is
            ``capacity(u, v) - residual.residual_capacity(u, v)``.
        augmentations: Number of augmenting paths applied.
        reachable: Vertices reachable from the source in the final residual
            graph (the source side of a minimum cut).
        min_cut: Original edges leaving ``reachable``, sorted. All of them are
            saturated.
    """

    source: Vertex
    sink: Vertex
    total_flow: int
    edge_flows: Dict[Edge, int]
    residual: "ResidualGraph"
    augmentations: int
    reachable: FrozenSet[Vertex]
    min_cut: Tuple[Edge, ...]

    @property
    def cut_capacity(self) -> int:
        """Total original capacity of the min-cut edges; equals ``total_flow``."""
        graph = self.residual.graph
        return sum(graph.capacity(u, v) for u, v in self.min_cut)

    def flow(self, u: Vertex, v: Vertex) -> int:
        """Return the flow on edge ``(u, v)``, 0 if it is not an original edge."""
        return self.edge_flows.get((u, v), 0)
