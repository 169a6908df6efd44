"""Residual capacity bookkeeping for a single max-flow solve.

The residual graph holds one entry per ordered pair that is an original edge
or the reverse of one. Augmentation only moves capacity between the two
directions of an existing pair, so the pair set and the neighbour order are
fixed once the residual graph has been built.

For every original edge ``(u, v)`` with capacity ``c`` the identity
``residual(u, v) + net_flow(u, v) == c`` holds after every augmentation, where
net flow counts flow pushed ``u -> v`` minus flow pushed ``v -> u``. Anti-parallel
original edges share the same pair of entries, which is what keeps their flow
from being counted twice.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from capflow.graph.capacity import CapacityGraph
from capflow.graph.path import AugmentingPath
from capflow.types.base import Capacity, Edge, Vertex


class ResidualGraph:
    """Mutable residual capacities derived from a :class:`CapacityGraph`.

    Attributes:
        graph: The capacity graph this residual graph was built from. It is
            never modified.
    """

    __slots__ = ("graph", "_residual", "_neighbors")

    def __init__(self, graph: CapacityGraph) -> None:
        self.graph = graph
        self._residual: List[Dict[Vertex, Capacity]] = [
            {} for _ in range(graph.vertex_count)
        ]
        for u, v, cap in graph.edges():
            self._residual[u][v] = cap
            # An anti-parallel original edge overwrites this with its own capacity.
            self._residual[v].setdefault(u, 0)
        self._neighbors: Tuple[Tuple[Vertex, ...], ...] = tuple(
            tuple(sorted(adj)) for adj in self._residual
        )

    @classmethod
    def from_capacity_graph(cls, graph: CapacityGraph) -> "ResidualGraph":
        """Create a fresh residual graph with residual equal to capacity."""
        return cls(graph)

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    def residual_capacity(self, u: Vertex, v: Vertex) -> Capacity:
        """Return the residual capacity of ``(u, v)``; 0 for pairs never seen.

        Pairs with an endpoint outside ``[0, n)`` have never been seen either.
        """
        if not 0 <= u < len(self._residual):
            return 0
        return self._residual[u].get(v, 0)

    def neighbors(self, u: Vertex) -> Tuple[Vertex, ...]:
        """Return the residual-graph neighbours of ``u`` in ascending order.

        Neighbours include vertices whose residual capacity is currently zero.
        """
        return self._neighbors[u]

    def apply_flow(self, path: AugmentingPath, amount: Capacity) -> None:
        """Push ``amount`` units along ``path``.

        Each path edge ``(u, v)`` loses ``amount`` residual capacity and its
        reverse ``(v, u)`` gains the same amount. The caller must ensure
        ``amount`` does not exceed the residual capacity of any path edge; the
        bottleneck of the path satisfies this by construction.
        """
        residual = self._residual
        for u, v in path.edges():
            remaining = residual[u][v] - amount
            assert remaining >= 0, (
                f"flow {amount} exceeds residual {residual[u][v]} on ({u}, {v})"
            )
            residual[u][v] = remaining
            residual[v][u] += amount

    def net_flow(self, u: Vertex, v: Vertex) -> int:
        """Return flow pushed ``u -> v`` minus flow pushed ``v -> u``.

        Defined for any pair; pairs with no original edge in either direction
        have net flow 0.
        """
        graph = self.graph
        if graph.has_edge(u, v):
            return graph.capacity(u, v) - self.residual_capacity(u, v)
        if graph.has_edge(v, u):
            return self.residual_capacity(v, u) - graph.capacity(v, u)
        return 0

    def edge_flows(self) -> Dict[Edge, int]:
        """Return the non-negative flow carried by each original edge.

        For an anti-parallel pair the net flow is attributed to the edge that
        carries it and the opposite edge reports 0.
        """
        return {
            (u, v): max(cap - self.residual_capacity(u, v), 0)
            for u, v, cap in self.graph.edges()
        }

    def pairs(self) -> Iterator[Tuple[Vertex, Vertex, Capacity]]:
        """Yield ``(u, v, residual)`` for every tracked pair in ascending order."""
        for u, adj in enumerate(self._neighbors):
            for v in adj:
                yield u, v, self._residual[u][v]

    def __repr__(self) -> str:
        return (
            f"ResidualGraph(vertex_count={self.vertex_count}, "
            f"pairs={sum(len(adj) for adj in self._neighbors)})"
        )
