"""Breadth-first search over positive residual capacity.

Breadth-first order always yields a fewest-edge augmenting path, which bounds
the number of augmentations by ``O(V * E)`` (Edmonds-Karp). Neighbours are
scanned in ascending vertex index and the first predecessor to discover a
vertex is kept, so results are reproducible.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, FrozenSet, Optional

from capflow.graph.path import AugmentingPath
from capflow.graph.residual import ResidualGraph
from capflow.types.base import Vertex


def find_augmenting_path(
    residual: ResidualGraph,
    source: Vertex,
    sink: Vertex,
) -> Optional[AugmentingPath]:
    """Find a shortest source-to-sink path with positive residual capacity.

    The search stops as soon as the sink is discovered.

    Args:
        residual: Residual graph to search. It is not modified.
        source: Start vertex.
        sink: Target vertex; must differ from ``source``.

    Returns:
        The discovered path, or ``None`` when the sink is unreachable.
    """
    parent: Dict[Vertex, Optional[Vertex]] = {source: None}
    queue: Deque[Vertex] = deque([source])
    while queue:
        u = queue.popleft()
        for v in residual.neighbors(u):
            if v in parent or residual.residual_capacity(u, v) <= 0:
                continue
            parent[v] = u
            if v == sink:
                return AugmentingPath(source=source, sink=sink, parent=parent)
            queue.append(v)
    return None


def reachable_from(residual: ResidualGraph, source: Vertex) -> FrozenSet[Vertex]:
    """Return all vertices reachable from ``source`` over positive residual capacity."""
    seen = {source}
    queue: Deque[Vertex] = deque([source])
    while queue:
        u = queue.popleft()
        for v in residual.neighbors(u):
            if v not in seen and residual.residual_capacity(u, v) > 0:
                seen.add(v)
                queue.append(v)
    return frozenset(seen)
