"""Augmenting path described by BFS parent pointers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from capflow.types.base import Edge, Vertex


@dataclass(frozen=True, eq=False)
class AugmentingPath:
    """A source-to-sink path recorded as a predecessor map.

    Only the predecessor chain from ``sink`` back to ``source`` is part of the
    path; ``parent`` may also hold entries for other vertices visited by the
    search. The vertex sequence is reconstructed on demand by walking the chain
    backward. Paths compare and hash by identity.

    Attributes:
        source: First vertex of the path.
        sink: Last vertex of the path.
        parent: Maps each discovered vertex to its predecessor. The source maps
            to ``None``.
    """

    source: Vertex
    sink: Vertex
    parent: Dict[Vertex, Vertex | None]

    def edges(self) -> Iterator[Edge]:
        """Yield path edges ``(u, v)`` from the sink back to the source."""
        v = self.sink
        while v != self.source:
            u = self.parent[v]
            assert u is not None, f"broken parent chain at vertex {v}"
            yield u, v
            v = u

    def vertices(self) -> Tuple[Vertex, ...]:
        """Return the path vertices in source-to-sink order."""
        seq = [self.sink]
        seq.extend(u for u, _ in self.edges())
        seq.reverse()
        return tuple(seq)

    def __len__(self) -> int:
        """Return the number of edges on the path."""
        return sum(1 for _ in self.edges())

    def __str__(self) -> str:
        return " <- ".join(str(v) for v in reversed(self.vertices()))
