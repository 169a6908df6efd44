"""Immutable capacitated directed graph.

`CapacityGraph` is the validated, read-only input of a max-flow solve. Vertices
are the integers ``0 .. n-1``; each ordered pair carries at most one edge with a
non-negative integer capacity. Instances are safe to share between threads.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Dict, Iterable, Iterator, List, Tuple

import numpy as np

from capflow.errors import DuplicateEdge, InvalidCapacity, InvalidVertex, SelfLoop
from capflow.logging import get_logger
from capflow.types.base import Capacity, Edge, EdgeTriple, Vertex

logger = get_logger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class CapacityGraph:
    """A validated directed graph with integer edge capacities.

    Construct through :func:`build_graph` or :meth:`from_matrix`; the
    constructor itself assumes validated input.

    Attributes:
        vertex_count: Number of vertices ``n``.
    """

    __slots__ = ("_n", "_capacity", "_out")

    def __init__(self, vertex_count: int, capacities: Dict[Edge, Capacity]) -> None:
        self._n = vertex_count
        self._capacity: Dict[Edge, Capacity] = dict(capacities)
        out: List[List[Tuple[Vertex, Capacity]]] = [[] for _ in range(vertex_count)]
        for (u, v), cap in sorted(self._capacity.items()):
            out[u].append((v, cap))
        self._out: Tuple[Tuple[Tuple[Vertex, Capacity], ...], ...] = tuple(
            tuple(adj) for adj in out
        )

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return len(self._capacity)

    def vertices(self) -> range:
        """Return the vertex range ``0 .. n-1``."""
        return range(self._n)

    def out_edges(self, u: Vertex) -> Tuple[Tuple[Vertex, Capacity], ...]:
        """Return ``(destination, capacity)`` pairs leaving ``u``, ascending.

        Raises:
            InvalidVertex: If ``u`` is not a vertex of this graph.
        """
        self._check_vertex(u)
        return self._out[u]

    def capacity(self, u: Vertex, v: Vertex) -> Capacity:
        """Return the capacity of ``(u, v)``, or 0 when there is no such edge."""
        return self._capacity.get((u, v), 0)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return (u, v) in self._capacity

    def edges(self) -> Iterator[EdgeTriple]:
        """Yield ``(u, v, capacity)`` triples in ascending ``(u, v)`` order."""
        for u, adj in enumerate(self._out):
            for v, cap in adj:
                yield u, v, cap

    def with_capacity(
        self, u: Vertex, v: Vertex, capacity: Capacity
    ) -> "CapacityGraph":
        """Return a new graph where edge ``(u, v)`` has ``capacity``.

        The edge is added when absent. The receiver is left untouched.

        Raises:
            InvalidVertex, SelfLoop, InvalidCapacity: As for :func:`build_graph`.
        """
        _validate_edge(self._n, u, v, capacity)
        capacities = dict(self._capacity)
        capacities[(int(u), int(v))] = int(capacity)
        return CapacityGraph(self._n, capacities)

    @classmethod
    def from_matrix(cls, matrix: Any) -> "CapacityGraph":
        """Build a graph from a square capacity matrix.

        ``matrix[u][v]`` is the capacity of ``(u, v)``; zero entries mean no
        edge. Diagonal entries must be zero.

        Args:
            matrix: Nested sequences or a 2-D integer ``numpy`` array.

        Raises:
            InvalidVertex: If the matrix is empty or not square.
            InvalidCapacity: If an entry is negative or not integral.
            SelfLoop: If a diagonal entry is non-zero.
        """
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
            raise InvalidVertex(
                f"Capacity matrix must be square and non-empty, got shape {arr.shape}"
            )
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidCapacity(
                f"Capacity matrix must hold integers, got dtype {arr.dtype}"
            )
        rows, cols = np.nonzero(arr)
        edges = [(int(u), int(v), int(arr[u, v])) for u, v in zip(rows, cols)]
        return build_graph(int(arr.shape[0]), edges)

    def to_matrix(self) -> np.ndarray:
        """Return the ``n x n`` int64 capacity matrix (0 where there is no edge)."""
        arr = np.zeros((self._n, self._n), dtype=np.int64)
        for (u, v), cap in self._capacity.items():
            arr[u, v] = cap
        return arr

    def _check_vertex(self, u: Any) -> None:
        if not _is_int(u) or not 0 <= u < self._n:
            raise InvalidVertex(f"Vertex {u!r} is outside [0, {self._n}).")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapacityGraph):
            return NotImplemented
        return self._n == other._n and self._capacity == other._capacity

    def __hash__(self) -> int:
        return hash((self._n, frozenset(self._capacity.items())))

    def __repr__(self) -> str:
        return f"CapacityGraph(vertex_count={self._n}, edges={list(self.edges())})"


def _validate_edge(n: int, u: Any, v: Any, capacity: Any) -> None:
    for w in (u, v):
        if not _is_int(w) or not 0 <= w < n:
            raise InvalidVertex(
                f"Edge ({u!r}, {v!r}) references vertex {w!r} outside [0, {n})."
            )
    if u == v:
        raise SelfLoop(f"Self-loop at vertex {u} is not allowed.")
    if not _is_int(capacity):
        raise InvalidCapacity(
            f"Capacity of edge ({u}, {v}) must be an integer, got {capacity!r}."
        )
    if capacity < 0:
        raise InvalidCapacity(f"Capacity of edge ({u}, {v}) is negative: {capacity}.")


def build_graph(vertex_count: int, edges: Iterable[Any]) -> CapacityGraph:
    """Validate ``(u, v, capacity)`` triples and build a :class:`CapacityGraph`.

    All triples are checked before the graph is created, so a failing call
    produces nothing.

    Args:
        vertex_count: Number of vertices ``n``; must be a positive integer.
        edges: Iterable of ``(u, v, capacity)`` triples.

    Returns:
        CapacityGraph: The validated graph.

    Raises:
        InvalidVertex: If ``n`` is not positive or an endpoint is outside ``[0, n)``.
        InvalidCapacity: If a capacity is negative or not an integer.
        SelfLoop: If ``u == v`` for some edge.
        DuplicateEdge: If the same ``(u, v)`` pair appears twice.
    """
    if not _is_int(vertex_count) or vertex_count <= 0:
        raise InvalidVertex(
            f"Vertex count must be a positive integer, got {vertex_count!r}."
        )

    capacities: Dict[Edge, Capacity] = {}
    for item in edges:
        try:
            u, v, capacity = item
        except (TypeError, ValueError):
            raise ValueError(
                f"Edge must be a (u, v, capacity) triple, got {item!r}."
            ) from None
        _validate_edge(vertex_count, u, v, capacity)
        key = (int(u), int(v))
        if key in capacities:
            raise DuplicateEdge(f"Edge ({u}, {v}) is given more than once.")
        capacities[key] = int(capacity)

    logger.debug(
        "Built capacity graph with %d vertices and %d edges",
        vertex_count,
        len(capacities),
    )
    return CapacityGraph(int(vertex_count), capacities)
