"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and :class:`CapacityGraph`, whose
vertices are the contiguous integers ``0 .. n-1``.

Example:
    >>> import networkx as nx
    >>> from capflow.lib.nx import from_networkx, to_networkx
    >>> from capflow.algorithms.max_flow import max_flow
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=10)
    >>> G.add_edge("a", "t", capacity=4)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> result = max_flow(graph, node_map.to_index["s"], node_map.to_index["t"])
    >>>
    >>> G_out = to_networkx(graph, node_map, result=result)
    >>> G_out.edges["s", "a"]["flow"]
    4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from capflow.errors import InvalidCapacity
from capflow.graph.capacity import CapacityGraph, build_graph
from capflow.types.base import Edge
from capflow.types.dto import MaxFlowResult

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Node names (any hashable) are mapped to contiguous integer vertices
    starting from 0, so results can be translated back to the caller's names.

    Attributes:
        to_index: Maps original node names to vertex indices
        to_name: Maps vertex indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def name_edge(self, edge: Edge) -> Tuple[Hashable, Hashable]:
        """Translate a vertex pair back to node names."""
        u, v = edge
        return self.to_name[u], self.to_name[v]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def _as_capacity(value: Any, u: Hashable, v: Hashable) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCapacity(
            f"Capacity of edge ({u!r}, {v!r}) is not a number: {value!r}"
        )
    if not isinstance(value, Integral) and (
        value != value or value in (float("inf"), float("-inf")) or value != int(value)
    ):
        raise InvalidCapacity(
            f"Capacity of edge ({u!r}, {v!r}) must be a finite integer, got {value!r}"
        )
    if value < 0:
        raise InvalidCapacity(
            f"Capacity of edge ({u!r}, {v!r}) is negative: {value!r}"
        )
    return int(value)


def from_networkx(
    G: NxGraph,
    *,
    capacity_attr: str = "capacity",
    default_capacity: Optional[int] = None,
) -> Tuple[CapacityGraph, NodeMap]:
    """Convert a NetworkX graph to a :class:`CapacityGraph`.

    Node names are sorted (by ``str``) and mapped to vertex indices. Parallel
    edges of a multigraph are merged by summing their capacities. Each edge of
    an undirected graph becomes a pair of anti-parallel edges with the same
    capacity.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        capacity_attr: Edge attribute name for capacity (default: "capacity")
        default_capacity: Capacity used when the attribute is missing. When
            ``None`` a missing capacity is an error, since unbounded edges are
            not supported.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
        InvalidVertex: If G has no nodes
        InvalidCapacity: If a capacity is missing, negative or not integral
        SelfLoop: If G contains a self-loop
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    merged: Dict[Edge, int] = {}
    directed = G.is_directed()
    for u, v, data in G.edges(data=True):
        if capacity_attr in data:
            cap = _as_capacity(data[capacity_attr], u, v)
        elif default_capacity is not None:
            cap = _as_capacity(default_capacity, u, v)
        else:
            raise InvalidCapacity(
                f"Edge ({u!r}, {v!r}) has no '{capacity_attr}' attribute"
            )
        src, dst = node_map.to_index[u], node_map.to_index[v]
        pairs = [(src, dst)] if directed else [(src, dst), (dst, src)]
        for pair in pairs:
            merged[pair] = merged.get(pair, 0) + cap

    graph = build_graph(len(node_names), [(u, v, c) for (u, v), c in merged.items()])
    return graph, node_map


def to_networkx(
    graph: CapacityGraph,
    node_map: Optional[NodeMap] = None,
    *,
    result: Optional[MaxFlowResult] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.DiGraph:
    """Convert a :class:`CapacityGraph` to a NetworkX DiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...
        result: Optional max-flow result; when given each edge also carries
            its flow under ``flow_attr``.
        capacity_attr: Edge attribute name for capacity (default: "capacity")
        flow_attr: Edge attribute name for flow (default: "flow")

    Returns:
        nx.DiGraph with one edge per capacity-graph edge.
    """

    def name(i: int) -> Hashable:
        return node_map.to_name.get(i, i) if node_map is not None else i

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in graph.vertices())
    for u, v, cap in graph.edges():
        attrs: Dict[str, int] = {capacity_attr: cap}
        if result is not None:
            attrs[flow_attr] = result.flow(u, v)
        G.add_edge(name(u), name(v), **attrs)
    return G
