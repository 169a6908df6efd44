"""Serialization of capacity graphs and max-flow results.

The persisted form of a graph is its vertex count plus the ordered
``(u, v, capacity)`` triples::

    {"vertices": 6, "edges": [[0, 1, 16], [0, 2, 13], ...]}

The same mapping may be stored as JSON or YAML. Plain edge lists with one
``u v capacity`` triple per line are also accepted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from capflow.graph.capacity import CapacityGraph, build_graph
from capflow.types.base import EdgeTriple
from capflow.types.dto import MaxFlowResult


def graph_to_dict(graph: CapacityGraph) -> Dict[str, Any]:
    """Convert a graph to a JSON-serializable dict.

    Returns:
        A dict with ``vertices`` (int) and ``edges`` (list of ``[u, v, capacity]``).
    """
    return {
        "vertices": graph.vertex_count,
        "edges": [[u, v, cap] for u, v, cap in graph.edges()],
    }


def graph_from_dict(data: Dict[str, Any]) -> CapacityGraph:
    """Build a graph from the dict produced by :func:`graph_to_dict`.

    Raises:
        ValueError: If ``vertices`` or ``edges`` is missing or malformed.
        InvalidVertex, InvalidCapacity, SelfLoop, DuplicateEdge: From validation.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Graph data must be a mapping, got {type(data).__name__}")
    if "vertices" not in data:
        raise ValueError("Graph data is missing the 'vertices' field")
    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise ValueError("Graph 'edges' must be a list of [u, v, capacity] triples")
    return build_graph(data["vertices"], edges)


def edgelist_to_graph(
    lines: Iterable[str],
    vertex_count: Optional[int] = None,
    separator: Optional[str] = None,
) -> CapacityGraph:
    """Build a graph from ``u v capacity`` lines.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        lines: Lines of text.
        vertex_count: Number of vertices. Inferred as one more than the largest
            vertex index when omitted.
        separator: Field separator; any whitespace when ``None``.

    Raises:
        ValueError: If a line does not hold three integers.
    """
    triples: List[EdgeTriple] = []
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        fields = text.split(separator)
        if len(fields) != 3:
            raise ValueError(
                f"Line {lineno}: expected 'u v capacity', got {text!r}"
            )
        try:
            u, v, cap = (int(f) for f in fields)
        except ValueError:
            raise ValueError(f"Line {lineno}: non-integer field in {text!r}") from None
        triples.append((u, v, cap))

    if vertex_count is None:
        vertex_count = max((max(u, v) for u, v, _ in triples), default=-1) + 1
    return build_graph(vertex_count, triples)


def load_graph(path: Union[str, Path]) -> CapacityGraph:
    """Load a graph from a ``.json``, ``.yaml``/``.yml`` or edge-list file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the content cannot be parsed into a valid graph.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        return graph_from_dict(json.loads(text))
    if suffix in (".yaml", ".yml"):
        return graph_from_dict(yaml.safe_load(text))
    return edgelist_to_graph(text.splitlines())


def save_graph(graph: CapacityGraph, path: Union[str, Path]) -> None:
    """Write ``graph`` as JSON or YAML depending on the file suffix."""
    path = Path(path)
    data = graph_to_dict(graph)
    if path.suffix.lower() in (".yaml", ".yml"):
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def result_to_dict(result: MaxFlowResult) -> Dict[str, Any]:
    """Convert a max-flow result to a JSON-serializable dict."""
    graph = result.residual.graph
    return {
        "source": result.source,
        "sink": result.sink,
        "total_flow": result.total_flow,
        "augmentations": result.augmentations,
        "edge_flows": [
            {"u": u, "v": v, "capacity": cap, "flow": result.edge_flows[(u, v)]}
            for u, v, cap in graph.edges()
        ],
        "min_cut": [[u, v] for u, v in result.min_cut],
    }
