"""Plain-text rendering of capacity graphs and max-flow results."""

from __future__ import annotations

from typing import Any, List, Optional

from capflow.graph.capacity import CapacityGraph
from capflow.types.dto import MaxFlowResult


def format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this, if given

    Returns:
        Formatted table string, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped = [[clip(h) for h in headers]] + [[clip(c) for c in row] for row in rows]
    col_widths = [
        max(max(len(row[i]) for row in clipped), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in clipped[1:])
    return "\n".join(lines)


def format_capacity_matrix(graph: CapacityGraph, cell_width: int = 4) -> str:
    """Render the capacity matrix with ``-`` marking absent edges.

    Example for a 3-vertex graph::

                0   1   2
          0:    -   5   -
          1:    -   -   3
          2:    -   -   -
    """
    n = graph.vertex_count
    label_width = len(str(n - 1)) + 2
    header = " " * (label_width + 2) + "".join(
        f"{v:>{cell_width}}" for v in range(n)
    )
    lines = [header]
    for u in graph.vertices():
        cells = "".join(
            f"{graph.capacity(u, v):>{cell_width}}"
            if graph.has_edge(u, v)
            else f"{'-':>{cell_width}}"
            for v in range(n)
        )
        lines.append(f"{u:>{label_width}}: {cells}")
    return "\n".join(lines)


def format_flow_table(result: MaxFlowResult, only_used: bool = False) -> str:
    """Render per-edge capacity, flow and utilisation as an ASCII table.

    Args:
        result: Solve result.
        only_used: Skip edges that carry no flow.
    """
    graph = result.residual.graph
    cut = set(result.min_cut)
    rows = []
    for u, v, cap in graph.edges():
        flow = result.flow(u, v)
        if only_used and flow == 0:
            continue
        util = f"{100.0 * flow / cap:.1f}%" if cap else "-"
        rows.append([f"{u} -> {v}", cap, flow, util, "yes" if (u, v) in cut else ""])
    return format_table(["Edge", "Capacity", "Flow", "Util", "Min-cut"], rows)


def format_summary(result: MaxFlowResult) -> str:
    """Return a short multi-line summary of a solve."""
    cut = ", ".join(f"{u}->{v}" for u, v in result.min_cut) or "(none)"
    return "\n".join(
        [
            f"Maximum flow from vertex {result.source} to vertex {result.sink}: "
            f"{result.total_flow}",
            f"Augmenting paths: {result.augmentations}",
            f"Minimum cut ({result.cut_capacity}): {cut}",
        ]
    )
