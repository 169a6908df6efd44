"""Maximum-flow computation via shortest augmenting paths (Edmonds-Karp).

Each solve builds its own :class:`ResidualGraph` from the read-only
:class:`CapacityGraph`, then repeatedly finds a fewest-edge augmenting path,
pushes the path's bottleneck along it and accumulates the total until no path
remains. Provides helpers for saturated-edge detection and simple sensitivity
analysis on top of the solver.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Dict, List, Optional

from capflow.algorithms.bfs import find_augmenting_path, reachable_from
from capflow.config import DEFAULT_CONFIG, SolverConfig
from capflow.errors import Aborted, InvalidEndpoints
from capflow.graph.capacity import CapacityGraph
from capflow.graph.path import AugmentingPath
from capflow.graph.residual import ResidualGraph
from capflow.logging import get_logger
from capflow.types.base import Capacity, Edge, SolveState, Vertex
from capflow.types.dto import MaxFlowResult

logger = get_logger(__name__)


def _validate_endpoints(graph: CapacityGraph, source: Any, sink: Any) -> None:
    n = graph.vertex_count
    for name, w in (("source", source), ("sink", sink)):
        if not isinstance(w, Integral) or isinstance(w, bool) or not 0 <= w < n:
            raise InvalidEndpoints(f"The {name} vertex {w!r} is outside [0, {n}).")
    if source == sink:
        raise InvalidEndpoints(f"Source and sink must differ, both are {source}.")


def bottleneck(residual: ResidualGraph, path: AugmentingPath) -> Capacity:
    """Return the minimum residual capacity over the edges of ``path``."""
    return min(residual.residual_capacity(u, v) for u, v in path.edges())


class MaxFlowSolver:
    """Drive one max-flow solve from initialization to termination.

    The solver moves through ``INITIALIZED -> RUNNING -> TERMINATED``. Endpoints
    are validated before the residual graph is built, so an invalid request
    performs no work. A solver instance computes exactly one result; create a
    new one (or call :func:`max_flow`) for every solve.

    Attributes:
        graph: Input capacity graph, never modified.
        source: Source vertex.
        sink: Sink vertex.
        config: Solver configuration.
        state: Current :class:`SolveState`.
        residual: Residual graph owned by this solve.
        total_flow: Flow accumulated so far.
        augmentations: Number of augmenting paths applied so far.
        augmentation_bound: ``V * E`` limit on augmentations for this graph.
    """

    def __init__(
        self,
        graph: CapacityGraph,
        source: Vertex,
        sink: Vertex,
        config: Optional[SolverConfig] = None,
    ) -> None:
        _validate_endpoints(graph, source, sink)
        self.graph = graph
        self.source = int(source)
        self.sink = int(sink)
        self.config = config or DEFAULT_CONFIG
        self.residual = ResidualGraph.from_capacity_graph(graph)
        self.total_flow = 0
        self.augmentations = 0
        self.augmentation_bound = SolverConfig.augmentation_bound(
            graph.vertex_count, graph.edge_count
        )
        self.state = SolveState.INITIALIZED

    def run(self) -> MaxFlowResult:
        """Augment until no path remains and return the result.

        Raises:
            RuntimeError: If the solver has already run.
            Aborted: If ``config.max_augmentations`` is set and another
                augmentation would exceed it.
        """
        if self.state is not SolveState.INITIALIZED:
            raise RuntimeError(f"Solver already used (state {self.state.name}).")
        self.state = SolveState.RUNNING
        budget = self.config.max_augmentations
        logger.debug(
            "Solving %d -> %d on %d vertices and %d edges (at most %d augmentations)",
            self.source,
            self.sink,
            self.graph.vertex_count,
            self.graph.edge_count,
            self.augmentation_bound,
        )

        while True:
            path = find_augmenting_path(self.residual, self.source, self.sink)
            if path is None:
                break
            if budget is not None and self.augmentations >= budget:
                logger.warning(
                    "Aborting solve %d -> %d after %d augmentations (flow so far %d)",
                    self.source,
                    self.sink,
                    self.augmentations,
                    self.total_flow,
                )
                raise Aborted(self.augmentations, self.total_flow)
            self._augment(path)

        self.state = SolveState.TERMINATED
        logger.debug(
            "No augmenting path from %d to %d: max flow %d after %d augmentations",
            self.source,
            self.sink,
            self.total_flow,
            self.augmentations,
        )
        return self._build_result()

    def _augment(self, path: AugmentingPath) -> None:
        amount = bottleneck(self.residual, path)
        self.residual.apply_flow(path, amount)
        self.total_flow += amount
        self.augmentations += 1
        bound = self.augmentation_bound
        assert self.augmentations <= bound, f"augmentations exceed V * E = {bound}"
        if self.config.log_paths:
            logger.debug(
                "Augmentation %d: path %s, bottleneck %d, total flow %d",
                self.augmentations,
                path,
                amount,
                self.total_flow,
            )

    def _build_result(self) -> MaxFlowResult:
        reachable = reachable_from(self.residual, self.source)
        min_cut = tuple(
            (u, v)
            for u, v, _ in self.graph.edges()
            if u in reachable and v not in reachable
        )
        return MaxFlowResult(
            source=self.source,
            sink=self.sink,
            total_flow=self.total_flow,
            edge_flows=self.residual.edge_flows(),
            residual=self.residual,
            augmentations=self.augmentations,
            reachable=reachable,
            min_cut=min_cut,
        )


def max_flow(
    graph: CapacityGraph,
    source: Vertex,
    sink: Vertex,
    *,
    config: Optional[SolverConfig] = None,
) -> MaxFlowResult:
    """Compute the maximum flow from ``source`` to ``sink``.

    Args:
        graph: Validated capacity graph. It is only read, so one graph may be
            solved concurrently from several threads.
        source: Source vertex.
        sink: Sink vertex.
        config: Optional solver configuration; defaults to
            :data:`capflow.config.DEFAULT_CONFIG`.

    Returns:
        MaxFlowResult: Total flow, per-edge flows, the final residual graph and
        the minimum cut. An unreachable sink yields a total flow of 0.

    Raises:
        InvalidEndpoints: If ``source == sink`` or either is not a vertex.
        Aborted: If the configured augmentation budget is exceeded.

    Examples:
        >>> from capflow.graph.capacity import build_graph
        >>> g = build_graph(3, [(0, 1, 5), (1, 2, 3)])
        >>> max_flow(g, 0, 2).total_flow
        3
    """
    return MaxFlowSolver(graph, source, sink, config).run()


def saturated_edges(
    graph: CapacityGraph,
    source: Vertex,
    sink: Vertex,
    **kwargs: Any,
) -> List[Edge]:
    """Return original edges left with zero residual capacity by a max flow.

    Args:
        graph: The graph to analyze.
        source: Source vertex.
        sink: Sink vertex.
        **kwargs: Additional arguments passed to :func:`max_flow`.

    Returns:
        Edges ``(u, v)`` in ascending order. Zero-capacity edges are included.
    """
    residual = max_flow(graph, source, sink, **kwargs).residual
    return [
        (u, v) for u, v, _ in graph.edges() if residual.residual_capacity(u, v) == 0
    ]


def run_sensitivity(
    graph: CapacityGraph,
    source: Vertex,
    sink: Vertex,
    *,
    change_amount: int = 1,
    **kwargs: Any,
) -> Dict[Edge, int]:
    """Measure how the max flow reacts to per-edge capacity changes.

    Each saturated edge in turn has its capacity changed by ``change_amount``
    (clamped at zero) on a copy of the graph, and the change in total flow is
    recorded.

    Args:
        graph: The graph to analyze.
        source: Source vertex.
        sink: Sink vertex.
        change_amount: Capacity delta to apply; negative values decrease.
        **kwargs: Additional arguments passed to :func:`max_flow`.

    Returns:
        dict: Flow delta per saturated edge.
    """
    baseline = max_flow(graph, source, sink, **kwargs)
    residual = baseline.residual

    sensitivity: Dict[Edge, int] = {}
    for u, v, cap in graph.edges():
        if residual.residual_capacity(u, v) != 0:
            continue
        test_graph = graph.with_capacity(u, v, max(cap + change_amount, 0))
        new_flow = max_flow(test_graph, source, sink, **kwargs).total_flow
        sensitivity[(u, v)] = new_flow - baseline.total_flow
    return sensitivity
