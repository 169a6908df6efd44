"""Shared fixtures: small capacity graphs and a flow-validity checker."""

from __future__ import annotations

from collections import defaultdict

import pytest

from capflow.graph.capacity import build_graph

# Six-vertex reference network (source 0, sink 5).
CLRS_EDGES = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 2, 10),
    (1, 3, 12),
    (2, 1, 4),
    (2, 4, 14),
    (3, 2, 9),
    (3, 5, 20),
    (4, 3, 7),
    (4, 5, 4),
]


@pytest.fixture
def clrs6():
    # Max flow 0 -> 5 is 23; min cut {(1,3), (4,3), (4,5)}.
    return build_graph(6, CLRS_EDGES)


@pytest.fixture
def antiparallel3():
    # 0 ⇄ 1 ─► 2 with (0,1)=5, (1,0)=3, (1,2)=5. Max flow 0 -> 2 is 5.
    return build_graph(3, [(0, 1, 5), (1, 0, 3), (1, 2, 5)])


@pytest.fixture
def line3():
    # 0 ─5─► 1 ─3─► 2
    return build_graph(3, [(0, 1, 5), (1, 2, 3)])


@pytest.fixture
def diamond4():
    #     ┌─3─► 1 ─2─┐
    #   0 │     │1   ▼ 3
    #     └─2─► 2 ─3─┘
    return build_graph(4, [(0, 1, 3), (0, 2, 2), (1, 2, 1), (1, 3, 2), (2, 3, 3)])


@pytest.fixture
def zero_capacity4():
    return build_graph(4, [(0, 1, 0), (1, 3, 0), (0, 2, 0), (2, 3, 0)])


@pytest.fixture
def disconnected_sink(clrs6):
    # Reference network with every edge touching vertex 5 removed.
    return build_graph(
        6, [(u, v, c) for u, v, c in clrs6.edges() if 5 not in (u, v)]
    )


@pytest.fixture
def check_flow():
    """Return a function asserting that a result is a valid flow for its graph.

    Checks capacity bounds, conservation at intermediate vertices, the
    net-flow residual identity and that the value leaving the source equals
    ``total_flow``.
    """

    def _check(result) -> None:
        residual = result.residual
        graph = residual.graph
        balance = defaultdict(int)
        for u, v, cap in graph.edges():
            flow = result.edge_flows[(u, v)]
            assert 0 <= flow <= cap
            assert residual.residual_capacity(u, v) >= 0
            assert residual.residual_capacity(u, v) + residual.net_flow(u, v) == cap
            balance[u] -= flow
            balance[v] += flow
        for w in graph.vertices():
            if w not in (result.source, result.sink):
                assert balance[w] == 0, f"flow not conserved at vertex {w}"
        assert -balance[result.source] == result.total_flow
        assert balance[result.sink] == result.total_flow
        for _, _, r in residual.pairs():
            assert r >= 0

    return _check
