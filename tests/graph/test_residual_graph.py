import pytest

from capflow.graph.capacity import build_graph
from capflow.graph.path import AugmentingPath
from capflow.graph.residual import ResidualGraph


def _path(*vertices):
    parent = {vertices[0]: None}
    for u, v in zip(vertices, vertices[1:]):
        parent[v] = u
    return AugmentingPath(source=vertices[0], sink=vertices[-1], parent=parent)


class TestResidualInit:
    def test_forward_and_reverse_entries(self, line3):
        r = ResidualGraph.from_capacity_graph(line3)
        assert r.residual_capacity(0, 1) == 5
        assert r.residual_capacity(1, 0) == 0
        assert r.residual_capacity(1, 2) == 3
        assert r.residual_capacity(2, 1) == 0
        assert list(r.pairs()) == [(0, 1, 5), (1, 0, 0), (1, 2, 3), (2, 1, 0)]

    def test_unknown_pair_is_zero(self, line3):
        r = ResidualGraph(line3)
        assert r.residual_capacity(0, 2) == 0
        assert r.residual_capacity(2, 0) == 0

    @pytest.mark.parametrize("u, v", [(-1, 0), (3, 0), (0, -1), (0, 3), (-3, 2)])
    def test_out_of_range_pair_is_zero(self, u, v):
        # Vertex 2 is the last row, so a negative index would alias it.
        r = ResidualGraph(build_graph(3, [(2, 0, 7)]))
        assert r.residual_capacity(u, v) == 0

    def test_antiparallel_keeps_both_capacities(self, antiparallel3):
        r = ResidualGraph(antiparallel3)
        assert r.residual_capacity(0, 1) == 5
        assert r.residual_capacity(1, 0) == 3

    def test_neighbors_ascending_include_reverse(self, clrs6):
        r = ResidualGraph(clrs6)
        assert r.neighbors(0) == (1, 2)
        assert r.neighbors(2) == (0, 1, 3, 4)
        assert r.neighbors(5) == (3, 4)

    def test_vertex_count_and_repr(self, line3):
        r = ResidualGraph(line3)
        assert r.vertex_count == 3
        assert repr(r) == "ResidualGraph(vertex_count=3, pairs=4)"


class TestApplyFlow:
    def test_moves_capacity_to_reverse(self, line3):
        r = ResidualGraph(line3)
        r.apply_flow(_path(0, 1, 2), 3)
        assert r.residual_capacity(0, 1) == 2
        assert r.residual_capacity(1, 0) == 3
        assert r.residual_capacity(1, 2) == 0
        assert r.residual_capacity(2, 1) == 3

    def test_antiparallel_reverse_grows_from_original(self, antiparallel3):
        r = ResidualGraph(antiparallel3)
        r.apply_flow(_path(0, 1, 2), 5)
        assert r.residual_capacity(0, 1) == 0
        assert r.residual_capacity(1, 0) == 8

    def test_cancelling_flow(self):
        g = build_graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (0, 2, 1), (1, 3, 1)])
        r = ResidualGraph(g)
        r.apply_flow(_path(0, 1, 2, 3), 1)
        # Send flow back over (2, 1), cancelling the unit on (1, 2).
        r.apply_flow(_path(0, 2, 1, 3), 1)
        assert r.net_flow(1, 2) == 0
        assert r.edge_flows() == {
            (0, 1): 1,
            (0, 2): 1,
            (1, 2): 0,
            (1, 3): 1,
            (2, 3): 1,
        }

    def test_overdraw_is_a_programming_error(self, line3):
        r = ResidualGraph(line3)
        with pytest.raises(AssertionError):
            r.apply_flow(_path(0, 1, 2), 4)

    def test_capacity_graph_untouched(self, line3):
        r = ResidualGraph(line3)
        r.apply_flow(_path(0, 1, 2), 3)
        assert list(line3.edges()) == [(0, 1, 5), (1, 2, 3)]


class TestFlowDerivation:
    def test_net_flow_is_antisymmetric(self, antiparallel3):
        r = ResidualGraph(antiparallel3)
        r.apply_flow(_path(0, 1, 2), 5)
        assert r.net_flow(0, 1) == 5
        assert r.net_flow(1, 0) == -5
        assert r.net_flow(0, 2) == 0

    def test_net_flow_for_reverse_only_pair(self, line3):
        r = ResidualGraph(line3)
        r.apply_flow(_path(0, 1), 2)
        assert r.net_flow(1, 0) == -2

    def test_edge_flows_antiparallel(self, antiparallel3):
        r = ResidualGraph(antiparallel3)
        r.apply_flow(_path(0, 1, 2), 5)
        assert r.edge_flows() == {(0, 1): 5, (1, 0): 0, (1, 2): 5}

