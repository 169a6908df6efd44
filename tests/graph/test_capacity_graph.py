import numpy as np
import pytest

from capflow.errors import (
    CapflowError,
    DuplicateEdge,
    InvalidCapacity,
    InvalidVertex,
    SelfLoop,
)
from capflow.graph.capacity import CapacityGraph, build_graph


class TestBuildGraph:
    def test_basic_accessors(self, clrs6):
        assert clrs6.vertex_count == 6
        assert clrs6.edge_count == 10
        assert list(clrs6.vertices()) == [0, 1, 2, 3, 4, 5]
        assert clrs6.capacity(0, 1) == 16
        assert clrs6.capacity(1, 0) == 0
        assert clrs6.has_edge(3, 5)
        assert not clrs6.has_edge(5, 3)

    def test_out_edges_sorted_by_destination(self):
        g = build_graph(4, [(0, 3, 1), (0, 1, 2), (0, 2, 3)])
        assert g.out_edges(0) == ((1, 2), (2, 3), (3, 1))
        assert g.out_edges(3) == ()

    def test_edges_sorted(self):
        g = build_graph(3, [(2, 0, 1), (0, 2, 4), (0, 1, 5)])
        assert list(g.edges()) == [(0, 1, 5), (0, 2, 4), (2, 0, 1)]

    def test_zero_capacity_edge_is_kept(self):
        g = build_graph(2, [(0, 1, 0)])
        assert g.has_edge(0, 1)
        assert g.capacity(0, 1) == 0

    def test_no_edges(self):
        g = build_graph(1, [])
        assert g.edge_count == 0

    def test_accepts_generator_and_lists(self):
        g = build_graph(3, ([u, u + 1, 2] for u in range(2)))
        assert list(g.edges()) == [(0, 1, 2), (1, 2, 2)]

    @pytest.mark.parametrize("edge", [(0, 3, 1), (-1, 0, 1), (0, 7, 1), (0.0, 1, 1)])
    def test_invalid_vertex(self, edge):
        with pytest.raises(InvalidVertex):
            build_graph(3, [edge])

    @pytest.mark.parametrize("n", [0, -2, 2.0, True, None])
    def test_invalid_vertex_count(self, n):
        with pytest.raises(InvalidVertex):
            build_graph(n, [])

    @pytest.mark.parametrize("cap", [-1, 1.5, "3", None, True])
    def test_invalid_capacity(self, cap):
        with pytest.raises(InvalidCapacity):
            build_graph(2, [(0, 1, cap)])

    def test_self_loop(self):
        with pytest.raises(SelfLoop):
            build_graph(3, [(0, 1, 1), (1, 1, 4)])

    def test_duplicate_edge(self):
        with pytest.raises(DuplicateEdge):
            build_graph(3, [(0, 1, 1), (1, 2, 1), (0, 1, 2)])

    def test_antiparallel_edges_are_not_duplicates(self):
        g = build_graph(2, [(0, 1, 1), (1, 0, 2)])
        assert g.capacity(0, 1) == 1
        assert g.capacity(1, 0) == 2

    def test_malformed_triple(self):
        with pytest.raises(ValueError, match="triple"):
            build_graph(3, [(0, 1)])

    def test_errors_are_distinct_value_errors(self):
        kinds = set()
        for edges in ([(0, 1, -1)], [(1, 1, 1)], [(0, 9, 1)]):
            with pytest.raises(CapflowError) as exc_info:
                build_graph(3, edges)
            assert isinstance(exc_info.value, ValueError)
            kinds.add(type(exc_info.value))
        assert kinds == {InvalidCapacity, SelfLoop, InvalidVertex}

    def test_failed_build_leaves_source_edges_untouched(self):
        edges = [(0, 1, 3), (1, 2, -4)]
        snapshot = list(edges)
        with pytest.raises(InvalidCapacity):
            build_graph(3, edges)
        assert edges == snapshot

    def test_out_edges_invalid_vertex(self, line3):
        with pytest.raises(InvalidVertex):
            line3.out_edges(3)


class TestCapacityGraphValueSemantics:
    def test_equality_and_hash(self):
        a = build_graph(3, [(0, 1, 1), (1, 2, 2)])
        b = build_graph(3, [(1, 2, 2), (0, 1, 1)])
        c = build_graph(4, [(0, 1, 1), (1, 2, 2)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_repr(self, line3):
        assert repr(line3) == (
            "CapacityGraph(vertex_count=3, edges=[(0, 1, 5), (1, 2, 3)])"
        )

    def test_with_capacity_returns_new_graph(self, line3):
        g2 = line3.with_capacity(1, 2, 10)
        assert g2.capacity(1, 2) == 10
        assert line3.capacity(1, 2) == 3
        g3 = line3.with_capacity(2, 0, 1)
        assert g3.edge_count == 3

    def test_with_capacity_validates(self, line3):
        with pytest.raises(InvalidCapacity):
            line3.with_capacity(0, 1, -1)
        with pytest.raises(SelfLoop):
            line3.with_capacity(1, 1, 1)


class TestMatrixConversion:
    def test_from_matrix(self):
        g = CapacityGraph.from_matrix([[0, 16, 13], [0, 0, 10], [4, 0, 0]])
        assert list(g.edges()) == [(0, 1, 16), (0, 2, 13), (1, 2, 10), (2, 0, 4)]

    def test_to_matrix_roundtrip(self, clrs6):
        matrix = clrs6.to_matrix()
        assert matrix.shape == (6, 6)
        assert matrix.dtype == np.int64
        assert matrix[0, 1] == 16
        assert matrix[5].sum() == 0
        assert CapacityGraph.from_matrix(matrix) == clrs6

    def test_from_matrix_rejects_non_square(self):
        with pytest.raises(InvalidVertex):
            CapacityGraph.from_matrix([[0, 1, 2], [0, 0, 1]])

    def test_from_matrix_rejects_diagonal(self):
        with pytest.raises(SelfLoop):
            CapacityGraph.from_matrix([[1, 0], [0, 0]])

    def test_from_matrix_rejects_negative(self):
        with pytest.raises(InvalidCapacity):
            CapacityGraph.from_matrix([[0, -2], [0, 0]])

    def test_from_matrix_rejects_floats(self):
        with pytest.raises(InvalidCapacity):
            CapacityGraph.from_matrix(np.array([[0.0, 1.5], [0.0, 0.0]]))
