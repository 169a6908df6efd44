from capflow.graph.path import AugmentingPath


def test_vertices_and_edges_follow_parent_chain():
    # Vertex 4 was visited by the search but is not on the path.
    path = AugmentingPath(source=0, sink=3, parent={0: None, 1: 0, 4: 0, 2: 1, 3: 2})
    assert path.vertices() == (0, 1, 2, 3)
    assert list(path.edges()) == [(2, 3), (1, 2), (0, 1)]
    assert len(path) == 3


def test_single_edge_path():
    path = AugmentingPath(source=2, sink=0, parent={2: None, 0: 2})
    assert path.vertices() == (2, 0)
    assert len(path) == 1


def test_str_reads_from_sink_back_to_source():
    path = AugmentingPath(source=0, sink=5, parent={0: None, 1: 0, 3: 1, 5: 3})
    assert str(path) == "5 <- 3 <- 1 <- 0"


def test_paths_hash_by_identity():
    parent = {0: None, 1: 0}
    a = AugmentingPath(source=0, sink=1, parent=parent)
    b = AugmentingPath(source=0, sink=1, parent=dict(parent))
    assert len({a, b}) == 2
    assert a == a and a != b
