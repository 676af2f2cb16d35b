import pytest

from algokit.graph import Graph


@pytest.fixture
def seven():
    g = Graph()
    for s, t in [(1, 2), (1, 3), (2, 4), (2, 5), (3, 4), (4, 6), (5, 6), (6, 7)]:
        g.add_edge(s, t)
    return g


@pytest.fixture
def eight():
    g = Graph()
    for s, t in [
        (0, 1), (0, 3), (1, 2), (1, 4), (2, 5),
        (3, 4), (4, 5), (4, 6), (5, 7), (6, 7),
    ]:
        g.add_edge(s, t)
    return g


def test_bfs_path_case(seven):
    assert seven.bfs_path(4, 1) == [4, 2, 1]


def test_dfs_path_case(seven):
    assert seven.dfs_path(5, 7) == [5, 2, 1, 3, 4, 6, 7]


def test_dfs_path_second_graph(eight):
    assert eight.dfs_path(1, 7) == [1, 0, 3, 4, 5, 7]


def test_bfs_path_second_graph(eight):
    assert eight.bfs_path(0, 7) == [0, 1, 2, 5, 7]


def test_bfs_order(eight):
    assert eight.bfs_order(0) == [0, 1, 3, 2, 4, 5, 6, 7]


def test_paths_follow_edges(eight):
    for path in (eight.bfs_path(7, 0), eight.dfs_path(7, 0)):
        assert path[0] == 7 and path[-1] == 0
        assert len(set(path)) == len(path)
        for a, b in zip(path, path[1:]):
            assert b in eight.bfs_order(a)


def test_same_start_and_target(seven):
    assert seven.bfs_path(3, 3) == [3]
    assert seven.dfs_path(3, 3) == [3]


def test_unreachable_returns_none(seven):
    seven.add_edge(8, 9)
    assert seven.bfs_path(1, 9) is None
    assert seven.dfs_path(1, 9) is None
    assert seven.bfs_path(1, 42) is None


def test_bfs_order_of_isolated_start():
    assert Graph().bfs_order("x") == ["x"]