from koalagraphs.graph import Graph
from koalagraphs.traversal import bfs, bfs_path, dfs_from


def _path_graph(n):
    g = Graph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    return g


def _grid_like():
    g = Graph(6)
    for u, v in [(0, 1), (1, 2), (0, 3), (3, 4), (4, 2), (2, 5)]:
        g.add_edge(u, v)
    return g


def test_bfs_reaches_target():
    g = _path_graph(5)
    assert bfs(g, 0, 4)


def test_bfs_blocked_by_predicate():
    g = _path_graph(5)
    assert not bfs(g, 0, 4, lambda v: v != 2)


def test_bfs_target_allowed_even_if_rejected():
    g = _path_graph(3)
    assert bfs(g, 0, 2, lambda v: v != 2)


def test_bfs_path_is_a_walk_from_source_to_target():
    g = _grid_like()
    path = bfs_path(g, 0, 5)
    assert path[0] == 0 and path[-1] == 5
    assert all(g.has_edge(a, b) for a, b in zip(path, path[1:]))
    assert len(path) == 4


def test_bfs_path_avoids_rejected_nodes():
    g = _grid_like()
    path = bfs_path(g, 0, 5, lambda v: v != 1)
    assert 1 not in path
    assert path[0] == 0 and path[-1] == 5


def test_bfs_path_empty_when_unreachable():
    g = Graph(4)
    g.add_edge(0, 1)
    assert bfs_path(g, 0, 3) == []


def test_bfs_path_to_self():
    g = _path_graph(3)
    assert bfs_path(g, 1, 1) == [1]


def test_dfs_visits_component_once():
    g = _grid_like()
    g.add_nodes(1)
    visited = list(dfs_from(g, 0))
    assert visited[0] == 0
    assert sorted(visited) == [0, 1, 2, 3, 4, 5]


def test_dfs_respects_predicate():
    g = _path_graph(5)
    visited = set(dfs_from(g, 0, lambda v: v < 3))
    assert visited == {0, 1, 2}