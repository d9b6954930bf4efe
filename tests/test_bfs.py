import pytest

from gridpath.core.bfs import BfsAlgo
from gridpath.core.errors import OutOfBounds, Unreachable
from gridpath.core.grid import Grid
from gridpath.core.neighbors import Adjacency, NeighborRule


def is_step(a, b):
    return max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1


def run_bfs(grid, start, end, adjacency=Adjacency.EIGHT):
    algo = BfsAlgo(adjacency=adjacency)
    algo.init(grid, start, end)
    return algo.run()


def test_routes_around_blocked_center():
    g = Grid.from_rows([[1, 1, 1], [1, -1, 1], [1, 1, 1]])
    path = run_bfs(g, (0, 0), (2, 2))
    assert path == [(2, 2), (1, 2), (0, 1), (0, 0)]
    assert (1, 1) not in path


def test_path_runs_end_to_start(open_grid):
    path = run_bfs(open_grid(5), (0, 0), (4, 2))
    assert path[0] == (4, 2) and path[-1] == (0, 0)
    assert len(path) - 1 == 4
    assert all(is_step(a, b) for a, b in zip(path, path[1:]))


def test_four_directional_hops_are_manhattan(open_grid):
    path = run_bfs(open_grid(4), (0, 0), (2, 3), Adjacency.FOUR)
    assert len(path) - 1 == 5
    assert all(abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(path, path[1:]))


def test_ignores_weights():
    g = Grid.from_rows([[1, 9, 1], [1, 9, 1], [1, 9, 1]])
    path = run_bfs(g, (0, 0), (0, 2), Adjacency.FOUR)
    assert path == [(0, 2), (0, 1), (0, 0)]


def test_same_start_and_end(open_grid):
    algo = BfsAlgo()
    algo.init(open_grid(3), (1, 1), (1, 1))
    assert algo.run() == [(1, 1)]
    assert algo.step().metrics["total_cost"] == 0


def test_enclosed_end_is_unreachable():
    g = Grid.from_rows([
        [1, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, -1, -1],
        [1, 1, -1, 1],
    ])
    with pytest.raises(Unreachable):
        run_bfs(g, (0, 0), (3, 3))


def test_missing_endpoint_is_unreachable(open_grid):
    algo = BfsAlgo()
    algo.init(open_grid(3), (0, 0), None)
    assert algo.step().status == "no_path"
    with pytest.raises(Unreachable):
        algo.run()


def test_out_of_bounds_start(open_grid):
    algo = BfsAlgo()
    with pytest.raises(OutOfBounds):
        algo.init(open_grid(3), (3, 0), (0, 0))


def test_stepping_reports_progress(open_grid):
    algo = BfsAlgo()
    algo.init(open_grid(4), (0, 0), (3, 3))
    res = algo.step()
    assert res.status == "running"
    assert res.current == (0, 0)
    assert res.closed == [(0, 0)]
    assert res.opened == [(0, 1), (1, 0), (1, 1)]
    assert res.metrics["popped"] == 1


def test_repeat_search_is_identical():
    g = Grid.from_rows([[1, 1, 1, 1], [1, -1, -1, 1], [1, 1, 1, 1], [-1, 1, 1, 1]])
    algo = BfsAlgo()
    algo.init(g, (0, 0), (3, 3))
    first = algo.run()
    algo.reset()
    assert algo.run() == first
    assert run_bfs(g, (0, 0), (3, 3)) == first


@pytest.mark.parametrize("adjacency", [Adjacency.EIGHT, Adjacency.FOUR])
def test_hop_count_is_shortest(random_grids, shortest_distances, adjacency):
    rng, grids = random_grids
    for g in grids:
        free = [p for p in g.points() if not g.is_blocked(p)]
        if len(free) < 2:
            continue
        start, end = rng.sample(free, 2)
        dist = shortest_distances(g, NeighborRule(g, adjacency), start, weighted=False)
        if end not in dist:
            with pytest.raises(Unreachable):
                run_bfs(g, start, end, adjacency)
            continue
        path = run_bfs(g, start, end, adjacency)
        assert len(path) - 1 == dist[end]
        assert not any(g.is_blocked(p) for p in path)


@pytest.mark.parametrize("start, end", [((0, 0), (1, 1)), ((1, 1), (0, 0)), ((0, 0), (0, 0))])
def test_blocked_endpoint_is_unreachable(start, end):
    g = Grid.from_rows([[-1, 1], [1, 1]])
    algo = BfsAlgo()
    algo.init(g, start, end)
    assert algo.step().status == "no_path"
    with pytest.raises(Unreachable):
        algo.run()
