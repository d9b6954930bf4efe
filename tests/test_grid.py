import pytest

from gridpath.core.errors import OutOfBounds
from gridpath.core.grid import Grid
from gridpath.core.types import BLOCKED, Weighted


def make_grid():
    return Grid.from_rows([
        [1, 2, 3],
        [4, -1, 6],
        [0, 8, 9],
    ])


def test_from_rows_negative_is_blocked():
    g = make_grid()
    assert g.side == 3
    assert g.cell_at((1, 1)) is BLOCKED
    assert g.cell_at((0, 2)) == Weighted(3, on_path=False)
    assert g.cell_at((2, 0)) == Weighted(0)


def test_queries():
    g = make_grid()
    assert g.is_blocked((1, 1))
    assert not g.is_blocked((0, 0))
    assert g.weight_of((1, 2)) == 6
    assert g.weight_of((1, 1)) == 0


@pytest.mark.parametrize("p", [(3, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
def test_cell_at_out_of_bounds(p):
    g = make_grid()
    with pytest.raises(OutOfBounds):
        g.cell_at(p)
    # also an IndexError for callers that only know lists
    with pytest.raises(IndexError):
        g.weight_of(p)


def test_set_on_path():
    g = make_grid()
    g.set_on_path((0, 1), True)
    assert g.cell_at((0, 1)).on_path
    assert g.on_path_points() == {(0, 1)}
    g.set_on_path((0, 1), False)
    assert g.on_path_points() == set()


def test_set_on_path_blocked_is_noop():
    g = make_grid()
    g.set_on_path((1, 1), True)
    assert g.cell_at((1, 1)) is BLOCKED
    assert g.on_path_points() == set()


def test_grid_must_be_square():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 1], [1]])
    with pytest.raises(ValueError):
        Grid.from_rows([])


def test_points_covers_every_cell():
    g = make_grid()
    pts = list(g.points())
    assert len(pts) == 9
    assert pts[0] == (0, 0) and pts[-1] == (2, 2)
