import random
from math import inf

import pytest

from gridpath.core.grid import Grid


def _open_grid(n, weight=1):
    return Grid.from_rows([[weight] * n for _ in range(n)])


def _relaxed_distances(grid, rule, start, weighted):
    """Reference distances by repeated relaxation until nothing changes."""
    dist = {start: 0}
    changed = True
    while changed:
        changed = False
        for p, d in list(dist.items()):
            for q in rule.neighbors_of(p):
                nd = d + (grid.weight_of(q) if weighted else 1)
                if nd < dist.get(q, inf):
                    dist[q] = nd
                    changed = True
    return dist


@pytest.fixture
def open_grid():
    """Factory for an n x n grid with no blocked cells."""
    return _open_grid


@pytest.fixture
def shortest_distances():
    return _relaxed_distances


@pytest.fixture
def random_grids():
    rng = random.Random(1234)
    grids = []
    for _ in range(40):
        n = rng.randint(2, 7)
        rows = [[-1 if rng.random() < 0.25 else rng.randint(0, 9) for _ in range(n)] for _ in range(n)]
        grids.append(Grid.from_rows(rows))
    return rng, grids
