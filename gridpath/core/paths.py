# gridpath/core/paths.py
from typing import List, Optional, TypeVar

from gridpath.core.errors import Unreachable
from gridpath.core.grid import Grid
from gridpath.core.types import Path, Point

T = TypeVar("T")


def new_table(side: int, fill: T) -> List[List[T]]:
    """Fresh side x side table, indexed [x][y]."""
    return [[fill] * side for _ in range(side)]


def reconstruct_path(came_from: List[List[Optional[Point]]], start: Point, end: Point) -> Path:
    """Walk predecessors back from end; the result runs end -> start."""
    path: Path = [end]
    cur = end
    while cur != start:
        prev = came_from[cur[0]][cur[1]]
        if prev is None:
            raise Unreachable(f"{end} was never reached from {start}")
        cur = prev
        path.append(cur)
    return path


def path_cost(grid: Grid, path: Path) -> int:
    """Sum of the weights of every entered cell (the start cell is free)."""
    return sum(grid.weight_of(p) for p in path[:-1])
