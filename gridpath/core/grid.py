# gridpath/core/grid.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Set

from gridpath.core.errors import OutOfBounds
from gridpath.core.types import BLOCKED, Blocked, Cell, Point, Weighted


@dataclass
class Grid:
    """
    Square N x N matrix of cells, indexed cells[x][y].

    The side length is fixed when the grid is built; every point access goes
    through `cell_at`, which raises OutOfBounds instead of wrapping negative
    indices the way Python lists would.
    """
    cells: List[List[Cell]]
    side: int = field(init=False)

    def __post_init__(self) -> None:
        n = len(self.cells)
        if n == 0:
            raise ValueError("grid must have at least one row")
        if any(len(row) != n for row in self.cells):
            raise ValueError(f"grid is not square: {n} rows of lengths "
                             f"{sorted({len(row) for row in self.cells})}")
        self.side = n

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Negative values become BLOCKED, the rest Weighted(value)."""
        cells: List[List[Cell]] = [
            [BLOCKED if v < 0 else Weighted(int(v)) for v in row]
            for row in rows
        ]
        return cls(cells)

    def in_bounds(self, p: Point) -> bool:
        x, y = p
        return 0 <= x < self.side and 0 <= y < self.side

    def check(self, p: Point) -> Point:
        if not self.in_bounds(p):
            raise OutOfBounds(p, self.side)
        return p

    def cell_at(self, p: Point) -> Cell:
        x, y = self.check(p)
        return self.cells[x][y]

    def is_blocked(self, p: Point) -> bool:
        return isinstance(self.cell_at(p), Blocked)

    def weight_of(self, p: Point) -> int:
        cell = self.cell_at(p)
        if isinstance(cell, Weighted):
            return cell.weight
        return 0

    def set_on_path(self, p: Point, flag: bool) -> None:
        cell = self.cell_at(p)
        if isinstance(cell, Weighted):
            cell.on_path = flag

    def points(self) -> Iterator[Point]:
        for x in range(self.side):
            for y in range(self.side):
                yield (x, y)

    def on_path_points(self) -> Set[Point]:
        flagged = set()
        for p in self.points():
            cell = self.cells[p[0]][p[1]]
            if isinstance(cell, Weighted) and cell.on_path:
                flagged.add(p)
        return flagged
