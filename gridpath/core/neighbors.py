# gridpath/core/neighbors.py
#!/usr/bin/env python3
"""
Neighbor rules.

EIGHT: every compass neighbor, scanned dx outer / dy inner.
FOUR:  down, right, then up (only when y > 0) and left (only when x > 0).

The FOUR rule proposes down/right unconditionally but guards up/left. The
bounds filter makes the two sides equivalent in practice; the asymmetric
guard and its ordering are left as they are.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from gridpath.core.grid import Grid
from gridpath.core.types import Point


class Adjacency(Enum):
    EIGHT = "eight"
    FOUR = "four"

    @classmethod
    def parse(cls, value: str) -> "Adjacency":
        key = value.strip().lower()
        aliases = {"8": cls.EIGHT, "4": cls.FOUR}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown adjacency {value!r} (expected 'four' or 'eight')") from None


@dataclass(frozen=True)
class NeighborRule:
    grid: Grid
    adjacency: Adjacency = Adjacency.EIGHT

    def _candidates(self, p: Point) -> List[Point]:
        x, y = p
        if self.adjacency is Adjacency.EIGHT:
            return [(x + dx, y + dy)
                    for dx in (-1, 0, 1)
                    for dy in (-1, 0, 1)
                    if (dx, dy) != (0, 0)]

        candidates: List[Point] = [(x, y + 1), (x + 1, y)]
        if y > 0:
            candidates.append((x, y - 1))
        if x > 0:
            candidates.append((x - 1, y))
        return candidates

    def neighbors_of(self, p: Point) -> List[Point]:
        """Traversable neighbors of p in a fixed order."""
        self.grid.check(p)
        out: List[Point] = []
        for n in self._candidates(p):
            if self.grid.in_bounds(n) and not self.grid.is_blocked(n):
                out.append(n)
        return out
