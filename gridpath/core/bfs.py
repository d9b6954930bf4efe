# gridpath/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search, one frontier pop per step().

Same Algorithm API as the Dijkstra implementation:
- init(grid, start, end) - reset() - step() -> StepResult - run() -> Path

Every move counts as one hop regardless of cell weight. The search stops the
moment `end` is discovered as a neighbor; the rest of the frontier is left
undrained.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from gridpath.core.errors import Unreachable
from gridpath.core.grid import Grid
from gridpath.core.neighbors import Adjacency, NeighborRule
from gridpath.core.paths import new_table, path_cost, reconstruct_path
from gridpath.core.types import Path, Point, StepResult


@dataclass
class BfsAlgo:
    name: str = "BFS"
    adjacency: Adjacency = Adjacency.EIGHT

    # Internal state, rebuilt by reset()
    grid: Optional[Grid] = None
    start: Optional[Point] = None
    end: Optional[Point] = None
    rule: Optional[NeighborRule] = None
    frontier: Deque[Point] = field(default_factory=deque)
    came_from: List[List[Optional[Point]]] = field(default_factory=list)  # None = unvisited
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    path: Optional[Path] = None

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Point], end: Optional[Point]) -> None:
        self.grid = grid
        self.start = start
        self.end = end
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the start point."""
        if self.grid is None:
            return
        self.rule = NeighborRule(self.grid, self.adjacency)
        self.frontier.clear()
        self.came_from = new_table(self.grid.side, None)
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.path = None

        if self.start is None or self.end is None:
            self.no_path = True
            return

        s = self.grid.check(self.start)
        self.grid.check(self.end)
        if self.grid.is_blocked(s) or self.grid.is_blocked(self.end):
            self.no_path = True
            return
        self.came_from[s[0]][s[1]] = s
        if s == self.end:
            self.done = True
            self.path = [s]
            return
        self.frontier.append(s)

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=self.path, metrics=self._metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        u = self.frontier.popleft()
        self.popped_count += 1

        opened_now: List[Point] = []
        for v in self.rule.neighbors_of(u):
            vx, vy = v
            if self.came_from[vx][vy] is not None:
                continue
            self.came_from[vx][vy] = u
            self.frontier.append(v)
            opened_now.append(v)
            if v == self.end:
                self.done = True
                self.path = reconstruct_path(self.came_from, self.start, self.end)
                return StepResult(status="done", opened=opened_now, closed=[u], current=u,
                                  path=self.path, metrics=self._metrics())

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> Path:
        """Step to a terminal state. Raises Unreachable when there is no path."""
        while True:
            res = self.step()
            if res.status == "done":
                return res.path
            if res.status == "no_path":
                raise Unreachable(f"no path from {self.start} to {self.end}")
            if res.status == "idle":
                raise Unreachable("search has no grid")

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        path_len = len(self.path) if self.path else 0
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "closed_count": self.popped_count,
            "path_len": path_len,
            "total_cost": path_cost(self.grid, self.path) if self.path else None,
        }
