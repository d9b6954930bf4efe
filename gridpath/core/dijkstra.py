# gridpath/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import heapq
from math import inf

from gridpath.core.errors import Unreachable
from gridpath.core.grid import Grid
from gridpath.core.neighbors import Adjacency, NeighborRule
from gridpath.core.paths import new_table, path_cost, reconstruct_path
from gridpath.core.types import Path, Point, StepResult


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"
    adjacency: Adjacency = Adjacency.FOUR

    grid: Optional[Grid] = None
    start: Optional[Point] = None
    end: Optional[Point] = None
    rule: Optional[NeighborRule] = None
    open_pq: List[Tuple[float, int, Point]] = field(default_factory=list)   # (g, seq, point)
    cost: List[List[float]] = field(default_factory=list)
    came_from: List[List[Optional[Point]]] = field(default_factory=list)
    popped_count: int = 0
    stale_count: int = 0
    done: bool = False
    no_path: bool = False
    path: Optional[Path] = None
    seq: int = 0  # insertion order breaks cost ties

    def init(self, grid: Grid, start: Optional[Point], end: Optional[Point]) -> None:
        self.grid = grid
        self.start = start
        self.end = end
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self.rule = NeighborRule(self.grid, self.adjacency)
        self.open_pq.clear()
        self.cost = new_table(self.grid.side, inf)
        self.came_from = new_table(self.grid.side, None)
        self.popped_count = 0
        self.stale_count = 0
        self.done = False
        self.no_path = False
        self.path = None
        self.seq = 0

        if self.start is None or self.end is None:
            self.no_path = True
            return

        s = self.grid.check(self.start)
        self.grid.check(self.end)
        if self.grid.is_blocked(s) or self.grid.is_blocked(self.end):
            self.no_path = True
            return
        self.cost[s[0]][s[1]] = 0
        self.came_from[s[0]][s[1]] = s
        if s == self.end:
            self.done = True
            self.path = [s]
            return
        heapq.heappush(self.open_pq, (0, self._bump(), s))

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=self.path, metrics=self._metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        g_u, _, u = heapq.heappop(self.open_pq)
        ux, uy = u
        # stale entry: a cheaper route to u was pushed after this one
        if g_u != self.cost[ux][uy]:
            self.stale_count += 1
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1

        opened_now: List[Point] = []
        for v in self.rule.neighbors_of(u):
            vx, vy = v
            alt = self.cost[ux][uy] + self.grid.weight_of(v)
            if alt < self.cost[vx][vy]:
                self.cost[vx][vy] = alt
                self.came_from[vx][vy] = u
                heapq.heappush(self.open_pq, (alt, self._bump(), v))
                opened_now.append(v)
                if v == self.end:
                    self.done = True
                    self.path = reconstruct_path(self.came_from, self.start, self.end)
                    return StepResult(status="done", opened=opened_now, closed=[u], current=u,
                                      path=self.path, metrics=self._metrics())

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> Path:
        while True:
            res = self.step()
            if res.status == "done":
                return res.path
            if res.status == "no_path":
                raise Unreachable(f"no path from {self.start} to {self.end}")
            if res.status == "idle":
                raise Unreachable("search has no grid")

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": self.stale_count,
            "open_size": len(self.open_pq),
            "closed_count": self.popped_count,
            "path_len": len(self.path) if self.path else 0,
            "total_cost": path_cost(self.grid, self.path) if self.path else None,
        }
