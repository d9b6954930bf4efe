# gridpath/core/session.py
"""
Event-handler side of the viewer: start/end designation drives a full search.

A designation runs retract -> search -> apply synchronously, so a reader of
the grid between two handler calls always sees a complete overlay.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gridpath.core.errors import Unreachable
from gridpath.core.grid import Grid
from gridpath.core.neighbors import Adjacency
from gridpath.core.overlay import PathOverlay
from gridpath.core.search import Algorithm, make_algo, parse_algo_name
from gridpath.core.types import Path, Point

logger = logging.getLogger(__name__)


@dataclass
class PathSession:
    grid: Grid
    algo_name: str = "BFS"
    adjacency: Optional[Adjacency] = None   # None = algorithm default

    start: Optional[Point] = None
    end: Optional[Point] = None
    status: str = "idle"                    # "idle" | "done" | "no_path"
    overlay: PathOverlay = field(init=False)
    algo: Algorithm = field(init=False)
    last_metrics: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.algo_name = parse_algo_name(self.algo_name)
        self.overlay = PathOverlay(self.grid)
        self.algo = make_algo(self.algo_name, self.adjacency)

    @property
    def path(self) -> Path:
        return self.overlay.path

    # -------------------- input --------------------

    def designate_start(self, p: Point) -> Path:
        self.grid.check(p)
        if self.end == p:
            logger.debug("ignoring start %s: already the end point", p)
            return self.path
        self.start = p
        return self.recompute()

    def designate_end(self, p: Point) -> Path:
        self.grid.check(p)
        if self.start == p:
            logger.debug("ignoring end %s: already the start point", p)
            return self.path
        self.end = p
        return self.recompute()

    def switch_algo(self, name: str) -> Path:
        self.algo_name = parse_algo_name(name)
        self.algo = make_algo(self.algo_name, self.adjacency)
        return self.recompute()

    def switch_adjacency(self, adjacency: Optional[Adjacency]) -> Path:
        self.adjacency = adjacency
        self.algo = make_algo(self.algo_name, adjacency)
        return self.recompute()

    def clear(self) -> None:
        self.overlay.retract()
        self.start = None
        self.end = None
        self.status = "idle"
        self.last_metrics = {"algo": self.algo_name}

    # -------------------- search --------------------

    def recompute(self) -> Path:
        """Retract the old overlay, search, and apply the new path if any."""
        self.overlay.retract()
        if self.start is None or self.end is None:
            self.status = "idle"
            self.last_metrics = {"algo": self.algo_name}
            return self.path

        self.algo.init(self.grid, self.start, self.end)
        try:
            path = self.algo.run()
        except Unreachable as ex:
            logger.warning("%s: %s", self.algo_name, ex)
            self.status = "no_path"
        else:
            self.overlay.apply(path)
            self.status = "done"
            logger.debug("%s: %d points from %s to %s", self.algo_name, len(path), self.start, self.end)
        self.last_metrics = self.algo.step().metrics
        return self.path
