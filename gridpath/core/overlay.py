# gridpath/core/overlay.py
from dataclasses import dataclass, field

from gridpath.core.grid import Grid
from gridpath.core.types import Path


@dataclass
class PathOverlay:
    """
    Tracks which path is currently flagged `on_path` on the grid.

    Only the overlay writes `on_path`. After any `replace`, exactly the cells of
    the last applied path carry the flag.
    """
    grid: Grid
    path: Path = field(default_factory=list)

    def retract(self) -> None:
        for p in self.path:
            self.grid.set_on_path(p, False)
        self.path = []

    def apply(self, path: Path) -> None:
        for p in path:
            self.grid.set_on_path(p, True)
        self.path = list(path)

    def replace(self, path: Path) -> None:
        self.retract()
        self.apply(path)
