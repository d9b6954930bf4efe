# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Union

Point = Tuple[int, int]  # (x, y)
Path = List[Point]       # end -> start


@dataclass(frozen=True)
class Blocked:
    """Impassable cell. Use the BLOCKED singleton."""

    def __repr__(self) -> str:
        return "BLOCKED"


BLOCKED = Blocked()


@dataclass
class Weighted:
    weight: int                  # cost of entering this cell
    on_path: bool = False        # overlay flag, never read by a search


Cell = Union[Blocked, Weighted]


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Point] = field(default_factory=list)
    closed: List[Point] = field(default_factory=list)
    current: Optional[Point] = None
    path: Optional[Path] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
