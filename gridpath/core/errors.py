# gridpath/core/errors.py


class GridPathError(Exception):
    """Base class for pathfinding errors."""


class OutOfBounds(GridPathError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, point, side: int):
        super().__init__(f"point {point} is outside a {side}x{side} grid")
        self.point = point
        self.side = side


class Unreachable(GridPathError):
    """No path exists, or start/end is not set."""
