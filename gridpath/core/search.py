# gridpath/core/search.py
from typing import Optional, Union

from gridpath.core.bfs import BfsAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.neighbors import Adjacency

Algorithm = Union[BfsAlgo, DijkstraAlgo]

ALGORITHMS = {
    "BFS": BfsAlgo,
    "Dijkstra": DijkstraAlgo,
}


def parse_algo_name(value: str) -> str:
    for name in ALGORITHMS:
        if value.strip().lower() == name.lower():
            return name
    raise ValueError(f"unknown algorithm {value!r} (expected one of {', '.join(ALGORITHMS)})")


def make_algo(name: str, adjacency: Optional[Adjacency] = None) -> Algorithm:
    """Build an algorithm by name; adjacency=None keeps the algorithm's default."""
    cls = ALGORITHMS[parse_algo_name(name)]
    if adjacency is None:
        return cls()
    return cls(adjacency=adjacency)
