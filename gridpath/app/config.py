# gridpath/app/config.py
"""
Viewer settings.

Defaults live in the constants below. Each can be overridden by an
environment variable and then by a --key=value command-line flag:

    GRIDPATH_MAP        --map=PATH
    GRIDPATH_ALGO       --algo=BFS|Dijkstra
    GRIDPATH_ADJACENCY  --adjacency=four|eight
    GRIDPATH_LOG_LEVEL  --log-level=INFO
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from gridpath.core.neighbors import Adjacency
from gridpath.core.search import parse_algo_name

REPO_ROOT = Path(__file__).resolve().parents[2]
MAP_DIR = REPO_ROOT / "maps"
DEFAULT_MAP = MAP_DIR / "map.txt"

WINDOW_SIDE = 800        # grid area, pixels
PANEL_W = 260            # right band: metrics + buttons
FPS = 30
DEFAULT_ALGO = "BFS"

_FLAGS = {
    "--map=": "GRIDPATH_MAP",
    "--algo=": "GRIDPATH_ALGO",
    "--adjacency=": "GRIDPATH_ADJACENCY",
    "--log-level=": "GRIDPATH_LOG_LEVEL",
}


@dataclass
class ViewerConfig:
    map_path: Path = DEFAULT_MAP
    algo: str = DEFAULT_ALGO
    adjacency: Optional[Adjacency] = None   # None = algorithm default
    log_level: str = "INFO"
    window_side: int = WINDOW_SIDE
    panel_w: int = PANEL_W
    fps: int = FPS


def resolve_config(argv: Optional[Sequence[str]] = None,
                   environ: Optional[Mapping[str, str]] = None) -> ViewerConfig:
    argv = list(argv) if argv is not None else []
    values = dict(environ if environ is not None else os.environ)
    for arg in argv:
        for prefix, key in _FLAGS.items():
            if arg.startswith(prefix):
                values[key] = arg.split("=", 1)[1]

    cfg = ViewerConfig()
    if values.get("GRIDPATH_MAP"):
        cfg.map_path = Path(values["GRIDPATH_MAP"])
    if values.get("GRIDPATH_ALGO"):
        cfg.algo = parse_algo_name(values["GRIDPATH_ALGO"])
    if values.get("GRIDPATH_ADJACENCY"):
        cfg.adjacency = Adjacency.parse(values["GRIDPATH_ADJACENCY"])
    if values.get("GRIDPATH_LOG_LEVEL"):
        level = values["GRIDPATH_LOG_LEVEL"].upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {values['GRIDPATH_LOG_LEVEL']!r}")
        cfg.log_level = level
    return cfg
