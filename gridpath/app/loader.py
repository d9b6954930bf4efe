# gridpath/app/loader.py
"""
Map files.

Plain text: one grid row per line, integers separated by spaces. A negative
value is a blocked cell, anything else a weighted cell. Tokens that do not
parse are skipped without complaint.

JSON: {"rows": [[...], ...]} with the same integer convention.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from gridpath.core.grid import Grid

logger = logging.getLogger(__name__)


def chop_line(line: str) -> List[int]:
    row: List[int] = []
    for token in line.split(" "):
        try:
            row.append(int(token))
        except ValueError:
            if token.strip():
                logger.debug("skipping token %r", token)
    return row


def parse_map(text: str) -> Grid:
    return Grid.from_rows([chop_line(line) for line in text.splitlines() if line.strip()])


def load_map(path: Union[str, Path]) -> Grid:
    path = Path(path)
    with open(path, "r") as f:
        if path.suffix == ".json":
            data = json.load(f)
            grid = Grid.from_rows([[int(v) for v in row] for row in data["rows"]])
        else:
            grid = parse_map(f.read())
    logger.info("loaded %s: %dx%d grid", path, grid.side, grid.side)
    return grid
