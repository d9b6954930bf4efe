from pathlib import Path

import pytest

from gridpath.app.config import DEFAULT_MAP, WINDOW_SIDE, resolve_config
from gridpath.core.neighbors import Adjacency


def test_defaults():
    cfg = resolve_config([], {})
    assert cfg.map_path == DEFAULT_MAP
    assert cfg.algo == "BFS"
    assert cfg.adjacency is None
    assert cfg.window_side == WINDOW_SIDE


def test_environment_overrides():
    cfg = resolve_config([], {
        "GRIDPATH_MAP": "other.txt",
        "GRIDPATH_ALGO": "dijkstra",
        "GRIDPATH_ADJACENCY": "8",
        "GRIDPATH_LOG_LEVEL": "debug",
    })
    assert cfg.map_path == Path("other.txt")
    assert cfg.algo == "Dijkstra"
    assert cfg.adjacency is Adjacency.EIGHT
    assert cfg.log_level == "DEBUG"


def test_flags_beat_environment():
    cfg = resolve_config(["--algo=BFS", "--adjacency=four", "--map=x.json"],
                         {"GRIDPATH_ALGO": "Dijkstra"})
    assert cfg.algo == "BFS"
    assert cfg.adjacency is Adjacency.FOUR
    assert cfg.map_path == Path("x.json")


def test_bad_values():
    with pytest.raises(ValueError):
        resolve_config(["--algo=astar"], {})
    with pytest.raises(ValueError):
        resolve_config([], {"GRIDPATH_ADJACENCY": "hex"})


def test_bad_log_level():
    with pytest.raises(ValueError):
        resolve_config(["--log-level=bogus"], {})
    assert resolve_config(["--log-level=warning"], {}).log_level == "WARNING"


def test_main_reports_bad_settings(capsys):
    from gridpath.app.viewer import main

    with pytest.raises(SystemExit) as exc:
        main(["--log-level=bogus"])
    assert exc.value.code == 2
    assert "Bad settings" in capsys.readouterr().out
