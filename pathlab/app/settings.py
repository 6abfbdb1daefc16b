# pathlab/app/settings.py
"""
Session settings. Fixed for the lifetime of a viewer window.

Resolution order: defaults below, then environment (PATHLAB_ROWS, ...),
then ``--rows=30`` style flags on the command line.
"""

from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

# Grid (same shape as the classic 20x20 demo)
GRID_ROWS: int = 20
GRID_COLS: int = 20
CELL_SIZE: int = 30
MIN_CELL_SIZE: int = 8

# Animation
STEPS_PER_SEC: int = 10          # one expansion every 100 ms
MAX_STEPS_PER_SEC: int = 60
FPS: int = 60

DEFAULT_ALGO: str = "BFS"
LOG_LEVEL: str = "INFO"

# Layout
PANEL_W: int = 300               # right band: metrics + buttons
GRID_MARGIN: int = 16
FONT_NAME = None                 # default pygame font

# Maps
MAP_DIR: Path = Path(__file__).resolve().parents[2] / "maps"
MAP_FILES: dict[str, Path] = {
    "01_open_field": MAP_DIR / "01_open_field.json",
    "02_wall_gap":   MAP_DIR / "02_wall_gap.json",
}
SAVE_FILE: Path = MAP_DIR / "custom.json"

# Colors
WHITE:      tuple[int, int, int] = (255, 255, 255)
BLACK:      tuple[int, int, int] = (0, 0, 0)
GRID_LINE:  tuple[int, int, int] = (170, 170, 170)
WALL_RGB:   tuple[int, int, int] = (0, 0, 0)
START_RGB:  tuple[int, int, int] = (0, 200, 0)
END_RGB:    tuple[int, int, int] = (220, 0, 0)
VISITED_RGB: tuple[int, int, int] = (255, 255, 0)
FRONTIER_RGBA: tuple[int, int, int, int] = (0, 150, 255, 110)
CURRENT_RGBA: tuple[int, int, int, int] = (255, 120, 0, 160)
PATH_RGB:   tuple[int, int, int] = (0, 0, 255)

BG_TOP:     tuple[int, int, int] = (24, 26, 32)
BG_BOTTOM:  tuple[int, int, int] = (36, 40, 48)
CARD_BG:    tuple[int, int, int, int] = (24, 28, 36, 220)
CARD_HI:    tuple[int, int, int, int] = (255, 255, 255, 18)
TEXT_LIGHT: tuple[int, int, int] = (230, 235, 240)
ACCENT_GOLD: tuple[int, int, int] = (255, 210, 0)
ERROR_RGB:  tuple[int, int, int] = (255, 110, 110)

_INT_KEYS = {"rows": "GRID_ROWS", "cols": "GRID_COLS", "cell_size": "CELL_SIZE", "speed": "STEPS_PER_SEC"}
_STR_KEYS = {"algo": "DEFAULT_ALGO", "log_level": "LOG_LEVEL"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _flag(argv: Sequence[str], key: str) -> Optional[str]:
    prefix = f"--{key.replace('_', '-')}="
    value = None
    for arg in argv:
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve(argv: Optional[Sequence[str]] = None, environ: Optional[dict] = None) -> dict:
    """Return the effective settings as a dict of module constant names."""
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    g = globals()
    out = {name: g[name] for name in list(_INT_KEYS.values()) + list(_STR_KEYS.values())}

    for key, name in {**_INT_KEYS, **_STR_KEYS}.items():
        raw = environ.get(f"PATHLAB_{key.upper()}")
        flag = _flag(argv, key)
        if flag is not None:
            raw = flag
        if raw is None:
            continue
        if key in _INT_KEYS:
            try:
                value = int(raw)
            except ValueError:
                raise ValueError(f"{key} must be an integer, got {raw!r}") from None
            if value <= 0:
                raise ValueError(f"{key} must be positive, got {value}")
            out[name] = value
        else:
            out[name] = raw

    out["STEPS_PER_SEC"] = min(MAX_STEPS_PER_SEC, out["STEPS_PER_SEC"])
    out["LOG_LEVEL"] = out["LOG_LEVEL"].upper()
    if out["LOG_LEVEL"] not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {out['LOG_LEVEL']!r}")
    return out
