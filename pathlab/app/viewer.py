#!/usr/bin/env python3
"""
Pathfinding Lab Viewer — paint a grid, then watch BFS / Dijkstra / A* explore it

- Mouse:
    [LEFT] click/drag -> toggle walls
- Keyboard:
    [S]/[E]      -> put start / end under the mouse
    [B]/[D]/[A]  -> run BFS / Dijkstra / A*
    [SPACE]      -> pause/resume
    [N]          -> single step
    [R]          -> reset overlays
    [C]          -> clear walls
    [1]/[2]      -> load bundled map
    [W]          -> save current map
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Settings: see pathlab.app.settings (env PATHLAB_* or --rows=.. --cols=.. flags).
"""

# --- bootstrap import path so `from pathlab...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

import logging
import time
from typing import Dict, List, Optional, Tuple

import pygame

from pathlab.app import settings
from pathlab.app.maps import load_map, save_map
from pathlab.core.algorithms import ALGORITHMS, make_algo
from pathlab.core.engine import SearchAlgo
from pathlab.core.errors import PathfindingError
from pathlab.core.grid import Grid
from pathlab.core.types import Cell, CellKind, EXHAUSTED, StepSnapshot, SUCCEEDED

logger = logging.getLogger(__name__)

RUN_KEYS = {pygame.K_b: "BFS", pygame.K_d: "Dijkstra", pygame.K_a: "A*"}
MAP_KEYS = {pygame.K_1: "01_open_field", pygame.K_2: "02_wall_gap"}

KIND_COLORS = {
    CellKind.EMPTY: settings.WHITE,
    CellKind.WALL:  settings.WALL_RGB,
    CellKind.START: settings.START_RGB,
    CellKind.END:   settings.END_RGB,
}


# ---------- Pixel <-> cell ----------
def cell_at_pixel(origin: Tuple[int, int], cell_size: int, grid: Grid,
                  pos: Tuple[int, int]) -> Optional[Cell]:
    """Map a window pixel to the (row, col) under it, or None outside the grid."""
    x, y = pos
    ox, oy = origin
    if x < ox or y < oy:
        return None
    cell = ((y - oy) // cell_size, (x - ox) // cell_size)
    return cell if grid.in_bounds(cell) else None


def fit_cell_size(grid: Grid, avail_w: int, avail_h: int, preferred: int) -> int:
    """Largest integer cell size (<= preferred) that fits the grid in the area."""
    cs = min(preferred, avail_w // grid.cols, avail_h // grid.rows)
    return max(settings.MIN_CELL_SIZE, cs)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235, 238, 242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, cfg: Optional[dict] = None):
        pygame.init()
        cfg = cfg or settings.resolve([])

        self.grid = grid
        self.preferred_cell = cfg["CELL_SIZE"]
        self.steps_per_sec = cfg["STEPS_PER_SEC"]
        self.selected_algo = cfg["DEFAULT_ALGO"] if cfg["DEFAULT_ALGO"] in ALGORITHMS else "BFS"

        self.font_small = pygame.font.Font(settings.FONT_NAME, 14)
        self.font = pygame.font.Font(settings.FONT_NAME, 18)
        self.font_big = pygame.font.Font(settings.FONT_NAME, 22)

        win_w = settings.GRID_MARGIN * 2 + grid.cols * self.preferred_cell + settings.PANEL_W
        win_h = max(settings.GRID_MARGIN * 2 + grid.rows * self.preferred_cell, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Lab")

        self.algo: Optional[SearchAlgo] = None
        self.snapshot: Optional[StepSnapshot] = None
        self.running = False
        self.state = "Idle"
        self.message = ""
        self.painting: Optional[CellKind] = None   # kind being dragged with the left button
        self.clock = pygame.time.Clock()
        self._last_step_t = 0.0

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid."""
        avail_w = max(1, win_w - settings.PANEL_W - 2 * settings.GRID_MARGIN)
        avail_h = max(1, win_h - 2 * settings.GRID_MARGIN)
        self.cell_size = fit_cell_size(self.grid, avail_w, avail_h, self.preferred_cell)

        grid_plate_w = self.grid.cols * self.cell_size + 2 * settings.GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * settings.GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)
        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + settings.GRID_MARGIN,
                             self.canvas_rect.y + settings.GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(settings.PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(settings.FPS)

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    # ---------- search control ----------
    def _start(self, label: str):
        self.selected_algo = label
        self._cancel()
        algo = make_algo(label)
        try:
            algo.init(self.grid)
        except PathfindingError as ex:
            self._fail(ex)
            return
        self.algo = algo
        self.snapshot = None
        self.message = ""
        self.running = True
        self.state = "Running"
        self._refresh_active_states()

    def _do_step(self):
        if self.algo is None:
            # single-stepping with nothing loaded starts the selected algorithm paused
            self._start(self.selected_algo)
            self.running = False
            if self.algo is None:
                return
        try:
            snap = self.algo.step()
        except PathfindingError as ex:
            self._fail(ex, exc_info=True)
            return
        self.snapshot = snap
        if snap.status == SUCCEEDED:
            self.state = "Done"; self.running = False
        elif snap.status == EXHAUSTED:
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _cancel(self):
        if self.algo is not None:
            self.algo.cancel()
        self.algo = None

    def _reset(self):
        self._cancel()
        self.snapshot = None
        self.running = False
        self.state = "Idle"
        self.message = ""
        self._refresh_active_states()

    def _fail(self, ex: Exception, exc_info: bool = False):
        logger.error("%s", ex, exc_info=exc_info)
        self.message = str(ex)
        self.running = False
        self.state = "Error"
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        if self.algo is None:
            self._start(self.selected_algo)
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(settings.MAX_STEPS_PER_SEC, self.steps_per_sec + dv)))

    # ---------- editing ----------
    def _edit(self, fn, *args):
        """Apply a grid edit; any search in flight is discarded first."""
        self._reset()
        try:
            fn(*args)
        except PathfindingError as ex:
            self._fail(ex)

    def _mouse_cell(self, pos: Optional[Tuple[int, int]] = None) -> Optional[Cell]:
        pos = pygame.mouse.get_pos() if pos is None else pos
        return cell_at_pixel(self._grid_origin, self.cell_size, self.grid, pos)

    def _paint(self, cell: Cell):
        # drag paints the kind chosen on button-down instead of flickering
        kind = self.grid.kind_at(cell)
        if kind in (CellKind.START, CellKind.END) or kind is self.painting:
            return
        self._edit(self.grid.toggle_wall, cell)

    def _set_endpoint(self, kind: CellKind):
        cell = self._mouse_cell()
        if cell is not None:
            self._edit(self.grid.set_kind, cell, kind)

    def _switch_map(self, key: str):
        try:
            grid = load_map(settings.MAP_FILES[key])
        except (OSError, PathfindingError) as ex:
            logger.error("Failed to load map %s: %s", key, ex)
            self.message = f"Failed to load map {key}"
            return
        self._reset()
        self.grid = grid
        pygame.display.set_caption(f"Pathfinding Lab — {key}")
        self._layout(*self.screen.get_size())

    def _save_map(self):
        try:
            save_map(self.grid, settings.SAVE_FILE)
        except OSError as ex:
            logger.error("Failed to save map: %s", ex)
            self.message = "Failed to save map"
            return
        self.message = f"Saved {settings.SAVE_FILE.name}"

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_c:
                    self._edit(self.grid.clear_walls)
                elif e.key == pygame.K_s:
                    self._set_endpoint(CellKind.START)
                elif e.key == pygame.K_e:
                    self._set_endpoint(CellKind.END)
                elif e.key == pygame.K_w:
                    self._save_map()
                elif e.key in RUN_KEYS:
                    self._start(RUN_KEYS[e.key])
                elif e.key in MAP_KEYS:
                    self._switch_map(MAP_KEYS[e.key])
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                cell = self._mouse_cell(e.pos)
                if cell is not None:
                    was = self.grid.kind_at(cell)
                    self._paint(cell)
                    self.painting = self.grid.kind_at(cell) if was is not self.grid.kind_at(cell) else None
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.painting = None
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if self.painting is not None and e.buttons[0]:
                    cell = self._mouse_cell(e.pos)
                    if cell is not None:
                        self._paint(cell)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top, bot = settings.BG_TOP, settings.BG_BOTTOM
        for y in range(h):
            t = y / max(1, h - 1)
            c = tuple(int(top[i] + (bot[i] - top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        snap = self.snapshot
        visited = snap.visited if snap else frozenset()
        frontier = snap.frontier if snap else ()
        path = snap.path if snap and snap.path else []

        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                kind = self.grid.cells[row][col]
                rect = self._cell_rect((row, col))
                color = KIND_COLORS[kind]
                if kind is CellKind.EMPTY and (row, col) in visited:
                    color = settings.VISITED_RGB
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, settings.GRID_LINE, rect, 1)

        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(settings.FRONTIER_RGBA)
        for cell in frontier:
            self.screen.blit(overlay, self._cell_rect(cell).topleft)
        if snap and snap.current is not None and not snap.finished:
            overlay.fill(settings.CURRENT_RGBA)
            self.screen.blit(overlay, self._cell_rect(snap.current).topleft)

        for cell in path:
            if self.grid.kind_at(cell) is CellKind.EMPTY:
                pygame.draw.rect(self.screen, settings.PATH_RGB, self._cell_rect(cell).inflate(-2, -2))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset); y += h + gap
        add("Clear Walls", lambda: self._edit(self.grid.clear_walls)); y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        self._algo_buttons: Dict[str, UIButton] = {}
        for label in ALGORITHMS:
            add(f"Run {label}", lambda label=label: self._start(label), togglable=True)
            self._algo_buttons[label] = self._buttons[-1]
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        for label, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(label == self.selected_algo)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 230), pygame.SRCALPHA)
        pygame.draw.rect(card, settings.CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, settings.CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0, 0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=settings.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=settings.ACCENT_GOLD)
        m = self.snapshot.metrics if self.snapshot else {}
        line(f"Expanded: {m.get('popped', 0)}")
        line(f"Frontier: {m.get('open_size', 0)}")
        line(f"Visited: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"Algo: {self.selected_algo}   State: {self.state}")
        line(f"Speed: {self.steps_per_sec} steps/s")
        if self.message:
            surf = self.font_small.render(self.message, True, settings.ERROR_RGB)
            self.screen.blit(surf, (x0, y0))

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    try:
        cfg = settings.resolve(argv)
    except ValueError as ex:
        print(f"pathlab: {ex}", file=sys.stderr)
        sys.exit(2)
    logging.basicConfig(level=cfg["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Viewer(Grid(cfg["GRID_ROWS"], cfg["GRID_COLS"]), cfg).run()


if __name__ == "__main__":
    main()
