# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinding Viewer

- Mouse:
    [LEFT]       -> designate start
    [RIGHT]      -> designate end
- Keyboard:
    [B]/[D]      -> select algorithm (BFS / Dijkstra)
    [4]/[8]      -> four / eight directional neighbors
    [C]          -> clear start, end and path
    [Q]/[ESC]    -> quit

Settings: see gridpath.app.config (env GRIDPATH_* or --key=value flags).
"""

import logging
import sys
from typing import List, Optional, Sequence, Tuple

import pygame

from gridpath.app.config import ViewerConfig, resolve_config
from gridpath.app.loader import load_map
from gridpath.core.errors import OutOfBounds
from gridpath.core.grid import Grid
from gridpath.core.neighbors import Adjacency
from gridpath.core.session import PathSession
from gridpath.core.types import Blocked, Point, Weighted

logger = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
GREEN       = (  0,255,  0)
RED         = (255,  0,  0)
BLUE        = (  0,  0,255)
ORANGE      = (255,165,  0)
TURQUOISE   = ( 64,224,208)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


def pixel_to_point(pos: Tuple[int, int], window_side: int, side: int) -> Point:
    """Project a pointer position onto the grid: floor(pixel / (window_side // side))."""
    offset = window_side // side
    if offset <= 0:
        raise ValueError(f"window of {window_side}px cannot show {side} cells per side")
    p = (int(pos[0]) // offset, int(pos[1]) // offset)
    if not (0 <= p[0] < side and 0 <= p[1] < side):
        raise OutOfBounds(p, side)
    return p


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

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

        text = font.render(self.label, True, (235,238,242))
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
    def __init__(self, grid: Grid, config: ViewerConfig):
        pygame.init()

        self.grid = grid
        self.config = config
        self.session = PathSession(grid, algo_name=config.algo, adjacency=config.adjacency)

        # cell pitch; one pixel of it is left as a gap between squares
        self.cell_size = config.window_side // grid.side
        self.grid_px = self.cell_size * grid.side

        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        win_w = config.window_side + config.panel_w
        win_h = config.window_side
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption(f"Grid pathfinding: {config.map_path.name}")

        self._right_band = pygame.Rect(config.window_side, 0, config.panel_w, win_h)
        self._buttons: List[UIButton] = []
        self._build_buttons()

        self.clock = pygame.time.Clock()

    def run(self):
        while True:
            self._handle_events()
            self._draw()
            self.clock.tick(self.config.fps)

    # ---------- input ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_b:
                    self._switch_algo("BFS")
                elif e.key == pygame.K_d:
                    self._switch_algo("Dijkstra")
                elif e.key == pygame.K_4:
                    self._switch_adjacency(Adjacency.FOUR)
                elif e.key == pygame.K_8:
                    self._switch_adjacency(Adjacency.EIGHT)
                elif e.key == pygame.K_c:
                    self._clear()
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
            elif e.type == pygame.MOUSEBUTTONDOWN:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                self._click(e.pos, e.button)

    def _click(self, pos: Tuple[int, int], button: int):
        if not (0 <= pos[0] < self.grid_px and 0 <= pos[1] < self.grid_px):
            return
        p = pixel_to_point(pos, self.config.window_side, self.grid.side)
        if button == 1:
            self.session.designate_start(p)
        elif button == 3:
            self.session.designate_end(p)
        self._refresh_active_states()

    def _switch_algo(self, name: str):
        self.session.switch_algo(name)
        self._refresh_active_states()

    def _switch_adjacency(self, adjacency: Adjacency):
        self.session.switch_adjacency(adjacency)
        self._refresh_active_states()

    def _clear(self):
        self.session.clear()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BLACK)
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        for x in range(self.grid.side):
            for y in range(self.grid.side):
                cell = self.grid.cell_at((x, y))
                rect = pygame.Rect(x*cs, y*cs, cs - 1, cs - 1)
                if isinstance(cell, Blocked):
                    pygame.draw.rect(self.screen, RED, rect)
                    continue
                on_path = isinstance(cell, Weighted) and cell.on_path
                pygame.draw.rect(self.screen, BLUE if on_path else GREEN, rect)
                txt = self.font_small.render(str(cell.weight), True, WHITE if on_path else BLACK)
                self.screen.blit(txt, (rect.x + 5, rect.y + 5))

        self._draw_badge(self.session.start, ORANGE, "S")
        self._draw_badge(self.session.end, TURQUOISE, "E")

    def _draw_badge(self, p: Optional[Point], color: Tuple[int,int,int], label: str):
        if p is None:
            return
        cs = self.cell_size
        cx = p[0]*cs + cs//2
        cy = p[1]*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx, cy), max(4, cs//4), width=2)
        txt = self.font_small.render(label, True, color)
        self.screen.blit(txt, txt.get_rect(bottomright=(p[0]*cs + cs - 3, p[1]*cs + cs - 3)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Algo: BFS",      lambda: self._switch_algo("BFS"),      togglable=True, store_as="btn_algo_b"); y += h + gap
        add("Algo: Dijkstra", lambda: self._switch_algo("Dijkstra"), togglable=True, store_as="btn_algo_d"); y += h + gap
        add("4 neighbors", lambda: self._switch_adjacency(Adjacency.FOUR),  togglable=True, store_as="btn_adj4"); y += h + gap
        add("8 neighbors", lambda: self._switch_adjacency(Adjacency.EIGHT), togglable=True, store_as="btn_adj8"); y += h + gap
        add("Clear", self._clear)

        self._refresh_active_states()

    def _refresh_active_states(self):
        algo = self.session.algo_name
        adjacency = self.session.algo.adjacency
        self.btn_algo_b.set_active(algo == "BFS")
        self.btn_algo_d.set_active(algo == "Dijkstra")
        self.btn_adj4.set_active(adjacency is Adjacency.FOUR)
        self.btn_adj8.set_active(adjacency is Adjacency.EIGHT)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 230
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        s = self.session
        m = s.last_metrics
        line("Metrics", big=True, color=ACCENT_GOLD)
        line(f"Algo: {s.algo_name} ({s.algo.adjacency.value})")
        line(f"Start: {s.start if s.start is not None else '-'}")
        line(f"End: {s.end if s.end is not None else '-'}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost", None) is not None:
            line(f"Total Cost: {m['total_cost']}")
        if s.status == "no_path":
            line("No path", color=RED)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[Sequence[str]] = None):
    try:
        config = resolve_config(sys.argv[1:] if argv is None else argv)
    except ValueError as ex:
        print(f"Bad settings: {ex}")
        sys.exit(2)
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        grid = load_map(config.map_path)
    except (OSError, ValueError, KeyError) as ex:
        logger.error("Failed to load map %s: %s", config.map_path, ex)
        sys.exit(1)
    Viewer(grid, config).run()

if __name__ == "__main__":
    main()
