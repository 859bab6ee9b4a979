"""
Rendering helpers for the Tetris front-end.

Draws a snapshot from ``tetris_engine`` and nothing else:
- Pre-render block cell Surfaces per color (solid, ghost outline, dimmed).
- Pre-render static background (grid + side/panel frames) once per Dims.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the
  snapshot carries a different board object (boards are never edited in place).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
from tetris_config import COLS, HIDDEN_ROWS, ROWS
from tetris_layout import Dims
from tetris_piece import SHAPES
from tetris_board import Board, blocks

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (34,211,238),
    "J": (59,130,246),
    "L": (251,146,60),
    "O": (252,211,77),
    "S": (163,230,53),
    "T": (232,121,249),
    "Z": (251,113,133),
}
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

CLEAR_LABELS = {
    "single": "Single", "double": "Double", "triple": "Triple",
    "tetris": "TETRIS!", "tspin": "T-Spin!",
}

@dataclass
class HudCache:
    values: Dict[str, object] = field(default_factory=dict)
    surfaces: Dict[str, pygame.Surface] = field(default_factory=dict)
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only locked blocks, visible rows)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board: Optional[Board] = None

    # ---------- Static background (grid + frames) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS-HIDDEN_ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        for rect in (pygame.Rect(d.side_x, d.panel_y, d.side_w, d.board_h),
                     pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)):
            pygame.draw.rect(self.bg, (21,25,53), rect)
            pygame.draw.rect(self.bg, (50,60,100), rect, 1)
        # Small-piece boxes: hold on the left, next queue on the right
        self.pv_cell = max(12, int(d.cell*0.6))
        self.hold_box = pygame.Rect(d.side_x + 8, d.panel_y + 40, d.side_w - 16, self.pv_cell*3 + 12)
        self.next_box = pygame.Rect(d.panel_x + 12, d.panel_y + 236, self.pv_cell*4 + 12, (self.pv_cell*3)*5 + 12)
        for box in (self.hold_box, self.next_box):
            pygame.draw.rect(self.bg, (15,18,40), box)
            pygame.draw.rect(self.bg, (55,65,110), box, 1)

    # ---------- Small cell sprites (solid + ghost outline + dimmed) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.mini_surf: Dict[str, pygame.Surface] = {}
        self.dim_surf: Dict[str, pygame.Surface] = {}
        c, m = self.dims.cell, self.pv_cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g
            ms = pygame.Surface((m-2, m-2))
            ms.fill(col)
            self.mini_surf[t] = ms
            ds = pygame.Surface((m-2, m-2))
            ds.fill(tuple(v // 3 for v in col))
            self.dim_surf[t] = ds
        self.flash_surf = pygame.Surface((self.dims.board_w, c), pygame.SRCALPHA)
        self.flash_surf.fill((255,255,255,140))

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the "locked blocks" surface from the visible rows."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(HIDDEN_ROWS, ROWS):
            for x in range(COLS):
                t = board[y][x]
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, (y-HIDDEN_ROWS)*c + 1))
        self._board = board

    def cell_pos(self, bx: int, by: int, inset: int) -> Tuple[int, int]:
        d = self.dims
        return d.board_x + bx*d.cell + inset, d.board_y + (by-HIDDEN_ROWS)*d.cell + inset

    # ---------- Small piece (hold / next) ----------
    def draw_mini(self, screen: pygame.Surface, t: str, x: int, y: int, dim: bool = False):
        offsets = SHAPES[t][0]
        min_x = min(dx for dx, _ in offsets)
        min_y = min(dy for _, dy in offsets)
        surf = (self.dim_surf if dim else self.mini_surf)[t]
        for dx, dy in offsets:
            screen.blit(surf, (x + (dx-min_x)*self.pv_cell + 1, y + (dy-min_y)*self.pv_cell + 1))

    # ---------- HUD ----------
    def _text(self, key: str, value, fmt: str, color=TEXT) -> pygame.Surface:
        if self.hud.values.get(key) != value or key not in self.hud.surfaces:
            self.hud.values[key] = value
            self.hud.surfaces[key] = self.font.render(fmt.format(value), True, color)
        return self.hud.surfaces[key]

    def draw_hud(self, screen: pygame.Surface, state):
        d = self.dims
        m = state.metrics
        screen.blit(self._text("hold_t", "Hold", "{}"), (d.side_x + 12, d.panel_y + 14))
        if state.hold:
            self.draw_mini(screen, state.hold, self.hold_box.x + 6, self.hold_box.y + 6, dim=not state.can_hold)

        x, y = d.panel_x + 12, d.panel_y + 12
        rows = [
            ("score", m.score, "Score: {}"),
            ("best", state.best, "Best: {}"),
            ("level", m.level, "Level: {}"),
            ("lines", m.lines, "Lines: {}"),
            ("combo", m.combo, "Combo: {}"),
            ("b2b", m.back_to_back, "Back-to-back: {}"),
            ("pieces", m.total_pieces, "Pieces: {}"),
            ("clear", CLEAR_LABELS.get(state.last_clear, " "), "{}"),
        ]
        for key, value, fmt in rows:
            screen.blit(self._text(key, value, fmt), (x, y)); y += 24
        screen.blit(self._text("next_t", "Next", "{}"), (x, self.next_box.y - 22))
        for i, t in enumerate(state.preview):
            self.draw_mini(screen, t, self.next_box.x + 6, self.next_box.y + 6 + i*self.pv_cell*3)

        if not self.hud.controls:
            self.hud.controls = [self.font.render(s, True, DIM_TEXT) for s in (
                "←/→ Move  ↓ Soft", "↑/X CW  Z CCW  A 180", "Space Hard  C Hold",
                "P Pause  R Reset", "Enter Start")]
        y = self.hold_box.bottom + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.side_x + 8, y)); y += 20
        # pending achievements stack under the next queue
        y = self.next_box.bottom + 10
        for label in state.pending_achievements:
            screen.blit(self._text("ach:" + label, label, "* {}", COLORS["O"]), (x, y)); y += 22

    def draw_banner(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255,230,230))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        shade = pygame.Surface((d.board_w, rect.height + 24), pygame.SRCALPHA)
        shade.fill((10,13,34,200))
        screen.blit(shade, (d.board_x, rect.y - 12))
        screen.blit(msg, rect)

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, state):
        if state.board is not self._board:
            self.rebuild_board_surface(state.board)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        for y in state.lines_just_cleared:
            if y >= HIDDEN_ROWS:
                screen.blit(self.flash_surf, (self.dims.board_x, self.dims.board_y + (y-HIDDEN_ROWS)*self.dims.cell))
        piece = state.active
        if piece is not None:
            for bx, by in state.ghost:
                if by >= HIDDEN_ROWS:
                    screen.blit(self.ghost_surf[piece.t], self.cell_pos(bx, by, 4))
            for bx, by in blocks(piece):
                if by >= HIDDEN_ROWS:
                    screen.blit(self.cell_surf[piece.t], self.cell_pos(bx, by, 1))
        self.draw_hud(screen, state)
        if state.status == "idle":
            self.draw_banner(screen, "ENTER to Start")
        elif state.status == "paused":
            self.draw_banner(screen, "PAUSED (P)")
        elif state.status == "over":
            self.draw_banner(screen, "GAME OVER (R)")
