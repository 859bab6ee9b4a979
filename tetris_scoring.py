"""Locking, line clears and scoring.

A lock merges the landed piece, checks the T-spin corners, sweeps full rows
and turns the outcome into a score delta:

  • base        line-clear table (or T-spin table) times the current level
  • combo       50 × level for every consecutive clearing lock after the first
  • back-to-back half of base+combo when a tetris/T-spin follows another one

Level is recomputed from total lines *after* scoring, so a clear that levels
up is still paid at the old level.
"""
import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from tetris_config import LINES_PER_LEVEL, MAX_LEVEL
from tetris_board import Board, merge, sweep, is_tspin
from tetris_piece import Piece

log = logging.getLogger(__name__)

SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}
TSPIN_TABLE = {1: 800, 2: 1200, 3: 1600}
COMBO_STEP = 50
SOFT_DROP_PER_CELL = 1         # times level
HARD_DROP_PER_CELL = 2         # times level


@dataclass(frozen=True)
class Metrics:
    score: int = 0
    level: int = 1
    lines: int = 0
    combo: int = 0
    max_combo: int = 0
    back_to_back: int = 0
    total_pieces: int = 0
    drop_distance: int = 0

    def add_drop(self, cells: int, per_cell: int) -> "Metrics":
        return replace(self,
                       score=self.score + cells * per_cell * self.level,
                       drop_distance=self.drop_distance + cells)


@dataclass(frozen=True)
class LockResult:
    board: Board
    metrics: Metrics
    clear: Optional[str]
    cleared_rows: List[int]
    tspin: bool


def level_for_lines(lines: int) -> int:
    return min(MAX_LEVEL, lines // LINES_PER_LEVEL + 1)


def classify(rows: int, tspin: bool) -> Optional[str]:
    """Label a lock. Four rows is always a tetris, even off a T-spin."""
    if rows == 4:
        return "tetris"
    if tspin:
        return "tspin"
    return {1: "single", 2: "double", 3: "triple"}.get(rows)


def line_score(rows: int, level: int, tspin: bool) -> int:
    table = TSPIN_TABLE if tspin else SCORE_TABLE
    return table.get(rows, 0) * level


def score_lock(metrics: Metrics, rows: int, tspin: bool) -> Metrics:
    """Apply line, combo and back-to-back points for one lock."""
    level = metrics.level
    combo = metrics.combo + 1 if rows > 0 else 0
    combo_bonus = max(0, combo - 1) * COMBO_STEP * level if rows > 0 else 0
    base = line_score(rows, level, tspin) + combo_bonus

    qualifies = rows >= 4 or tspin
    b2b_bonus = base // 2 if qualifies and metrics.back_to_back > 0 else 0
    if qualifies:
        back_to_back = metrics.back_to_back + 1
    elif rows == 0:
        back_to_back = metrics.back_to_back
    else:
        back_to_back = 0

    lines = metrics.lines + rows
    return replace(metrics,
                   score=metrics.score + base + b2b_bonus,
                   lines=lines,
                   level=level_for_lines(lines),
                   combo=combo,
                   max_combo=max(metrics.max_combo, combo),
                   back_to_back=back_to_back)


def lock(board: Board, piece: Piece, metrics: Metrics) -> LockResult:
    """Merge `piece` into `board`, clear rows and score the result."""
    tspin = is_tspin(board, piece)
    merged, cleared = sweep(merge(board, piece))
    scored = score_lock(metrics, len(cleared), tspin)
    label = classify(len(cleared), tspin)
    if label:
        log.debug("%s clear rows=%s +%d", label, cleared, scored.score - metrics.score)
    return LockResult(merged, scored, label, cleared, tspin)
