"""Held-key auto repeat (DAS/ARR)"""
from typing import Optional
from tetris_config import CONFIG

class ShiftRepeat:
    """
    Horizontal auto-shift: one step on press, then after DAS_MS a step every
    ARR_MS (0 => one step per update). Switching or releasing resets.
    """
    def __init__(self, das_ms: Optional[float] = None, arr_ms: Optional[float] = None):
        self.das = CONFIG["DAS_MS"] if das_ms is None else das_ms
        self.arr = CONFIG["ARR_MS"] if arr_ms is None else arr_ms
        self.dir = 0; self.held_ms = 0.0; self.last = 0.0; self.initial = False

    def update(self, dt: float, left: bool, right: bool) -> int:
        nd = (-1 if left else 0) + (1 if right else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0.0; self.last = 0.0; self.initial = False
        if self.dir == 0: return 0
        self.held_ms += dt
        if not self.initial:
            self.initial = True; return self.dir
        if self.held_ms < self.das: return 0
        if self.arr == 0: return self.dir
        self.last += dt
        if self.last >= self.arr:
            self.last = 0.0; return self.dir
        return 0

class DropRepeat:
    """Soft drop while held: one row on press, then one every SOFT_DROP_REPEAT_MS."""
    def __init__(self, rate_ms: Optional[float] = None):
        self.rate = CONFIG["SOFT_DROP_REPEAT_MS"] if rate_ms is None else rate_ms
        self.held = False; self.acc = 0.0

    def update(self, dt: float, held: bool) -> bool:
        if not held:
            self.held = False; return False
        if not self.held:
            self.held = True; self.acc = 0.0; return True
        self.acc += dt
        if self.acc >= self.rate:
            self.acc = 0.0; return True
        return False
