"""Gravity and achievement-acknowledgment timers.

The scheduler never touches the engine. Each frame the loop hands it the
live snapshot and the elapsed milliseconds, and dispatches whatever actions
come back, exactly like key presses:

    for action in scheduler.update(engine.state, dt):
        engine.dispatch(action)

Timers are re-armed or cancelled from the snapshot before they are advanced,
so a timer armed for an older game, level, status or pending list never
fires.
"""
from dataclasses import dataclass
from typing import List, Optional

from tetris_config import CONFIG
from tetris_engine import GameState, Tick, AcknowledgeAchievements, RUNNING


def gravity_interval_ms(level: int) -> int:
    """Milliseconds between gravity ticks at `level` (1-based)."""
    base, step = CONFIG["GRAVITY_BASE_MS"], CONFIG["GRAVITY_STEP_MS"]
    return max(CONFIG["GRAVITY_MIN_MS"], base - (level - 1) * step)


@dataclass
class Timer:
    interval: float
    generation: int
    key: object     # (game, level) for gravity, pending count for acknowledgment
    elapsed: float = 0.0


class Scheduler:
    def __init__(self, ack_delay_ms: Optional[float] = None):
        self.ack_delay_ms = CONFIG["ACHIEVEMENT_ACK_MS"] if ack_delay_ms is None else ack_delay_ms
        self.gravity: Optional[Timer] = None
        self.ack: Optional[Timer] = None
        self.generation = 0

    def _arm(self, interval: float, key) -> Timer:
        self.generation += 1
        return Timer(interval, self.generation, key)

    def sync(self, state: GameState) -> None:
        """Arm, re-arm or cancel timers to match `state`."""
        if state.status == RUNNING:
            # a new game restarts the interval even at an unchanged level
            key = (state.game, state.metrics.level)
            if self.gravity is None or self.gravity.key != key:
                self.gravity = self._arm(gravity_interval_ms(key[1]), key)
        else:
            self.gravity = None

        pending = len(state.pending_achievements)
        if pending == 0:
            self.ack = None
        elif self.ack is None or self.ack.key != pending:
            self.ack = self._arm(self.ack_delay_ms, pending)

    @staticmethod
    def _fire(timer: Optional[Timer], dt_ms: float) -> bool:
        if timer is None:
            return False
        timer.elapsed += dt_ms
        if timer.elapsed < timer.interval:
            return False
        # one firing per update; backlog beyond a single interval is dropped
        timer.elapsed = (timer.elapsed - timer.interval) % timer.interval if timer.interval else 0.0
        return True

    def update(self, state: GameState, dt_ms: float) -> List[object]:
        self.sync(state)
        actions: List[object] = []
        if self._fire(self.gravity, dt_ms):
            actions.append(Tick())
        if self._fire(self.ack, dt_ms):
            self.ack = None  # one-shot
            actions.append(AcknowledgeAchievements())
        return actions

    def cancel(self) -> None:
        self.gravity = None
        self.ack = None
