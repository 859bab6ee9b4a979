"""
Game state machine
==================

Every change to a game goes through ``reduce(state, action, rng)``: a pure
function from the current snapshot and one action to the next snapshot.
Actions that do not apply (moving into a wall, holding twice, dropping while
paused, ...) hand back the *same* snapshot object, so a caller can spot a
no-op with ``is``.

Status flow:

    idle --Start--> running <--Pause/Resume--> paused
                       |
                 spawn blocked
                       v
                     over --Reset--> running

Reset also restarts a running or paused game.

``Engine`` wraps the reducer as the single dispatch point used by keyboard
input and by the timers in ``tetris_scheduler``, and reports the score to
observers (the high-score store) after every applied action.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Tuple

from tetris_config import PREVIEW_SIZE
from tetris_piece import Piece, try_rotate
from tetris_board import Board, Cell, new_board, collide, drop_distance, ghost_blocks
from tetris_rng import BagRandom
from tetris_scoring import Metrics, lock, SOFT_DROP_PER_CELL, HARD_DROP_PER_CELL
from tetris_achievements import evaluate

log = logging.getLogger(__name__)

IDLE, RUNNING, PAUSED, OVER = "idle", "running", "paused", "over"


@dataclass(frozen=True)
class GameState:
    board: Board = field(default_factory=new_board)
    active: Optional[Piece] = None
    queue: Tuple[str, ...] = ()
    hold: Optional[str] = None
    can_hold: bool = True
    status: str = IDLE
    metrics: Metrics = field(default_factory=Metrics)
    last_clear: Optional[str] = None
    lines_just_cleared: Tuple[int, ...] = ()
    pending_achievements: Tuple[str, ...] = ()
    unlocked_achievements: Tuple[str, ...] = ()
    high_score: int = 0
    game: int = 0  # bumped by every Start/Reset

    @property
    def ghost(self) -> List[Cell]:
        return ghost_blocks(self.board, self.active)

    @property
    def preview(self) -> Tuple[str, ...]:
        return self.queue[:PREVIEW_SIZE]

    @property
    def best(self) -> int:
        """Running maximum of the stored high score and the current score."""
        return max(self.high_score, self.metrics.score)


# -------------------------------------------------------------
# ACTIONS
# -------------------------------------------------------------
@dataclass(frozen=True)
class Start: pass

@dataclass(frozen=True)
class Reset: pass

@dataclass(frozen=True)
class Pause: pass

@dataclass(frozen=True)
class Resume: pass

@dataclass(frozen=True)
class Tick: pass

@dataclass(frozen=True)
class Move:
    direction: int  # -1 left, +1 right

@dataclass(frozen=True)
class SoftDrop: pass

@dataclass(frozen=True)
class HardDrop: pass

@dataclass(frozen=True)
class Rotate:
    direction: str = "CW"  # "CW", "CCW" or "180"

@dataclass(frozen=True)
class Hold: pass

@dataclass(frozen=True)
class AcknowledgeAchievements: pass

@dataclass(frozen=True)
class HydrateHighScore:
    value: int


# -------------------------------------------------------------
# SPAWN & LOCK
# -------------------------------------------------------------

def initial_state(rng: BagRandom, high_score: int = 0) -> GameState:
    return GameState(queue=rng.ensure_queue(()), high_score=high_score)


def spawn(state: GameState, rng: BagRandom) -> GameState:
    """Activate the head of the queue at the spawn anchor, or end the game."""
    queue = rng.ensure_queue(state.queue)
    piece = Piece.spawn(queue[0])
    if collide(state.board, piece):
        log.debug("spawn of %s blocked, game over at %d", piece.t, state.metrics.score)
        return replace(state, status=OVER, active=None, queue=queue, can_hold=False)
    metrics = replace(state.metrics, total_pieces=state.metrics.total_pieces + 1)
    return replace(state, active=piece, queue=rng.ensure_queue(queue[1:]),
                   can_hold=True, metrics=metrics)


def new_game(state: GameState, rng: BagRandom) -> GameState:
    log.debug("new game (high score %d)", state.best)
    fresh = GameState(queue=rng.ensure_queue(()), status=RUNNING,
                      high_score=state.best, game=state.game + 1)
    return spawn(fresh, rng)


def lock_active(state: GameState, piece: Piece, metrics: Metrics, rng: BagRandom) -> GameState:
    """Lock `piece` (the active piece at its landing spot) and spawn the next one."""
    result = lock(state.board, piece, metrics)
    ids, labels = evaluate(result.metrics, result.clear, state.unlocked_achievements)
    locked = replace(state,
                     board=result.board,
                     active=None,
                     metrics=result.metrics,
                     last_clear=result.clear,
                     lines_just_cleared=tuple(result.cleared_rows),
                     unlocked_achievements=state.unlocked_achievements + ids,
                     pending_achievements=state.pending_achievements + labels)
    return spawn(locked, rng)


def playing(state: GameState) -> bool:
    return state.status == RUNNING and state.active is not None


# -------------------------------------------------------------
# HANDLERS (one per action type)
# -------------------------------------------------------------

def on_start(state, action, rng):
    if state.status != IDLE:
        return state
    return new_game(state, rng)


def on_reset(state, action, rng):
    if state.status == IDLE:
        return state
    return new_game(state, rng)


def on_pause(state, action, rng):
    if state.status != RUNNING:
        return state
    return replace(state, status=PAUSED)


def on_resume(state, action, rng):
    if state.status != PAUSED:
        return state
    return replace(state, status=RUNNING)


def on_move(state, action, rng):
    if not playing(state) or action.direction not in (-1, 1):
        return state
    moved = state.active.moved(action.direction, 0)
    if collide(state.board, moved):
        return state
    return replace(state, active=moved)


def on_tick(state, action, rng):
    if not playing(state):
        return state
    down = state.active.moved(0, 1)
    if collide(state.board, down):
        return lock_active(state, state.active, state.metrics, rng)
    return replace(state, active=down)


def on_soft_drop(state, action, rng):
    if not playing(state):
        return state
    down = state.active.moved(0, 1)
    if collide(state.board, down):
        return lock_active(state, state.active, state.metrics, rng)
    return replace(state, active=down, metrics=state.metrics.add_drop(1, SOFT_DROP_PER_CELL))


def on_hard_drop(state, action, rng):
    if not playing(state):
        return state
    distance = drop_distance(state.board, state.active)
    metrics = state.metrics.add_drop(distance, HARD_DROP_PER_CELL)
    return lock_active(state, state.active.moved(0, distance), metrics, rng)


def on_rotate(state, action, rng):
    if not playing(state):
        return state
    rotated = try_rotate(state.board, state.active, action.direction)
    if rotated is None:
        return state
    return replace(state, active=rotated)


def on_hold(state, action, rng):
    if not playing(state) or not state.can_hold:
        return state
    if state.hold is None:
        queue = rng.ensure_queue(state.queue)
        incoming, queue = queue[0], rng.ensure_queue(queue[1:])
    else:
        incoming, queue = state.hold, state.queue
    piece = Piece.spawn(incoming)
    held = replace(state, hold=state.active.t, can_hold=False, queue=queue, active=piece)
    if collide(state.board, piece):
        log.debug("held swap blocked, game over")
        return replace(held, active=None, status=OVER)
    return held


def on_acknowledge(state, action, rng):
    if not state.pending_achievements:
        return state
    return replace(state, pending_achievements=())


def on_hydrate(state, action, rng):
    return replace(state, high_score=max(0, int(action.value)))


HANDLERS: Dict[type, Callable] = {
    Start: on_start,
    Reset: on_reset,
    Pause: on_pause,
    Resume: on_resume,
    Tick: on_tick,
    Move: on_move,
    SoftDrop: on_soft_drop,
    HardDrop: on_hard_drop,
    Rotate: on_rotate,
    Hold: on_hold,
    AcknowledgeAchievements: on_acknowledge,
    HydrateHighScore: on_hydrate,
}


def reduce(state: GameState, action, rng: BagRandom) -> GameState:
    """Apply one action; unknown or inapplicable actions return `state` itself."""
    handler = HANDLERS.get(type(action))
    if handler is None:
        return state
    new = handler(state, action, rng)
    if new is state:
        return state
    if new.status != state.status:
        log.debug("status %s -> %s", state.status, new.status)
    # cleared rows belong to the snapshot that produced them only
    if new.lines_just_cleared and new.lines_just_cleared is state.lines_just_cleared:
        new = replace(new, lines_just_cleared=())
    return new


class Engine:
    """Owns the live snapshot and serializes every action through `dispatch`."""
    def __init__(self, seed: Optional[int] = None, rng: Optional[BagRandom] = None):
        self.rng = rng or BagRandom(seed)
        self.state = initial_state(self.rng)
        self.score_observers: List[Callable[[int], None]] = []

    def subscribe(self, observer: Callable[[int], None]) -> None:
        """Call `observer(score)` after every action that changed the snapshot."""
        self.score_observers.append(observer)

    def dispatch(self, action) -> GameState:
        new = reduce(self.state, action, self.rng)
        if new is not self.state:
            self.state = new
            for observer in self.score_observers:
                observer(new.metrics.score)
        return self.state
