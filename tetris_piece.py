"""Piece model, shape catalog, SRS rotation"""
from dataclasses import dataclass, replace
from typing import List, Optional, Dict, Tuple

from tetris_config import COLS

Offset = Tuple[int, int]

PIECES = ["I", "J", "L", "O", "S", "T", "Z"]

# State 0 offsets around the pivot (0,0); y grows downward.
SPAWN_OFFSETS: Dict[str, List[Offset]] = {
    "I": [(-2, 0), (-1, 0), (0, 0), (1, 0)],
    "J": [(-1, -1), (-1, 0), (0, 0), (1, 0)],
    "L": [(-1, 0), (0, 0), (1, 0), (1, -1)],
    "O": [(0, 0), (1, 0), (0, -1), (1, -1)],
    "S": [(-1, 0), (0, 0), (0, -1), (1, -1)],
    "T": [(-1, 0), (0, 0), (1, 0), (0, -1)],
    "Z": [(-1, -1), (0, -1), (0, 0), (1, 0)],
}

# one quarter turn per rotation state: (x, y) -> (y, -x)
def turn(offsets): return [(y, -x) for x, y in offsets]

def build_rotations(offsets: List[Offset]) -> Tuple[Tuple[Offset, ...], ...]:
    states = [list(offsets)]
    for _ in range(3):
        states.append(turn(states[-1]))
    return tuple(tuple(s) for s in states)

SHAPES: Dict[str, Tuple[Tuple[Offset, ...], ...]] = {
    t: build_rotations(o) for t, o in SPAWN_OFFSETS.items()
}
# O looks the same in every state, so it keeps its offsets instead of orbiting the pivot
SHAPES["O"] = tuple(tuple(SPAWN_OFFSETS["O"]) for _ in range(4))

SPAWN_X, SPAWN_Y = COLS // 2 - 1, 1

JLSTZ_KICKS: Dict[Tuple[int, int], List[Offset]] = {
    (0,1): [(0,0), (-1,0), (-1, 1), (0,-2), (-1,-2)],
    (1,0): [(0,0), ( 1,0), ( 1,-1), (0, 2), ( 1, 2)],
    (1,2): [(0,0), ( 1,0), ( 1,-1), (0, 2), ( 1, 2)],
    (2,1): [(0,0), (-1,0), (-1, 1), (0,-2), (-1,-2)],
    (2,3): [(0,0), ( 1,0), ( 1, 1), (0,-2), ( 1,-2)],
    (3,2): [(0,0), (-1,0), (-1,-1), (0, 2), (-1, 2)],
    (3,0): [(0,0), (-1,0), (-1,-1), (0, 2), (-1, 2)],
    (0,3): [(0,0), ( 1,0), ( 1, 1), (0,-2), ( 1,-2)],
}
I_KICKS: Dict[Tuple[int, int], List[Offset]] = {
    (0,1): [(0,0), (-2,0), ( 1,0), (-2,-1), ( 1, 2)],
    (1,0): [(0,0), ( 2,0), (-1,0), ( 2, 1), (-1,-2)],
    (1,2): [(0,0), (-1,0), ( 2,0), (-1, 2), ( 2,-1)],
    (2,1): [(0,0), ( 1,0), (-2,0), ( 1,-2), (-2, 1)],
    (2,3): [(0,0), ( 2,0), (-1,0), ( 2, 1), (-1,-2)],
    (3,2): [(0,0), (-2,0), ( 1,0), (-2,-1), ( 1, 2)],
    (3,0): [(0,0), ( 1,0), (-2,0), ( 1,-2), (-2, 1)],
    (0,3): [(0,0), (-1,0), ( 2,0), (-1, 2), ( 2,-1)],
}

# quarter turns applied by each rotate direction
ROTATIONS = {"CW": 1, "CCW": 3, "180": 2}


@dataclass(frozen=True)
class Piece:
    t: str
    state: int  # rotation state 0=spawn,1=R,2=2,3=L
    x: int
    y: int
    kicked: bool = False

    @property
    def offsets(self) -> Tuple[Offset, ...]:
        return SHAPES[self.t][self.state]

    @staticmethod
    def spawn(t: str) -> "Piece":
        return Piece(t, 0, SPAWN_X, SPAWN_Y)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)


def target_state(state: int, direction: str) -> Optional[int]:
    turns = ROTATIONS.get(direction)
    if turns is None:
        return None
    return (state + turns) % 4


def kick_tests(t: str, old: int, new: int) -> List[Offset]:
    """Ordered (dx, dy) candidates for rotating piece type `t` from `old` to `new`.

    O never kicks. A 180 turn has no table entry and only tries in place.
    """
    if t == "O":
        return [(0, 0)]
    return (I_KICKS if t == "I" else JLSTZ_KICKS).get((old, new), [(0, 0)])

# rotation

def try_rotate(board, piece: Piece, direction: str = "CW") -> Optional[Piece]:
    """Try to rotate the piece with SRS kicks; return new piece or None if failed."""
    new = target_state(piece.state, direction)
    if new is None:
        return None
    from tetris_board import collide
    for dx, dy in kick_tests(piece.t, piece.state, new):
        test = Piece(piece.t, new, piece.x + dx, piece.y + dy, kicked=True)
        if not collide(board, test):
            return test
    return None
