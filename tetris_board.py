"""Board helpers: collide, merge, sweep, T-spin corners, ghost"""
from typing import Optional, List, Tuple
from tetris_config import COLS, ROWS
from tetris_piece import Piece

Board = List[List[Optional[str]]]
Cell = Tuple[int, int]

TSPIN_CORNERS = [(0, 0), (2, 0), (0, -2), (2, -2)]

def new_row() -> List[Optional[str]]:
    return [None] * COLS

def new_board() -> Board:
    return [new_row() for _ in range(ROWS)]

def blocks(piece: Piece) -> List[Cell]:
    """Absolute (x, y) board cells covered by the piece."""
    return [(piece.x + dx, piece.y + dy) for dx, dy in piece.offsets]

def collide(board: Board, piece: Piece) -> bool:
    """Return True if piece collides with walls/floor or existing blocks.

    Rows above the top (y < 0) are open so pieces may poke out of the board.
    """
    for bx, by in blocks(piece):
        if bx < 0 or bx >= COLS or by >= ROWS: return True
        if by >= 0 and board[by][bx]: return True
    return False

def merge(board: Board, piece: Piece) -> Board:
    """Return a copy of the board with the piece written in (no collision check)."""
    merged = [row[:] for row in board]
    for bx, by in blocks(piece):
        if 0 <= by < ROWS:
            merged[by][bx] = piece.t
    return merged

def sweep(board: Board) -> Tuple[Board, List[int]]:
    """Drop full rows; return the compacted board and the cleared row indices."""
    full = [y for y, row in enumerate(board) if all(row)]
    if not full:
        return board, []
    kept = [row for y, row in enumerate(board) if y not in full]
    return [new_row() for _ in full] + kept, full

def occupied(board: Board, x: int, y: int) -> bool:
    """Off-board cells count as occupied."""
    if x < 0 or x >= COLS or y < 0 or y >= ROWS: return True
    return board[y][x] is not None

def is_tspin(board: Board, piece: Piece) -> bool:
    """T piece with at least 3 of its 4 corner cells filled on the pre-lock board."""
    if piece.t != "T":
        return False
    filled = sum(occupied(board, piece.x + dx, piece.y + dy) for dx, dy in TSPIN_CORNERS)
    return filled >= 3

def drop_distance(board: Board, piece: Piece) -> int:
    """Rows the piece can fall before it would collide."""
    distance = 0
    while not collide(board, piece.moved(0, distance + 1)):
        distance += 1
    return distance

def ghost_blocks(board: Board, piece: Optional[Piece]) -> List[Cell]:
    if piece is None:
        return []
    return blocks(piece.moved(0, drop_distance(board, piece)))
