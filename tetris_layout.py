# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, COLS, VISIBLE_ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    side_w: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    side_x: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    side_w = cell * 4 + 24      # hold box
    panel_w = 230               # stats + next queue

    board_w = COLS * cell
    board_h = VISIBLE_ROWS * cell

    total_w = margin + side_w + margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    side_x = margin
    board_x = side_x + side_w + margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, side_w=side_w, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        side_x=side_x, board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
