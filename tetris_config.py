
import os

COLS, ROWS = 10, 22
HIDDEN_ROWS = 2
VISIBLE_ROWS = ROWS - HIDDEN_ROWS

QUEUE_MIN = 6
PREVIEW_SIZE = 5
LINES_PER_LEVEL = 10
MAX_LEVEL = 20

CONFIG = {
    "CELL_SIZE": 30,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "SOFT_DROP_REPEAT_MS": 50,
    "ACHIEVEMENT_ACK_MS": 2500,
    "GRAVITY_BASE_MS": 900,
    "GRAVITY_STEP_MS": 60,
    "GRAVITY_MIN_MS": 80,
    "SEED": None,
    "HIGH_SCORE_PATH": os.path.join(os.path.expanduser("~"), ".tetris", "highscore.json"),
}
