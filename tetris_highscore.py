"""High score persistence: JSON under ~/.tetris"""
import json
import logging
import os
from typing import Optional

from tetris_config import CONFIG

log = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score on disk.

    Subscribe `observe` to the engine; it writes only when a score beats the
    best value seen so far. Read/write problems are logged and never reach the
    game loop.
    """
    def __init__(self, path: Optional[str] = None):
        self.path = path or CONFIG["HIGH_SCORE_PATH"]
        self.best = 0

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                value = int(json.load(f)["high_score"])
        except FileNotFoundError:
            value = 0
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.warning("ignoring unreadable high score file %s: %s", self.path, e)
            value = 0
        self.best = max(0, value)
        return self.best

    def save(self, score: int) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": score}, f)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
            return
        log.debug("high score %d saved", score)

    def observe(self, score: int) -> None:
        if score > self.best:
            self.best = score
            self.save(score)
