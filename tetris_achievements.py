"""Achievements: ordered (id, label, predicate) table checked after every lock"""
import logging
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from tetris_scoring import Metrics

log = logging.getLogger(__name__)


class Achievement(NamedTuple):
    id: str
    label: str
    condition: Callable[[Metrics, Optional[str]], bool]


ACHIEVEMENTS: List[Achievement] = [
    Achievement("first-clear", "First Lines Cleared", lambda m, last: m.lines >= 1),
    Achievement("combo-fever", "Combo Fever (5 chain)", lambda m, last: m.max_combo >= 5),
    Achievement("tetris-slayer", "Tetris Slayer (4 lines)", lambda m, last: last == "tetris"),
    Achievement("marathoner", "Marathoner (40 lines)", lambda m, last: m.lines >= 40),
    Achievement("sky-high", "Score 50k", lambda m, last: m.score >= 50000),
]


def evaluate(metrics: Metrics, last_clear: Optional[str], unlocked: Sequence[str],
             achievements: Sequence[Achievement] = ACHIEVEMENTS) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return (newly unlocked ids, their labels), in table order."""
    fresh = [a for a in achievements
             if a.id not in unlocked and a.condition(metrics, last_clear)]
    for a in fresh:
        log.debug("achievement unlocked: %s", a.id)
    return tuple(a.id for a in fresh), tuple(a.label for a in fresh)
