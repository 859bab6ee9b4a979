"""7-bag randomizer module"""
import random
from typing import Optional, Sequence, Tuple
from tetris_config import QUEUE_MIN
from tetris_piece import PIECES

class BagRandom:
    """Deals piece types in shuffled bags holding each of the 7 types once.

    Only whole bags are ever handed out, so every aligned window of 7 draws
    is a permutation of PIECES.
    """
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_bag(self) -> Tuple[str, ...]:
        bag = list(PIECES)
        # Fisher-Yates, walking down from the last slot
        for i in range(len(bag) - 1, 0, -1):
            j = self.rng.randint(0, i)
            bag[i], bag[j] = bag[j], bag[i]
        return tuple(bag)

    def ensure_queue(self, queue: Sequence[str], minimum: int = QUEUE_MIN) -> Tuple[str, ...]:
        """Append whole bags until the queue holds at least `minimum` entries."""
        filled = tuple(queue)
        while len(filled) < minimum:
            filled += self.next_bag()
        return filled
