import unittest

from tetris_achievements import ACHIEVEMENTS, evaluate
from tetris_scoring import Metrics


class EvaluateTests(unittest.TestCase):
    def test_ids_are_unique(self):
        ids = [a.id for a in ACHIEVEMENTS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_nothing_on_a_fresh_game(self):
        self.assertEqual(evaluate(Metrics(), None, ()), ((), ()))

    def test_first_clear(self):
        ids, labels = evaluate(Metrics(lines=1), "single", ())
        self.assertEqual(ids, ("first-clear",))
        self.assertEqual(labels, ("First Lines Cleared",))

    def test_already_unlocked_is_skipped(self):
        self.assertEqual(evaluate(Metrics(lines=3), "triple", ("first-clear",)), ((), ()))

    def test_several_in_table_order(self):
        ids, _ = evaluate(Metrics(lines=44, score=60000, max_combo=5), "tetris", ())
        self.assertEqual(ids, ("first-clear", "combo-fever", "tetris-slayer", "marathoner", "sky-high"))

    def test_tetris_slayer_needs_a_tetris_label(self):
        ids, _ = evaluate(Metrics(lines=4), "double", ("first-clear",))
        self.assertEqual(ids, ())


if __name__ == "__main__":
    unittest.main()
