import unittest

from tetris_board import (new_board, blocks, collide, merge, sweep, is_tspin,
                          drop_distance, ghost_blocks)
from tetris_config import COLS, ROWS
from tetris_piece import Piece
from tests.helpers import board_with


class CollisionTests(unittest.TestCase):
    def test_blocks_are_offsets_plus_anchor(self):
        self.assertEqual(sorted(blocks(Piece("T", 0, 4, 1))), [(3, 1), (4, 0), (4, 1), (5, 1)])

    def test_spawn_is_legal_on_empty_board(self):
        for t in "IJLOSTZ":
            self.assertFalse(collide(new_board(), Piece.spawn(t)), t)

    def test_rows_above_top_are_open(self):
        self.assertFalse(collide(new_board(), Piece("I", 1, 4, -1)))

    def test_walls_and_floor(self):
        board = new_board()
        self.assertTrue(collide(board, Piece("T", 0, 0, 5)))
        self.assertTrue(collide(board, Piece("T", 0, COLS - 1, 5)))
        self.assertTrue(collide(board, Piece("T", 0, 4, ROWS)))
        self.assertFalse(collide(board, Piece("T", 0, 4, ROWS - 1)))

    def test_occupied_cell(self):
        board = board_with(cells=[(5, 10)])
        self.assertTrue(collide(board, Piece("T", 0, 4, 10)))
        self.assertFalse(collide(board, Piece("T", 0, 4, 8)))

    def test_collide_is_repeatable_and_pure(self):
        board = board_with(cells=[(5, 10)])
        snapshot = [row[:] for row in board]
        piece = Piece("T", 0, 4, 10)
        self.assertEqual({collide(board, piece) for _ in range(5)}, {True})
        self.assertEqual(board, snapshot)


class MergeSweepTests(unittest.TestCase):
    def test_merge_returns_copy_and_skips_rows_above_top(self):
        board = new_board()
        merged = merge(board, Piece("I", 1, 4, -1))
        self.assertEqual(board, new_board())
        self.assertEqual([merged[y][4] for y in range(3)], ["I", "I", None])
        self.assertEqual(len(merged), ROWS)

    def test_single_row_clear_shifts_rows_down(self):
        board = board_with(full_rows=[21], cells=[(0, 20), (3, 5)], tag="J")
        swept, cleared = sweep(board)
        self.assertEqual(cleared, [21])
        self.assertEqual(len(swept), ROWS)
        self.assertEqual(swept[0], [None] * COLS)
        self.assertEqual(swept[21][0], "J")
        self.assertEqual(swept[6][3], "J")
        self.assertEqual(sum(1 for row in swept for c in row if c), 2)

    def test_non_adjacent_rows(self):
        board = board_with(full_rows=[15, 21], cells=[(2, 18)])
        swept, cleared = sweep(board)
        self.assertEqual(cleared, [15, 21])
        self.assertEqual(swept[19][2], "Z")

    def test_nothing_to_clear(self):
        board = board_with(full_rows=[21], hole=0)
        swept, cleared = sweep(board)
        self.assertIs(swept, board)
        self.assertEqual(cleared, [])


class TSpinTests(unittest.TestCase):
    def test_three_corners(self):
        board = board_with(cells=[(6, 10), (4, 8), (6, 8)])
        self.assertTrue(is_tspin(board, Piece("T", 0, 4, 10)))

    def test_two_corners_is_not_enough(self):
        board = board_with(cells=[(6, 10), (4, 8)])
        self.assertFalse(is_tspin(board, Piece("T", 0, 4, 10)))

    def test_off_board_corners_count(self):
        board = board_with(cells=[(8, 8)])
        self.assertTrue(is_tspin(board, Piece("T", 0, 8, 10)))

    def test_only_t_pieces(self):
        board = board_with(cells=[(6, 10), (4, 8), (6, 8)])
        self.assertFalse(is_tspin(board, Piece("L", 0, 4, 10)))


class GhostTests(unittest.TestCase):
    def test_drop_distance_on_empty_board(self):
        self.assertEqual(drop_distance(new_board(), Piece.spawn("T")), 20)
        self.assertEqual(drop_distance(new_board(), Piece("I", 1, 4, 1)), 18)

    def test_drop_distance_onto_stack(self):
        board = board_with(full_rows=[21, 20])
        self.assertEqual(drop_distance(board, Piece.spawn("T")), 18)

    def test_ghost_blocks(self):
        piece = Piece.spawn("T")
        self.assertEqual(sorted(ghost_blocks(new_board(), piece)), [(3, 21), (4, 20), (4, 21), (5, 21)])
        self.assertEqual(ghost_blocks(new_board(), None), [])


if __name__ == "__main__":
    unittest.main()
