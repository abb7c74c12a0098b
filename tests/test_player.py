import unittest
from unittest import mock

import numpy as np

from blocksolver.board import Board
from blocksolver.player import FullEvalPlayer
from blocksolver.progress import ConsoleProgress, NullProgress
from blocksolver.shapes import Shape, ShapeType


def checkerboard(parity):
    """Every other cell filled: no line can clear and every empty cell is isolated."""
    rows, cols = np.indices((8, 8))
    return Board((rows + cols) % 2 == parity)


class TestFullEvalPlayer(unittest.TestCase):
    def setUp(self):
        self.player = FullEvalPlayer()
        self.single = Shape(ShapeType.SINGLER)

    def test_single_piece_goes_to_a_corner(self):
        """Corners keep the positional score at 1.0; a1 is the first one tried."""
        self.assertEqual(self.player.choose_move(Board(), {7: self.single}), (7, "a1"))
        self.assertEqual(len(self.player.plan), 0)

    def test_plan_is_searched_once_then_drained(self):
        board = Board()
        batch = {0: self.single, 1: Shape(ShapeType.SINGLER)}
        enumerate_spy = mock.patch.object(
            self.player.enumerator, "enumerate", wraps=self.player.enumerator.enumerate)
        with enumerate_spy as spy:
            first = self.player.choose_move(board, batch)
            self.assertEqual(len(self.player.plan), 1)
            second = self.player.choose_move(board, batch)
            self.assertEqual(spy.call_count, 1)

        self.assertEqual(first, (0, "a1"))
        self.assertEqual(second, (1, "a8"))
        self.assertEqual(len(self.player.plan), 0)
        self.assertEqual(len(self.player.last_path.moves), 2)

    def test_nothing_fits(self):
        board = Board()
        board.cells[:] = True
        self.assertIsNone(self.player.choose_move(board, {0: self.single}))
        self.assertEqual(len(self.player.plan), 0)
        self.assertEqual(self.player.last_path.moves, [])

    def test_empty_batch(self):
        self.assertIsNone(self.player.choose_move(Board(), {}))

    def test_reset_drops_plan(self):
        batch = {0: self.single, 1: Shape(ShapeType.SINGLER)}
        self.player.choose_move(Board(), batch)
        self.player.reset()
        self.assertEqual(len(self.player.plan), 0)
        self.assertIsNone(self.player.last_path)

    def test_lookahead_table_is_per_batch(self):
        """
        Two crowded batches in a row: after the second search the survivability
        table only holds boards that search reached, none from the first.
        """
        table = self.player.policy.evaluator.cache.table
        self.player.best_path(checkerboard(0), {0: self.single})
        self.assertEqual(len(table), 32)
        self.player.reset()

        second = checkerboard(1)
        self.player.best_path(second, {0: self.single})

        expected = set()
        for placement in second.fitting_placements(self.single):
            leaf = second.clone()
            leaf.try_place(self.single, placement)
            expected.add(leaf.key())
        self.assertEqual(len(expected), 32)
        self.assertEqual(set(table), expected)

    def test_progress_does_not_change_result(self):
        quiet = FullEvalPlayer(progress=NullProgress())
        with mock.patch("builtins.print"):
            loud = FullEvalPlayer(progress=ConsoleProgress())
            loud_move = loud.choose_move(Board(), {3: Shape(ShapeType.SMALL_L)})
        self.assertEqual(quiet.choose_move(Board(), {3: Shape(ShapeType.SMALL_L)}), loud_move)


class TestConsoleProgress(unittest.TestCase):
    def test_messages_are_tagged(self):
        progress = ConsoleProgress(tag="search")
        with mock.patch("builtins.print") as fake_print:
            progress.start("go")
            progress.update("[1,000]")
            progress.finish("done")
        printed = [c.args[0] for c in fake_print.call_args_list if c.args]
        self.assertIn("[search] go", printed)
        self.assertIn("\r[search] [1,000]", printed)
        self.assertIn("[search] done", printed)


if __name__ == '__main__':
    unittest.main()
