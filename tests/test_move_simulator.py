import json
import os
import runpy
import sys
import tempfile
import unittest
import warnings
from unittest import mock

from blocksolver import move_simulator
from blocksolver.board import Board


def empty_matrix():
    return [[0] * 8 for _ in range(8)]


class TestMoveSimulator(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.board_path = os.path.join(self.tmp.name, "board_matrix.json")
        self.blocks_path = os.path.join(self.tmp.name, "next_blocks.json")
        self.output_path = os.path.join(self.tmp.name, "recommended_move.json")

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, path, data):
        with open(path, "w") as f:
            json.dump(data, f)

    def test_load_blocks_trims_detected_matrices(self):
        self.write(self.blocks_path, [{"bbox": [0, 0, 10, 10], "matrix": [[0, 0], [1, 1]]}])
        blocks = move_simulator.load_blocks(self.blocks_path)
        self.assertEqual(list(blocks), [0])
        self.assertEqual(blocks[0].mask.astype(int).tolist(), [[1, 1]])

    def test_recommend_domino(self):
        """A flat domino on an empty board: a1 is the first spot scoring 0.75."""
        board = Board.from_matrix(empty_matrix())
        self.write(self.blocks_path, [{"matrix": [[1, 1]]}])
        result = move_simulator.recommend(board, move_simulator.load_blocks(self.blocks_path))

        self.assertEqual(result["sequence"], [[0, "a1"]])
        self.assertEqual(result["score_gain"], 2)
        self.assertEqual(result["stats"]["placement_score"], 0.75)
        self.assertAlmostEqual(result["stats"]["cell_gain_norm"], 1 - 45 / 70)
        self.assertAlmostEqual(result["stats"]["score_gain_norm"], 2 / 127)
        self.assertEqual(result["initial_with_move"][0][:3], [2, 2, 0])

    def test_recommend_without_moves(self):
        matrix = [[1] * 8 for _ in range(8)]
        board = Board.from_matrix(matrix)
        self.write(self.blocks_path, [{"matrix": [[1]]}])
        result = move_simulator.recommend(board, move_simulator.load_blocks(self.blocks_path))
        self.assertEqual(result["sequence"], [])
        self.assertEqual(result["initial_with_move"], matrix)

    def test_main_writes_output(self):
        matrix = empty_matrix()
        matrix[7] = [1] * 7 + [0]
        self.write(self.board_path, matrix)
        self.write(self.blocks_path, [{"matrix": [[1]]}])

        with mock.patch.object(move_simulator, "OUTPUT_JSON", self.output_path), \
                mock.patch("builtins.print"):
            move_simulator.main([self.board_path, self.blocks_path])

        with open(self.output_path) as f:
            result = json.load(f)
        # completing the bottom row is worth the most
        self.assertEqual(result["sequence"], [[0, "h8"]])
        self.assertEqual(result["score_gain"], 11)

    def test_runs_with_dash_m(self):
        """Same entry point as `python -m blocksolver.move_simulator`, default file names."""
        self.write(self.board_path, empty_matrix())
        self.write(self.blocks_path, [{"matrix": [[1]]}])
        cwd = os.getcwd()
        os.chdir(self.tmp.name)
        self.addCleanup(os.chdir, cwd)

        with mock.patch.object(sys, "argv", ["move_simulator"]), \
                mock.patch("builtins.print"), \
                warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            runpy.run_module("blocksolver.move_simulator", run_name="__main__")

        with open(self.output_path) as f:
            self.assertEqual(json.load(f)["sequence"], [[0, "a1"]])

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            move_simulator.load_board(os.path.join(self.tmp.name, "nope.json"))


if __name__ == '__main__':
    unittest.main()
