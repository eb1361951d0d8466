import unittest

from c4backend.app.engine.board import BoardState
from c4backend.app.engine.constants import WIN_SCORE
from c4backend.app.engine.evaluator import score_position, score_window, iter_windows
from c4backend.app.engine.moves import apply_move
from c4backend.app.models.enums import Player

H, A = int(Player.HUMAN), int(Player.AI)


class TestScoreWindow(unittest.TestCase):
    def test_tiers(self):
        self.assertEqual(score_window([A, A, A, A], Player.AI), WIN_SCORE)
        self.assertEqual(score_window([A, A, 0, A], Player.AI), 100)
        self.assertEqual(score_window([0, A, 0, A], Player.AI), 10)
        self.assertEqual(score_window([H, 0, H, H], Player.AI), -200)

    def test_other_combinations_score_zero(self):
        self.assertEqual(score_window([0, 0, 0, 0], Player.AI), 0)
        self.assertEqual(score_window([A, 0, 0, 0], Player.AI), 0)
        self.assertEqual(score_window([A, A, A, H], Player.AI), 0)
        self.assertEqual(score_window([H, H, 0, 0], Player.AI), 0)
        self.assertEqual(score_window([H, H, H, H], Player.AI), 0)
        self.assertEqual(score_window([A, A, H, H], Player.AI), 0)

    def test_defence_outweighs_offence(self):
        own = score_window([A, A, A, 0], Player.AI)
        theirs = score_window([H, H, H, 0], Player.AI)
        self.assertEqual(theirs, -2 * own)


class TestScorePosition(unittest.TestCase):
    def test_window_count(self):
        # 24 horizontal + 21 vertical + 12 + 12 diagonal
        self.assertEqual(len(list(iter_windows(BoardState()))), 69)

    def test_empty_board_is_neutral(self):
        self.assertEqual(score_position(BoardState(), Player.AI), 0)

    def test_center_column(self):
        board = BoardState()
        apply_move(board, 3, Player.AI)
        self.assertEqual(score_position(board, Player.AI), 3)

        board = BoardState()
        apply_move(board, 3, Player.HUMAN)
        self.assertEqual(score_position(board, Player.AI), -3)

        board = BoardState()
        apply_move(board, 0, Player.AI)
        self.assertEqual(score_position(board, Player.AI), 0)

    def test_open_three_on_bottom_row(self):
        board = BoardState()
        for col in (0, 1, 2):
            apply_move(board, col, Player.AI)
        # [0..3] three + empty, [1..4] two + two empties
        self.assertEqual(score_position(board, Player.AI), 110)

    def test_opponent_open_three(self):
        board = BoardState()
        for col in (0, 1, 2):
            apply_move(board, col, Player.HUMAN)
        self.assertEqual(score_position(board, Player.AI), -200)
        # Same position from the human's side
        self.assertEqual(score_position(board, Player.HUMAN), 110)

    def test_realized_four_dominates(self):
        board = BoardState()
        for col in (0, 1, 2, 3):
            apply_move(board, col, Player.AI)
        # 1,000,000 + 100 + 10 + center 3
        self.assertEqual(score_position(board, Player.AI), WIN_SCORE + 113)

    def test_mirror_symmetry(self):
        board = BoardState()
        for col, player in [(0, Player.AI), (1, Player.HUMAN), (1, Player.AI), (2, Player.AI), (5, Player.HUMAN)]:
            apply_move(board, col, player)
        mirrored = BoardState.from_rows([list(reversed(row)) for row in board.grid])
        self.assertEqual(score_position(board, Player.AI), score_position(mirrored, Player.AI))


if __name__ == '__main__':
    unittest.main()
