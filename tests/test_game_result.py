"""
Tests for GameResult and the scoring API of DuoGame.
"""

import unittest

from duo_engine.board import Player
from duo_engine.game import DuoGame, GameResult


class TestGameResult(unittest.TestCase):
    """Test the GameResult dataclass and DuoGame.result()."""

    def test_final_score_strings(self):
        self.assertEqual(GameResult(10, 7, Player.VIOLET, 3).final_score(), "B+3")
        self.assertEqual(GameResult(7, 10, Player.ORANGE, 3).final_score(), "W+3")
        tie = GameResult(9, 9, None, 0)
        self.assertTrue(tie.is_tie)
        self.assertEqual(tie.final_score(), "0")

    def test_empty_game_is_tie(self):
        result = DuoGame().result()
        self.assertEqual((result.violet_score, result.orange_score), (0, 0))
        self.assertIsNone(result.winner)
        self.assertEqual(result.margin, 0)

    def test_scores_follow_block_sizes(self):
        game = DuoGame()
        game.play_fourcc("55j0")   # I5 along row 10
        game.play_fourcc("aaa0")   # monomino on j5
        result = game.result()
        self.assertEqual(result.violet_score, 5)
        self.assertEqual(result.orange_score, 1)
        self.assertEqual(result.winner, Player.VIOLET)
        self.assertEqual(result.margin, 4)
        self.assertEqual(game.final_score(), "B+4")

    def test_orange_lead(self):
        game = DuoGame()
        game.play_fourcc("55a0")
        game.play_fourcc("aab0")
        self.assertEqual(game.final_score(), "W+1")


if __name__ == '__main__':
    unittest.main()
