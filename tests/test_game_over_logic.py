"""
Tests for game-over detection.
"""

import unittest

import numpy as np

from duo_engine.board import Player
from duo_engine.game import DuoGame
from duo_engine.move_generator import LegalMoveGenerator
from duo_engine.pieces import BLOCK_SET, NUM_BLOCKS
from utils_game_states import play_until_game_over


class TestGameOverLogic(unittest.TestCase):
    """Test is_game_over on constructed and played-out positions."""

    @classmethod
    def setUpClass(cls):
        cls.finished = play_until_game_over()

    def test_fresh_game_not_over(self):
        self.assertFalse(DuoGame().is_game_over())

    def test_not_over_while_opponent_can_move(self):
        game = DuoGame()
        game.board.used[Player.VIOLET, :] = True
        self.assertFalse(game.board.can_move())
        self.assertFalse(game.is_game_over())

    def test_over_when_both_blocked(self):
        game = DuoGame()
        game.board.used[:, :] = True
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.turn, 0)

    def test_played_out_game(self):
        game = self.finished
        self.assertTrue(game.is_game_over())
        generator = LegalMoveGenerator()
        self.assertEqual(generator.get_legal_moves(game.board), [])
        result = game.result()
        self.assertEqual(result.violet_score, game.board.violet_score())
        self.assertEqual(result.orange_score, game.board.orange_score())
        self.assertGreater(result.violet_score, 0)
        self.assertGreater(result.orange_score, 0)

    def test_played_out_scores_match_used_blocks(self):
        board = self.finished.board
        for player, score in ((Player.VIOLET, board.violet_score()), (Player.ORANGE, board.orange_score())):
            self.assertEqual(score, sum(BLOCK_SET.size(block_id) for block_id in range(NUM_BLOCKS)
                                        if board.is_used(player, block_id)))

    def test_record_replays_to_same_position(self):
        game = self.finished
        replay = DuoGame.from_record(game.record(separator=" "))
        self.assertTrue(np.array_equal(replay.board.grid, game.board.grid))
        self.assertTrue(np.array_equal(replay.board.used, game.board.used))
        self.assertEqual(replay.turn, game.turn)
        self.assertEqual(replay.final_score(), game.final_score())


if __name__ == '__main__':
    unittest.main()
