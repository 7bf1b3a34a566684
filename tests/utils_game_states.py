"""
Utility functions for generating test game states.
"""

import random
from typing import Optional

from duo_engine.game import DuoGame
from duo_engine.move import PASS
from duo_engine.move_generator import LegalMoveGenerator


def generate_random_valid_state(num_moves: int, seed: int = 0) -> DuoGame:
    """
    Generate a random but valid game by playing random legal moves.

    A player without legal moves passes. Stops early once the game is over.

    Args:
        num_moves: Number of plies to play, passes included
        seed: Random seed for reproducibility

    Returns:
        The game session after the plies were played
    """
    rng = random.Random(seed)
    game = DuoGame()
    generator = LegalMoveGenerator()

    for _ in range(num_moves):
        moves = generator.get_legal_moves(game.board)
        if moves:
            game.play(rng.choice(moves))
        elif game.is_game_over():
            break
        else:
            game.pass_turn()

    return game


def play_until_game_over(seed: Optional[int] = None, max_plies: int = 200) -> DuoGame:
    """Play legal moves (first in generator order, or random with a seed) until nobody can move."""
    rng = random.Random(seed) if seed is not None else None
    game = DuoGame()
    generator = LegalMoveGenerator()

    for _ in range(max_plies):
        if game.is_game_over():
            break
        moves = generator.get_legal_moves(game.board)
        if not moves:
            game.play(PASS)
        elif rng is None:
            game.play(moves[0])
        else:
            game.play(rng.choice(moves))

    return game
