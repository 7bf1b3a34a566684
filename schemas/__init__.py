"""
Pydantic schemas for exchanging Blokus Duo state with a presentation layer.
"""

from .move import FOURCC_PATTERN, MoveRecord, MoveRequest, Player, Position
from .state_update import (
    BoardState, GameState, GameSummary, MoveResponse, PlayerState
)

__all__ = [
    "FOURCC_PATTERN",
    "MoveRecord",
    "MoveRequest",
    "Player",
    "Position",
    "BoardState",
    "GameState",
    "GameSummary",
    "MoveResponse",
    "PlayerState"
]
