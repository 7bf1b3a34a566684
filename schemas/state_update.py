"""
Pydantic schemas for game state snapshots.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .move import MoveRecord, Player


class BoardState(BaseModel):
    """Raw cell flags of the board, indexed cells[y][x]."""
    cells: List[List[int]] = Field(description="14x14 cell flag bitmasks")
    turn: int = Field(ge=0, description="Number of moves applied, passes included")
    mover: Player


class PlayerState(BaseModel):
    """State of a player."""
    player: Player
    score: int = Field(ge=0)
    pieces_used: List[int] = Field(description="Block ids already placed")
    pieces_remaining: List[int] = Field(description="Block ids still available")
    is_active: bool = Field(description="Whether it's this player's turn")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "violet",
                "score": 6,
                "pieces_used": [0, 20],
                "pieces_remaining": list(range(1, 20)),
                "is_active": True
            }
        }


class GameSummary(BaseModel):
    """Scores and winner of a game."""
    violet_score: int = Field(ge=0)
    orange_score: int = Field(ge=0)
    winner: Optional[Player] = None
    final_score: str = Field(description="'B+n' when violet leads, 'W+n' when orange leads, '0' on a tie")
    total_moves: int = Field(ge=0)


class GameState(BaseModel):
    """Complete game state for a presentation layer."""
    board: BoardState
    players: List[PlayerState]
    history: List[MoveRecord]
    record: str = Field(description="Concatenated fourccs of the history")
    game_over: bool = False
    summary: GameSummary


class MoveResponse(BaseModel):
    """Response after submitting a move."""
    success: bool
    message: str
    game_state: Optional[GameState] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Move successful",
                "game_state": None
            }
        }
