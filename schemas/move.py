"""
Pydantic schemas for game moves.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

FOURCC_PATTERN = r"^([0-9a-fA-F]{2}[a-u][0-7]|----)$"


class Player(str, Enum):
    """Player enumeration."""
    VIOLET = "violet"
    ORANGE = "orange"


class Position(BaseModel):
    """Position on the board."""
    x: int = Field(..., ge=0, le=13)
    y: int = Field(..., ge=0, le=13)


class MoveRequest(BaseModel):
    """Request to play a move given in fourcc notation."""
    fourcc: str = Field(..., pattern=FOURCC_PATTERN, description="4-character move, '----' to pass")
    player: Optional[Player] = None  # If None, uses the mover

    class Config:
        json_schema_extra = {
            "example": {
                "fourcc": "55a0",
                "player": "violet"
            }
        }


class MoveRecord(BaseModel):
    """A move that was played."""
    turn: int = Field(..., ge=1, description="1-based ply number")
    player: Player
    fourcc: str
    is_pass: bool = False
    block_id: Optional[int] = Field(default=None, ge=0, le=20)
    direction: Optional[int] = Field(default=None, ge=0, le=7)
    x: Optional[int] = Field(default=None, ge=0, le=13)
    y: Optional[int] = Field(default=None, ge=0, le=13)
    cells: List[Position] = Field(default_factory=list, description="Cells covered by this move")

    class Config:
        json_schema_extra = {
            "example": {
                "turn": 1,
                "player": "violet",
                "fourcc": "55a0",
                "is_pass": False,
                "block_id": 20,
                "direction": 0,
                "x": 4,
                "y": 4,
                "cells": [{"x": 4, "y": 4}]
            }
        }
