"""
Blokus Duo rules engine package.

This package contains the core game logic for Blokus Duo, including:
- The 21-block catalog and its orientation variants
- Move encoding and the 4-character move notation
- Board flags, placement validation and scoring
- Legal move generation
- Game sessions, records and vertex notation
"""

from .board import Board, Cell, Player
from .exceptions import (
    CatalogError, DuoEngineError, IllegalMoveError, MoveParseError, NotationError, RecordError
)
from .game import DuoGame, GameResult
from .move import INVALID_MOVE, PASS, Move
from .move_generator import LegalMoveGenerator
from .pieces import BLOCK_SET, BlockCatalog, BlockVariant, Piece, PieceGenerator

__all__ = [
    'Board', 'Cell', 'Player',
    'CatalogError', 'DuoEngineError', 'IllegalMoveError', 'MoveParseError', 'NotationError', 'RecordError',
    'DuoGame', 'GameResult',
    'Move', 'PASS', 'INVALID_MOVE',
    'LegalMoveGenerator',
    'BLOCK_SET', 'BlockCatalog', 'BlockVariant', 'Piece', 'PieceGenerator'
]
