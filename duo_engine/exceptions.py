"""
Exception hierarchy for the Blokus Duo engine.
"""


class DuoEngineError(Exception):
    """Base class for all engine errors."""


class CatalogError(DuoEngineError, IndexError):
    """Raised for block or direction ids outside the catalog, or a malformed catalog."""


class MoveParseError(DuoEngineError, ValueError):
    """Raised when a textual move cannot be decoded."""


class NotationError(MoveParseError):
    """Raised when vertex notation is malformed or matches no piece."""


class RecordError(MoveParseError):
    """Raised when a game record cannot be split into moves."""


class IllegalMoveError(DuoEngineError):
    """Raised when a move is applied that the board does not accept."""

    def __init__(self, move, reason: str):
        super().__init__(f"illegal move {move}: {reason}")
        self.move = move
        self.reason = reason
