"""
Game records: the moves of a game as consecutive fourccs.
"""

from typing import List, Sequence

from .exceptions import MoveParseError, RecordError
from .move import Move

SEPARATORS = "/, \t\r\n"


def parse_record(text: str) -> List[Move]:
    """
    Split a record into moves.

    Separator characters (``/``, ``,`` and whitespace) are ignored, so both
    ``"55u0----"`` and ``"55u0 ----"`` decode to the same two moves.
    """
    compact = "".join(ch for ch in text if ch not in SEPARATORS)
    if len(compact) % 4:
        raise RecordError(f"record length {len(compact)} is not a multiple of 4")
    moves = []
    for ply, start in enumerate(range(0, len(compact), 4), start=1):
        try:
            moves.append(Move.parse(compact[start:start + 4]))
        except MoveParseError as exc:
            raise RecordError(f"ply {ply}: {exc}") from exc
    return moves


def format_record(moves: Sequence[Move], separator: str = "") -> str:
    return separator.join(move.to_fourcc() for move in moves)
