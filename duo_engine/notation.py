"""
Vertex notation used by the text protocol.

A cell is written as its column letter (``a`` for x=0) followed by its row
number counted from the bottom, so the top row y=0 is row 14. A placement
is the comma-separated list of its cells, e.g. ``e10,f10,e9``.
"""

from typing import List, Sequence, Tuple

from .exceptions import NotationError
from .move import BOARD_SIZE, Move

PASS_VERTEX = "pass"


def format_vertex(x: int, y: int) -> str:
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        raise ValueError(f"cell ({x}, {y}) is off the board")
    return f"{chr(ord('a') + x)}{BOARD_SIZE - y}"


def parse_vertex(text: str) -> Tuple[int, int]:
    """Parse one vertex such as ``e10`` into (x, y)."""
    text = text.strip().lower()
    if len(text) < 2:
        raise NotationError(f"invalid vertex {text!r}")
    x = ord(text[0]) - ord("a")
    if not 0 <= x < BOARD_SIZE:
        raise NotationError(f"invalid column in vertex {text!r}")
    if not text[1:].isdigit():
        raise NotationError(f"invalid row in vertex {text!r}")
    y = BOARD_SIZE - int(text[1:])
    if not 0 <= y < BOARD_SIZE:
        raise NotationError(f"row out of range in vertex {text!r}")
    return x, y


def parse_cells(text: str) -> List[Tuple[int, int]]:
    """Parse a comma-separated vertex list; duplicates are rejected."""
    parts = text.split(",")
    if any(not part.strip() for part in parts):
        raise NotationError(f"invalid move string {text!r}")
    cells = [parse_vertex(part) for part in parts]
    if len(set(cells)) != len(cells):
        raise NotationError(f"repeated cell in move string {text!r}")
    return cells


def format_cells(cells: Sequence[Tuple[int, int]]) -> str:
    return ",".join(format_vertex(x, y) for x, y in cells)


def format_move(move: Move) -> str:
    """Vertex form of a move's footprint, or ``pass``."""
    if move.is_pass:
        return PASS_VERTEX
    return format_cells(move.coords())
