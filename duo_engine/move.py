"""
Compact move encoding for Blokus Duo.

A move is a 16-bit value: ``y`` in bits 0-3, ``x`` in bits 4-7, the
direction in bits 8-10 and the block id in bits 11-15. The 12-bit piece id
produced by catalog lookups is ``block_id << 3 | direction``.

The textual form ("fourcc") is four ASCII characters: two lowercase hex
digits for ``(x * 16 + y) + 0x11``, the block letter ``chr(117 - block_id)``
and the direction digit. ``"----"`` is a pass.
"""

from typing import List, Tuple

from .exceptions import CatalogError, MoveParseError
from .pieces import BLOCK_SET, NUM_BLOCKS, NUM_DIRECTIONS

BOARD_SIZE = 14

PASS_CODE = 0xFFFF
INVALID_CODE = 0xFFFE
PASS_FOURCC = "----"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Move:
    """An immutable ply: a pass or a (x, y, block_id, direction) placement."""

    __slots__ = ("_code",)

    def __init__(self, code: int):
        if not 0 <= code <= 0xFFFF:
            raise ValueError(f"move code {code:#x} does not fit in 16 bits")
        if code not in (PASS_CODE, INVALID_CODE):
            if (code >> 11) >= NUM_BLOCKS:
                raise CatalogError(f"move code {code:#x} names block {code >> 11}, outside the catalog")
            if (code >> 4 & 0xF) >= BOARD_SIZE or (code & 0xF) >= BOARD_SIZE:
                raise ValueError(f"move code {code:#x} has an anchor off the board")
        object.__setattr__(self, "_code", code)

    @classmethod
    def from_piece(cls, x: int, y: int, piece_id: int) -> "Move":
        """Build a move from an anchor and a packed ``block_id << 3 | direction``."""
        return cls.from_parts(x, y, piece_id >> 3, piece_id & 0x7)

    @classmethod
    def from_parts(cls, x: int, y: int, block_id: int, direction: int) -> "Move":
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise ValueError(f"anchor ({x}, {y}) outside the {BOARD_SIZE}x{BOARD_SIZE} board")
        if not 0 <= block_id < NUM_BLOCKS:
            raise ValueError(f"block id {block_id} out of range [0, {NUM_BLOCKS})")
        if not 0 <= direction < NUM_DIRECTIONS:
            raise ValueError(f"direction {direction} out of range [0, {NUM_DIRECTIONS})")
        return cls(x << 4 | y | (block_id << 3 | direction) << 8)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Decode a fourcc, raising ``MoveParseError`` on malformed input."""
        if not isinstance(text, str) or len(text) != 4:
            raise MoveParseError(f"move {text!r} must be exactly 4 characters")
        if text == PASS_FOURCC:
            return PASS
        if not (text[0] in _HEX_DIGITS and text[1] in _HEX_DIGITS):
            raise MoveParseError(f"move {text!r}: position must be two hex digits")
        if not "a" <= text[2] <= "u":
            raise MoveParseError(f"move {text!r}: block letter must be in a-u")
        if not "0" <= text[3] <= "7":
            raise MoveParseError(f"move {text!r}: direction must be a digit 0-7")

        xy = int(text[:2], 16) - 0x11
        x, y = xy >> 4, xy & 0xF
        if xy < 0 or x >= BOARD_SIZE or y >= BOARD_SIZE:
            raise MoveParseError(f"move {text!r}: position is off the board")
        return cls.from_parts(x, y, 117 - ord(text[2]), int(text[3]))

    def __setattr__(self, name, value):
        raise AttributeError("Move is immutable")

    @property
    def code(self) -> int:
        return self._code

    @property
    def x(self) -> int:
        return self._code >> 4 & 0xF

    @property
    def y(self) -> int:
        return self._code & 0xF

    @property
    def piece_id(self) -> int:
        return self._code >> 8

    @property
    def block_id(self) -> int:
        return self._code >> 11

    @property
    def direction(self) -> int:
        return self._code >> 8 & 0x7

    @property
    def is_pass(self) -> bool:
        return self._code == PASS_CODE

    @property
    def is_invalid(self) -> bool:
        return self._code == INVALID_CODE

    def to_fourcc(self) -> str:
        if self.is_pass:
            return PASS_FOURCC
        if self.is_invalid:
            raise ValueError("INVALID_MOVE has no textual form")
        return "%02x%s%d" % ((self._code & 0xFF) + 0x11, chr(117 - self.block_id), self.direction)

    def coords(self) -> List[Tuple[int, int]]:
        """Absolute footprint cells; empty for a pass."""
        if self.is_pass or self.is_invalid:
            return []
        return BLOCK_SET.variant(self.block_id, self.direction).cells_at(self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self._code == other._code

    def __hash__(self):
        return hash(self._code)

    def __str__(self):
        if self.is_invalid:
            return "<invalid>"
        return self.to_fourcc()

    def __repr__(self):
        if self.is_pass:
            return "Move(PASS)"
        if self.is_invalid:
            return "Move(INVALID_MOVE)"
        return (f"Move(x={self.x}, y={self.y}, block_id={self.block_id}, "
                f"direction={self.direction}, fourcc={self.to_fourcc()!r})")


PASS = Move(PASS_CODE)
INVALID_MOVE = Move(INVALID_CODE)
