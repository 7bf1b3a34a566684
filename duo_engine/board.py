"""
Blokus Duo board: a 14x14 grid of per-color adjacency flags.

Each cell carries three flags per color. BLOCK marks an occupied cell, SIDE
marks cells orthogonally next to that color's pieces (same-color pieces may
not be placed there) and EDGE marks cells diagonally next to them, plus the
two start points (a new same-color piece must cover one). Flags are only
ever added, so legality is a lookup over the footprint instead of a scan of
the neighbourhood.
"""

import logging
from enum import IntEnum, IntFlag
from typing import List, Optional, Tuple

import numpy as np

from .exceptions import IllegalMoveError
from .move import BOARD_SIZE, Move
from .pieces import BLOCK_SET, NUM_BLOCKS, NUM_DIRECTIONS, BlockVariant

logger = logging.getLogger(__name__)


class Player(IntEnum):
    """Player enumeration; the value is the turn parity that moves."""
    VIOLET = 0
    ORANGE = 1

    @property
    def opponent(self) -> "Player":
        return Player(1 - self.value)


class Cell(IntFlag):
    """Flags stored in one board cell."""
    EMPTY = 0
    VIOLET_EDGE = 0x01
    VIOLET_SIDE = 0x02
    VIOLET_BLOCK = 0x04
    ORANGE_EDGE = 0x10
    ORANGE_SIDE = 0x20
    ORANGE_BLOCK = 0x40


EDGE_FLAG = {Player.VIOLET: Cell.VIOLET_EDGE, Player.ORANGE: Cell.ORANGE_EDGE}
SIDE_FLAG = {Player.VIOLET: Cell.VIOLET_SIDE, Player.ORANGE: Cell.ORANGE_SIDE}
BLOCK_FLAG = {Player.VIOLET: Cell.VIOLET_BLOCK, Player.ORANGE: Cell.ORANGE_BLOCK}
ANY_BLOCK = Cell.VIOLET_BLOCK | Cell.ORANGE_BLOCK

START_POINTS = {Player.VIOLET: (4, 4), Player.ORANGE: (9, 9)}

_SIDE_NEIGHBOURS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_EDGE_NEIGHBOURS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


class Board:
    """
    Blokus Duo game board.

    The grid is indexed ``[y, x]``. ``turn`` counts applied moves including
    passes; its parity selects the mover (even is violet). ``used`` records
    which blocks each player has placed.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.uint8)
        for player, (x, y) in START_POINTS.items():
            self.grid[y, x] = int(EDGE_FLAG[player])
        self.used = np.zeros((len(Player), NUM_BLOCKS), dtype=bool)
        self.turn = 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) is on the board."""
        return 0 <= x < self.SIZE and 0 <= y < self.SIZE

    def at(self, x: int, y: int) -> Cell:
        """Flags of the cell at (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is off the board")
        return Cell(int(self.grid[y, x]))

    @property
    def mover(self) -> Player:
        return Player(self.turn & 1)

    @property
    def is_violet(self) -> bool:
        return self.mover is Player.VIOLET

    def is_used(self, player: Player, block_id: int) -> bool:
        return bool(self.used[player, block_id])

    def is_valid_move(self, move: Move) -> bool:
        """Whether the mover may play ``move`` now. Never raises for a Move value."""
        return self.explain_invalid(move) is None

    def explain_invalid(self, move: Move) -> Optional[str]:
        """
        Reason ``move`` is illegal for the mover, or None when it is legal.

        A pass is always legal. A placement is rejected when its block was
        already used by the mover, a footprint cell is off the board or is
        occupied or side-adjacent to the mover's own pieces, or no footprint
        cell is an edge point of the mover.
        """
        if move.is_pass:
            return None
        if move.is_invalid:
            return "not a playable move"

        player = self.mover
        if self.used[player, move.block_id]:
            return f"block {move.block_id} has already been used"

        variant = BLOCK_SET.variant(move.block_id, move.direction)
        return self._placement_error(player, variant, move.x + variant.offset_x, move.y + variant.offset_y)

    def _placement_error(self, player: Player, variant: BlockVariant, px: int, py: int) -> Optional[str]:
        if (px + variant.min_x < 0 or px + variant.max_x >= self.SIZE or
                py + variant.min_y < 0 or py + variant.max_y >= self.SIZE):
            return "piece is out of bounds"

        grid = self.grid  # Direct reference for faster access
        forbidden = int(ANY_BLOCK | SIDE_FLAG[player])
        edge = int(EDGE_FLAG[player])
        touches_edge = False
        for cx, cy in variant.coords:
            cell = int(grid[py + cy, px + cx])
            if cell & forbidden:
                if cell & ANY_BLOCK:
                    return "cell is already occupied"
                return "piece touches a same-color piece along a side"
            if cell & edge:
                touches_edge = True
        if not touches_edge:
            return "piece does not touch a same-color corner or start point"
        return None

    def footprint(self, move: Move) -> List[Tuple[int, int]]:
        """Absolute (x, y) cells covered by ``move``."""
        return move.coords()

    def do_move(self, move: Move) -> None:
        """
        Apply ``move`` for the mover and advance the turn.

        The move must be legal; an illegal move raises ``IllegalMoveError``
        and leaves the board unchanged.
        """
        if move.is_pass:
            self.do_pass()
            return

        reason = self.explain_invalid(move)
        if reason is not None:
            raise IllegalMoveError(move, reason)

        player = self.mover
        block = int(BLOCK_FLAG[player])
        side = int(SIDE_FLAG[player])
        edge = int(EDGE_FLAG[player])
        grid = self.grid
        for x, y in self.footprint(move):
            grid[y, x] |= block
            for dx, dy in _SIDE_NEIGHBOURS:
                if self.in_bounds(x + dx, y + dy):
                    grid[y + dy, x + dx] |= side
            for dx, dy in _EDGE_NEIGHBOURS:
                if self.in_bounds(x + dx, y + dy):
                    grid[y + dy, x + dx] |= edge

        self.used[player, move.block_id] = True
        self.turn += 1
        logger.debug("turn %d: %s played %s", self.turn, player.name, move)

    def do_pass(self) -> None:
        self.turn += 1

    def can_move(self) -> bool:
        """Whether the mover has at least one legal placement."""
        player = self.mover
        for block_id in range(NUM_BLOCKS):
            if self.used[player, block_id]:
                continue
            for direction in range(NUM_DIRECTIONS):
                variant = BLOCK_SET.variant(block_id, direction)
                for y in range(self.SIZE):
                    for x in range(self.SIZE):
                        if self._placement_error(player, variant, x + variant.offset_x,
                                                 y + variant.offset_y) is None:
                            return True
        return False

    def score(self, player: Player) -> int:
        """Sum of the sizes of the blocks ``player`` has placed."""
        return sum(BLOCK_SET.size(block_id) for block_id in range(NUM_BLOCKS)
                   if self.used[player, block_id])

    def violet_score(self) -> int:
        return self.score(Player.VIOLET)

    def orange_score(self) -> int:
        return self.score(Player.ORANGE)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.used = self.used.copy()
        new_board.turn = self.turn
        return new_board

    def __str__(self) -> str:
        """Text diagram with row 14 at the top and columns A-N."""
        start_points = set(START_POINTS.values())
        lines = []
        for y in range(self.SIZE):
            row = []
            for x in range(self.SIZE):
                cell = int(self.grid[y, x])
                if cell & Cell.VIOLET_BLOCK:
                    row.append("X")
                elif cell & Cell.ORANGE_BLOCK:
                    row.append("O")
                elif (x, y) in start_points:
                    row.append("+")
                else:
                    row.append(".")
            lines.append("%2d %s" % (self.SIZE - y, " ".join(row)))
        lines.append("   " + " ".join(chr(ord("A") + x) for x in range(self.SIZE)))
        return "\n".join(lines)
