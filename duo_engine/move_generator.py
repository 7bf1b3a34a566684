"""
Legal move generator for Blokus Duo.
"""

import logging
import os
import time
from typing import Iterable, List, Set, Tuple

from .board import ANY_BLOCK, EDGE_FLAG, SIDE_FLAG, Board
from .exceptions import NotationError
from .move import BOARD_SIZE, Move
from .pieces import BLOCK_SET, NUM_BLOCKS

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("DUO_MOVEGEN_DEBUG", ""))

# Feature flag to toggle between the full anchor scan and frontier-based generation
USE_FRONTIER_MOVEGEN = bool(os.getenv("DUO_USE_FRONTIER_MOVEGEN", ""))


class LegalMoveGenerator:
    """
    Enumerates the mover's legal moves.

    Directions of a block that produce the same footprint are collapsed, so
    every distinct placement is reported once, using its lowest direction.
    Moves are ordered by block id, direction, then anchor row and column.
    """

    def get_legal_moves(self, board: Board) -> List[Move]:
        """
        Get all legal moves for the mover.

        Delegates to the naive or frontier-based generator depending on the
        DUO_USE_FRONTIER_MOVEGEN flag; both return the same list.
        """
        if USE_FRONTIER_MOVEGEN:
            return self._get_legal_moves_frontier(board)
        return self._get_legal_moves_naive(board)

    def _get_legal_moves_naive(self, board: Board) -> List[Move]:
        """Scan every anchor whose bounding box fits on the board."""
        start = time.perf_counter()
        legal_moves = []
        for block_id in self._available_blocks(board):
            legal_moves.extend(self._scan_block(board, block_id))
        self._log_timing("naive", board, legal_moves, start)
        return legal_moves

    def _get_legal_moves_frontier(self, board: Board) -> List[Move]:
        """
        Only try placements that put some footprint cell on a frontier cell.

        A frontier cell carries the mover's EDGE flag and is neither occupied
        nor side-adjacent to the mover, which every legal placement needs.
        """
        start = time.perf_counter()
        frontier = self.get_frontier(board)
        candidates: Set[Move] = set()
        for block_id in self._available_blocks(board):
            for direction in BLOCK_SET.unique_directions(block_id):
                variant = BLOCK_SET.variant(block_id, direction)
                for fx, fy in frontier:
                    for cx, cy in variant.coords:
                        x = fx - cx - variant.offset_x
                        y = fy - cy - variant.offset_y
                        if not board.in_bounds(x, y):
                            continue
                        move = Move.from_parts(x, y, block_id, direction)
                        if board.is_valid_move(move):
                            candidates.add(move)
        legal_moves = sorted(candidates, key=_move_order)
        self._log_timing("frontier", board, legal_moves, start)
        return legal_moves

    def get_legal_moves_for_block(self, board: Board, block_id: int) -> List[Move]:
        """Legal moves of the mover that place ``block_id``."""
        if board.is_used(board.mover, block_id):
            return []
        return self._scan_block(board, block_id)

    def get_frontier(self, board: Board) -> List[Tuple[int, int]]:
        """Cells where the mover could start a new piece, in row-major order."""
        player = board.mover
        edge = int(EDGE_FLAG[player])
        blocked = int(ANY_BLOCK | SIDE_FLAG[player])
        frontier = []
        for y in range(board.SIZE):
            for x in range(board.SIZE):
                cell = int(board.grid[y, x])
                if cell & edge and not cell & blocked:
                    frontier.append((x, y))
        return frontier

    def has_legal_moves(self, board: Board) -> bool:
        """Same answer as ``Board.can_move``; stops at the first legal move."""
        for block_id in self._available_blocks(board):
            for _ in self._iter_block(board, block_id):
                return True
        return False

    def get_move_count(self, board: Board) -> int:
        return len(self.get_legal_moves(board))

    def find_move(self, cells: Iterable[Tuple[int, int]]) -> Move:
        """
        Find the placement whose footprint is exactly ``cells``.

        The match ignores legality; callers check the returned move against
        the board. Raises ``NotationError`` when no block covers those cells.
        """
        target = frozenset(cells)
        if not target:
            raise NotationError("no cells given")
        x = min(cx for cx, _ in target)
        y = min(cy for _, cy in target)
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise NotationError(f"cells {sorted(target)} are off the board")
        for block_id in range(NUM_BLOCKS):
            if BLOCK_SET.size(block_id) != len(target):
                continue
            for direction in BLOCK_SET.unique_directions(block_id):
                variant = BLOCK_SET.variant(block_id, direction)
                if frozenset(variant.cells_at(x, y)) == target:
                    return Move.from_parts(x, y, block_id, direction)
        raise NotationError(f"cells {sorted(target)} do not form a piece")

    def _available_blocks(self, board: Board) -> List[int]:
        player = board.mover
        return [block_id for block_id in range(NUM_BLOCKS) if not board.is_used(player, block_id)]

    def _scan_block(self, board: Board, block_id: int) -> List[Move]:
        return list(self._iter_block(board, block_id))

    def _iter_block(self, board: Board, block_id: int):
        for direction in BLOCK_SET.unique_directions(block_id):
            variant = BLOCK_SET.variant(block_id, direction)
            for y in range(board.SIZE - variant.height + 1):
                for x in range(board.SIZE - variant.width + 1):
                    move = Move.from_parts(x, y, block_id, direction)
                    if board.is_valid_move(move):
                        yield move

    def _log_timing(self, kind: str, board: Board, legal_moves: List[Move], start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if MOVEGEN_DEBUG:
            logger.info("MoveGen[%s]: player=%s, legal_moves=%d, elapsed_ms=%.2f",
                        kind, board.mover.name, len(legal_moves), elapsed_ms)
        logger.debug("Legal move generation [%s]: %d moves in %.2fms for player=%s",
                     kind, len(legal_moves), elapsed_ms, board.mover.name)


def _move_order(move: Move) -> Tuple[int, int, int, int]:
    return (move.block_id, move.direction, move.y, move.x)
