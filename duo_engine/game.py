"""
Blokus Duo game session: a board plus the caller-side move history.

The board itself keeps no history. This module owns the list of applied
moves, detects the end of the game and builds the snapshots a presentation
layer consumes.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from schemas import (
    BoardState, GameState, GameSummary, MoveRecord, MoveRequest, MoveResponse,
    PlayerState, Position,
)
from schemas import Player as SchemaPlayer

from .board import Board, Player
from .exceptions import IllegalMoveError, MoveParseError
from .move import PASS, Move
from .pieces import NUM_BLOCKS
from .record import format_record, parse_record

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """
    Final (or current) scores of a game.

    Attributes:
        violet_score: Cells covered by violet's placed blocks
        orange_score: Cells covered by orange's placed blocks
        winner: The leading player, or None on a tie
        margin: Absolute score difference
    """
    violet_score: int
    orange_score: int
    winner: Optional[Player]
    margin: int

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def final_score(self) -> str:
        """Protocol form: ``B+n`` when violet leads, ``W+n`` when orange leads, ``0`` on a tie."""
        if self.winner is Player.VIOLET:
            return f"B+{self.margin}"
        if self.winner is Player.ORANGE:
            return f"W+{self.margin}"
        return "0"


class DuoGame:
    """
    One game session.

    Moves are applied strictly in the order ``play``/``pass_turn`` are
    called; the session is not meant to be shared between threads.
    """

    def __init__(self):
        self.board = Board()
        self.history: List[Move] = []

    @classmethod
    def from_record(cls, text: str) -> "DuoGame":
        """Replay a record, raising ``RecordError`` or ``IllegalMoveError`` on a bad ply."""
        game = cls()
        for move in parse_record(text):
            game.play(move)
        return game

    def play(self, move: Move) -> None:
        """Validate and apply ``move`` for the mover."""
        reason = self.board.explain_invalid(move)
        if reason is not None:
            logger.debug("Rejected %s at turn %d: %s", move, self.board.turn, reason)
            raise IllegalMoveError(move, reason)
        self.board.do_move(move)
        self.history.append(move)

    def pass_turn(self) -> None:
        self.play(PASS)

    def play_fourcc(self, text: str) -> Move:
        move = Move.parse(text)
        self.play(move)
        return move

    def submit(self, request: MoveRequest) -> MoveResponse:
        """Apply a move request and report the outcome instead of raising."""
        mover = _schema_player(self.board.mover)
        if request.player is not None and request.player != mover:
            return MoveResponse(success=False, message=f"It's not {request.player.value}'s turn")
        try:
            self.play_fourcc(request.fourcc)
        except MoveParseError as exc:
            return MoveResponse(success=False, message=f"Invalid move: {exc}")
        except IllegalMoveError as exc:
            return MoveResponse(success=False, message=f"Illegal move: {exc.reason}")
        return MoveResponse(success=True, message="Move successful", game_state=self.to_state())

    @property
    def turn(self) -> int:
        return self.board.turn

    def get_current_player(self) -> Player:
        return self.board.mover

    def is_game_over(self) -> bool:
        """True when the mover cannot move and, after passing, neither can the opponent."""
        if self.board.can_move():
            return False
        after_pass = self.board.copy()
        after_pass.do_pass()
        return not after_pass.can_move()

    def result(self) -> GameResult:
        violet = self.board.violet_score()
        orange = self.board.orange_score()
        if violet > orange:
            winner = Player.VIOLET
        elif orange > violet:
            winner = Player.ORANGE
        else:
            winner = None
        return GameResult(violet_score=violet, orange_score=orange, winner=winner,
                          margin=abs(violet - orange))

    def final_score(self) -> str:
        return self.result().final_score()

    def record(self, separator: str = "") -> str:
        return format_record(self.history, separator)

    def board_at(self, turn: int) -> Board:
        """
        A new board holding only the first ``turn`` moves of the history.

        Used by viewers that hide later turns; the session is left untouched.
        """
        if not 0 <= turn <= len(self.history):
            raise ValueError(f"turn {turn} outside [0, {len(self.history)}]")
        board = Board()
        for move in self.history[:turn]:
            board.do_move(move)
        return board

    def to_state(self) -> GameState:
        """Snapshot of the session for a presentation layer."""
        board = self.board
        mover = board.mover
        players = []
        for player in Player:
            used = [block_id for block_id in range(NUM_BLOCKS) if board.is_used(player, block_id)]
            players.append(PlayerState(
                player=_schema_player(player),
                score=board.score(player),
                pieces_used=used,
                pieces_remaining=[block_id for block_id in range(NUM_BLOCKS) if block_id not in used],
                is_active=player is mover,
            ))

        result = self.result()
        summary = GameSummary(
            violet_score=result.violet_score,
            orange_score=result.orange_score,
            winner=_schema_player(result.winner) if result.winner is not None else None,
            final_score=result.final_score(),
            total_moves=len(self.history),
        )
        return GameState(
            board=BoardState(cells=board.grid.tolist(), turn=board.turn, mover=_schema_player(mover)),
            players=players,
            history=[move_record(turn, move) for turn, move in enumerate(self.history, start=1)],
            record=self.record(),
            game_over=self.is_game_over(),
            summary=summary,
        )


def move_record(turn: int, move: Move) -> MoveRecord:
    """Describe the ``turn``-th (1-based) move of a game."""
    player = _schema_player(Player((turn - 1) & 1))
    if move.is_pass:
        return MoveRecord(turn=turn, player=player, fourcc=move.to_fourcc(), is_pass=True)
    return MoveRecord(
        turn=turn,
        player=player,
        fourcc=move.to_fourcc(),
        block_id=move.block_id,
        direction=move.direction,
        x=move.x,
        y=move.y,
        cells=[Position(x=x, y=y) for x, y in move.coords()],
    )


def _schema_player(player: Player) -> SchemaPlayer:
    return SchemaPlayer(player.name.lower())
