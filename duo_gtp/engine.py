"""
Go Text Protocol front end for the Blokus Duo engine.

Colors follow the protocol convention: ``b``/``black`` is violet (moves
first) and ``w``/``white`` is orange. Moves are comma-separated vertex
lists such as ``e10,f10`` or ``pass``. Move generation is not offered.
"""

import logging
import time
from typing import Callable, Dict, List, Optional, TextIO

from duo_engine.board import Player
from duo_engine.exceptions import IllegalMoveError, NotationError
from duo_engine.game import DuoGame
from duo_engine.move import PASS
from duo_engine.move_generator import LegalMoveGenerator
from duo_engine.notation import PASS_VERTEX, parse_cells

from .config import EngineConfig

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2"

_COLORS = {
    "b": Player.VIOLET,
    "black": Player.VIOLET,
    "w": Player.ORANGE,
    "white": Player.ORANGE,
}


class GtpFailure(Exception):
    """Raised by a command handler to answer with a failure response."""


class GtpEngine:
    """Dispatches protocol commands to one game session."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.game = DuoGame()
        self.move_generator = LegalMoveGenerator()
        self.quit_requested = False
        self._commands: Dict[str, Callable[[List[str]], str]] = {}

        self.add("protocol_version", self.cmd_protocol_version)
        self.add("name", self.cmd_name)
        self.add("version", self.cmd_version)
        self.add("known_command", self.cmd_known_command)
        self.add("list_commands", self.cmd_list_commands)
        self.add("quit", self.cmd_quit)
        self.add("clear_board", self.cmd_clear_board)
        self.add("set_game", self.cmd_set_game)
        self.add("play", self.cmd_play)
        self.add("showboard", self.cmd_showboard)
        self.add("final_score", self.cmd_final_score)
        self.add("cputime", self.cmd_cputime)
        self.add("record", self.cmd_record)

    def add(self, name: str, handler: Callable[[List[str]], str]) -> None:
        self._commands[name] = handler

    def handle_line(self, line: str) -> Optional[str]:
        """
        Execute one command line and return the full response text.

        Returns None for empty and comment-only lines, which get no response.
        """
        line = line.split("#", 1)[0].replace("\t", " ").strip()
        if not line:
            return None

        tokens = line.split()
        command_id = ""
        if tokens[0].isdigit():
            command_id = tokens.pop(0)
            if not tokens:
                return f"?{command_id} missing command\n\n"
        name, args = tokens[0], tokens[1:]

        handler = self._commands.get(name)
        if handler is None:
            logger.debug("Unknown command: %s", name)
            return f"?{command_id} unknown command\n\n"
        try:
            text = handler(args)
        except GtpFailure as exc:
            logger.debug("Command %s failed: %s", name, exc)
            return f"?{command_id} {exc}\n\n"
        return f"={command_id} {text}\n\n"

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Serve commands until ``quit`` or end of input."""
        for line in stdin:
            response = self.handle_line(line)
            if response is None:
                continue
            stdout.write(response)
            stdout.flush()
            if self.quit_requested:
                break
        return 0

    # Commands

    def cmd_protocol_version(self, args: List[str]) -> str:
        return PROTOCOL_VERSION

    def cmd_name(self, args: List[str]) -> str:
        return self.config.name

    def cmd_version(self, args: List[str]) -> str:
        return self.config.version

    def cmd_known_command(self, args: List[str]) -> str:
        _check_size(args, 1)
        return "true" if args[0] in self._commands else "false"

    def cmd_list_commands(self, args: List[str]) -> str:
        return "\n".join(sorted(self._commands))

    def cmd_quit(self, args: List[str]) -> str:
        self.quit_requested = True
        return ""

    def cmd_clear_board(self, args: List[str]) -> str:
        _check_size(args, 0)
        self.game = DuoGame()
        return ""

    def cmd_set_game(self, args: List[str]) -> str:
        if " ".join(args) != self.config.game_name:
            raise GtpFailure("unsupported game")
        return ""

    def cmd_play(self, args: List[str]) -> str:
        """
        Play a move for a color.

        When the color is not the mover, the mover passes first. Nothing is
        applied if the move turns out to be malformed or illegal.
        """
        _check_size(args, 2)
        player = _color_arg(args[0])
        move_string = args[1].lower()

        if move_string == PASS_VERTEX:
            move = PASS
        else:
            try:
                move = self.move_generator.find_move(parse_cells(move_string))
            except NotationError as exc:
                raise GtpFailure("invalid move string") from exc

        board = self.game.board
        if player is not board.mover:
            board = board.copy()
            board.do_pass()
        if not board.is_valid_move(move):
            raise GtpFailure("illegal move")

        if player is not self.game.board.mover:
            self.game.pass_turn()
        try:
            self.game.play(move)
        except IllegalMoveError as exc:
            raise GtpFailure("illegal move") from exc
        logger.info("play %s %s -> %s", player.name.lower(), move_string, move)
        return ""

    def cmd_showboard(self, args: List[str]) -> str:
        return "\n" + str(self.game.board)

    def cmd_final_score(self, args: List[str]) -> str:
        return self.game.final_score()

    def cmd_cputime(self, args: List[str]) -> str:
        return "%.3f" % time.process_time()

    def cmd_record(self, args: List[str]) -> str:
        return self.game.record()


def _check_size(args: List[str], size: int) -> None:
    if len(args) != size:
        raise GtpFailure(f"expected {size} argument{'' if size == 1 else 's'}")


def _color_arg(token: str) -> Player:
    try:
        return _COLORS[token.lower()]
    except KeyError:
        raise GtpFailure(f"invalid color argument '{token.lower()}'") from None
