#!/usr/bin/env python3
"""
Print a Blokus Duo game record as a board diagram, move list and scores.

Use --turn to show the position after an earlier ply; later moves are
listed but greyed out with a leading '-'.
"""

import argparse
import logging
import sys
from pathlib import Path

from duo_engine.exceptions import IllegalMoveError, RecordError
from duo_engine.game import DuoGame
from duo_engine.notation import format_move
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def render(game: DuoGame, turn: int) -> str:
    board = game.board_at(turn)
    lines = [str(board), ""]
    for ply, move in enumerate(game.history, start=1):
        color = "violet" if ply % 2 else "orange"
        marker = " " if ply <= turn else "-"
        lines.append(f"{marker}{ply:3d} {color:<6} {move.to_fourcc()}  {format_move(move)}")
    lines.append("")
    lines.append(f"violet {board.violet_score()} points, orange {board.orange_score()} points")
    if turn == len(game.history) and game.is_game_over():
        lines.append(f"game over: {game.final_score()}")
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("record", help="Record text, or @path to read it from a file")
    parser.add_argument("--turn", type=int, default=None, help="Show the position after this many plies")
    parser.add_argument("--verbose", action="store_true", help="Log replay details to stderr")
    args = parser.parse_args(argv)

    setup_logging(None, "show_record", logging.DEBUG if args.verbose else logging.WARNING)

    text = args.record
    if text.startswith("@"):
        text = Path(text[1:]).read_text(encoding="utf-8")

    try:
        game = DuoGame.from_record(text)
    except (RecordError, IllegalMoveError) as exc:
        logger.error("Cannot replay record: %s", exc)
        return 1

    turn = len(game.history) if args.turn is None else args.turn
    if not 0 <= turn <= len(game.history):
        parser.error(f"--turn must be between 0 and {len(game.history)}")
    print(render(game, turn))
    return 0


if __name__ == "__main__":
    sys.exit(main())
