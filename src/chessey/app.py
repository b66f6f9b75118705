"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chessey.config import LOG_LEVELS, AppSettings
from chessey.core.enums import Color, Terminal
from chessey.core.errors import HistoryFormatError, NotationError
from chessey.core.notation.fen import state_to_fen
from chessey.core.state import State
from chessey.core.types import square_name
from chessey.game.history import game_from_text

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessey",
        description="Replay a move history and list the legal moves that follow",
    )
    parser.add_argument(
        "history",
        nargs="?",
        default=None,
        help='Move history, e.g. "e4 e5; Nf3" (default: start position)',
    )
    parser.add_argument(
        "--no-notation",
        action="store_true",
        help="List moves as coordinates instead of SAN",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser


def _pieces(state: State, color: Color) -> str:
    """Pieces of *color* as board letter plus square, e.g. ``ke1``."""
    return " ".join(
        f"{piece.letter}{square_name(x, y)}"
        for (x, y), piece in state.board.occupied(color)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line front end; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = AppSettings.from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        game = game_from_text(settings.history)
    except (HistoryFormatError, NotationError) as exc:
        _LOGGER.warning("Rejected history %r: %s", settings.history, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    state = game.state
    print(state_to_fen(state))
    print(f"white: {_pieces(state, Color.WHITE)}")
    print(f"black: {_pieces(state, Color.BLACK)}")

    options = game.available_moves(settings.with_notation)
    if isinstance(options, Terminal):
        print(options)
    else:
        print(f"{state.turn} to move: {' '.join(str(move) for move in options)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
