"""High-level chess rules: check, checkmate, stalemate and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessey.core.enums import Color, GameResult, Terminal
from chessey.core.move_generator import get_available_move_list
from chessey.core.state import king_is_in_check

if TYPE_CHECKING:
    from chessey.core.state import State


class Rules:
    """Static rule-checker that operates on a :class:`State`."""

    # Draws by repetition, the fifty-move rule or insufficient material are
    # not tracked; only stalemate ends a game drawn.

    @staticmethod
    def is_in_check(state: State) -> bool:
        return king_is_in_check(state)

    @staticmethod
    def is_checkmate(state: State) -> bool:
        return get_available_move_list(state, with_notation=False) is Terminal.CHECKMATE

    @staticmethod
    def is_stalemate(state: State) -> bool:
        return get_available_move_list(state, with_notation=False) is Terminal.STALEMATE

    @staticmethod
    def game_result(state: State) -> GameResult:
        """Determine the current game result."""
        options = get_available_move_list(state, with_notation=False)
        if options is Terminal.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if state.turn == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if options is Terminal.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
