"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessey.core import State, get_available_move_list

    state = State.initial()
    for move in get_available_move_list(state):
        print(move)
"""

from chessey.core.board import Board
from chessey.core.enums import Color, GameResult, PieceType, SpecialMove, Terminal
from chessey.core.errors import (
    AmbiguousMoveError,
    BoardInvariantError,
    HistoryFormatError,
    IncorrectNotationError,
    InvalidMoveError,
    NotationError,
)
from chessey.core.move import Move
from chessey.core.move_generator import (
    MoveGenerator,
    MoveOptionList,
    get_available_move_list,
)
from chessey.core.notation import (
    STARTING_FEN,
    get_notation,
    parse_notation,
    state_from_fen,
    state_to_fen,
)
from chessey.core.piece import Piece
from chessey.core.rules import Rules
from chessey.core.ruleset import (
    can_piece_attack_square,
    can_piece_move_to,
    is_under_attack,
)
from chessey.core.state import Castle, State, apply_move_to_state, king_is_in_check
from chessey.core.types import Square, file_letter, inbound, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "SpecialMove",
    "Terminal",
    # Types / helpers
    "Square",
    "file_letter",
    "inbound",
    "parse_square",
    "square_name",
    # Errors
    "AmbiguousMoveError",
    "BoardInvariantError",
    "HistoryFormatError",
    "IncorrectNotationError",
    "InvalidMoveError",
    "NotationError",
    # Domain objects
    "Board",
    "Castle",
    "Move",
    "MoveGenerator",
    "MoveOptionList",
    "Piece",
    "Rules",
    "State",
    # Rules
    "apply_move_to_state",
    "can_piece_attack_square",
    "can_piece_move_to",
    "get_available_move_list",
    "is_under_attack",
    "king_is_in_check",
    # Notation
    "STARTING_FEN",
    "get_notation",
    "parse_notation",
    "state_from_fen",
    "state_to_fen",
]
