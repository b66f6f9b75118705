"""State — complete game position and the move transition function."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessey.core.board import Board
from chessey.core.enums import Color, PieceType, SpecialMove
from chessey.core.move import Move
from chessey.core.piece import Piece
from chessey.core.ruleset import is_under_attack
from chessey.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Castle:
    """Castling rights of one player. Rights are only ever revoked."""

    long: bool = True
    short: bool = True

    def revoke(self, *, long: bool = False, short: bool = False) -> Castle:
        return Castle(self.long and not long, self.short and not short)


@dataclass(frozen=True, slots=True)
class State:
    """Full chess position: board + side to move + en passant + castling.

    ``en_passant`` is the file (0–7) of the pawn that just advanced two
    squares, or ``None`` when no en passant capture is available.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    en_passant: int | None = None
    white_can_castle: Castle = Castle()
    black_can_castle: Castle = Castle()

    @classmethod
    def initial(cls) -> State:
        return cls()

    def can_castle(self, color: Color) -> Castle:
        return self.white_can_castle if color == Color.WHITE else self.black_can_castle

    def with_turn(self, turn: Color) -> State:
        """Same position with *turn* to move."""
        if turn == self.turn:
            return self
        return replace(self, turn=turn)

    @property
    def en_passant_square(self) -> Square | None:
        """Square a pawn of the side to move lands on when capturing en passant."""
        if self.en_passant is None:
            return None
        return self.en_passant, 5 if self.turn == Color.WHITE else 2


# ── Castling bookkeeping ─────────────────────────────────────────────────────

_ROOK_CORNERS: dict[Square, tuple[Color, str]] = {
    (0, 0): (Color.WHITE, "long"),
    (7, 0): (Color.WHITE, "short"),
    (0, 7): (Color.BLACK, "long"),
    (7, 7): (Color.BLACK, "short"),
}


def _update_castling(move: Move, piece: Piece, state: State) -> dict[Color, Castle]:
    rights = {
        Color.WHITE: state.white_can_castle,
        Color.BLACK: state.black_can_castle,
    }
    if piece.kind == PieceType.KING:
        rights[piece.color] = rights[piece.color].revoke(long=True, short=True)

    # A rook leaving its corner, or being captured there.
    for sq in (move.origin, move.destination):
        if sq in _ROOK_CORNERS:
            color, side = _ROOK_CORNERS[sq]
            rights[color] = rights[color].revoke(**{side: True})
    return rights


# ── Transition ───────────────────────────────────────────────────────────────


def apply_move_to_state(move: Move, state: State) -> State:
    """Return the state reached by playing *move* in *state*."""
    board = state.board
    piece = board[move.origin]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.x, move.y)}")
    mover = state.turn

    changes: dict[Square, Piece | None] = {move.origin: None}
    if move.special == SpecialMove.PROMOTION:
        changes[move.destination] = Piece(mover, move.kind)
    else:
        changes[move.destination] = piece

    if move.special == SpecialMove.EN_PASSANT:
        # The passed pawn stands beside the origin, not on the destination.
        changes[(move.nx, move.y)] = None
    elif move.special == SpecialMove.CASTLE_SHORT:
        changes[(7, move.y)] = None
        changes[(5, move.y)] = board[(7, move.y)]
    elif move.special == SpecialMove.CASTLE_LONG:
        changes[(0, move.y)] = None
        changes[(3, move.y)] = board[(0, move.y)]

    rights = _update_castling(move, piece, state)
    return State(
        board=board.replace(changes),
        turn=mover.opposite,
        en_passant=move.nx if move.special == SpecialMove.LONG_PAWN_MOVE else None,
        white_can_castle=rights[Color.WHITE],
        black_can_castle=rights[Color.BLACK],
    )


def king_is_in_check(state: State) -> bool:
    """Is the king of the side to move attacked by the opponent?"""
    x, y = state.board.king_square(state.turn)
    return is_under_attack(x, y, state.turn.opposite, state)
