"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TypeAlias

from chessey.core.enums import Color, PieceType, SpecialMove, Terminal
from chessey.core.move import Move
from chessey.core.piece import Piece
from chessey.core.ruleset import PAWN, MovementRule, is_under_attack, movement_rule
from chessey.core.state import State, apply_move_to_state, king_is_in_check
from chessey.core.types import inbound

MoveOptionList: TypeAlias = list[Move] | Terminal

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class MoveGenerator:
    """Generates moves for the side to move of a given :class:`State`.

    Trial positions used by the legality filter are new states produced by
    :func:`apply_move_to_state`; the state under evaluation is never touched.
    """

    __slots__ = ("_state", "_board")

    def __init__(self, state: State) -> None:
        self._state = state
        self._board = state.board

    # -- Public API ---------------------------------------------------------

    def available_moves(self, with_notation: bool = True) -> MoveOptionList:
        """Legal moves, or the terminal sentinel when there are none.

        SAN labels are only computed when *with_notation* is set; the SAN
        renderer itself asks for moves without notation to look for mate.
        """
        legal = self.generate_legal_moves()
        if not legal:
            if king_is_in_check(self._state):
                return Terminal.CHECKMATE
            return Terminal.STALEMATE

        if with_notation:
            from chessey.core.notation.san import get_notation

            legal = [move.with_notation(get_notation(move, self._state)) for move in legal]
        return legal

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        state = self._state
        mover = state.turn
        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves():
            trial = apply_move_to_state(move, state).with_turn(mover)
            if not king_is_in_check(trial):
                legal.append(move)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._state.turn

        for (x, y), piece in self._board.occupied(color):
            rule = movement_rule(piece.kind)
            if rule == PAWN:
                self._gen_pawn(x, y, color, moves)
            else:
                self._gen_piece(x, y, piece.kind, rule, color, moves)

        self._gen_en_passant(color, moves)
        self._gen_castling(color, moves)
        return moves

    def is_in_check(self) -> bool:
        """Is the side to move in check?"""
        return king_is_in_check(self._state)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, x: int, y: int, color: Color, moves: list[Move]) -> None:
        board = self._board
        dy = color.pawn_direction
        ny = y + dy
        for dx in (-1, 0, 1):
            nx = x + dx
            if not inbound(nx, ny):
                continue
            if dx == 0:
                if not board.is_empty(nx, ny):
                    continue
                self._add_pawn_move(x, y, nx, ny, moves)
                if y == color.pawn_start_row and board.is_empty(nx, ny + dy):
                    moves.append(
                        Move(x, y, nx, ny + dy, PieceType.PAWN, SpecialMove.LONG_PAWN_MOVE)
                    )
            else:
                target = board[(nx, ny)]
                if target is not None and target.color != color:
                    self._add_pawn_move(x, y, nx, ny, moves)

    @staticmethod
    def _add_pawn_move(x: int, y: int, nx: int, ny: int, moves: list[Move]) -> None:
        if ny in (0, 7):
            for kind in _PROMOTION_TYPES:
                moves.append(Move(x, y, nx, ny, kind, SpecialMove.PROMOTION))
        else:
            moves.append(Move(x, y, nx, ny, PieceType.PAWN))

    def _gen_piece(
        self,
        x: int,
        y: int,
        kind: PieceType,
        rule: MovementRule,
        color: Color,
        moves: list[Move],
    ) -> None:
        board = self._board
        for dx, dy in rule.directions:
            nx, ny = x, y
            for _ in range(rule.max_steps):
                nx += dx
                ny += dy
                if not inbound(nx, ny):
                    break
                target = board[(nx, ny)]
                if target is None:
                    moves.append(Move(x, y, nx, ny, kind))
                    continue
                if target.color != color:
                    moves.append(Move(x, y, nx, ny, kind))
                break

    def _gen_en_passant(self, color: Color, moves: list[Move]) -> None:
        target = self._state.en_passant_square
        if target is None:
            return
        nx, ny = target
        y = ny - color.pawn_direction
        pawn = Piece(color, PieceType.PAWN)
        for dx in (-1, 1):
            x = nx + dx
            if inbound(x, y) and self._board[(x, y)] == pawn:
                moves.append(Move(x, y, nx, ny, PieceType.PAWN, SpecialMove.EN_PASSANT))

    def _gen_castling(self, color: Color, moves: list[Move]) -> None:
        rights = self._state.can_castle(color)
        if not (rights.long or rights.short):
            return

        board = self._board
        row = color.home_row
        if board[(4, row)] != Piece(color, PieceType.KING):
            return
        opponent = color.opposite
        if is_under_attack(4, row, opponent, self._state):
            return

        rook = Piece(color, PieceType.ROOK)
        if (
            rights.long
            and board[(0, row)] == rook
            and all(board.is_empty(x, row) for x in (1, 2, 3))
            and not any(is_under_attack(x, row, opponent, self._state) for x in (2, 3))
        ):
            moves.append(Move(4, row, 2, row, PieceType.KING, SpecialMove.CASTLE_LONG))

        if (
            rights.short
            and board[(7, row)] == rook
            and all(board.is_empty(x, row) for x in (5, 6))
            and not any(is_under_attack(x, row, opponent, self._state) for x in (5, 6))
        ):
            moves.append(Move(4, row, 6, row, PieceType.KING, SpecialMove.CASTLE_SHORT))


def get_available_move_list(state: State, with_notation: bool = True) -> MoveOptionList:
    """Legal moves for ``state.turn``, or ``CHECKMATE`` / ``STALEMATE``."""
    return MoveGenerator(state).available_moves(with_notation)
