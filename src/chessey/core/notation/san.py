"""SAN (Standard Algebraic Notation) rendering and parsing."""

from __future__ import annotations

import re
from dataclasses import replace

from chessey.core.enums import PieceType, SpecialMove, Terminal
from chessey.core.errors import (
    AmbiguousMoveError,
    IncorrectNotationError,
    InvalidMoveError,
)
from chessey.core.move import Move
from chessey.core.move_generator import MoveGenerator, get_available_move_list
from chessey.core.piece import Piece
from chessey.core.ruleset import can_piece_attack_square, can_piece_move_to
from chessey.core.state import State, apply_move_to_state, king_is_in_check
from chessey.core.types import Square, file_letter, inbound, parse_square, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_DESTINATION_RE = re.compile(r"([a-h][1-8])(?:=([RNBQ]))?$")
_PAWN_RE = re.compile(r"^(?:([a-h])?x)?[a-h][1-8](?:=[RNBQ])?$")
_PIECE_RE = re.compile(r"^[RNBQK]([a-h]?[1-8]?)x?[a-h][1-8]$")


# ── Rendering ────────────────────────────────────────────────────────────────


def get_notation(move: Move, state: State) -> str:
    """Render a legal *move* as SAN given the *state* before the move."""
    return _base_notation(move, state) + _check_suffix(move, state)


def _base_notation(move: Move, state: State) -> str:
    destination = square_name(move.nx, move.ny)

    if move.special == SpecialMove.CASTLE_SHORT:
        return "O-O"
    if move.special == SpecialMove.CASTLE_LONG:
        return "O-O-O"
    if move.special == SpecialMove.EN_PASSANT:
        return f"{file_letter(move.x)}x{destination}"

    board = state.board
    is_capture = board[move.destination] is not None

    if move.special == SpecialMove.PROMOTION:
        prefix = f"{file_letter(move.x)}x" if is_capture else ""
        return f"{prefix}{destination}={_SAN_PIECE[move.kind]}"
    if move.special == SpecialMove.LONG_PAWN_MOVE:
        return destination

    piece = board[move.origin]
    kind = piece.kind if piece is not None else move.kind
    if kind == PieceType.PAWN:
        return f"{file_letter(move.x)}x{destination}" if is_capture else destination

    san = _SAN_PIECE[kind] + _disambiguation(move, kind, state)
    if is_capture:
        san += "x"
    return san + destination


def _disambiguation(move: Move, kind: PieceType, state: State) -> str:
    """File, rank or square of the origin when a rival piece could also go there."""
    board = state.board
    piece = board[move.origin]
    color = piece.color if piece is not None else state.turn

    # A rival's path may run through the piece now standing on the destination.
    cleared = replace(state, board=board.replace({move.destination: None}))
    rivals: list[Square] = [
        (x, y)
        for (x, y), other in board.occupied(color)
        if other.kind == kind
        and (x, y) != move.origin
        and can_piece_attack_square(x, y, move.nx, move.ny, kind, color, cleared)
    ]
    if not rivals:
        return ""
    if all(x != move.x for x, _ in rivals):
        return file_letter(move.x)
    if all(y != move.y for _, y in rivals):
        return str(move.y + 1)
    return square_name(move.x, move.y)


def _check_suffix(move: Move, state: State) -> str:
    after = apply_move_to_state(move, state)
    if not king_is_in_check(after):
        return ""
    options = get_available_move_list(after, with_notation=False)
    return "#" if options is Terminal.CHECKMATE else "+"


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_notation(notation: str, state: State) -> Move:
    """Parse SAN *notation* into a legal :class:`Move` for ``state.turn``.

    The returned move keeps *notation* verbatim, check markers included.

    Raises:
        IncorrectNotationError: the text is not SAN.
        InvalidMoveError: no piece of the side to move can make the move.
        AmbiguousMoveError: several pieces can make it.
    """
    short = notation.rstrip("+#")

    if short.startswith("O-O"):
        move = _parse_castling(short, notation, state)
    else:
        destination = _DESTINATION_RE.search(short)
        if destination is None:
            raise IncorrectNotationError(notation)
        nx, ny = parse_square(destination.group(1))
        kind = _SAN_PIECE_REV.get(short[:1], PieceType.PAWN)

        if kind == PieceType.PAWN:
            move = _parse_pawn(short, notation, nx, ny, destination.group(2), state)
        else:
            match = _PIECE_RE.match(short)
            if match is None:
                raise IncorrectNotationError(notation)
            move = _parse_piece(notation, kind, match.group(1), nx, ny, state)

    legal = MoveGenerator(state).generate_legal_moves()
    if not any(move.same_action(m) for m in legal):
        raise InvalidMoveError(notation)
    return move


def _parse_castling(short: str, notation: str, state: State) -> Move:
    if short == "O-O":
        special, nx = SpecialMove.CASTLE_SHORT, 6
    elif short == "O-O-O":
        special, nx = SpecialMove.CASTLE_LONG, 2
    else:
        raise IncorrectNotationError(notation)
    row = state.turn.home_row
    return Move(4, row, nx, row, PieceType.KING, special, notation)


def _parse_pawn(
    short: str,
    notation: str,
    nx: int,
    ny: int,
    promotion: str | None,
    state: State,
) -> Move:
    match = _PAWN_RE.match(short)
    if match is None:
        raise IncorrectNotationError(notation)

    board = state.board
    color = state.turn
    pawn = Piece(color, PieceType.PAWN)
    dy = color.pawn_direction

    kind = PieceType.PAWN
    special = SpecialMove.NONE
    if promotion is not None:
        kind = _SAN_PIECE_REV[promotion]
        special = SpecialMove.PROMOTION

    if "x" in short:
        y = ny - dy
        if match.group(1) is not None:
            x = ord(match.group(1)) - ord("a")
        else:
            sources = [
                sx for sx in (nx + 1, nx - 1) if inbound(sx, y) and board[(sx, y)] == pawn
            ]
            if not sources:
                raise InvalidMoveError(notation)
            if len(sources) > 1:
                raise AmbiguousMoveError(notation)
            x = sources[0]
        if state.en_passant == nx and board.is_empty(nx, ny):
            special = SpecialMove.EN_PASSANT
        return Move(x, y, nx, ny, kind, special, notation)

    one_back = ny - dy
    two_back = ny - 2 * dy
    if inbound(nx, one_back) and board[(nx, one_back)] == pawn:
        return Move(nx, one_back, nx, ny, kind, special, notation)
    if promotion is None and inbound(nx, two_back) and board[(nx, two_back)] == pawn:
        return Move(nx, two_back, nx, ny, kind, SpecialMove.LONG_PAWN_MOVE, notation)
    raise InvalidMoveError(notation)


def _parse_piece(
    notation: str,
    kind: PieceType,
    disambiguation: str,
    nx: int,
    ny: int,
    state: State,
) -> Move:
    candidates: list[Square] = [
        (x, y)
        for (x, y), piece in state.board.occupied(state.turn)
        if piece.kind == kind and can_piece_move_to(x, y, nx, ny, kind, state)
    ]

    for char in disambiguation:
        if char.isalpha():
            candidates = [sq for sq in candidates if sq[0] == ord(char) - ord("a")]
        else:
            candidates = [sq for sq in candidates if sq[1] == int(char) - 1]

    # A pinned rival does not make the move ambiguous.
    if len(candidates) > 1:
        mover = state.turn
        candidates = [
            (x, y)
            for x, y in candidates
            if not king_is_in_check(
                apply_move_to_state(Move(x, y, nx, ny, kind), state).with_turn(mover)
            )
        ]

    if not candidates:
        raise InvalidMoveError(notation)
    if len(candidates) > 1:
        raise AmbiguousMoveError(notation)
    x, y = candidates[0]
    return Move(x, y, nx, ny, kind, SpecialMove.NONE, notation)
