"""Movement ruleset: piece geometry, attack tests and move-capability tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal

from chessey.core.board import Board
from chessey.core.enums import Color, PieceType
from chessey.core.types import inbound

if TYPE_CHECKING:
    from chessey.core.state import State

PAWN: Final = "pawn"


@dataclass(frozen=True, slots=True)
class MovementRule:
    """Delta vectors of a piece; each delta is also walked negated.

    ``repeat`` pieces slide until blocked, the others jump exactly once.
    """

    delta_list: tuple[tuple[int, int], ...]
    repeat: bool

    @property
    def directions(self) -> tuple[tuple[int, int], ...]:
        return self.delta_list + tuple((-dx, -dy) for dx, dy in self.delta_list)

    @property
    def max_steps(self) -> int:
        return 8 if self.repeat else 1


KNIGHT_RULE = MovementRule(((2, 1), (2, -1), (1, 2), (1, -2)), repeat=False)
BISHOP_RULE = MovementRule(((1, 1), (1, -1)), repeat=True)
ROOK_RULE = MovementRule(((0, 1), (1, 0)), repeat=True)
QUEEN_RULE = MovementRule(BISHOP_RULE.delta_list + ROOK_RULE.delta_list, repeat=True)
KING_RULE = MovementRule(QUEEN_RULE.delta_list, repeat=False)

MOVEMENT_RULES: dict[PieceType, MovementRule | Literal["pawn"]] = {
    PieceType.PAWN: PAWN,
    PieceType.KNIGHT: KNIGHT_RULE,
    PieceType.BISHOP: BISHOP_RULE,
    PieceType.ROOK: ROOK_RULE,
    PieceType.QUEEN: QUEEN_RULE,
    PieceType.KING: KING_RULE,
}


def movement_rule(kind: PieceType) -> MovementRule | Literal["pawn"]:
    """Movement rule of *kind*, or ``"pawn"`` for pawns."""
    return MOVEMENT_RULES[kind]


def _reaches(x: int, y: int, tx: int, ty: int, rule: MovementRule, board: Board) -> bool:
    """Walk every direction of *rule* from (x, y); stop on the first piece."""
    for dx, dy in rule.directions:
        nx, ny = x, y
        for _ in range(rule.max_steps):
            nx += dx
            ny += dy
            if not inbound(nx, ny):
                break
            if nx == tx and ny == ty:
                return True
            if not board.is_empty(nx, ny):
                break
    return False


# ── Attack detection ────────────────────────────────────────────────────────


def can_piece_attack_square(
    x: int,
    y: int,
    target_x: int,
    target_y: int,
    kind: PieceType,
    color: Color,
    state: State,
) -> bool:
    """Can a *color* *kind* standing on (x, y) attack the target square?

    The first occupied square on a line is attacked too, whoever owns it.
    """
    rule = movement_rule(kind)
    if rule == PAWN:
        return target_y == y + color.pawn_direction and abs(target_x - x) == 1
    return _reaches(x, y, target_x, target_y, rule, state.board)


def is_under_attack(x: int, y: int, by_color: Color, state: State) -> bool:
    """Is (x, y) attacked by any piece of *by_color*?"""
    for (ax, ay), piece in state.board.occupied(by_color):
        if can_piece_attack_square(ax, ay, x, y, piece.kind, by_color, state):
            return True
    return False


# ── Move capability (used to find SAN candidates) ────────────────────────────


def can_pawn_move_to(x: int, y: int, nx: int, ny: int, state: State) -> bool:
    """Can the pawn on (x, y) move to (nx, ny), ignoring king safety?"""
    board = state.board
    pawn = board[(x, y)]
    if pawn is None or not inbound(nx, ny):
        return False
    color = pawn.color
    dy = color.pawn_direction

    if nx == x:
        if ny == y + dy:
            return board.is_empty(nx, ny)
        if ny == y + 2 * dy and y == color.pawn_start_row:
            return board.is_empty(x, y + dy) and board.is_empty(nx, ny)
        return False

    if abs(nx - x) != 1 or ny != y + dy:
        return False
    target = board[(nx, ny)]
    if target is not None:
        return target.color != color
    en_passant_row = 5 if color == Color.WHITE else 2
    return state.en_passant == nx and ny == en_passant_row


def can_piece_move_to(
    x: int, y: int, nx: int, ny: int, kind: PieceType, state: State
) -> bool:
    """Can the *kind* on (x, y) move to (nx, ny), ignoring king safety?"""
    rule = movement_rule(kind)
    if rule == PAWN:
        return can_pawn_move_to(x, y, nx, ny, state)
    if not inbound(nx, ny) or (x, y) == (nx, ny):
        return False

    board = state.board
    mover = board[(x, y)]
    target = board[(nx, ny)]
    if mover is not None and target is not None and target.color == mover.color:
        return False
    return _reaches(x, y, nx, ny, rule, board)
