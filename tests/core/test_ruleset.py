"""Tests for movement rules, attack detection and move capability."""

from chessey.core.board import Board
from chessey.core.enums import Color, PieceType
from chessey.core.notation import state_from_fen
from chessey.core.ruleset import (
    BISHOP_RULE,
    KING_RULE,
    KNIGHT_RULE,
    PAWN,
    QUEEN_RULE,
    ROOK_RULE,
    can_pawn_move_to,
    can_piece_attack_square,
    can_piece_move_to,
    is_under_attack,
    movement_rule,
)
from chessey.core.state import State


class TestMovementRules:
    def test_direction_counts(self) -> None:
        assert len(KNIGHT_RULE.directions) == 8
        assert len(BISHOP_RULE.directions) == 4
        assert len(ROOK_RULE.directions) == 4
        assert len(QUEEN_RULE.directions) == 8
        assert len(KING_RULE.directions) == 8

    def test_sliders_repeat(self) -> None:
        assert QUEEN_RULE.max_steps == 8
        assert KING_RULE.max_steps == 1
        assert KNIGHT_RULE.max_steps == 1

    def test_pawn_has_no_rule(self) -> None:
        assert movement_rule(PieceType.PAWN) == PAWN
        assert movement_rule(PieceType.ROOK) is ROOK_RULE


class TestAttack:
    def test_knight_jumps(self, initial_state: State) -> None:
        assert can_piece_attack_square(
            1, 0, 2, 2, PieceType.KNIGHT, Color.WHITE, initial_state
        )

    def test_rook_blocked_by_pawn(self, initial_state: State) -> None:
        assert not can_piece_attack_square(
            0, 0, 0, 2, PieceType.ROOK, Color.WHITE, initial_state
        )

    def test_first_blocker_is_attacked(self, initial_state: State) -> None:
        # Own pieces count as attacked too
        assert can_piece_attack_square(
            0, 0, 0, 1, PieceType.ROOK, Color.WHITE, initial_state
        )

    def test_pawn_attacks_diagonally_forward(self, initial_state: State) -> None:
        assert can_piece_attack_square(4, 1, 3, 2, PieceType.PAWN, Color.WHITE, initial_state)
        assert can_piece_attack_square(4, 1, 5, 2, PieceType.PAWN, Color.WHITE, initial_state)
        assert not can_piece_attack_square(
            4, 1, 4, 2, PieceType.PAWN, Color.WHITE, initial_state
        )

    def test_black_pawn_attacks_downward(self, initial_state: State) -> None:
        assert can_piece_attack_square(4, 6, 3, 5, PieceType.PAWN, Color.BLACK, initial_state)
        assert not can_piece_attack_square(
            4, 6, 3, 7, PieceType.PAWN, Color.BLACK, initial_state
        )

    def test_is_under_attack(self, initial_state: State) -> None:
        assert is_under_attack(5, 2, Color.WHITE, initial_state)
        assert not is_under_attack(4, 3, Color.WHITE, initial_state)
        assert is_under_attack(5, 5, Color.BLACK, initial_state)

    def test_slider_across_board(self) -> None:
        state = State(board=Board.from_placement({"a1": "Q", "h8": "k", "e1": "K"}))
        assert is_under_attack(7, 7, Color.BLACK, state)


class TestMoveCapability:
    def test_pawn_single_and_double(self, initial_state: State) -> None:
        assert can_pawn_move_to(4, 1, 4, 2, initial_state)
        assert can_pawn_move_to(4, 1, 4, 3, initial_state)
        assert not can_pawn_move_to(4, 1, 4, 4, initial_state)

    def test_pawn_double_only_from_start(self) -> None:
        state = State(board=Board.from_placement({"e3": "p", "e1": "k", "e8": "K"}))
        assert can_pawn_move_to(4, 2, 4, 3, state)
        assert not can_pawn_move_to(4, 2, 4, 4, state)

    def test_pawn_blocked(self) -> None:
        state = State(board=Board.from_placement({"e2": "p", "e3": "N", "e1": "k", "e8": "K"}))
        assert not can_pawn_move_to(4, 1, 4, 2, state)
        assert not can_pawn_move_to(4, 1, 4, 3, state)

    def test_pawn_capture_needs_enemy(self, initial_state: State) -> None:
        assert not can_pawn_move_to(4, 1, 3, 2, initial_state)

    def test_pawn_en_passant(self) -> None:
        state = state_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert can_pawn_move_to(4, 4, 3, 5, state)
        assert not can_pawn_move_to(4, 4, 5, 5, state)

    def test_piece_cannot_take_own(self, initial_state: State) -> None:
        assert not can_piece_move_to(1, 0, 3, 1, PieceType.KNIGHT, initial_state)
        assert can_piece_move_to(1, 0, 2, 2, PieceType.KNIGHT, initial_state)

    def test_piece_captures_enemy(self) -> None:
        state = State(board=Board.from_placement({"a1": "r", "a7": "P", "e1": "k", "e8": "K"}))
        assert can_piece_move_to(0, 0, 0, 6, PieceType.ROOK, state)
        assert not can_piece_move_to(0, 0, 0, 7, PieceType.ROOK, state)
