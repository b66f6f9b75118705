"""Tests for State and the move transition function."""

import pytest

from chessey.core.board import Board
from chessey.core.enums import Color, PieceType, SpecialMove
from chessey.core.move import Move
from chessey.core.notation import state_from_fen
from chessey.core.piece import Piece
from chessey.core.ruleset import is_under_attack
from chessey.core.state import Castle, State, apply_move_to_state, king_is_in_check

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)


class TestCastle:
    def test_revoke_one_side(self) -> None:
        assert Castle().revoke(long=True) == Castle(long=False, short=True)

    def test_revoked_stays_revoked(self) -> None:
        assert Castle(long=False).revoke(short=True) == Castle(long=False, short=False)


class TestInitialState:
    def test_defaults(self, initial_state: State) -> None:
        assert initial_state.board == Board.initial()
        assert initial_state.turn == Color.WHITE
        assert initial_state.en_passant is None
        assert initial_state.can_castle(Color.WHITE) == Castle()
        assert initial_state.can_castle(Color.BLACK) == Castle()

    def test_not_in_check(self, initial_state: State) -> None:
        assert not king_is_in_check(initial_state)


class TestApplyMove:
    def test_quiet_move(self, initial_state: State) -> None:
        after = apply_move_to_state(Move(6, 0, 5, 2, PieceType.KNIGHT), initial_state)
        assert after.board[(5, 2)] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert after.board.is_empty(6, 0)
        assert after.turn == Color.BLACK
        assert after.en_passant is None

    def test_input_state_untouched(self, initial_state: State) -> None:
        apply_move_to_state(Move(4, 1, 4, 3, PieceType.PAWN, SpecialMove.LONG_PAWN_MOVE), initial_state)
        assert initial_state == State.initial()

    def test_long_pawn_move_sets_en_passant(self, initial_state: State) -> None:
        move = Move(4, 1, 4, 3, PieceType.PAWN, SpecialMove.LONG_PAWN_MOVE)
        after = apply_move_to_state(move, initial_state)
        assert after.en_passant == 4
        assert after.en_passant_square == (4, 2)
        assert after.board[(4, 3)] == WHITE_PAWN

    def test_en_passant_cleared_by_next_move(self, initial_state: State) -> None:
        state = apply_move_to_state(
            Move(4, 1, 4, 3, PieceType.PAWN, SpecialMove.LONG_PAWN_MOVE), initial_state
        )
        state = apply_move_to_state(Move(6, 7, 5, 5, PieceType.KNIGHT), state)
        assert state.en_passant is None

    def test_en_passant_capture(self) -> None:
        state = state_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        after = apply_move_to_state(
            Move(4, 4, 3, 5, PieceType.PAWN, SpecialMove.EN_PASSANT), state
        )
        assert after.board[(3, 5)] == WHITE_PAWN
        assert after.board.is_empty(3, 4)
        assert after.board.is_empty(4, 4)

    @pytest.mark.parametrize(
        "kind", [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT]
    )
    def test_promotion(self, kind: PieceType) -> None:
        state = state_from_fen("8/P7/4k3/8/8/8/8/4K3 w - - 0 1")
        after = apply_move_to_state(Move(0, 6, 0, 7, kind, SpecialMove.PROMOTION), state)
        assert after.board[(0, 7)] == Piece(Color.WHITE, kind)
        assert after.board.is_empty(0, 6)

    def test_castle_short(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = apply_move_to_state(
            Move(4, 0, 6, 0, PieceType.KING, SpecialMove.CASTLE_SHORT), state
        )
        assert after.board.rows()[0] == "r____rk_"
        assert after.white_can_castle == Castle(long=False, short=False)
        assert after.black_can_castle == Castle()

    def test_castle_long_black(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        after = apply_move_to_state(
            Move(4, 7, 2, 7, PieceType.KING, SpecialMove.CASTLE_LONG), state
        )
        assert after.board.rows()[7] == "__KR___R"
        assert after.black_can_castle == Castle(long=False, short=False)
        assert after.white_can_castle == Castle()

    def test_rook_move_revokes_its_side(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = apply_move_to_state(Move(0, 0, 0, 3, PieceType.ROOK), state)
        assert after.white_can_castle == Castle(long=False, short=True)

    def test_king_move_revokes_both(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = apply_move_to_state(Move(4, 0, 4, 1, PieceType.KING), state)
        assert after.white_can_castle == Castle(long=False, short=False)

    def test_capture_on_corner_revokes_opponent(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = apply_move_to_state(Move(7, 0, 7, 7, PieceType.ROOK), state)
        assert after.black_can_castle == Castle(long=True, short=False)
        assert after.white_can_castle == Castle(long=True, short=False)

    def test_empty_origin(self, initial_state: State) -> None:
        with pytest.raises(ValueError, match="No piece on e4"):
            apply_move_to_state(Move(4, 3, 4, 4, PieceType.PAWN), initial_state)


class TestCheck:
    def test_rook_check(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert king_is_in_check(state)

    def test_only_side_to_move(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 b - - 0 1")
        assert not king_is_in_check(state)

    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R b KQkq - 0 1",
            "4k3/8/8/8/8/8/8/r3K3 w - - 0 1",
        ],
    )
    def test_agrees_with_attack_test(self, fen: str) -> None:
        state = state_from_fen(fen)
        x, y = state.board.king_square(state.turn)
        assert king_is_in_check(state) == is_under_attack(x, y, state.turn.opposite, state)
