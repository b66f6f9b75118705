"""Tests for Rules: check, checkmate, stalemate and game result."""

from chessey.core.enums import GameResult
from chessey.core.notation import state_from_fen
from chessey.core.rules import Rules
from chessey.core.state import State


class TestCheck:
    def test_starting_not_in_check(self, initial_state: State) -> None:
        assert not Rules.is_in_check(initial_state)

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4#
        state = state_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
        assert Rules.is_in_check(state)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        state = state_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
        assert Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.BLACK_WINS

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        state = state_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.WHITE_WINS

    def test_not_checkmate_when_can_escape(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert Rules.is_in_check(state)
        assert not Rules.is_checkmate(state)


class TestStalemate:
    def test_king_trapped(self) -> None:
        state = state_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(state)
        assert not Rules.is_checkmate(state)
        assert Rules.game_result(state) == GameResult.DRAW

    def test_not_stalemate_when_has_moves(self) -> None:
        state = state_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(state)


class TestInProgress:
    def test_starting(self, initial_state: State) -> None:
        assert Rules.game_result(initial_state) == GameResult.IN_PROGRESS
