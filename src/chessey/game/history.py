"""Move history and game assembly from history text.

History text lists move pairs separated by ``;``; inside a pair the white
and black moves are separated by whitespace::

    "e4 e5; Nf3 Nc6; Bb5"

Only the last pair may hold a single (white) move.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from chessey.core.enums import Color
from chessey.core.errors import HistoryFormatError
from chessey.core.move import Move
from chessey.core.move_generator import MoveOptionList, get_available_move_list
from chessey.core.notation.san import parse_notation
from chessey.core.state import State, apply_move_to_state

_LOGGER = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(slots=True)
class GameHistory:
    """Completed move pairs plus a pending white move, if any."""

    move_pair_list: list[tuple[Move, Move]] = field(default_factory=list)
    extra_move: Move | None = None

    def __len__(self) -> int:
        """Number of half-moves played."""
        return 2 * len(self.move_pair_list) + (self.extra_move is not None)

    def moves(self) -> list[Move]:
        """All half-moves in play order."""
        result = [move for pair in self.move_pair_list for move in pair]
        if self.extra_move is not None:
            result.append(self.extra_move)
        return result


@dataclass(slots=True)
class Game:
    """A history together with the state it leads to."""

    history: GameHistory = field(default_factory=GameHistory)
    state: State = field(default_factory=State.initial)

    def push(self, notation: str) -> Move:
        """Parse *notation* for the side to move, play it and record it."""
        move = parse_notation(notation, self.state)
        _LOGGER.debug(
            "Half-move %d (%s): %s", len(self.history) + 1, self.state.turn, notation
        )
        if self.state.turn == Color.WHITE:
            self.history.extra_move = move
        else:
            white = self.history.extra_move
            if white is None:
                raise HistoryFormatError("black move without a white move")
            self.history.move_pair_list.append((white, move))
            self.history.extra_move = None
        self.state = apply_move_to_state(move, self.state)
        return move

    def available_moves(self, with_notation: bool = True) -> MoveOptionList:
        return get_available_move_list(self.state, with_notation)


def create_game(history: GameHistory | None = None, state: State | None = None) -> Game:
    """Build a :class:`Game`; defaults to an empty history and the start position."""
    return Game(
        history=history if history is not None else GameHistory(),
        state=state if state is not None else State.initial(),
    )


def split_history_text(text: str) -> list[list[str]]:
    """Split history text into pairs of move tokens.

    A blank text is the empty history. Blank pairs come back as ``[""]``
    so the format check can report them.
    """
    pairs = [_WHITESPACE_RE.split(part.strip()) for part in text.split(";")]
    if pairs == [[""]]:
        return []
    return pairs


def check_text_move_history_format(text_move_list: list[list[str]]) -> None:
    """Validate the pair shape of split history text.

    Raises:
        HistoryFormatError: a pair has the wrong number of tokens.
    """
    last = len(text_move_list) - 1
    for i, pair in enumerate(text_move_list):
        if i == last and len(pair) == 1:
            if not pair[0]:
                raise HistoryFormatError("empty last move pair", i)
            continue
        if len(pair) != 2:
            raise HistoryFormatError(
                f"expected single space in move pair {i}, got {len(pair) - 1}", i
            )
        if not pair[0] or not pair[1]:
            raise HistoryFormatError(f"empty move in pair {i}", i)


def game_from_text(text: str) -> Game:
    """Replay history *text* from the initial position.

    Raises:
        HistoryFormatError: the text does not have the pair shape.
        NotationError: a move is malformed, illegal or ambiguous.
    """
    text_move_list = split_history_text(text)
    check_text_move_history_format(text_move_list)

    game = create_game()
    for pair in text_move_list:
        for notation in pair:
            game.push(notation)
    _LOGGER.debug("Replayed %d half-moves", len(game.history))
    return game


def history_to_text(history: GameHistory) -> str:
    """Format *history* as history text, e.g. ``"e4 e5; Nf3"``."""
    parts = [f"{white.notation} {black.notation}" for white, black in history.move_pair_list]
    if history.extra_move is not None:
        parts.append(history.extra_move.notation)
    return "; ".join(parts)
