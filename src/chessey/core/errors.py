"""Exceptions raised by the rules engine."""

from __future__ import annotations


class BoardInvariantError(RuntimeError):
    """The board violates a structural invariant (e.g. king count)."""


class NotationError(ValueError):
    """SAN text could not be turned into a move."""

    reason = "Invalid notation"

    def __init__(self, notation: str) -> None:
        super().__init__(f"{self.reason}: {notation}")
        self.notation = notation


class IncorrectNotationError(NotationError):
    """The text has no recognisable destination square or is malformed."""

    reason = "Incorrect notation"


class InvalidMoveError(NotationError):
    """Well-formed notation, but no piece can legally make the move."""

    reason = "Invalid move"


class AmbiguousMoveError(NotationError):
    """Several pieces can make the move and the text does not pick one."""

    reason = "Ambiguous move"


class HistoryFormatError(ValueError):
    """A move-history text does not have the expected pair shape."""

    def __init__(self, message: str, pair_index: int | None = None) -> None:
        super().__init__(f"Invalid history: {message}")
        self.pair_index = pair_index
