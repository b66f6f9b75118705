"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color, also used as the side to move."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_row(self) -> int:
        """Back rank row index (0 for white, 7 for black)."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_start_row(self) -> int:
        return 1 if self == Color.WHITE else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lowercase kind code, e.g. ``n`` for a knight."""
        return _KIND_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        try:
            return _LETTER_KINDS[letter.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_KIND_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_LETTERS.items()}


class SpecialMove(IntEnum):
    """Special move classification."""

    NONE = 0
    LONG_PAWN_MOVE = 1
    EN_PASSANT = 2
    CASTLE_SHORT = 3
    CASTLE_LONG = 4
    PROMOTION = 5


class Terminal(IntEnum):
    """Sentinel returned instead of a move list when no legal move exists."""

    CHECKMATE = 1
    STALEMATE = 2

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
