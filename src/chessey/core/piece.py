"""Piece value object and the board letter case convention.

On the board, white pieces are written in lowercase and black pieces in
uppercase: ``k`` is the white king, ``K`` the black king.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessey.core.enums import Color, PieceType


def apply_color_to_case(color: Color, letter: str) -> str:
    """Case *letter* for *color* (white → lowercase, black → uppercase)."""
    return letter.lower() if color == Color.WHITE else letter.upper()


def read_case_to_color(letter: str) -> Color:
    """Color encoded by the case of *letter*."""
    return Color.WHITE if letter == letter.lower() else Color.BLACK


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.letter

    @property
    def letter(self) -> str:
        """Board letter, e.g. 'n' for a white knight, 'N' for a black one."""
        return apply_color_to_case(self.color, self.kind.letter)

    @property
    def fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return self.letter.swapcase()

    @classmethod
    def from_letter(cls, letter: str) -> Piece:
        """Create piece from a board letter, e.g. 'N' → black knight."""
        if len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"Invalid piece letter: {letter!r}")
        return cls(read_case_to_color(letter), PieceType.from_letter(letter))
