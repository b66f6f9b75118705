"""Notation package: SAN and FEN parsing and serialization."""

from chessey.core.notation.fen import STARTING_FEN, state_from_fen, state_to_fen
from chessey.core.notation.san import get_notation, parse_notation

__all__ = [
    "STARTING_FEN",
    "state_from_fen",
    "state_to_fen",
    "get_notation",
    "parse_notation",
]
