"""Square type alias and coordinate helpers.

Board layout:
    x is the file, 0 = a ... 7 = h
    y is the row,  0 = rank 1 (White's home rank) ... 7 = rank 8
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (x, y)


def inbound(x: int, y: int) -> bool:
    """Whether (x, y) lies on the 8x8 board."""
    return 0 <= x < 8 and 0 <= y < 8


def file_letter(x: int) -> str:
    """File letter, e.g. 0 → 'a'."""
    return chr(ord("a") + x)


def square_name(x: int, y: int) -> str:
    """Human-readable name, e.g. (4, 3) → 'e4'."""
    return file_letter(x) + str(y + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return ord(name[0]) - ord("a"), int(name[1]) - 1


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((x, 0) for x in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((x, 1) for x in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((x, 2) for x in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((x, 3) for x in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((x, 4) for x in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((x, 5) for x in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((x, 6) for x in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((x, 7) for x in range(8))
