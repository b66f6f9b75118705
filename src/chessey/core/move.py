"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessey.core.enums import PieceType, SpecialMove
from chessey.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``kind`` is the kind of the piece standing on the destination after the
    move: for a promotion it is the promoted-to kind, not the pawn.
    """

    x: int
    y: int
    nx: int
    ny: int
    kind: PieceType
    special: SpecialMove = SpecialMove.NONE
    notation: str = ""

    @property
    def origin(self) -> Square:
        return self.x, self.y

    @property
    def destination(self) -> Square:
        return self.nx, self.ny

    def same_action(self, other: Move) -> bool:
        """Whether both moves do the same thing, ignoring their notation."""
        return (
            self.origin == other.origin
            and self.destination == other.destination
            and self.kind == other.kind
            and self.special == other.special
        )

    def with_notation(self, notation: str) -> Move:
        return replace(self, notation=notation)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.notation or self.uci

    @property
    def uci(self) -> str:
        """Long-algebraic coordinates, e.g. ``e7e8q``."""
        base = f"{square_name(self.x, self.y)}{square_name(self.nx, self.ny)}"
        if self.special == SpecialMove.PROMOTION:
            base += self.kind.letter
        return base
