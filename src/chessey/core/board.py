"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from chessey.core.enums import Color, PieceType
from chessey.core.errors import BoardInvariantError
from chessey.core.piece import Piece
from chessey.core.types import Square, parse_square

EMPTY = "_"

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board indexed by ``(x, y)``.

    Updates go through :meth:`replace`, which returns a new board, so a
    board shared between states is never modified behind their back.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Sequence[Piece | None] | None = None) -> None:
        if squares is None:
            squares = (None,) * 64
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = tuple(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        x, y = sq
        return self._squares[y * 8 + x]

    def is_empty(self, x: int, y: int) -> bool:
        return self._squares[y * 8 + x] is None

    def letter_at(self, x: int, y: int) -> str:
        """Board letter of the square, ``"_"`` when empty."""
        piece = self._squares[y * 8 + x]
        return EMPTY if piece is None else piece.letter

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Square, Piece | None]]:
        """Every square in scan order: row 0 first, file a first."""
        for index, piece in enumerate(self._squares):
            yield (index % 8, index // 8), piece

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in scan order, optionally only *color*'s."""
        for sq, piece in self:
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def find(self, piece: Piece) -> list[Square]:
        """All squares holding *piece*."""
        return [sq for sq, p in self if p == piece]

    def pieces(self, color: Color, kind: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *kind*."""
        return self.find(Piece(color, kind))

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        squares = self.pieces(color, PieceType.KING)
        if len(squares) != 1:
            raise BoardInvariantError(
                f"Expected exactly one {color} king, found {len(squares)}"
            )
        return squares[0]

    # -- Copying ------------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with the given squares overwritten."""
        squares = list(self._squares)
        for (x, y), piece in changes.items():
            squares[y * 8 + x] = piece
        return Board(squares)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        squares: list[Piece | None] = [None] * 64
        for x, kind in enumerate(_BACK_RANK):
            squares[x] = Piece(Color.WHITE, kind)
            squares[8 + x] = Piece(Color.WHITE, PieceType.PAWN)
            squares[48 + x] = Piece(Color.BLACK, PieceType.PAWN)
            squares[56 + x] = Piece(Color.BLACK, kind)
        return cls(squares)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build from eight strings of board letters, row 0 first.

        ``"_"`` marks an empty square::

            Board.from_rows(["rnbqkbnr", "pppppppp", *["________"] * 4,
                             "PPPPPPPP", "RNBQKBNR"])
        """
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board rows must be 8 strings of 8 letters")
        squares = [
            None if letter == EMPTY else Piece.from_letter(letter)
            for row in rows
            for letter in row
        ]
        return cls(squares)

    @classmethod
    def from_placement(cls, placement: Mapping[str, str]) -> Board:
        """Build from square names to board letters, e.g. ``{"e1": "k"}``."""
        return cls.empty().replace(
            {
                parse_square(name): Piece.from_letter(letter)
                for name, letter in placement.items()
            }
        )

    def rows(self) -> list[str]:
        """Eight strings of board letters, row 0 first."""
        return [
            "".join(self.letter_at(x, y) for x in range(8)) for y in range(8)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(7, -1, -1):
            row = []
            for x in range(8):
                p = self[(x, y)]
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
