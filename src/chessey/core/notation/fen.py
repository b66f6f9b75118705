"""FEN parsing and serialization."""

from __future__ import annotations

from chessey.core.board import Board
from chessey.core.enums import Color
from chessey.core.piece import Piece
from chessey.core.state import Castle, State
from chessey.core.types import parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def state_from_fen(fen: str) -> State:
    """Parse a FEN string into a :class:`State`.

    The halfmove clock and fullmove number are validated but not kept.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    squares: list[Piece | None] = [None] * 64
    for rank_idx, rank_text in enumerate(ranks):
        y = 7 - rank_idx
        x = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                x += step
            else:
                if x >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                try:
                    squares[y * 8 + x] = Piece.from_letter(ch.swapcase())
                except ValueError:
                    raise ValueError(f"Invalid FEN piece {ch!r}: {fen!r}") from None
                x += 1
            if x > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if x != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    white = Castle(long=False, short=False)
    black = Castle(long=False, short=False)
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            if ch not in "KQkq" or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
        white = Castle(long="Q" in seen, short="K" in seen)
        black = Castle(long="q" in seen, short="k" in seen)

    # 4. En passant
    en_passant: int | None = None
    if ep_part != "-":
        try:
            ep_x, ep_y = parse_square(ep_part)
        except ValueError:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}") from None
        if ep_y not in (2, 5):
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if ep_y != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        en_passant = ep_x

    # 5–6. Clocks (optional)
    if len(parts) > 4 and int(parts[4]) < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if len(parts) > 5 and int(parts[5]) < 1:
        raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return State(
        board=Board(squares),
        turn=side,
        en_passant=en_passant,
        white_can_castle=white,
        black_can_castle=black,
    )


def state_to_fen(state: State) -> str:
    """Serialise a :class:`State` to FEN, with clocks fixed to ``0 1``."""
    # 1. Board
    rows: list[str] = []
    for y in range(7, -1, -1):
        empty = 0
        row = ""
        for x in range(8):
            piece = state.board[(x, y)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.fen_char
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if state.turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    if state.white_can_castle.short:
        castling_str += "K"
    if state.white_can_castle.long:
        castling_str += "Q"
    if state.black_can_castle.short:
        castling_str += "k"
    if state.black_can_castle.long:
        castling_str += "q"
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep = state.en_passant_square
    ep_str = square_name(*ep) if ep is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
