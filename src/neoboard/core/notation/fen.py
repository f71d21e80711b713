"""FEN parsing and serialization.

Parsing is strict: a malformed record raises :class:`ParseError` instead of
producing a partially filled board. Only the placement field is mandatory;
missing trailing fields take their start-of-game defaults.
"""

from __future__ import annotations

from neoboard.core.board import Board
from neoboard.core.enums import CastlingRights, Color
from neoboard.core.errors import ParseError
from neoboard.core.piece import PIECE_CHARS, Piece
from neoboard.core.position import Position
from neoboard.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_DEFAULT_FIELDS = ("w", "-", "-", "0", "1")
_EMPTY_RUNS = "12345678"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ParseError(f"Invalid FEN (need 1-6 fields): {fen!r}")
    parts += _DEFAULT_FIELDS[len(parts) - 1 :]

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ParseError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = _parse_castling(castling_part)

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise ParseError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks
    halfmove = _parse_counter(half_part, "halfmove clock", minimum=0)
    fullmove = _parse_counter(full_part, "fullmove number", minimum=1)

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.piece_at(make_square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if pos.castling & right)

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {pos.side_to_move.letter} {castling_str or '-'} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


# ── Field parsers ────────────────────────────────────────────────────────────


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ParseError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUNS:
                file += int(ch)
            elif ch in PIECE_CHARS:
                if file >= 8:
                    raise ParseError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            else:
                raise ParseError(f"Invalid FEN piece character {ch!r}: {fen!r}")
            if file > 8:
                raise ParseError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ParseError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(castling_part: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if castling_part == "-":
        return castling
    rights = dict(_CASTLING_CHARS)
    seen: set[str] = set()
    for ch in castling_part:
        right = rights.get(ch)
        if right is None or ch in seen:
            raise ParseError(f"Invalid FEN castling field: {castling_part!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_counter(text: str, name: str, *, minimum: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ParseError(f"Invalid FEN {name}: {text!r}")
    value = int(text)
    if value < minimum:
        raise ParseError(f"Invalid FEN {name}: {text!r}")
    return value
