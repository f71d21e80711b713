"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from neoboard.core.enums import Color, PieceType
from neoboard.core.errors import InvariantViolation
from neoboard.core.piece import Piece
from neoboard.core.types import Square, is_valid_square, make_square

_BACK_RANK = (
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
    """64-square piece placement.

    A board is filled while a position is being built (by the codec or the
    move executor). The owning :class:`~neoboard.core.position.Position`
    freezes it; a frozen board rejects writes and becomes hashable.
    """

    __slots__ = ("_squares", "_frozen")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._frozen = False

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise InvariantViolation(f"Square out of range: {sq}")
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if self._frozen:
            raise InvariantViolation("Board is frozen; copy() it before writing")
        if not is_valid_square(sq):
            raise InvariantViolation(f"Square out of range: {sq}")
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def occupants(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in ascending order (a1, b1, ..., h8)."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Ownership ----------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the board read-only. Idempotent."""
        self._frozen = True

    def copy(self) -> Board:
        """Writable copy, frozen or not."""
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: unfrozen 'Board'")
        return hash(tuple(self._squares))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
