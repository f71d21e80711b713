"""Move value objects (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from neoboard.core.enums import CastleSide, PieceType
from neoboard.core.errors import ParseError
from neoboard.core.piece import Piece
from neoboard.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

PROMOTION_TYPES: frozenset[PieceType] = frozenset(_PROMO_CHARS)


def promotion_from_char(char: str) -> PieceType:
    """Map a lowercase promotion letter (``q r b n``) to a piece type."""
    try:
        return _PROMO_TYPES[char]
    except KeyError:
        raise ParseError(f"Invalid promotion piece: {char!r}") from None


def promotion_char(piece_type: PieceType) -> str:
    return _PROMO_CHARS[piece_type]


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate move: destination plus the flags the generator knows."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_capture: bool = False
    is_en_passant: bool = False
    castle_side: CastleSide | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """A move that was played, enriched with the pieces involved."""

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def from_sq(self) -> Square:
        return self.move.from_sq

    @property
    def to_sq(self) -> Square:
        return self.move.to_sq

    @property
    def promotion(self) -> PieceType | None:
        return self.move.promotion

    def __str__(self) -> str:
        return str(self.move)
