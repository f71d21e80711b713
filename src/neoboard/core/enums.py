"""Core enumerations and flags for the board domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def letter(self) -> str:
        """Record letter, ``w`` or ``b``."""
        return "w" if self == Color.WHITE else "b"

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


class CastleSide(IntEnum):
    """Which wing a castling move goes to."""

    KINGSIDE = 1
    QUEENSIDE = 2


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def of(cls, color: Color, side: CastleSide) -> CastlingRights:
        """The single right for *color* castling to *side*."""
        if color == Color.WHITE:
            return (
                cls.WHITE_KINGSIDE
                if side == CastleSide.KINGSIDE
                else cls.WHITE_QUEENSIDE
            )
        return (
            cls.BLACK_KINGSIDE if side == CastleSide.KINGSIDE else cls.BLACK_QUEENSIDE
        )

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class RejectReason(str, Enum):
    """Why a move request was refused; the value crosses the UI boundary."""

    EMPTY = "empty"
    TURN = "turn"
    ILLEGAL = "illegal"

    def __str__(self) -> str:
        return self.value
