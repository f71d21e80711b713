"""Position — complete, immutable board state for one turn."""

from __future__ import annotations

from dataclasses import dataclass, field

from neoboard.core.board import Board
from neoboard.core.enums import CastlingRights, Color
from neoboard.core.errors import InvariantViolation
from neoboard.core.piece import Piece
from neoboard.core.types import Square, is_valid_square


@dataclass(frozen=True, slots=True)
class Occupant:
    """One occupied square in a board snapshot."""

    square: Square
    piece: Piece


@dataclass(frozen=True, slots=True)
class Position:
    """Board + side to move + castling + en passant + clocks.

    Positions are produced by the codec or the move executor and never
    change afterwards; every move yields a new instance. The board is frozen
    on construction, so writing through ``position.board`` raises.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise InvariantViolation(f"Negative halfmove clock: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise InvariantViolation(
                f"Fullmove number must be positive: {self.fullmove_number}"
            )
        if self.en_passant is not None and not is_valid_square(self.en_passant):
            raise InvariantViolation(
                f"En-passant square out of range: {self.en_passant}"
            )
        self.board.freeze()

    @classmethod
    def initial(cls) -> Position:
        return cls()

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def occupants(self) -> tuple[Occupant, ...]:
        """All occupied squares, ascending."""
        return tuple(Occupant(sq, piece) for sq, piece in self.board.occupants())
