"""Move executor — validates one move and builds the resulting position.

The input position is never touched: the executor works on a private copy of
the board and wraps it in a fresh :class:`Position`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from neoboard.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    PieceType,
    RejectReason,
)
from neoboard.core.move import PROMOTION_TYPES, AppliedMove, Move
from neoboard.core.move_generator import MoveGenerator
from neoboard.core.notation.fen import position_to_fen
from neoboard.core.piece import Piece
from neoboard.core.position import Occupant, Position
from neoboard.core.types import Square, file_of, make_square, rank_of

_LAST_RANK: tuple[int, int] = (7, 0)

# Castling wing -> (rook origin file, rook destination file)
_ROOK_SLIDES: dict[CastleSide, tuple[int, int]] = {
    CastleSide.KINGSIDE: (7, 5),
    CastleSide.QUEENSIDE: (0, 3),
}


@dataclass(frozen=True, slots=True)
class MoveRejected:
    """The move could not be played; *reason* says why."""

    reason: RejectReason

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class MoveApplied:
    """A successfully played move.

    ``transitions`` maps every piece that changed square (the mover and, when
    castling, the rook) from its origin to its destination. It is the
    authoritative correspondence for animating this move.
    """

    position: Position
    move: AppliedMove
    before: tuple[Occupant, ...]
    after: tuple[Occupant, ...]
    transitions: dict[Square, Square] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)


MoveResult: TypeAlias = MoveApplied | MoveRejected


def castle_side_of(piece: Piece, from_sq: Square, to_sq: Square) -> CastleSide | None:
    """Castling wing when *piece* is a king travelling two files, else None."""
    if piece.piece_type != PieceType.KING:
        return None
    delta = file_of(to_sq) - file_of(from_sq)
    if abs(delta) != 2:
        return None
    return CastleSide.KINGSIDE if delta > 0 else CastleSide.QUEENSIDE


def move_transitions(move: Move, piece: Piece) -> dict[Square, Square]:
    """Origin → destination for every piece relocated by *move*."""
    transitions = {move.from_sq: move.to_sq}
    side = castle_side_of(piece, move.from_sq, move.to_sq)
    if side is not None:
        rank = rank_of(move.from_sq)
        rook_from, rook_to = _ROOK_SLIDES[side]
        transitions[make_square(rook_from, rank)] = make_square(rook_to, rank)
    return transitions


def apply_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> MoveResult:
    """Validate and play ``from_sq → to_sq`` in *position*.

    Validation runs in order: an empty origin, a piece of the wrong color,
    then a destination that is not among the generated candidates. A
    promotion kind outside queen/rook/bishop/knight counts as illegal.
    """
    piece = position.piece_at(from_sq)
    if piece is None:
        return MoveRejected(RejectReason.EMPTY)
    if piece.color != position.side_to_move:
        return MoveRejected(RejectReason.TURN)

    candidate = next(
        (m for m in MoveGenerator(position).moves_from(from_sq) if m.to_sq == to_sq),
        None,
    )
    if candidate is None:
        return MoveRejected(RejectReason.ILLEGAL)
    if promotion is not None and promotion not in PROMOTION_TYPES:
        return MoveRejected(RejectReason.ILLEGAL)

    board = position.board.copy()
    color = piece.color

    # 1. En passant: the captured pawn sits beside the origin, not on the target
    captured = board[to_sq]
    if candidate.is_en_passant:
        ep_capture_sq = make_square(file_of(to_sq), rank_of(from_sq))
        captured = board[ep_capture_sq]
        board[ep_capture_sq] = None

    # 2. Relocate
    board[from_sq] = None
    placed = piece

    # 3. Promotion on the farthest rank
    promoted_to: PieceType | None = None
    if piece.piece_type == PieceType.PAWN and rank_of(to_sq) == _LAST_RANK[color]:
        promoted_to = promotion or PieceType.QUEEN
        placed = Piece(color, promoted_to)
    board[to_sq] = placed

    # 4. Castling: slide whatever stands in the corner, drop both rights
    castling = position.castling
    castle_side = castle_side_of(piece, from_sq, to_sq)
    if castle_side is not None:
        rank = rank_of(from_sq)
        rook_from, rook_to = _ROOK_SLIDES[castle_side]
        board[make_square(rook_to, rank)] = board[make_square(rook_from, rank)]
        board[make_square(rook_from, rank)] = None
        castling &= ~CastlingRights.both(color)

    # 5. En passant target for the opponent
    en_passant: Square | None = None
    rank_delta = rank_of(to_sq) - rank_of(from_sq)
    if piece.piece_type == PieceType.PAWN and abs(rank_delta) == 2:
        en_passant = make_square(file_of(from_sq), rank_of(from_sq) + rank_delta // 2)

    # 6. Clocks
    if piece.piece_type == PieceType.PAWN or captured is not None:
        halfmove = 0
    else:
        halfmove = position.halfmove_clock + 1
    fullmove = position.fullmove_number + (1 if color == Color.BLACK else 0)

    # 7. Flip side
    new_position = Position(
        board=board,
        side_to_move=color.opposite,
        castling=CastlingRights(castling),
        en_passant=en_passant,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )

    played = Move(
        from_sq,
        to_sq,
        promotion=promoted_to,
        is_capture=captured is not None,
        is_en_passant=candidate.is_en_passant,
        castle_side=castle_side,
    )
    return MoveApplied(
        position=new_position,
        move=AppliedMove(played, piece, captured),
        before=position.occupants(),
        after=new_position.occupants(),
        transitions=move_transitions(played, piece),
    )
