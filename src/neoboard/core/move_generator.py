"""Pseudo-legal move generation.

Moves are generated from piece movement patterns and board occupancy only:
nothing here checks whether the mover's own king ends up attacked, and
castling candidates are gated on the rights flags and empty squares alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from neoboard.core.enums import CastleSide, CastlingRights, Color, PieceType
from neoboard.core.move import Move
from neoboard.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from neoboard.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# Files that must be empty between king and corner, and the king's landing file.
_CASTLE_PATHS: tuple[tuple[CastleSide, tuple[int, ...], int], ...] = (
    (CastleSide.KINGSIDE, (5, 6), 6),
    (CastleSide.QUEENSIDE, (1, 2, 3), 2),
)

_PAWN_DIRECTION: tuple[int, int] = (1, -1)
_PAWN_START_RANK: tuple[int, int] = (1, 6)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Position`.

    The generator only reads the position.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, sq: Square) -> list[Move]:
        """Candidate moves for the piece on *sq*.

        Empty when the square is vacant or holds a piece of the side that
        is not to move.
        """
        piece = self._board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece.color, _KING_TARGETS[sq], moves)
            self._gen_castling(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_RAYS[ptype][sq], moves)
        return moves

    def generate_moves(self) -> list[Move]:
        """All pseudo-legal moves for the side to move."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        for sq, piece in self._board.occupants():
            if piece.color == color:
                moves.extend(self.moves_from(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        direction = _PAWN_DIRECTION[color]
        ahead = rank_idx + direction
        if not 0 <= ahead < 8:
            return

        one_step = make_square(file_idx, ahead)
        if board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            if rank_idx == _PAWN_START_RANK[color]:
                two_step = make_square(file_idx, ahead + direction)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, ahead)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(Move(sq, cap_sq, is_capture=True))
            elif cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq, is_capture=True, is_en_passant=True))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
            elif target.color != color:
                moves.append(Move(sq, to_sq, is_capture=True))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq, is_capture=True))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        # Naive: no attack checks, no rook-presence check.
        board = self._board
        rank = rank_of(king_sq)
        taken = {m.to_sq for m in moves}
        for side, between_files, landing_file in _CASTLE_PATHS:
            if not self._pos.castling & CastlingRights.of(color, side):
                continue
            if not all(board.is_empty(make_square(f, rank)) for f in between_files):
                continue
            to_sq = make_square(landing_file, rank)
            if to_sq in taken:
                continue
            moves.append(Move(king_sq, to_sq, castle_side=side))
