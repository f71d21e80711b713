"""Full rules — strict legality through python-chess.

Communication with python-chess uses FEN strings for positions and square
indices for moves; both libraries number squares a1=0 … h8=63 and piece
types pawn=1 … king=6, so no translation tables are needed.
"""

from __future__ import annotations

import chess

from neoboard.core.enums import CastleSide, Color, PieceType, RejectReason
from neoboard.core.executor import (
    MoveApplied,
    MoveRejected,
    MoveResult,
    move_transitions,
)
from neoboard.core.move import AppliedMove, Move, promotion_from_char
from neoboard.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from neoboard.core.piece import Piece
from neoboard.core.types import Square, parse_square
from neoboard.rules.adapter import Candidate, MoveRequest


def _to_piece(piece: chess.Piece) -> Piece:
    color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
    return Piece(color, PieceType(piece.piece_type))


def _to_color(turn: chess.Color) -> Color:
    return Color.WHITE if turn == chess.WHITE else Color.BLACK


class FullRules:
    """Rules adapter with check, pin and castling-through-check validation."""

    __slots__ = ("_board",)

    def __init__(self, fen: str = STARTING_FEN) -> None:
        self._board = chess.Board()
        self.set_position(fen)

    # ── RulesAdapter ─────────────────────────────────────────────────────

    def set_position(self, fen: str) -> None:
        # Parse with the core codec first so malformed records fail the same
        # way for every engine.
        self._board = chess.Board(position_to_fen(position_from_fen(fen)))

    def get_position(self) -> str:
        return self._board.fen(en_passant="fen")

    def side_to_move(self) -> Color:
        return _to_color(self._board.turn)

    def moves_from(self, square: str) -> list[Candidate]:
        sq = parse_square(square)
        piece = self._board.piece_at(sq)
        if piece is None or piece.color != self._board.turn:
            return []
        return [
            Candidate.from_move(self._to_move(m))
            for m in self._board.legal_moves
            if m.from_square == sq
        ]

    def move(self, request: MoveRequest) -> MoveResult:
        from_sq = parse_square(request.from_square)
        to_sq = parse_square(request.to_square)

        piece = self._board.piece_at(from_sq)
        if piece is None:
            return MoveRejected(RejectReason.EMPTY)
        if piece.color != self._board.turn:
            return MoveRejected(RejectReason.TURN)

        promotion: int | None = None
        if piece.piece_type == chess.PAWN and chess.square_rank(to_sq) in (0, 7):
            letter = request.promotion or "q"
            promotion = int(promotion_from_char(letter))
        candidate = chess.Move(from_sq, to_sq, promotion=promotion)
        if candidate not in self._board.legal_moves:
            return MoveRejected(RejectReason.ILLEGAL)

        before = position_from_fen(self.get_position())
        played = self._to_move(candidate)
        captured_sq = self._captured_square(candidate)
        mover = _to_piece(piece)
        captured: Piece | None = None
        if captured_sq is not None:
            taken = self._board.piece_at(captured_sq)
            captured = _to_piece(taken) if taken is not None else None

        self._board.push(candidate)
        after = position_from_fen(self.get_position())

        return MoveApplied(
            position=after,
            move=AppliedMove(played, mover, captured),
            before=before.occupants(),
            after=after.occupants(),
            transitions=move_transitions(played, mover),
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _to_move(self, move: chess.Move) -> Move:
        board = self._board
        castle_side: CastleSide | None = None
        if board.is_kingside_castling(move):
            castle_side = CastleSide.KINGSIDE
        elif board.is_queenside_castling(move):
            castle_side = CastleSide.QUEENSIDE
        return Move(
            move.from_square,
            move.to_square,
            promotion=PieceType(move.promotion) if move.promotion else None,
            is_capture=board.is_capture(move),
            is_en_passant=board.is_en_passant(move),
            castle_side=castle_side,
        )

    def _captured_square(self, move: chess.Move) -> Square | None:
        board = self._board
        if board.is_en_passant(move):
            return chess.square(
                chess.square_file(move.to_square), chess.square_rank(move.from_square)
            )
        if board.is_capture(move):
            return move.to_square
        return None
