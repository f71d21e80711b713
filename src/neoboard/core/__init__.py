"""Core domain layer — board state, move generation and execution.

Quick start::

    from neoboard.core import STARTING_FEN, apply_move, parse_square, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    result = apply_move(pos, parse_square("e2"), parse_square("e4"))
    if result.ok:
        print(result.fen)
"""

from neoboard.core.board import Board
from neoboard.core.diff import match_snapshots
from neoboard.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    PieceType,
    RejectReason,
)
from neoboard.core.errors import InvariantViolation, ParseError
from neoboard.core.executor import (
    MoveApplied,
    MoveRejected,
    MoveResult,
    apply_move,
    move_transitions,
)
from neoboard.core.move import AppliedMove, Move, promotion_from_char
from neoboard.core.move_generator import MoveGenerator
from neoboard.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from neoboard.core.piece import Piece
from neoboard.core.position import Occupant, Position
from neoboard.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "PieceType",
    "RejectReason",
    # Errors
    "InvariantViolation",
    "ParseError",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "Move",
    "MoveGenerator",
    "Occupant",
    "Piece",
    "Position",
    "promotion_from_char",
    # Execution
    "MoveApplied",
    "MoveRejected",
    "MoveResult",
    "apply_move",
    "move_transitions",
    # Snapshot diff
    "match_snapshots",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
