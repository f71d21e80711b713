"""Light rules — the built-in pseudo-legal fallback engine.

Basic movement, captures, double pawn pushes, en passant, naive castling and
promotion. There is no check, mate or stalemate detection; plug a full
engine in through the same contract when that matters.
"""

from __future__ import annotations

from neoboard.core.enums import Color
from neoboard.core.executor import MoveApplied, MoveResult, apply_move
from neoboard.core.move import promotion_from_char
from neoboard.core.move_generator import MoveGenerator
from neoboard.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from neoboard.core.position import Position
from neoboard.core.types import parse_square
from neoboard.rules.adapter import Candidate, MoveRequest


class LightRules:
    """Rules adapter over :mod:`neoboard.core`."""

    __slots__ = ("_position",)

    def __init__(self, fen: str = STARTING_FEN) -> None:
        self._position = position_from_fen(fen)

    @property
    def position(self) -> Position:
        return self._position

    # ── RulesAdapter ─────────────────────────────────────────────────────

    def set_position(self, fen: str) -> None:
        self._position = position_from_fen(fen)

    def get_position(self) -> str:
        return position_to_fen(self._position)

    def side_to_move(self) -> Color:
        return self._position.side_to_move

    def moves_from(self, square: str) -> list[Candidate]:
        gen = MoveGenerator(self._position)
        return [Candidate.from_move(m) for m in gen.moves_from(parse_square(square))]

    def move(self, request: MoveRequest) -> MoveResult:
        promotion = (
            promotion_from_char(request.promotion)
            if request.promotion is not None
            else None
        )
        result = apply_move(
            self._position,
            parse_square(request.from_square),
            parse_square(request.to_square),
            promotion,
        )
        if isinstance(result, MoveApplied):
            self._position = result.position
        return result
