"""Rules-adapter contract shared by every rules engine.

The board controller talks to rules exclusively through
:class:`RulesAdapter`. Squares crossing this boundary are two-character
labels (``"e4"``) and promotions are single letters (``q``, ``r``, ``b``,
``n``); the core's integer squares stay inside the engines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from neoboard.core.move import promotion_char, promotion_from_char
from neoboard.core.types import parse_square, square_name

if TYPE_CHECKING:
    from neoboard.core.enums import CastleSide, Color
    from neoboard.core.executor import MoveResult
    from neoboard.core.move import Move


@dataclass(slots=True, frozen=True)
class MoveRequest:
    """A move as the UI asks for it.

    Labels and the promotion letter are checked on construction; malformed
    values raise :class:`~neoboard.core.errors.ParseError`.
    """

    from_square: str
    to_square: str
    promotion: str | None = None

    def __post_init__(self) -> None:
        parse_square(self.from_square)
        parse_square(self.to_square)
        if self.promotion is not None:
            promotion_from_char(self.promotion)


@dataclass(slots=True, frozen=True)
class Candidate:
    """One destination offered for a square, with its move flags."""

    from_square: str
    to_square: str
    promotion: str | None = None
    is_capture: bool = False
    is_en_passant: bool = False
    castle_side: CastleSide | None = None

    @classmethod
    def from_move(cls, move: Move) -> Candidate:
        return cls(
            from_square=square_name(move.from_sq),
            to_square=square_name(move.to_sq),
            promotion=(
                promotion_char(move.promotion) if move.promotion is not None else None
            ),
            is_capture=move.is_capture,
            is_en_passant=move.is_en_passant,
            castle_side=move.castle_side,
        )


class RulesAdapter(Protocol):
    """Capability interface for a rules engine.

    Exactly one adapter backs a board at a time. A successful :meth:`move`
    advances the adapter's own current position. All calls are synchronous.
    """

    def set_position(self, fen: str) -> None: ...

    def get_position(self) -> str: ...

    def side_to_move(self) -> Color: ...

    def moves_from(self, square: str) -> list[Candidate]: ...

    def move(self, request: MoveRequest) -> MoveResult: ...
