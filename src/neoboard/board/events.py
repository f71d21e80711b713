"""Upward events the board publishes to its surrounding layer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from neoboard.core.enums import RejectReason


@dataclass(frozen=True, slots=True)
class MoveEvent:
    """A move was played; *fen* is the resulting record."""

    from_square: str
    to_square: str
    fen: str


@dataclass(frozen=True, slots=True)
class IllegalMoveEvent:
    """A move attempt was refused."""

    from_square: str
    to_square: str
    reason: RejectReason


@dataclass(frozen=True, slots=True)
class UpdateEvent:
    """The position was replaced wholesale."""

    fen: str


MoveCallback = Callable[[MoveEvent], None]
IllegalMoveCallback = Callable[[IllegalMoveEvent], None]
UpdateCallback = Callable[[UpdateEvent], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal: list[IllegalMoveCallback] = field(default_factory=list)
    on_update: list[UpdateCallback] = field(default_factory=list)
