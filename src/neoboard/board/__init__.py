"""Board layer — controller and the events it publishes."""

from neoboard.board.controller import BoardController
from neoboard.board.events import (
    BoardEvents,
    IllegalMoveEvent,
    MoveEvent,
    UpdateEvent,
)

__all__ = [
    "BoardController",
    "BoardEvents",
    "IllegalMoveEvent",
    "MoveEvent",
    "UpdateEvent",
]
