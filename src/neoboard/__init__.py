"""neoboard — chess board core with pluggable rules and move animation.

Quick start::

    from neoboard import BoardController, BoardOptions, RulesEngine

    board = BoardController(BoardOptions(rules_engine=RulesEngine.FULL))
    board.events.on_move.append(lambda e: print(e.fen))
    board.move("e2", "e4")
"""

from neoboard.board import BoardController, BoardEvents
from neoboard.config import BoardOptions
from neoboard.core import STARTING_FEN, ParseError, Position, position_from_fen
from neoboard.rules import MoveRequest, RulesAdapter, RulesEngine, create_rules

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "BoardController",
    "BoardEvents",
    "BoardOptions",
    "MoveRequest",
    "ParseError",
    "Position",
    "RulesAdapter",
    "RulesEngine",
    "create_rules",
    "position_from_fen",
]
