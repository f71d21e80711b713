"""Board configuration."""

from __future__ import annotations

from dataclasses import dataclass

from neoboard.core.move import promotion_from_char
from neoboard.core.notation.fen import STARTING_FEN
from neoboard.rules.factory import RulesEngine


@dataclass
class BoardOptions:
    """All user-configurable board settings."""

    # Position / rules
    fen: str = STARTING_FEN
    rules_engine: RulesEngine = RulesEngine.LIGHT

    # Interaction
    highlight_legal: bool = True
    default_promotion: str = "q"  # q, r, b or n

    # Animation
    animation_ms: int = 150

    def __post_init__(self) -> None:
        if self.animation_ms < 0:
            raise ValueError(f"animation_ms must be >= 0, got {self.animation_ms}")
        promotion_from_char(self.default_promotion)
