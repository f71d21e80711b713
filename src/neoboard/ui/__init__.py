"""Qt-side helpers. Importing this package requires PyQt6."""

from neoboard.ui.animation import (
    AnimationFrame,
    MoveAnimator,
    PieceSprite,
    ease_out_cubic,
    interpolate_frame,
)

__all__ = [
    "AnimationFrame",
    "MoveAnimator",
    "PieceSprite",
    "ease_out_cubic",
    "interpolate_frame",
]
