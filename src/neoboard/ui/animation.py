"""MoveAnimator — timer-driven interpolation between two board snapshots.

The animator does not paint anything. Every display tick it emits an
:class:`AnimationFrame` describing where each piece of the target position
should be drawn; a view renders the frame however it likes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from neoboard.core.types import Square, file_of, rank_of

if TYPE_CHECKING:
    from neoboard.core.piece import Piece
    from neoboard.core.position import Position

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PieceSprite:
    """Where to draw one piece, in fractional (file, rank) board units."""

    piece: Piece
    square: Square
    file: float
    rank: float
    moving: bool = False


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    """One frame: eased progress in [0, 1] and every sprite to draw."""

    progress: float
    sprites: tuple[PieceSprite, ...]


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def interpolate_frame(
    target: Position,
    transitions: Mapping[Square, Square],
    t: float,
) -> AnimationFrame:
    """Frame at linear time *t* for pieces sliding along *transitions*.

    Pieces of *target* without an entry are drawn at rest. When several
    origins point at the same destination the first one wins.
    """
    eased = ease_out_cubic(min(max(t, 0.0), 1.0))
    arrivals: dict[Square, Square] = {}
    for origin, destination in transitions.items():
        arrivals.setdefault(destination, origin)

    sprites: list[PieceSprite] = []
    for occupant in target.occupants():
        sq = occupant.square
        origin = arrivals.get(sq)
        if origin is None:
            sprites.append(
                PieceSprite(occupant.piece, sq, float(file_of(sq)), float(rank_of(sq)))
            )
            continue
        fx, fy = file_of(origin), rank_of(origin)
        tx, ty = file_of(sq), rank_of(sq)
        sprites.append(
            PieceSprite(
                occupant.piece,
                sq,
                fx + (tx - fx) * eased,
                fy + (ty - fy) * eased,
                moving=eased < 1.0,
            )
        )
    return AnimationFrame(eased, tuple(sprites))


class MoveAnimator(QObject):
    """Runs one transition at a time on a display-rate timer.

    Signals:
        frame_ready(AnimationFrame): Emitted on every tick, including the
            final at-rest frame.
        finished(): Emitted once when a transition runs to completion.
            A cancelled transition never emits it.
    """

    frame_ready = pyqtSignal(object)
    finished = pyqtSignal()

    FRAME_INTERVAL_MS = 16

    def __init__(
        self,
        duration_ms: int = 150,
        *,
        clock: Callable[[], float] = time.monotonic,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._duration_ms = duration_ms
        self._clock = clock
        self._target: Position | None = None
        self._transitions: dict[Square, Square] = {}
        self._started_at = 0.0

        self._timer = QTimer(self)
        self._timer.setInterval(self.FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self.tick)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._target is not None

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def set_duration(self, duration_ms: int) -> None:
        """Change the duration used by the next transition."""
        self._duration_ms = duration_ms

    def start(
        self,
        target: Position,
        transitions: Mapping[Square, Square],
    ) -> None:
        """Animate towards *target*, cancelling any transition in flight."""
        if self.is_running:
            self.cancel()
        self._target = target
        self._transitions = dict(transitions)
        self._started_at = self._clock()
        if self._duration_ms <= 0:
            self.tick()
            return
        self._timer.start()

    def cancel(self) -> None:
        """Drop the running transition without emitting ``finished``."""
        if not self.is_running:
            return
        self._timer.stop()
        self._target = None
        self._transitions = {}
        _LOGGER.debug("Animation cancelled")

    def tick(self) -> None:
        """Emit the frame for the current clock time."""
        target = self._target
        if target is None:
            return
        if self._duration_ms <= 0:
            t = 1.0
        else:
            elapsed_ms = (self._clock() - self._started_at) * 1000.0
            t = min(elapsed_ms / self._duration_ms, 1.0)

        self.frame_ready.emit(interpolate_frame(target, self._transitions, t))
        if t >= 1.0:
            self._timer.stop()
            self._target = None
            self._transitions = {}
            self.finished.emit()
