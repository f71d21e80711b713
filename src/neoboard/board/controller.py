"""BoardController — the board's state holder between UI and rules.

Coordinates: rules adapter, premove, animation, event listeners.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from neoboard.board.events import BoardEvents, IllegalMoveEvent, MoveEvent, UpdateEvent
from neoboard.config import BoardOptions
from neoboard.core.diff import match_snapshots
from neoboard.core.executor import MoveRejected
from neoboard.core.notation.fen import position_from_fen
from neoboard.core.types import parse_square
from neoboard.rules.adapter import MoveRequest
from neoboard.rules.factory import create_rules

if TYPE_CHECKING:
    from neoboard.core.enums import Color
    from neoboard.core.position import Position
    from neoboard.rules.adapter import RulesAdapter
    from neoboard.ui.animation import MoveAnimator

_LOGGER = logging.getLogger(__name__)


class BoardController:
    """Owns the displayed position and routes moves through the rules.

    Thread-safety: single-threaded; call from the UI thread only.
    """

    __slots__ = (
        "_options",
        "_rules",
        "_animator",
        "_position",
        "_last_move",
        "_premove",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        options: BoardOptions | None = None,
        *,
        rules: RulesAdapter | None = None,
        animator: MoveAnimator | None = None,
    ) -> None:
        self._options = options if options is not None else BoardOptions()
        self._rules = (
            rules if rules is not None else create_rules(self._options.rules_engine)
        )
        self._animator = animator
        self._last_move: tuple[str, str] | None = None
        self._premove: tuple[str, str] | None = None
        self.events = BoardEvents()

        if animator is not None:
            animator.set_duration(self._options.animation_ms)
            animator.finished.connect(self._on_transition_done)

        self._rules.set_position(self._options.fen)
        self._position = position_from_fen(self._rules.get_position())

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def options(self) -> BoardOptions:
        return self._options

    @property
    def rules(self) -> RulesAdapter:
        return self._rules

    @property
    def position(self) -> Position:
        return self._position

    @property
    def fen(self) -> str:
        return self._rules.get_position()

    @property
    def side_to_move(self) -> Color:
        return self._rules.side_to_move()

    @property
    def last_move(self) -> tuple[str, str] | None:
        return self._last_move

    @property
    def premove(self) -> tuple[str, str] | None:
        return self._premove

    # ── Position / moves ─────────────────────────────────────────────────

    def set_position(self, fen: str, *, immediate: bool = False) -> None:
        """Replace the position, animating the difference unless *immediate*.

        There is no move metadata here, so piece travel is inferred by
        :func:`~neoboard.core.diff.match_snapshots`.
        """
        previous = self._position
        self._rules.set_position(fen)
        self._position = position_from_fen(self._rules.get_position())
        self._last_move = None
        self._premove = None

        if self._animator is not None:
            if immediate:
                self._animator.cancel()
            else:
                self._animator.start(
                    self._position, match_snapshots(previous, self._position)
                )

        self._emit_update(UpdateEvent(self.fen))

    def move(
        self,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> bool:
        """Try to play a move. Returns True if the rules accepted it."""
        request = MoveRequest(
            from_square, to_square, promotion or self._options.default_promotion
        )
        result = self._rules.move(request)
        if isinstance(result, MoveRejected):
            _LOGGER.debug(
                "Rejected %s-%s: %s", from_square, to_square, result.reason.value
            )
            self._emit_illegal(IllegalMoveEvent(from_square, to_square, result.reason))
            return False

        self._position = result.position
        self._last_move = (from_square, to_square)
        self._emit_move(MoveEvent(from_square, to_square, result.fen))

        # A premove is tried once the transition has finished playing.
        if self._animator is not None:
            self._animator.start(result.position, result.transitions)
        else:
            self._play_premove()
        return True

    def legal_targets(self, square: str) -> list[str]:
        """Destination labels to hint for *square* (empty if hints are off)."""
        if not self._options.highlight_legal:
            return []
        targets = (c.to_square for c in self._rules.moves_from(square))
        return list(dict.fromkeys(targets))

    # ── Premove ──────────────────────────────────────────────────────────

    def set_premove(self, from_square: str, to_square: str) -> None:
        """Queue one move to try once its piece's side is to move."""
        parse_square(from_square)
        parse_square(to_square)
        self._premove = (from_square, to_square)

    def clear_premove(self) -> None:
        self._premove = None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_transition_done(self) -> None:
        self._play_premove()

    def _play_premove(self) -> None:
        if self._premove is None:
            return
        from_square, to_square = self._premove
        piece = self._position.piece_at(parse_square(from_square))
        if piece is None:
            _LOGGER.debug("Premove %s-%s dropped: origin empty", from_square, to_square)
            self._premove = None
            return
        if piece.color != self._position.side_to_move:
            return

        self._premove = None
        if not self.move(from_square, to_square):
            _LOGGER.debug("Premove %s-%s dropped: rejected", from_square, to_square)

    def _emit_move(self, event: MoveEvent) -> None:
        for cb in self.events.on_move:
            cb(event)

    def _emit_illegal(self, event: IllegalMoveEvent) -> None:
        for cb in self.events.on_illegal:
            cb(event)

    def _emit_update(self, event: UpdateEvent) -> None:
        for cb in self.events.on_update:
            cb(event)
