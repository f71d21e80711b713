"""Resolves which rules engine backs a board."""

from __future__ import annotations

import logging
from enum import IntEnum, auto

from neoboard.core.notation.fen import STARTING_FEN
from neoboard.rules.adapter import RulesAdapter
from neoboard.rules.full import FullRules
from neoboard.rules.light import LightRules

_LOGGER = logging.getLogger(__name__)


class RulesEngine(IntEnum):
    """Selector for the built-in rules engines."""

    LIGHT = auto()  # pseudo-legal fallback
    FULL = auto()  # python-chess legality


def create_rules(
    engine: RulesEngine = RulesEngine.LIGHT,
    fen: str = STARTING_FEN,
) -> RulesAdapter:
    """Build the adapter for *engine*, positioned at *fen*."""
    if engine == RulesEngine.FULL:
        return FullRules(fen)
    _LOGGER.warning("Using light rules (no check/mate validation)")
    return LightRules(fen)
