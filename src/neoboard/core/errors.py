"""Error taxonomy for the board core.

Rejected moves are *not* exceptions: they are reported as
:class:`~neoboard.core.executor.MoveRejected` values so the caller can surface
them as events.
"""

from __future__ import annotations


class ParseError(ValueError):
    """A position record or square label could not be parsed."""


class InvariantViolation(AssertionError):
    """Internal state broke a structural invariant (programmer error)."""
