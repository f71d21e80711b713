"""Snapshot diff — guess which piece went where between two positions.

Used only when a position arrives without move metadata (for example a
record loaded directly). Moves played through the executor carry their own
``transitions`` and do not need this.

The match is by piece symbol, not by identity: when two identical pieces
relocate in the same transition the pairing may cross over. Several origins
can also resolve to the same destination. Callers animate whatever mapping
comes back and draw unmatched pieces without interpolation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from neoboard.core.types import Square

if TYPE_CHECKING:
    from neoboard.core.piece import Piece
    from neoboard.core.position import Position


def match_snapshots(before: Position, after: Position) -> dict[Square, Square]:
    """Map origin squares in *before* to destination squares in *after*."""
    mapping: dict[Square, Square] = {}
    for sq in range(64):
        piece = before.piece_at(sq)
        if piece is None or after.piece_at(sq) == piece:
            continue
        destination = _find_arrival(piece, before, after)
        if destination is not None:
            mapping[sq] = destination
    return mapping


def _find_arrival(piece: Piece, before: Position, after: Position) -> Square | None:
    # First square (a1 → h8) that gained this symbol.
    for sq in range(64):
        if after.piece_at(sq) == piece and before.piece_at(sq) != piece:
            return sq
    return None
