"""Tests for the snapshot diff matcher."""

from neoboard.core.diff import match_snapshots
from neoboard.core.executor import MoveApplied, apply_move
from neoboard.core.notation import STARTING_FEN, position_from_fen
from neoboard.core.position import Position
from neoboard.core.types import A1, E1, E2, E4, E5, F1, G1, H1, parse_square


class TestMatchSnapshots:
    def test_identical_positions(self) -> None:
        assert match_snapshots(Position(), Position()) == {}

    def test_single_pawn_push(self) -> None:
        after = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert match_snapshots(Position(), after) == {E2: E4}

    def test_agrees_with_executor_for_castling(self) -> None:
        before = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        result = apply_move(before, E1, G1)
        assert isinstance(result, MoveApplied)
        assert match_snapshots(before, result.position) == {E1: G1, H1: F1}

    def test_captured_piece_is_unmatched(self) -> None:
        before = position_from_fen("4k3/8/8/4p3/3P4/8/8/4K3 w - - 0 1")
        after = position_from_fen("4k3/8/8/4P3/8/8/8/4K3 b - - 0 1")
        assert match_snapshots(before, after) == {parse_square("d4"): E5}

    def test_vanished_piece_is_unmatched(self) -> None:
        before = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        after = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert match_snapshots(before, after) == {}

    def test_same_symbol_picks_lowest_arrival(self) -> None:
        before = position_from_fen("4k3/8/8/8/8/8/8/R3K2R w - - 0 1")
        after = position_from_fen("4k3/8/8/8/8/8/R6R/4K3 w - - 0 1")
        mapping = match_snapshots(before, after)
        # Both rooks resolve to the lowest square that gained a rook.
        assert mapping == {A1: parse_square("a2"), H1: parse_square("a2")}

    def test_pieces_only_removed(self) -> None:
        before = position_from_fen(STARTING_FEN)
        after = position_from_fen("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
        # Nothing gained a symbol, so nothing travels.
        assert match_snapshots(before, after) == {}
