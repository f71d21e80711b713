"""Tests for pseudo-legal move generation."""

import pytest

from neoboard.core.enums import CastleSide
from neoboard.core.executor import MoveApplied, apply_move
from neoboard.core.move_generator import MoveGenerator
from neoboard.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from neoboard.core.position import Position
from neoboard.core.types import (
    A3,
    B1,
    C1,
    C3,
    C8,
    D4,
    D5,
    D6,
    E1,
    E2,
    E3,
    E4,
    E5,
    E6,
    E7,
    E8,
    G1,
    G8,
    H1,
    parse_square,
)

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


def perft(position: Position, depth: int) -> int:
    """Count pseudo-legal leaves at *depth*, checking the FEN round trip on the way."""
    gen = MoveGenerator(position)
    assert position_from_fen(position_to_fen(position)) == position
    moves = gen.generate_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        result = apply_move(position, move.from_sq, move.to_sq)
        assert isinstance(result, MoveApplied)
        nodes += perft(result.position, depth - 1)
    return nodes


def targets(fen: str, sq: int) -> set[int]:
    return {m.to_sq for m in MoveGenerator(position_from_fen(fen)).moves_from(sq)}


# ── Whole-position counts ───────────────────────────────────────────────────


class TestCounts:
    def test_starting_white(self) -> None:
        assert len(MoveGenerator(Position()).generate_moves()) == 20

    def test_starting_black(self) -> None:
        pos = position_from_fen(STARTING_FEN.replace(" w ", " b "))
        assert len(MoveGenerator(pos).generate_moves()) == 20

    def test_depth_2(self) -> None:
        assert perft(Position(), 2) == 400

    def test_depth_3(self) -> None:
        assert perft(Position(), 3) == 8_902

    def test_every_kiwipete_candidate_applies(self) -> None:
        pos = position_from_fen(KIWIPETE)
        for move in MoveGenerator(pos).generate_moves():
            result = apply_move(pos, move.from_sq, move.to_sq)
            assert isinstance(result, MoveApplied), str(move)
            assert position_from_fen(result.fen) == result.position


# ── Per-square queries ──────────────────────────────────────────────────────


class TestMovesFrom:
    def test_empty_square(self) -> None:
        assert MoveGenerator(Position()).moves_from(E4) == []

    def test_opponent_piece(self) -> None:
        assert MoveGenerator(Position()).moves_from(E7) == []

    def test_knight_start(self) -> None:
        assert targets(STARTING_FEN, B1) == {A3, C3}

    def test_blocked_bishop(self) -> None:
        assert targets(STARTING_FEN, C1) == set()

    def test_rook_open_file(self) -> None:
        moves = MoveGenerator(
            position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        ).moves_from(parse_square("a1"))
        assert len(moves) == 10

    def test_queen_center_with_capture(self) -> None:
        moves = MoveGenerator(
            position_from_fen("7k/8/8/8/3Q4/8/8/7K w - - 0 1")
        ).moves_from(D4)
        assert len(moves) == 27
        assert [m.to_sq for m in moves if m.is_capture] == [parse_square("h8")]


class TestPawns:
    def test_single_and_double_push(self) -> None:
        assert targets(STARTING_FEN, E2) == {E3, E4}

    def test_fully_blocked(self) -> None:
        assert targets("4k3/8/8/8/8/4p3/4P3/4K3 w - - 0 1", E2) == set()

    def test_double_blocked(self) -> None:
        assert targets("4k3/8/8/8/4p3/8/4P3/4K3 w - - 0 1", E2) == {E3}

    def test_diagonal_capture(self) -> None:
        moves = MoveGenerator(
            position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        ).moves_from(E4)
        assert {m.to_sq for m in moves} == {E5, D5}
        assert [m.to_sq for m in moves if m.is_capture] == [D5]

    def test_en_passant_candidate(self) -> None:
        moves = MoveGenerator(
            position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        ).moves_from(E5)
        ep = [m for m in moves if m.is_en_passant]
        assert {m.to_sq for m in moves} == {E6, D6}
        assert len(ep) == 1 and ep[0].to_sq == D6 and ep[0].is_capture

    def test_no_en_passant_without_target(self) -> None:
        assert targets("4k3/8/8/3pP3/8/8/8/4K3 w - - 0 2", E5) == {E6}

    def test_push_to_last_rank(self) -> None:
        assert targets("7k/4P3/8/8/8/8/8/4K3 w - - 0 1", E7) == {E8}

    def test_black_pawn_moves_down(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert targets(fen, parse_square("d7")) == {D6, parse_square("d5")}


class TestCastling:
    def test_both_wings(self) -> None:
        moves = MoveGenerator(
            position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        ).moves_from(E1)
        sides = {m.to_sq: m.castle_side for m in moves if m.castle_side is not None}
        assert len(moves) == 7
        assert sides == {G1: CastleSide.KINGSIDE, C1: CastleSide.QUEENSIDE}

    def test_black_wings(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1"
        assert {G8, C8} <= targets(fen, E8)

    def test_path_blocked(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1"
        result = targets(fen, E1)
        assert G1 in result
        assert C1 not in result

    def test_no_rights(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w - - 0 1"
        assert targets(fen, E1) == {
            parse_square(s) for s in ("d1", "f1", "d2", "e2", "f2")
        }

    def test_allowed_while_in_check(self) -> None:
        fen = "r3k2r/8/8/8/8/8/4r3/R3K2R w KQ - 0 1"
        assert {G1, C1} <= targets(fen, E1)

    def test_allowed_without_rook(self) -> None:
        moves = MoveGenerator(
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w K - 0 1")
        ).moves_from(E1)
        assert any(
            m.to_sq == G1 and m.castle_side == CastleSide.KINGSIDE for m in moves
        )

    def test_landing_already_a_king_step(self) -> None:
        moves = MoveGenerator(
            position_from_fen("4k3/8/8/8/8/8/8/7K w K - 0 1")
        ).moves_from(H1)
        assert len(moves) == 3
        assert all(m.castle_side is None for m in moves)


@pytest.mark.parametrize(
    "fen, expected",
    [
        ("4k3/8/8/8/8/8/8/4K3 w - - 0 1", 5),
        ("4k3/8/8/8/8/8/8/N3K3 w - - 0 1", 7),
    ],
)
def test_small_positions(fen: str, expected: int) -> None:
    assert len(MoveGenerator(position_from_fen(fen)).generate_moves()) == expected
