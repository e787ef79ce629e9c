"""Tests for per-kind movement rules and the shared scanning helpers."""

import pytest

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.move_generator import (
    _RULES,
    UNBOUNDED,
    generate_moves,
    slide_add,
    try_add_capture,
)
from tilechess.core.piece import Piece
from tilechess.core.tile import Cell, Tile
from tilechess.core.types import Coord


def _place(board: Board, x: int, y: int, color: Color, pt: PieceType) -> Piece:
    piece = Piece(color, pt)
    board.place_piece(piece, x, y)
    return piece


def _moves(board: Board, x: int, y: int) -> tuple[set[Coord], set[Coord]]:
    piece = board[x, y]
    assert piece is not None
    passable, capturable = piece.valid_moves(board, x, y)
    return {t.coord for t in passable}, {t.coord for t in capturable}


# ── Scenarios on the starting position ──────────────────────────────────────


class TestStartingPosition:
    def test_white_pawn_double_step(self) -> None:
        board = Board.initial()
        assert _moves(board, 6, 4) == ({(5, 4), (4, 4)}, set())

    def test_white_knight(self) -> None:
        board = Board.initial()
        assert _moves(board, 7, 1) == ({(5, 0), (5, 2)}, set())

    def test_black_rook_blocked(self) -> None:
        board = Board.initial()
        assert _moves(board, 0, 0) == (set(), set())

    @pytest.mark.parametrize("y", [0, 2, 3, 4, 5, 7])
    def test_back_rank_without_knights_is_stuck(self, y: int) -> None:
        board = Board.initial()
        assert _moves(board, 7, y) == (set(), set())
        assert _moves(board, 0, y) == (set(), set())

    def test_black_pawn_moves_south(self) -> None:
        board = Board.initial()
        assert _moves(board, 1, 3) == ({(2, 3), (3, 3)}, set())

    def test_all_sets_disjoint(self) -> None:
        board = Board.initial()
        for (x, y), _piece in board.pieces():
            passable, capturable = _moves(board, x, y)
            assert not passable & capturable


# ── Sliding pieces ───────────────────────────────────────────────────────────


class TestSliding:
    def test_queen_stops_at_enemy(self) -> None:
        board = Board.empty()
        _place(board, 3, 3, Color.WHITE, PieceType.QUEEN)
        _place(board, 3, 6, Color.BLACK, PieceType.PAWN)
        passable, capturable = _moves(board, 3, 3)
        assert {(3, 4), (3, 5)} <= passable
        assert (3, 6) in capturable
        assert (3, 7) not in passable and (3, 7) not in capturable

    def test_rook_friendly_blocker_not_reported(self) -> None:
        board = Board.empty()
        _place(board, 4, 0, Color.WHITE, PieceType.ROOK)
        _place(board, 4, 3, Color.BLACK, PieceType.KNIGHT)
        _place(board, 2, 0, Color.WHITE, PieceType.PAWN)
        passable, capturable = _moves(board, 4, 0)
        assert passable == {(4, 1), (4, 2), (3, 0), (5, 0), (6, 0), (7, 0)}
        assert capturable == {(4, 3)}

    @pytest.mark.parametrize(
        ("piece_type", "expected"),
        [
            (PieceType.ROOK, 14),
            (PieceType.BISHOP, 13),
            (PieceType.QUEEN, 27),
        ],
    )
    def test_open_board_counts(self, piece_type: PieceType, expected: int) -> None:
        board = Board.empty()
        _place(board, 3, 3, Color.BLACK, piece_type)
        passable, capturable = _moves(board, 3, 3)
        assert len(passable) == expected
        assert capturable == set()

    def test_bishop_captures_on_diagonals_only(self) -> None:
        board = Board.empty()
        _place(board, 4, 4, Color.WHITE, PieceType.BISHOP)
        _place(board, 2, 2, Color.BLACK, PieceType.ROOK)
        _place(board, 4, 6, Color.BLACK, PieceType.ROOK)
        passable, capturable = _moves(board, 4, 4)
        assert capturable == {(2, 2)}
        assert (3, 3) in passable
        assert (1, 1) not in passable


# ── Stepping pieces ──────────────────────────────────────────────────────────


class TestKingKnight:
    def test_king_center(self) -> None:
        board = Board.empty()
        _place(board, 4, 4, Color.WHITE, PieceType.KING)
        passable, capturable = _moves(board, 4, 4)
        assert len(passable) == 8
        assert capturable == set()

    def test_king_corner(self) -> None:
        board = Board.empty()
        _place(board, 0, 0, Color.BLACK, PieceType.KING)
        assert _moves(board, 0, 0) == ({(0, 1), (1, 0), (1, 1)}, set())

    def test_king_captures_adjacent_enemy_only(self) -> None:
        board = Board.empty()
        _place(board, 4, 4, Color.WHITE, PieceType.KING)
        _place(board, 3, 4, Color.BLACK, PieceType.PAWN)
        _place(board, 5, 5, Color.WHITE, PieceType.PAWN)
        _place(board, 2, 4, Color.BLACK, PieceType.QUEEN)
        passable, capturable = _moves(board, 4, 4)
        assert capturable == {(3, 4)}
        assert (5, 5) not in passable
        assert len(passable) == 6

    def test_knight_center(self) -> None:
        board = Board.empty()
        _place(board, 4, 4, Color.WHITE, PieceType.KNIGHT)
        passable, _ = _moves(board, 4, 4)
        assert passable == {
            (2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5),
        }

    def test_knight_jumps_over_pieces(self) -> None:
        board = Board.empty()
        _place(board, 4, 4, Color.WHITE, PieceType.KNIGHT)
        for x, y in [(3, 4), (5, 4), (4, 3), (4, 5), (3, 3), (5, 5)]:
            _place(board, x, y, Color.WHITE, PieceType.PAWN)
        _place(board, 2, 3, Color.BLACK, PieceType.BISHOP)
        _place(board, 6, 5, Color.WHITE, PieceType.ROOK)
        passable, capturable = _moves(board, 4, 4)
        assert capturable == {(2, 3)}
        assert len(passable) == 6
        assert (6, 5) not in passable


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawn:
    def test_single_step_after_first_move(self) -> None:
        board = Board.empty()
        pawn = _place(board, 6, 4, Color.WHITE, PieceType.PAWN)
        pawn.first_move = False
        assert _moves(board, 6, 4) == ({(5, 4)}, set())

    def test_blocked_first_square_blocks_both(self) -> None:
        board = Board.empty()
        _place(board, 6, 4, Color.WHITE, PieceType.PAWN)
        _place(board, 5, 4, Color.BLACK, PieceType.KNIGHT)
        assert _moves(board, 6, 4) == (set(), set())

    def test_blocked_second_square(self) -> None:
        board = Board.empty()
        _place(board, 6, 4, Color.WHITE, PieceType.PAWN)
        _place(board, 4, 4, Color.BLACK, PieceType.KNIGHT)
        assert _moves(board, 6, 4) == ({(5, 4)}, set())

    def test_diagonal_captures(self) -> None:
        board = Board.empty()
        _place(board, 1, 3, Color.BLACK, PieceType.PAWN)
        _place(board, 2, 2, Color.WHITE, PieceType.ROOK)
        _place(board, 2, 4, Color.BLACK, PieceType.ROOK)
        passable, capturable = _moves(board, 1, 3)
        assert capturable == {(2, 2)}
        assert passable == {(2, 3), (3, 3)}

    def test_edge_file_capture_check_is_safe(self) -> None:
        board = Board.empty()
        _place(board, 6, 0, Color.WHITE, PieceType.PAWN)
        _place(board, 5, 1, Color.BLACK, PieceType.PAWN)
        assert _moves(board, 6, 0) == ({(5, 0), (4, 0)}, {(5, 1)})

    def test_last_row_has_no_moves(self) -> None:
        board = Board.empty()
        _place(board, 0, 4, Color.WHITE, PieceType.PAWN)
        assert _moves(board, 0, 4) == (set(), set())

    def test_move_generation_keeps_first_move_flag(self) -> None:
        board = Board.initial()
        pawn = board.get_if_pawn(6, 4)
        assert pawn is not None
        _moves(board, 6, 4)
        assert pawn.first_move


# ── Helpers and general properties ──────────────────────────────────────────


class TestHelpers:
    def test_try_add_capture_off_board_is_noop(self) -> None:
        board = Board.empty()
        piece = _place(board, 0, 0, Color.WHITE, PieceType.PAWN)
        tiles: list[Tile] = []
        try_add_capture(piece, board, tiles, -1, -1)
        try_add_capture(piece, board, tiles, 1, 1)
        assert tiles == []

    def test_slide_add_without_capture_list(self) -> None:
        board = Board.empty()
        piece = _place(board, 4, 0, Color.WHITE, PieceType.ROOK)
        _place(board, 4, 2, Color.BLACK, PieceType.ROOK)
        passable: list[Tile] = []
        slide_add(piece, board, passable, None, 4, 0, 0, 1, UNBOUNDED)
        assert passable == [Tile(4, 1)]

    def test_slide_add_zero_steps(self) -> None:
        board = Board.empty()
        piece = _place(board, 4, 4, Color.WHITE, PieceType.ROOK)
        passable: list[Tile] = []
        capturable: list[Tile] = []
        slide_add(piece, board, passable, capturable, 4, 4, 1, 0, 0)
        assert passable == [] and capturable == []

    def test_results_are_detached_tiles(self) -> None:
        board = Board.initial()
        passable, _ = generate_moves(board[7, 1], board, 7, 1)  # type: ignore[arg-type]
        assert all(isinstance(t, Tile) and not isinstance(t, Cell) for t in passable)

    def test_idempotent(self) -> None:
        board = Board.empty()
        _place(board, 3, 3, Color.WHITE, PieceType.QUEEN)
        _place(board, 5, 5, Color.BLACK, PieceType.KNIGHT)
        _place(board, 1, 3, Color.WHITE, PieceType.PAWN)
        assert _moves(board, 3, 3) == _moves(board, 3, 3)

    @pytest.mark.parametrize("piece_type", list(PieceType))
    @pytest.mark.parametrize("color", list(Color))
    def test_disjoint_everywhere(self, piece_type: PieceType, color: Color) -> None:
        board = Board.initial()
        for x in range(2, 6):
            for y in range(8):
                _place(board, x, y, color, piece_type)
                passable, capturable = _moves(board, x, y)
                assert not passable & capturable
                board.remove_piece(x, y)

    def test_every_piece_type_has_a_rule(self) -> None:
        assert set(_RULES) == set(PieceType)
