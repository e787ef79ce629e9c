"""Destination generation: shared directional scans + per-kind rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from tilechess.core.enums import PieceType
from tilechess.core.tile import Tile
from tilechess.core.types import in_borders

if TYPE_CHECKING:
    from tilechess.core.board import Board
    from tilechess.core.piece import Piece

UNBOUNDED = -1

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-1, -2),
    (2, -1),
    (1, -2),
    (-2, 1),
    (-1, 2),
    (2, 1),
    (1, 2),
)

# north, west, south, east
CARDINAL_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))
# north-west, north-east, south-west, south-east
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

MoveLists = tuple[list[Tile], list[Tile]]
MoveRule = Callable[["Piece", "Board", int, int], MoveLists]


# -- Shared scanning helpers ------------------------------------------------


def try_add_capture(
    piece: Piece, board: Board, tiles: list[Tile], x: int, y: int
) -> None:
    """Append (x, y) to *tiles* if it holds an enemy of *piece*.

    Safe to call with off-board coordinates (pawn diagonals at the edge).
    """
    if not in_borders(x, y):
        return
    if not board.is_occupied(x, y):
        return
    if piece.is_white != board.is_white_occupied(x, y):
        tiles.append(Tile(x, y))


def slide_add(
    piece: Piece,
    board: Board,
    passable: list[Tile],
    capturable: list[Tile] | None,
    x: int,
    y: int,
    dx: int,
    dy: int,
    max_steps: int,
) -> None:
    """Walk from (x, y) by (dx, dy) until a wall, a piece or *max_steps*.

    Empty squares go to *passable*. The first occupied square stops the
    walk and is offered as a capture only when *capturable* is given.
    ``max_steps == UNBOUNDED`` means no step limit.
    """
    while in_borders(x + dx, y + dy):
        if max_steps == 0:
            break
        if board.is_occupied(x + dx, y + dy):
            if capturable is not None:
                try_add_capture(piece, board, capturable, x + dx, y + dy)
            break
        x += dx
        y += dy
        if max_steps != UNBOUNDED:
            max_steps -= 1
        passable.append(Tile(x, y))


def _add_directions(
    piece: Piece,
    board: Board,
    passable: list[Tile],
    capturable: list[Tile],
    x: int,
    y: int,
    directions: tuple[tuple[int, int], ...],
    max_steps: int,
) -> None:
    for dx, dy in directions:
        slide_add(piece, board, passable, capturable, x, y, dx, dy, max_steps)


def add_cardinals(
    piece: Piece,
    board: Board,
    passable: list[Tile],
    capturable: list[Tile],
    x: int,
    y: int,
    max_steps: int,
) -> None:
    _add_directions(piece, board, passable, capturable, x, y, CARDINAL_DIRS, max_steps)


def add_diagonals(
    piece: Piece,
    board: Board,
    passable: list[Tile],
    capturable: list[Tile],
    x: int,
    y: int,
    max_steps: int,
) -> None:
    _add_directions(piece, board, passable, capturable, x, y, DIAGONAL_DIRS, max_steps)


# -- Per-kind rules ---------------------------------------------------------


def _king_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    add_cardinals(piece, board, passable, capturable, x, y, 1)
    add_diagonals(piece, board, passable, capturable, x, y, 1)
    return passable, capturable


def _queen_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    add_cardinals(piece, board, passable, capturable, x, y, UNBOUNDED)
    add_diagonals(piece, board, passable, capturable, x, y, UNBOUNDED)
    return passable, capturable


def _bishop_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    add_diagonals(piece, board, passable, capturable, x, y, UNBOUNDED)
    return passable, capturable


def _rook_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    add_cardinals(piece, board, passable, capturable, x, y, UNBOUNDED)
    return passable, capturable


def _knight_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    for dx, dy in KNIGHT_OFFSETS:
        slide_add(piece, board, passable, capturable, x, y, dx, dy, 1)
    return passable, capturable


def _pawn_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    passable: list[Tile] = []
    capturable: list[Tile] = []
    # White pawns go north, black pawns go south; never capture straight ahead.
    dx = -1 if piece.is_white else 1
    slide_add(piece, board, passable, None, x, y, dx, 0, 2 if piece.first_move else 1)
    try_add_capture(piece, board, capturable, x + dx, y - 1)
    try_add_capture(piece, board, capturable, x + dx, y + 1)
    return passable, capturable


_RULES: dict[PieceType, MoveRule] = {
    PieceType.KING: _king_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.PAWN: _pawn_moves,
}

_MISSING_RULES = set(PieceType) - set(_RULES)
if _MISSING_RULES:
    raise RuntimeError(f"No movement rule for: {sorted(_MISSING_RULES)}")


def generate_moves(piece: Piece, board: Board, x: int, y: int) -> MoveLists:
    """Passable and capturable tiles for *piece* standing on (x, y)."""
    return _RULES[piece.piece_type](piece, board, x, y)
