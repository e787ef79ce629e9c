"""Core domain layer — move enumeration with zero external dependencies.

Quick start::

    from tilechess.core import Board

    board = Board()
    passable, capturable = board.valid_next_positions(6, 4, is_white_turn=True)
"""

from tilechess.core.board import Board
from tilechess.core.enums import Color, PieceType
from tilechess.core.move_generator import UNBOUNDED, generate_moves
from tilechess.core.piece import Piece
from tilechess.core.tile import Cell, Tile
from tilechess.core.types import (
    COLS,
    ROWS,
    Coord,
    in_borders,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "COLS",
    "Coord",
    "ROWS",
    "UNBOUNDED",
    "in_borders",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Cell",
    "Piece",
    "Tile",
    "generate_moves",
]
