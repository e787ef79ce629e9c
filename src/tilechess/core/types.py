"""Coordinate type alias and helpers.

Board layout (top-left origin, ``(x, y)`` = ``(row, column)``):
    (0, 0)=a8 ... (0, 7)=h8      black back rank
    (1, y)                       black pawns
    (6, y)                       white pawns
    (7, 0)=a1 ... (7, 7)=h1      white back rank
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

ROWS = 8
COLS = 8


def in_borders(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the board."""
    return 0 <= x < ROWS and 0 <= y < COLS


def square_name(coord: Coord) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    x, y = coord
    return chr(ord("a") + y) + str(ROWS - x)


def parse_square(name: str) -> Coord:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return ROWS - int(name[1]), ord(name[0]) - ord("a")
