"""Tile value object and board cell handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilechess.core.types import Coord

if TYPE_CHECKING:
    from tilechess.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Tile:
    """Candidate destination produced by move generation.

    Carries coordinates only and never refers back to the board grid.
    """

    x: int
    y: int

    @property
    def coord(self) -> Coord:
        return self.x, self.y


class Cell:
    """One square of the board grid; owns the occupant slot."""

    __slots__ = ("_x", "_y", "piece")

    def __init__(self, x: int, y: int, piece: Piece | None = None) -> None:
        self._x = x
        self._y = y
        self.piece = piece

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coord(self) -> Coord:
        return self._x, self._y

    def __repr__(self) -> str:
        return f"Cell({self._x}, {self._y}, {self.piece!r})"
