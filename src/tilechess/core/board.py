"""Board - piece placement on an 8x8 grid of cells."""

from __future__ import annotations

from collections.abc import Iterator

from tilechess.core.enums import Color, PieceType
from tilechess.core.piece import Piece
from tilechess.core.tile import Cell
from tilechess.core.types import COLS, ROWS, Coord, in_borders

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid; one :class:`Cell` per coordinate for its lifetime.

    Accessors raise ``IndexError`` for off-board coordinates. Queries that
    need an occupant (``symbol``, ``is_white_occupied``,
    ``valid_next_positions``) raise ``ValueError`` on an empty square.
    """

    ROWS = ROWS
    COLS = COLS

    __slots__ = ("_cells", "captured_pieces")

    def __init__(self, *, empty: bool = False) -> None:
        """Grid of 64 cells holding the starting position unless *empty*."""
        self._cells: list[list[Cell]] = [
            [Cell(x, y) for y in range(COLS)] for x in range(ROWS)
        ]
        # Filled by move execution, never by the queries below.
        self.captured_pieces: list[Piece] = []
        if not empty:
            self._place_starting_layout()

    # -- Element access -----------------------------------------------------

    def cell(self, x: int, y: int) -> Cell:
        if not in_borders(x, y):
            raise IndexError(f"Square out of range: ({x}, {y})")
        return self._cells[x][y]

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self.cell(*coord).piece

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        self.cell(*coord).piece = piece

    def _occupant(self, x: int, y: int) -> Piece:
        piece = self.cell(x, y).piece
        if piece is None:
            raise ValueError(f"No piece at ({x}, {y})")
        return piece

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, piece: Piece | None, x: int, y: int) -> None:
        """Overwrite the occupant at (x, y); ``None`` empties the square."""
        self.cell(x, y).piece = piece

    def remove_piece(self, x: int, y: int) -> Piece | None:
        """Empty (x, y) and return whatever stood there."""
        cell = self.cell(x, y)
        piece = cell.piece
        cell.piece = None
        return piece

    def remove_kings(self) -> None:
        """Clear every square holding a king (for what-if boards)."""
        for cell in self._iter_cells():
            if cell.piece is not None and cell.piece.is_king:
                self.remove_piece(cell.x, cell.y)

    def clear(self) -> None:
        for cell in self._iter_cells():
            cell.piece = None
        self.captured_pieces.clear()

    # -- Queries ------------------------------------------------------------

    def valid_next_positions(
        self, x: int, y: int, is_white_turn: bool
    ) -> tuple[list[Coord], list[Coord]]:
        """Passable and capturable coordinates for the piece at (x, y).

        Returns two empty lists when the piece does not belong to the side
        named by *is_white_turn*: a player may only inspect their own moves.
        """
        piece = self._occupant(x, y)
        passable, capturable = piece.valid_moves(self, x, y)
        if piece.is_white != is_white_turn:
            return [], []
        return [t.coord for t in passable], [t.coord for t in capturable]

    def symbol(self, x: int, y: int) -> str:
        return self._occupant(x, y).symbol

    def is_occupied(self, x: int, y: int) -> bool:
        return self.cell(x, y).piece is not None

    def is_white_occupied(self, x: int, y: int) -> bool:
        return self._occupant(x, y).is_white

    def get_if_pawn(self, x: int, y: int) -> Piece | None:
        """The occupant if it is a pawn, else ``None``."""
        piece = self.cell(x, y).piece
        if piece is not None and piece.is_pawn:
            return piece
        return None

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Coord, Piece]]:
        """Yield ``(coord, piece)`` for occupied squares, optionally by color."""
        for cell in self._iter_cells():
            piece = cell.piece
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield cell.coord, piece

    def _iter_cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        """Independent board with copied pieces (pawn flags included)."""
        b = Board.empty()
        for cell in self._iter_cells():
            if cell.piece is not None:
                b._cells[cell.x][cell.y].piece = cell.piece.copy()
        b.captured_pieces = [p.copy() for p in self.captured_pieces]
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, black on row 0, white on row 7."""
        return cls()

    @classmethod
    def empty(cls) -> Board:
        """Board with no pieces, for custom setups."""
        return cls(empty=True)

    def _place_starting_layout(self) -> None:
        for y, pt in enumerate(_BACK_RANK):
            self.place_piece(Piece(Color.BLACK, pt), 0, y)
            self.place_piece(Piece(Color.BLACK, PieceType.PAWN), 1, y)
            self.place_piece(Piece(Color.WHITE, PieceType.PAWN), 6, y)
            self.place_piece(Piece(Color.WHITE, pt), 7, y)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._layout() == other._layout()

    def _layout(self) -> list[str | None]:
        return [None if c.piece is None else str(c.piece) for c in self._iter_cells()]

    def __repr__(self) -> str:
        rows: list[str] = []
        for x in range(ROWS):
            row = []
            for y in range(COLS):
                p = self._cells[x][y].piece
                row.append(str(p) if p else ".")
            rows.append(f"{ROWS - x} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
