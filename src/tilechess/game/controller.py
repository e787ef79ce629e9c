"""GameController — executes chosen moves on top of the move engine.

The engine only enumerates destinations; this layer moves pieces, records
captures, clears pawn first-move flags and alternates turns. Listeners
subscribe through :class:`GameEvents`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tilechess.core.board import Board
from tilechess.core.enums import Color
from tilechess.core.piece import Piece
from tilechess.core.types import Coord, in_borders, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One executed move."""

    src: Coord
    dst: Coord
    piece: Piece
    captured: Piece | None = None

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        return f"{self.piece.symbol}{square_name(self.src)}{sep}{square_name(self.dst)}"


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
CaptureCallback = Callable[[Piece], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one board and the side to move.

    Thread-safety: call from a single thread (the main/UI thread); the
    board has no locking of its own.
    """

    __slots__ = ("_board", "_side_to_move", "_history", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self._side_to_move = Color.WHITE
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def is_white_turn(self) -> bool:
        return self._side_to_move.is_white

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    # ── Public API ───────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._board = Board.initial()
        self._history = []
        self._set_side(Color.WHITE)

    def valid_moves(self, x: int, y: int) -> tuple[list[Coord], list[Coord]]:
        """Destinations for the piece at (x, y) if it belongs to the side to move."""
        if not in_borders(x, y) or not self._board.is_occupied(x, y):
            return [], []
        return self._board.valid_next_positions(x, y, self.is_white_turn)

    def submit_move(self, src: Coord, dst: Coord) -> bool:
        """Play *src* → *dst* for the side to move; ``False`` if not allowed."""
        passable, capturable = self.valid_moves(*src)
        if dst not in passable and dst not in capturable:
            _LOGGER.info(
                "Rejected move %s-%s for %s",
                square_name(src) if in_borders(*src) else src,
                square_name(dst) if in_borders(*dst) else dst,
                self._side_to_move,
            )
            return False

        piece = self._board.remove_piece(*src)
        assert piece is not None
        captured = self._board.remove_piece(*dst)
        if captured is not None:
            self._board.captured_pieces.append(captured)
        self._board.place_piece(piece, *dst)
        if piece.is_pawn:
            piece.first_move = False

        record = MoveRecord(src, dst, piece, captured)
        self._history.append(record)
        _LOGGER.debug("Played %s", record)

        self._emit_move(record)
        if captured is not None:
            self._emit_capture(captured)
        self._set_side(self._side_to_move.opposite)
        return True

    def preview_board(self) -> Board:
        """Kingless copy of the current board for what-if displays."""
        preview = self._board.copy()
        preview.remove_kings()
        return preview

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_side(self, color: Color) -> None:
        self._side_to_move = color
        for cb in self.events.on_turn_changed:
            cb(color)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_capture(self, piece: Piece) -> None:
        _LOGGER.debug("Captured %s", piece.symbol)
        for cb in self.events.on_capture:
            cb(piece)
