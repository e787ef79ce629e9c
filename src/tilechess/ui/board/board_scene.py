"""BoardScene — QGraphicsScene that draws the board, glyphs and move hints."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tilechess.core.types import COLS, ROWS, Coord
from tilechess.game.controller import GameController
from tilechess.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board and forwards clicks to a :class:`GameController`.

    Signals:
        move_made(object): Emitted with the ``MoveRecord`` after a move played
            by clicking.
    """

    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller = controller if controller is not None else GameController()
        self._show_coordinates = True
        self._show_legal_moves = True

        # Interaction state
        self._selected: Coord | None = None
        self._passable: list[Coord] = []
        self._capturable: list[Coord] = []

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coord, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        self.sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def set_controller(self, controller: GameController) -> None:
        self._controller = controller
        self._clear_selection()
        self.sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def click_square(self, coord: Coord) -> bool:
        """Handle a click on *coord*; ``True`` if it played a move."""
        if self._selected is not None and (
            coord in self._passable or coord in self._capturable
        ):
            src = self._selected
            self._clear_selection()
            if self._controller.submit_move(src, coord):
                self.sync_pieces()
                self.move_made.emit(self._controller.history[-1])
                return True
            return False

        passable, capturable = self._controller.valid_moves(*coord)
        if passable or capturable:
            self._select(coord, passable, capturable)
        else:
            self._clear_selection()
        return False

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for x in range(ROWS):
            for y in range(COLS):
                is_light = (x + y) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(y * t, x * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(x, y)] = rect

                label_brush = QBrush(
                    self._theme.coord_light if is_light else self._theme.coord_dark
                )
                # Rank numbers (left edge)
                if y == 0:
                    self._add_coord_label(str(ROWS - x), label_brush, font, 2, x * t + 1)
                # File letters (bottom edge)
                if x == ROWS - 1:
                    self._add_coord_label(
                        chr(ord("a") + y), label_brush, font, y * t + t - 12, x * t + t - 16
                    )

        self.setSceneRect(0, 0, COLS * t, ROWS * t)

    def _add_coord_label(
        self, text: str, brush: QBrush, font: QFont, px: float, py: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(px, py)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def sync_pieces(self) -> None:
        """Re-create all glyph items from the controller's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for coord, piece in self._controller.board.pieces():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = self._theme.piece_white if piece.is_white else self._theme.piece_black
            item.setBrush(QBrush(fill))
            item.setPen(QPen(self._theme.piece_black, 0.5))
            bounds = item.boundingRect()
            x, y = coord
            item.setPos(
                y * t + (t - bounds.width()) / 2, x * t + (t - bounds.height()) / 2
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[coord] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_square(event.scenePos())
        if coord is None:
            self._clear_selection()
        else:
            self.click_square(coord)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(
        self, coord: Coord, passable: list[Coord], capturable: list[Coord]
    ) -> None:
        self._clear_selection()
        self._selected = coord
        self._passable = passable
        self._capturable = capturable

        self._highlight_items.append(
            self._make_highlight(coord, self._theme.highlight_from)
        )
        if self._show_legal_moves:
            for target in passable:
                self._legal_dot_items.append(
                    self._make_highlight(target, self._theme.highlight_to)
                )
            for target in capturable:
                self._legal_dot_items.append(
                    self._make_highlight(target, self._theme.highlight_capture)
                )

    def _clear_selection(self) -> None:
        self._selected = None
        self._passable = []
        self._capturable = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Coord | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= row < ROWS and 0 <= col < COLS):
            return None
        return row, col

    def _make_highlight(self, coord: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        x, y = coord
        rect = QGraphicsRectItem(y * t, x * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
