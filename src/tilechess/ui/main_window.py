"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from tilechess.core.enums import Color
from tilechess.core.piece import Piece
from tilechess.game.controller import GameController, MoveRecord
from tilechess.ui.board.board_view import BoardView
from tilechess.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window for tilechess."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("tilechess")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._apply_settings()
        self._refresh_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)

        self._turn_label = QLabel()
        self._last_move_label = QLabel()
        self._captured_label = QLabel()
        status = QStatusBar()
        status.addPermanentWidget(self._turn_label, 1)
        status.addPermanentWidget(self._last_move_label)
        status.addPermanentWidget(self._captured_label)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return
        self._new_game_action = QAction("&New game", self)
        self._new_game_action.setShortcut("Ctrl+N")
        self._new_game_action.triggered.connect(self.new_game)
        game_menu.addAction(self._new_game_action)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_capture.append(self._on_capture)
        events.on_turn_changed.append(self._on_turn_changed)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(self._settings.theme)
        scene.set_show_coordinates(self._settings.show_coordinates)
        scene.set_show_legal_moves(self._settings.show_legal_moves)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def new_game(self) -> None:
        self._controller.new_game()
        self._last_move_label.clear()
        self._board_view.board_scene.set_controller(self._controller)
        self._refresh_status()

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_move(self, record: MoveRecord) -> None:
        self._last_move_label.setText(str(record))

    def _on_capture(self, _piece: Piece) -> None:
        self._refresh_status()

    def _on_turn_changed(self, _color: Color) -> None:
        self._refresh_status()

    def _refresh_status(self) -> None:
        side = "White" if self._controller.is_white_turn else "Black"
        self._turn_label.setText(f"{side} to move")
        captured = "".join(p.symbol for p in self._controller.board.captured_pieces)
        self._captured_label.setText(captured)
