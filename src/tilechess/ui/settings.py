"""User-configurable settings."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.ui.theme import BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    @property
    def theme(self) -> BoardTheme:
        return BoardTheme.by_name(self.board_theme)
