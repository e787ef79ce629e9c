"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "TILECHESS_LOG_LEVEL"


def configure_logging(level_name: str | None = None) -> None:
    """Set up root logging from *level_name* or ``TILECHESS_LOG_LEVEL``."""
    name = (level_name or os.environ.get(_LOG_LEVEL_ENV, "WARNING")).upper()
    level = logging.getLevelNamesMapping().get(name)
    logging.basicConfig(
        level=logging.WARNING if level is None else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        _LOGGER.warning("Unknown log level %r, using WARNING", name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("tilechess")
    app.setStyle("Fusion")


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tilechess.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
