"""PySide6 desktop front end."""

from __future__ import annotations

import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication

from locidle.config import GameConfig
from locidle.gui.theme import stylesheet
from locidle.gui.window import MainWindow
from locidle.runtime import GameRuntime


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication.instance() or QApplication(list(argv))
    app.setApplicationName("LOC Idle")
    app.setStyleSheet(stylesheet())
    return app


def run(config: GameConfig | None = None, argv: Sequence[str] | None = None) -> int:
    """Open the main window and block in the Qt event loop."""
    app = create_application(argv if argv is not None else sys.argv)
    window = MainWindow(GameRuntime(config))
    window.show()
    return app.exec()


__all__ = ["MainWindow", "create_application", "run"]
