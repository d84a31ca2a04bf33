"""
Main Application Window
=======================
Shows the rendered session text and forwards key presses to the controller.
"""
from PySide6.QtWidgets import QMainWindow, QPlainTextEdit
from PySide6.QtGui import QFontDatabase, QKeyEvent
from PySide6.QtCore import Qt

from matrixcalc import config
from matrixcalc.controller.keys import event_from_key
from matrixcalc.controller.session import SessionController


class SessionDisplay(QPlainTextEdit):
    """Read-only monospace text view that hands every key to a callback."""

    def __init__(self, on_key, parent=None) -> None:
        super().__init__(parent)
        self._on_key = on_key
        self.setReadOnly(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))

    def keyPressEvent(self, event: QKeyEvent) -> None:
        self._on_key(event)


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.controller = controller

        self.setWindowTitle(config.APP_NAME)
        self.resize(800, 500)

        self.display = SessionDisplay(self.on_key_pressed)
        self.setCentralWidget(self.display)

        # --- SIGNAL CONNECTIONS ---
        self.controller.view_changed.connect(self.display.setPlainText)
        self.controller.quit_requested.connect(self.close)

        self.display.setPlainText(self.controller.current_view())
        self.display.setFocus()

    def on_key_pressed(self, event: QKeyEvent) -> None:
        self.controller.dispatch(
            event_from_key(event.key(), event.text(), event.modifiers())
        )
