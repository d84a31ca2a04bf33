"""
Session Controller
==================
Owns the single Session and notifies the view after every event.

Why is this file needed?
------------------------
1. Decoupling: The view never touches the Session directly; it sends events
   in and receives rendered text out through Qt signals.
2. Synchronicity: One event is fully processed and rendered before the next
   one is accepted.
"""
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from matrixcalc.model.state import Event, Session

logger = logging.getLogger(__name__)


class SessionController(QObject):
    """Central controller with signals for view sync."""
    view_changed = Signal(str)
    quit_requested = Signal()

    def __init__(self, session: Optional[Session] = None) -> None:
        super().__init__()
        self.session = session if session is not None else Session()

    def current_view(self) -> str:
        return self.session.render()

    def dispatch(self, event: Optional[Event]) -> None:
        if event is None:
            return

        self.session.handle_event(event)
        if self.session.quit_requested:
            self.quit_requested.emit()
            return
        self.view_changed.emit(self.session.render())
