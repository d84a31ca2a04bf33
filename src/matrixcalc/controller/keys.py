"""
Key Mapping
===========
Translates Qt key presses into session events.

Enter confirms, Backspace/Delete erase, Escape, Ctrl+C, Ctrl+Q and a bare
'q' quit. Any other printable text is typed into the buffer; everything
else (arrows, function keys, lone modifiers) is ignored.
"""
from typing import Optional

from PySide6.QtCore import Qt

from matrixcalc.model.state import Event

CONFIRM_KEYS = (Qt.Key.Key_Return, Qt.Key.Key_Enter)
BACKSPACE_KEYS = (Qt.Key.Key_Backspace, Qt.Key.Key_Delete)
QUIT_SHORTCUT_KEYS = (Qt.Key.Key_C, Qt.Key.Key_Q)


def event_from_key(key: int, text: str, modifiers: Qt.KeyboardModifier = Qt.KeyboardModifier.NoModifier) -> Optional[Event]:
    """
    Map a key press to a session event.

    Args:
        key: The Qt key code (QKeyEvent.key()).
        text: The text produced by the key (QKeyEvent.text()).
        modifiers: Active keyboard modifiers.

    Returns:
        The matching Event, or None if the key should be ignored.
    """
    if key in CONFIRM_KEYS:
        return Event.confirm()
    if key in BACKSPACE_KEYS:
        return Event.backspace()
    if key == Qt.Key.Key_Escape:
        return Event.quit()
    if modifiers & Qt.KeyboardModifier.ControlModifier:
        return Event.quit() if key in QUIT_SHORTCUT_KEYS else None
    if text == "q":
        return Event.quit()
    if len(text) == 1 and text.isprintable():
        return Event.character(text)
    return None
