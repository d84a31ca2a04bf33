"""
Session State (State Machine)
=============================
This module defines the single mutable session driven by key events.

Why is this file needed?
------------------------
1. State Management: It holds the operands, the current stage of the
   workflow, the live input buffer and the last error in one place.
2. Transitions: It sequences "collect A -> choose operation ->
   (collect B -> choose operation) -> show result -> reset".
3. Rendering: It produces the text shown by the front end for every state.

Classes:
    SessionState: The stages of the workflow.
    Event: A single key event delivered by the front end.
    Session: The state machine itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
import logging
from typing import Optional

from matrixcalc.model.errors import ParseError
from matrixcalc.model.matrix import Matrix
from matrixcalc.model.operations import (
    BINARY_OPERATIONS, OPERATION_LABELS, UNARY_OPERATIONS, Operation, run_binary, run_unary
)
from matrixcalc.model.parser import parse_matrix

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """The stages of the workflow."""
    COLLECT_A = "collect_a"
    SELECT_OP_A = "select_op_a"
    COLLECT_B = "collect_b"
    SELECT_OP_AB = "select_op_ab"
    RESULT = "result"
    ERROR = "error"


class EventKind(Enum):
    CHARACTER = "character"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    QUIT = "quit"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> Event:
        return cls(EventKind.CHARACTER, char)

    @classmethod
    def backspace(cls) -> Event:
        return cls(EventKind.BACKSPACE)

    @classmethod
    def confirm(cls) -> Event:
        return cls(EventKind.CONFIRM)

    @classmethod
    def quit(cls) -> Event:
        return cls(EventKind.QUIT)


# States in which the user is typing into the buffer
EDITABLE_STATES = (
    SessionState.COLLECT_A,
    SessionState.SELECT_OP_A,
    SessionState.COLLECT_B,
    SessionState.SELECT_OP_AB,
)

INPUT_HINT = "comma-separated values, semicolon-separated rows"
CONFIRM_HINT = "Press enter to confirm, q to quit."


def _options_line(operations: tuple[Operation, ...]) -> str:
    return ", ".join(f"{op} ({OPERATION_LABELS[op]})" for op in operations)


def _invalid_selection_message(operations: tuple[Operation, ...]) -> str:
    names = ", ".join(f"'{op}'" for op in operations[:-1])
    return f"Invalid selection. Please choose {names}, or '{operations[-1]}'."


@dataclass
class Session:
    """
    The calculator session. There is exactly one per process.

    `input_buffer` holds the text being typed, or the message shown in the
    Result state and after an invalid selection.
    """
    state: SessionState = SessionState.COLLECT_A
    matrix_a: Optional[Matrix] = None
    matrix_b: Optional[Matrix] = None
    input_buffer: str = ""
    last_error: Optional[ParseError] = None
    quit_requested: bool = False

    # True while `input_buffer` shows a message instead of typed text
    _showing_message: bool = field(default=False, repr=False)

    def reset(self) -> None:
        """Back to the initial state, dropping both operands."""
        self.state = SessionState.COLLECT_A
        self.matrix_a = None
        self.matrix_b = None
        self.input_buffer = ""
        self.last_error = None
        self._showing_message = False
        logger.info("Session has been reset.")

    # =========================
    # Event handling
    # =========================
    def handle_event(self, event: Event) -> Session:
        """Apply one event. Returns self so events can be folded over a session."""
        old_state = self.state

        if event.kind == EventKind.QUIT:
            self.quit_requested = True
            logger.info("Quit requested.")
        elif event.kind == EventKind.CHARACTER:
            self._on_character(event.char)
        elif event.kind == EventKind.BACKSPACE:
            self._on_backspace()
        elif event.kind == EventKind.CONFIRM:
            self._on_confirm()

        if self.state != old_state:
            logger.debug(f"Transition {old_state} -> {self.state}")
        return self

    def feed(self, text: str) -> Session:
        """Type every character of `text`."""
        for char in text:
            self.handle_event(Event.character(char))
        return self

    def _on_character(self, char: str) -> None:
        if self.state not in EDITABLE_STATES:
            return
        if self._showing_message:
            self.input_buffer = ""
            self._showing_message = False
        self.input_buffer += char

    def _on_backspace(self) -> None:
        if self.state not in EDITABLE_STATES:
            return
        if self._showing_message:
            self.input_buffer = ""
            self._showing_message = False
            return
        self.input_buffer = self.input_buffer[:-1]

    def _on_confirm(self) -> None:
        if self.state == SessionState.COLLECT_A:
            self.matrix_a = self._parse_buffer(next_state=SessionState.SELECT_OP_A)
        elif self.state == SessionState.COLLECT_B:
            self.matrix_b = self._parse_buffer(next_state=SessionState.SELECT_OP_AB)
        elif self.state == SessionState.SELECT_OP_A:
            self._select_first_operation()
        elif self.state == SessionState.SELECT_OP_AB:
            self._select_second_operation()
        elif self.state in (SessionState.RESULT, SessionState.ERROR):
            self.reset()

    def _parse_buffer(self, next_state: SessionState) -> Optional[Matrix]:
        try:
            matrix = parse_matrix(self.input_buffer)
        except ParseError as e:
            logger.warning(f"Could not parse '{self.input_buffer}': {e}")
            self.last_error = e
            self.state = SessionState.ERROR
            return None

        self.input_buffer = ""
        self.state = next_state
        return matrix

    def _select_first_operation(self) -> None:
        operation = self._selected(UNARY_OPERATIONS + BINARY_OPERATIONS)
        if operation is None:
            return

        if operation.is_binary:
            self.input_buffer = ""
            self.state = SessionState.COLLECT_B
        else:
            self._show_result(run_unary(operation, self.matrix_a))

    def _select_second_operation(self) -> None:
        operation = self._selected(BINARY_OPERATIONS)
        if operation is None:
            return
        self._show_result(run_binary(operation, self.matrix_a, self.matrix_b))

    def _selected(self, allowed: tuple[Operation, ...]) -> Optional[Operation]:
        """Operation named by the buffer, or None after showing guidance."""
        operation = None if self._showing_message else Operation.from_keyword(self.input_buffer)
        if operation not in allowed:
            logger.info(f"Invalid selection '{self.input_buffer}' in {self.state}")
            self.input_buffer = _invalid_selection_message(allowed)
            self._showing_message = True
            return None
        return operation

    def _show_result(self, message: str) -> None:
        self.input_buffer = message
        self._showing_message = True
        self.state = SessionState.RESULT

    # =========================
    # Rendering
    # =========================
    def render(self) -> str:
        """The full text shown by the front end for the current state."""
        if self.state == SessionState.COLLECT_A:
            return (
                f"Enter a matrix or vector ({INPUT_HINT}):\n"
                f"{self.input_buffer}\n\n{CONFIRM_HINT}"
            )
        if self.state == SessionState.SELECT_OP_A:
            return (
                f"Matrix A:\n{self.matrix_a.format()}\n\n"
                f"Choose an operation: {_options_line(UNARY_OPERATIONS + BINARY_OPERATIONS)}\n"
                f"{self.input_buffer}\n\n{CONFIRM_HINT}"
            )
        if self.state == SessionState.COLLECT_B:
            return (
                f"Matrix A:\n{self.matrix_a.format()}\n\n"
                f"Enter a second matrix or vector ({INPUT_HINT}):\n"
                f"{self.input_buffer}\n\n{CONFIRM_HINT}"
            )
        if self.state == SessionState.SELECT_OP_AB:
            return (
                f"Matrix A:\n{self.matrix_a.format()}\n\n"
                f"Matrix B:\n{self.matrix_b.format()}\n\n"
                f"Choose an operation: {_options_line(BINARY_OPERATIONS)}\n"
                f"{self.input_buffer}\n\n{CONFIRM_HINT}"
            )
        if self.state == SessionState.RESULT:
            return f"{self.input_buffer}\n\nPress enter to continue..."
        if self.state == SessionState.ERROR:
            return f"Error: {self.last_error}\n\nPress enter to try again..."
        raise ValueError(f"Unknown state: {self.state}")
