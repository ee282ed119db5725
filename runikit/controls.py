"""Keyboard handling of the sudoku game: cursor, selection and entered numbers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from runikit.keys import Key

EV_KEY = 0x01
EV_REL = 0x02
BTN_LEFT = 0x110
BTN_RIGHT = 0x111
BTN_MIDDLE = 0x112
REL_X = 0x00
REL_Y = 0x01

SHORT_STEP = 1
LONG_STEP = 20
CELL = 75
SELECT_LIMIT = 600

IDLE = 200
MOVED = 100
CLEAR = 0
HINT = int(Key.H)
SOLVE = int(Key.O)

_DIGITS = {Key[f"KEY_{n}"]: n for n in range(1, 10)}

# key: (axis, step); axis is "x" or "y"
_CURSOR_MOVES = {
    Key.UP: ("y", -SHORT_STEP),
    Key.DOWN: ("y", SHORT_STEP),
    Key.LEFT: ("x", -SHORT_STEP),
    Key.RIGHT: ("x", SHORT_STEP),
    Key.PAGEUP: ("y", -LONG_STEP),
    Key.PAGEDOWN: ("y", LONG_STEP),
    Key.HOME: ("x", -LONG_STEP),
    Key.END: ("x", LONG_STEP),
}

_SELECT_MOVES = {
    Key.W: ("y", -CELL),
    Key.S: ("y", CELL),
    Key.A: ("x", -CELL),
    Key.D: ("x", CELL),
}


@dataclass(frozen=True)
class InputEvent:
    """An event from an input device."""

    event_type: int
    code: int
    value: int


@dataclass
class Controller:
    """State driven by key presses.

    ``on_cursor(x, y)`` is called after the cursor moves and
    ``on_select(old_x, old_y, new_x, new_y)`` after the selection moves.
    """

    width: int = 1280
    height: int = 800
    cursor_x: int = 900
    cursor_y: int = 500
    select_x: int = 0
    select_y: int = 0
    input_number: int = IDLE
    on_cursor: Callable[[int, int], None] | None = None
    on_select: Callable[[int, int, int, int], None] | None = None

    def handle(self, event: InputEvent) -> None:
        """Apply a key press; releases, repeats and other events are ignored."""
        if event.event_type != EV_KEY or event.value != 1:
            return
        code = event.code
        if code in _CURSOR_MOVES:
            self._move_cursor(*_CURSOR_MOVES[code])
        elif code in _SELECT_MOVES:
            self._move_select(*_SELECT_MOVES[code])
            self.input_number = MOVED
        elif code == Key.H:
            self.input_number = HINT
        elif code == Key.O:
            self.input_number = SOLVE
        elif code in _DIGITS:
            self.input_number = _DIGITS[code]
        elif code == Key.BACKSPACE:
            self.input_number = CLEAR

    def take_input(self) -> int:
        """Return the pending input and reset it to idle."""
        value = self.input_number
        self.input_number = IDLE
        return value

    def _move_cursor(self, axis: str, step: int) -> None:
        position = self.cursor_x if axis == "x" else self.cursor_y
        limit = self.width if axis == "x" else self.height
        magnitude = abs(step)
        if step < 0 and position <= magnitude:
            return
        if step > 0 and position >= limit - magnitude:
            return
        if axis == "x":
            self.cursor_x += step
        else:
            self.cursor_y += step
        if self.on_cursor is not None:
            self.on_cursor(self.cursor_x, self.cursor_y)

    def _move_select(self, axis: str, step: int) -> None:
        position = self.select_x if axis == "x" else self.select_y
        if step < 0 and position < CELL:
            return
        if step > 0 and position >= SELECT_LIMIT:
            return
        old_x, old_y = self.select_x, self.select_y
        if axis == "x":
            self.select_x += step
        else:
            self.select_y += step
        if self.on_select is not None:
            self.on_select(old_x, old_y, self.select_x, self.select_y)