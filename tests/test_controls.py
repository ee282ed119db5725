import pytest

from runikit.controls import (
    CELL,
    EV_KEY,
    EV_REL,
    IDLE,
    LONG_STEP,
    MOVED,
    SELECT_LIMIT,
    SHORT_STEP,
    Controller,
    InputEvent,
)
from runikit.keys import Key


def press(key):
    return InputEvent(EV_KEY, int(key), 1)


def test_arrow_moves_cursor_one_step():
    c = Controller()
    y = c.cursor_y
    c.handle(press(Key.DOWN))
    assert c.cursor_y == y + SHORT_STEP
    c.handle(press(Key.UP))
    assert c.cursor_y == y


def test_page_and_home_move_long_step():
    c = Controller()
    x, y = c.cursor_x, c.cursor_y
    c.handle(press(Key.PAGEDOWN))
    c.handle(press(Key.END))
    assert (c.cursor_x, c.cursor_y) == (x + LONG_STEP, y + LONG_STEP)
    c.handle(press(Key.HOME))
    c.handle(press(Key.PAGEUP))
    assert (c.cursor_x, c.cursor_y) == (x, y)


def test_cursor_stays_inside_screen():
    c = Controller(width=100, height=100, cursor_x=1, cursor_y=99)
    c.handle(press(Key.LEFT))
    c.handle(press(Key.DOWN))
    assert (c.cursor_x, c.cursor_y) == (1, 99)


def test_cursor_callback_receives_position():
    moves = []
    c = Controller(on_cursor=lambda x, y: moves.append((x, y)))
    c.handle(press(Key.RIGHT))
    assert moves == [(c.cursor_x, c.cursor_y)]


def test_select_moves_by_cell_and_marks_input():
    c = Controller()
    c.handle(press(Key.S))
    c.handle(press(Key.D))
    assert (c.select_x, c.select_y) == (CELL, CELL)
    assert c.input_number == MOVED


def test_select_stays_on_board():
    c = Controller(select_x=0, select_y=SELECT_LIMIT)
    c.handle(press(Key.A))
    c.handle(press(Key.S))
    assert (c.select_x, c.select_y) == (0, SELECT_LIMIT)
    assert c.input_number == MOVED


def test_select_callback_gets_old_and_new():
    calls = []
    c = Controller(on_select=lambda *a: calls.append(a))
    c.handle(press(Key.S))
    c.handle(press(Key.W))
    assert calls == [(0, 0, 0, CELL), (0, CELL, 0, 0)]


@pytest.mark.parametrize("n", range(1, 10))
def test_digit_keys(n):
    c = Controller()
    c.handle(press(Key[f"KEY_{n}"]))
    assert c.input_number == n


def test_special_keys():
    c = Controller()
    c.handle(press(Key.H))
    assert c.input_number == int(Key.H)
    c.handle(press(Key.O))
    assert c.input_number == int(Key.O)
    c.handle(press(Key.BACKSPACE))
    assert c.input_number == 0


def test_release_and_other_events_ignored():
    c = Controller()
    c.handle(InputEvent(EV_KEY, int(Key.KEY_5), 0))
    c.handle(InputEvent(EV_REL, int(Key.KEY_5), 1))
    c.handle(press(Key.ESC))
    assert c.input_number == IDLE


def test_take_input_resets():
    c = Controller()
    c.handle(press(Key.KEY_7))
    assert c.take_input() == 7
    assert c.take_input() == IDLE