"""Curses keyboard input."""

from __future__ import annotations

import curses
from typing import Protocol

from term_snake.keys import Key

# curses key codes, with WASD aliases for terminals that mangle arrows.
_KEY_CODES: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord("w"): Key.UP,
    ord("s"): Key.DOWN,
    ord("a"): Key.LEFT,
    ord("d"): Key.RIGHT,
    27: Key.ESCAPE,
    32: Key.SPACE,
}


class InputSource(Protocol):
    def poll(self) -> Key: ...


def decode_key(code: int) -> Key:
    """Map a curses ``getch`` code to a :class:`Key`."""
    return _KEY_CODES.get(code, Key.NONE)


class CursesInput:
    """Non-blocking keyboard poll over a curses window.

    ``poll`` drains every pending key code and returns the most recent one
    the game understands, or :attr:`Key.NONE` when nothing was pressed.
    An ESC anywhere in the drain wins over keys queued after it.
    """

    def __init__(self, window: curses.window) -> None:
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def poll(self) -> Key:
        latest = Key.NONE
        while True:
            code = self.window.getch()
            if code == -1:
                return latest
            key = decode_key(code)
            if key is not Key.NONE and latest is not Key.ESCAPE:
                latest = key


def setup_terminal() -> None:
    """Hide the cursor and shorten the ESC delay so quitting feels instant."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    curses.set_escdelay(25)
