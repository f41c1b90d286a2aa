"""Terminal helpers: screen clearing and single-key input."""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

CLEAR_SEQUENCE = "\033c\033[2J\033[H"
UNKNOWN_ESCAPE = "UnknownEscapeSeq"

_TILDE_KEYS = {
    "1": "Home",
    "2": "Insert",
    "3": "Delete",
    "4": "End",
    "5": "PageUp",
    "6": "PageDown",
}

_LETTER_KEYS = {
    "A": "ArrowUp",
    "B": "ArrowDown",
    "C": "ArrowRight",
    "D": "ArrowLeft",
    "H": "Home",
    "F": "End",
}

_SIMPLE_KEYS = {
    "\n": "Enter",
    "\r": "Enter",
    "\x7f": "Backspace",
    "\b": "Backspace",
    "\t": "Tab",
    " ": "Space",
}


def clear(out: TextIO | None = None) -> None:
    """Reset the terminal and move the cursor to the top-left corner."""
    out = sys.stdout if out is None else out
    out.write(CLEAR_SEQUENCE)
    out.flush()


def decode_key(read_char: Callable[[], str]) -> str:
    """Read one key press through ``read_char`` and return its name.

    ``read_char`` returns a single character, or an empty string at end of
    input. Raises EOFError if there is no key at all.
    """
    ch = read_char()
    if not ch:
        raise EOFError("no key to read")
    if ch == "\x1b":
        if read_char() != "[":
            return "Escape"
        code = read_char()
        if code and "0" <= code <= "6":
            read_char()  # trailing '~'
            return _TILDE_KEYS.get(code, UNKNOWN_ESCAPE)
        return _LETTER_KEYS.get(code, UNKNOWN_ESCAPE)
    return _SIMPLE_KEYS.get(ch, ch)


def _terminal_fd(stream: TextIO) -> int | None:
    if termios is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def get_button(stream: TextIO | None = None) -> str:
    """Wait for a single key press on ``stream`` (stdin by default).

    On a terminal, line buffering and echo are switched off for the read
    and restored afterwards.
    """
    stream = sys.stdin if stream is None else stream

    def read_char() -> str:
        return stream.read(1)

    fd = _terminal_fd(stream)
    if fd is None:
        return decode_key(read_char)

    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        return decode_key(read_char)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)