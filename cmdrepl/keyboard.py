"""Raw keyboard input from a terminal stream."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]

__all__ = ["InputType", "Key", "Keyboard"]


class InputType(Enum):
    """Kinds of key press recognised by :class:`Keyboard`."""

    ASCII = auto()
    TAB = auto()
    BACKSPACE = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ENTER = auto()
    INVALID_INPUT = auto()


@dataclass(frozen=True)
class Key:
    """A key press; ``char`` holds the character for ASCII input only."""

    type: InputType
    char: str = ""


_ARROWS = {
    "A": InputType.ARROW_UP,
    "B": InputType.ARROW_DOWN,
    "C": InputType.ARROW_RIGHT,
    "D": InputType.ARROW_LEFT,
}


class Keyboard:
    """Reads single key presses, switching the terminal to raw mode on demand."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.enabled = False
        self._saved_attrs: Optional[list] = None

    def _fileno(self) -> Optional[int]:
        if termios is None:
            return None
        try:
            if not self.stream.isatty():
                return None
            return self.stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def enable(self) -> None:
        """Turn off line buffering and echo on the terminal."""
        if not self.enabled:
            fd = self._fileno()
            if fd is not None:
                self._saved_attrs = termios.tcgetattr(fd)
                raw = termios.tcgetattr(fd)
                raw[3] &= ~(termios.ICANON | termios.ECHO)
                termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
        self.enabled = True

    def disable(self) -> None:
        """Restore the terminal settings saved by :meth:`enable`."""
        fd = self._fileno()
        if fd is not None and self._saved_attrs is not None:
            termios.tcsetattr(fd, termios.TCSAFLUSH, self._saved_attrs)
        self.enabled = False

    @contextmanager
    def raw_mode(self) -> Iterator["Keyboard"]:
        """Keep the terminal in raw mode for the duration of the block."""
        self.enable()
        try:
            yield self
        finally:
            self.disable()

    def _read_char(self) -> str:
        char = self.stream.read(1)
        if not char:
            raise EOFError("end of keyboard input")
        return char

    def read_key(self) -> Key:
        """Block until a recognised key is pressed and return it."""
        while True:
            char = self._read_char()
            if char == "\033":
                first = self._read_char()
                second = self._read_char()
                if first == "[" and second in _ARROWS:
                    return Key(_ARROWS[second])
                continue
            if char == "\t":
                return Key(InputType.TAB)
            if char == "\n":
                return Key(InputType.ENTER)
            if char in ("\x7f", "\b"):
                return Key(InputType.BACKSPACE)
            return Key(InputType.ASCII, char)