"""Interactive command processor: parsing, dispatch, validation and line editing."""

from __future__ import annotations

import re
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

from .colors import Color, add_color
from .history import History
from .keyboard import InputType, Keyboard
from .rules import Rule

__all__ = [
    "CommandError",
    "ParseError",
    "CommandProcessor",
    "parse_statement",
]

Handler = Callable[[List[str]], object]

_COMMAND_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_CLEAR_SEQUENCE = "\033[2J\033[H"
_QUOTES = "\"'"


class CommandError(ValueError):
    """Raised for invalid command definitions, unknown commands or bad arguments."""


class ParseError(ValueError):
    """Raised when a statement cannot be split into a command and arguments."""


def parse_statement(text: str) -> Tuple[str, List[str]]:
    """Split ``text`` into a command and its arguments.

    Words are separated by spaces; single or double quotes group a phrase into
    one argument. An unterminated quote raises :class:`ParseError`. Empty input
    gives an empty command with no arguments.
    """
    tokens: List[str] = []
    current: List[str] = []
    chars = iter(text)
    for char in chars:
        if char in _QUOTES:
            quoted: List[str] = []
            for inner in chars:
                if inner == char:
                    break
                quoted.append(inner)
            else:
                raise ParseError(f"unterminated quote in {text!r}")
            tokens.append("".join(quoted))
        elif char == " ":
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


class CommandProcessor:
    """A read-eval loop dispatching named commands to registered handlers."""

    _BUILTINS = (
        ("help", "lists all commands and their description"),
        ("clear", "clear screen"),
        ("exit", "exit program"),
        ("history", "print history"),
    )

    def __init__(
        self,
        name: str,
        keyboard: Optional[Keyboard] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.out = out if out is not None else sys.stdout
        self.history = History()
        self.running = True
        self._handlers: Dict[str, Handler] = {}
        self._descriptions: Dict[str, str] = {}
        self._rules: Dict[str, List[Rule]] = {}

    def add(
        self,
        command: str,
        processor: Handler,
        description: str = "",
        rules: Optional[Sequence[Rule]] = None,
    ) -> None:
        """Register ``processor`` under ``command``, optionally with argument rules.

        A command starts with a letter and holds only letters, digits and '-'.
        """
        if not _COMMAND_PATTERN.fullmatch(command):
            raise CommandError("invalid argument provided for command")
        if command in self._handlers:
            raise CommandError("Command already exists")
        self._handlers[command] = processor
        self._descriptions[command] = description
        if rules is not None:
            self._rules[command] = list(rules)

    def help(self) -> None:
        """Write every command and its description, built-ins first."""
        entries = list(self._BUILTINS) + sorted(self._descriptions.items())
        lines = (f"\t{add_color(cmd, Color.BLUE)}: {desc}" for cmd, desc in entries)
        self.out.write("\n".join(lines) + "\n")
        self.out.flush()

    def _clear_screen(self) -> None:
        self.out.write(_CLEAR_SEQUENCE * 2)
        self.out.flush()

    def _validate(self, command: str, args: List[str]) -> None:
        rules = self._rules.get(command)
        if rules is None:
            return
        message = ""
        for rule in rules:
            result = rule.apply(args)
            message += result.message
            if not result.valid:
                raise CommandError(message)

    def process(self, command: str, args: Sequence[str] = ()) -> None:
        """Run ``command`` with ``args``, handling the built-in commands."""
        args = list(args)
        if command == "":
            return
        if command == "help":
            self.help()
            return
        if command == "exit":
            self.running = False
            return
        if command == "clear":
            self._clear_screen()
            return
        if command == "history":
            self.out.write(self.history.as_text())
            self.out.flush()
            return
        self._validate(command, args)
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandError(f"Command {command} not found")
        handler(args)

    def read_line(self) -> str:
        """Read one non-empty line from the keyboard with editing and history."""
        current = ""
        pos = 0
        prompt = add_color(f"{self.name} => ", Color.GREEN)
        scratch = History()
        scratch.add_front(current)

        while True:
            self.out.write("\r\033[K" + prompt + current)
            self.out.write("\033[D" * (len(current) - pos))
            self.out.flush()

            key = self.keyboard.read_key()
            kind = key.type
            if kind is InputType.ASCII:
                current = current[:pos] + key.char + current[pos:]
                scratch.edit(current)
                pos += 1
            elif kind is InputType.BACKSPACE and current and pos > 0:
                current = current[: pos - 1] + current[pos:]
                scratch.edit(current)
                pos -= 1
            elif kind is InputType.ENTER:
                self.out.write("\n")
                pos = 0
                if current:
                    return current
            elif kind is InputType.ARROW_LEFT and pos > 0:
                pos -= 1
            elif kind is InputType.ARROW_RIGHT and pos < len(current):
                pos += 1
            elif kind is InputType.ARROW_UP:
                earlier = scratch.previous()
                if earlier is not None:
                    current = earlier
                    pos = len(current)
                else:
                    stored = self.history.previous()
                    if stored is not None:
                        current = stored
                        pos = len(current)
                        scratch.add_front(current)
            elif kind is InputType.ARROW_DOWN:
                later = scratch.next()
                if later is not None:
                    current = later
                    pos = len(current)

    def _report(self, message: str) -> None:
        self.out.write(add_color(message, Color.RED) + "\n")
        self.out.flush()

    def run(self) -> None:
        """Loop reading and processing statements until ``exit`` or end of input."""
        self._clear_screen()
        while self.running:
            try:
                with self.keyboard.raw_mode():
                    line = self.read_line()
            except EOFError:
                break
            self.history.add_back(line)
            try:
                command, args = parse_statement(line)
            except ParseError:
                self._report("Invalid input")
                continue
            try:
                self.process(command, args)
                self.out.write("\n")
                self.out.flush()
            except Exception as exc:  # noqa: BLE001 - report any handler failure
                self._report(str(exc) or "An unknown error occured")