# cmdrepl

`cmdrepl` lets you build a small interactive shell for your own program.
You register named commands with a handler function and an optional
description, and `cmdrepl` takes care of the prompt, line editing, quoting,
history and error reporting.

## Features

- A coloured prompt showing the processor's name (`name => `).
- Line editing with the terminal in raw mode: left/right arrows move the
  cursor, backspace deletes, up/down arrows walk through earlier input.
- Arguments split on spaces; single or double quotes group words into one
  argument (`send 'hello world'`).
- Built-in commands: `help`, `clear`, `exit` and `history`.
- Argument validation through rules: `ArgCountRule` checks the number of
  arguments, `UserRule` wraps any function of your own.
- Errors raised by a command are printed in red and the session carries on.

## Usage

```python
import sys

from cmdrepl.keyboard import Keyboard
from cmdrepl.processor import CommandProcessor
from cmdrepl.rules import ArgCountRule, UserRule


def greet(args):
    print("Hello, " + " ".join(args))


def first_is_number(args):
    ok = bool(args) and args[0].isdigit()
    return ok, "" if ok else "first argument must be a number"


def repeat(args):
    for _ in range(int(args[0])):
        print(" ".join(args[1:]))


repl = CommandProcessor("demo", Keyboard(sys.stdin), sys.stdout)
repl.add("greet", greet, "greet somebody by name", [ArgCountRule(1, 3)])
repl.add("repeat", repeat, "repeat N text...", [ArgCountRule(2, 10), UserRule(first_is_number)])
repl.run()
```

`CommandProcessor(name, keyboard=None, out=None)` reads keys from a
`Keyboard` (standard input by default) and writes to `out` (standard output
by default). `run()` loops until the `exit` command is given or the input
ends.

Command names must start with a letter and contain only letters, digits
and `-`. Adding an invalid name, or a name that is already registered,
raises `CommandError`. Processing a command that was never registered also
raises `CommandError`.

Rules run in the order they were given. When one fails, the command is not
run and a `CommandError` is raised whose message is the messages of the
rules applied so far, joined together; the interactive loop prints it in
red. `ArgCountRule(minimum=1, maximum=10)` accepts an inclusive range of
argument counts.

`help()` lists the built-in commands first, then the registered commands
in alphabetical order, each with its description.

### Parsing without a terminal

`parse_statement` splits a line into a command and its arguments, the same
way the interactive prompt does:

```python
from cmdrepl.processor import parse_statement

parse_statement("send 'hello world' again")
# ("send", ["hello world", "again"])
```

An empty line gives `("", [])`. An unterminated quote raises `ParseError`.

### Keyboard

`Keyboard.read_key()` returns a `Key` whose `type` is an `InputType`
(`ASCII`, `TAB`, `BACKSPACE`, the four arrows or `ENTER`) and whose `char`
holds the character for `ASCII` keys. It raises `EOFError` at the end of
input. `Keyboard.raw_mode()` is a context manager that switches off line
buffering and echo for the duration of a block; when the stream is not a
terminal, raw mode is skipped.

### History

`History` keeps the lines entered so far and a cursor into them:

```python
from cmdrepl.history import History

history = History()
history.add_back("first")
history.add_back("second")
history.previous()   # "second"
history.previous()   # "first"
history.previous()   # None
print(history.as_text())
```

### Colours

`add_color` wraps text in the bold ANSI escape for a `Color`:

```python
from cmdrepl.colors import Color, add_color

print(add_color("done", Color.GREEN))
```

## Limitations

- There is no command-line program; `cmdrepl` is a library you call from
  your own code.
- The tab key is recognised but does nothing: there is no command or
  argument completion.
- History lives in memory only and is lost when the session ends.

## Requirements

Python 3.10 or later on a POSIX system; the interactive prompt switches the
terminal into raw mode through `termios`. No third-party dependencies.