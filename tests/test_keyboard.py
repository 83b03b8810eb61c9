import io

import pytest

from cmdrepl.keyboard import InputType, Key, Keyboard


def keys(text, count):
    keyboard = Keyboard(io.StringIO(text))
    return [keyboard.read_key() for _ in range(count)]


@pytest.mark.parametrize(
    "sequence, expected",
    [
        ("\033[A", InputType.ARROW_UP),
        ("\033[B", InputType.ARROW_DOWN),
        ("\033[C", InputType.ARROW_RIGHT),
        ("\033[D", InputType.ARROW_LEFT),
        ("\t", InputType.TAB),
        ("\n", InputType.ENTER),
        ("\x7f", InputType.BACKSPACE),
        ("\b", InputType.BACKSPACE),
    ],
)
def test_special_keys(sequence, expected):
    assert keys(sequence, 1) == [Key(expected)]


def test_ascii_keys_carry_character():
    assert keys("ab", 2) == [Key(InputType.ASCII, "a"), Key(InputType.ASCII, "b")]


def test_unknown_escape_sequence_is_skipped():
    assert keys("\033[Zx", 1) == [Key(InputType.ASCII, "x")]


def test_mixed_sequence():
    result = keys("h\033[D\n", 3)
    assert [k.type for k in result] == [
        InputType.ASCII,
        InputType.ARROW_LEFT,
        InputType.ENTER,
    ]


def test_end_of_input_raises():
    keyboard = Keyboard(io.StringIO(""))
    with pytest.raises(EOFError):
        keyboard.read_key()


def test_truncated_escape_raises():
    keyboard = Keyboard(io.StringIO("\033["))
    with pytest.raises(EOFError):
        keyboard.read_key()


def test_raw_mode_toggles_enabled():
    keyboard = Keyboard(io.StringIO("q"))
    assert keyboard.enabled is False
    with keyboard.raw_mode() as active:
        assert active.enabled is True
        assert active.read_key() == Key(InputType.ASCII, "q")
    assert keyboard.enabled is False


def test_enable_disable_on_non_terminal():
    keyboard = Keyboard(io.StringIO())
    keyboard.enable()
    assert keyboard.enabled is True
    keyboard.disable()
    assert keyboard.enabled is False