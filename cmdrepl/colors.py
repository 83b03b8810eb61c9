"""ANSI colour helpers for terminal output."""

from enum import IntEnum

__all__ = ["Color", "add_color"]


class Color(IntEnum):
    """ANSI foreground colour codes."""

    NONE = 0
    RED = 31
    GREEN = 32
    BLUE = 34


def add_color(value: str, color: Color) -> str:
    """Wrap ``value`` in a bold ANSI colour sequence and a reset."""
    return f"\033[1;{int(color)}m{value}\033[0m"