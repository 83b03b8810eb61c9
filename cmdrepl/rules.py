"""Validation rules applied to command arguments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Sequence

__all__ = ["RuleResult", "Rule", "ArgCountRule", "UserRule"]


class RuleResult(NamedTuple):
    """Outcome of applying a rule: validity and an accompanying message."""

    valid: bool
    message: str = ""


class Rule(ABC):
    """A check applied to the arguments of a command."""

    @abstractmethod
    def apply(self, args: Sequence[str]) -> RuleResult:
        """Validate ``args`` and return the result."""


class ArgCountRule(Rule):
    """Require the number of arguments to lie within an inclusive range."""

    def __init__(self, minimum: int = 1, maximum: int = 10) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def apply(self, args: Sequence[str]) -> RuleResult:
        count = len(args)
        if self.minimum <= count <= self.maximum:
            return RuleResult(True, "")
        return RuleResult(
            False,
            f"Number of arguments should be between {self.minimum} and "
            f"{self.maximum} But got {count}",
        )


class UserRule(Rule):
    """A rule backed by a caller-supplied function returning ``(valid, message)``."""

    def __init__(self, func: Callable[[Sequence[str]], tuple[bool, str]]) -> None:
        self.func = func

    def apply(self, args: Sequence[str]) -> RuleResult:
        valid, message = self.func(args)
        return RuleResult(bool(valid), message)