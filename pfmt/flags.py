"""Conversion flags and the parser for a single ``%`` directive."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_TYPES = frozenset("csdiuxXp%")
_SPECS = frozenset("-0.*# +")
_DIGITS = frozenset("0123456789")


class Platform(enum.Enum):
    """Target conventions that change how some conversions are rendered."""

    LINUX = "linux"
    APPLE = "apple"

    @property
    def null_pointer(self) -> str:
        """Text printed by ``%p`` for a null pointer."""
        return "(nil)" if self is Platform.LINUX else "0x0"


@dataclass
class Flags:
    """State collected while reading one conversion directive."""

    spec: str = ""
    width: int = 0
    left: bool = False
    zero: bool = False
    star: bool = False
    precision: int = -1
    hash: bool = False
    space: bool = False
    plus: bool = False

    def set_left(self) -> None:
        """Switch to left alignment; this cancels zero padding."""
        self.left = True
        self.zero = False

    def add_digit(self, c: str) -> None:
        """Append one decimal digit to the field width."""
        if c not in _DIGITS:
            raise ValueError(f"not a decimal digit: {c!r}")
        if self.star:
            self.width = 0
        self.width = self.width * 10 + int(c)

    def set_star_width(self, value: int) -> None:
        """Take the width from an argument; a negative one means left-aligned."""
        self.star = True
        self.width = value
        if self.width < 0:
            self.left = True
            self.width = -self.width


def is_type(c: str) -> bool:
    """Whether ``c`` is a conversion specifier character."""
    return c in _TYPES


def is_spec(c: str) -> bool:
    """Whether ``c`` is a flag, precision or star character."""
    return c in _SPECS


def is_flag(c: str) -> bool:
    """Whether ``c`` may appear inside a conversion directive."""
    return is_type(c) or c in _DIGITS or is_spec(c)


def _char_at(fmt: str, index: int) -> str:
    return fmt[index] if 0 <= index < len(fmt) else ""


def _next_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if not isinstance(value, int):
        raise TypeError(f"'*' expects an int argument, got {type(value).__name__}")
    return value


def _parse_precision(fmt: str, pos: int, args: Iterator[object]) -> tuple[int, int]:
    """Read a precision after the '.' at ``pos``; return (index, precision)."""
    i = pos + 1
    if _char_at(fmt, i) == "*":
        return i, _next_int(args)
    precision = 0
    while (c := _char_at(fmt, i)) in _DIGITS and c:
        precision = precision * 10 + int(c)
        i += 1
    return i, precision


def parse_flags(fmt: str, pos: int, args: Iterable[object]) -> tuple[int, Flags]:
    """Parse the directive whose ``%`` sits at ``pos``.

    Star arguments are drawn from ``args``; pass an iterator to have the
    consumption visible to the caller. Returns the index where parsing
    stopped (the specifier, when one was found) and the collected flags.
    A star right after the '.' supplies the precision and, in the same
    step, a field width taken from the following argument.
    """
    args = iter(args)
    flags = Flags()
    i = pos
    while True:
        i += 1
        c = _char_at(fmt, i)
        if not c or not is_flag(c):
            break
        if c == "-":
            flags.set_left()
        if c == "#":
            flags.hash = True
        if c == " ":
            flags.space = True
        if c == "+":
            flags.plus = True
        if c == "0" and not flags.left and flags.width == 0:
            flags.zero = True
        if c == ".":
            i, flags.precision = _parse_precision(fmt, i, args)
            c = _char_at(fmt, i)
        if c == "*":
            flags.set_star_width(_next_int(args))
        if c in _DIGITS and c:
            flags.add_digit(c)
        if is_type(c):
            flags.spec = c
            break
    return min(i, len(fmt)), flags