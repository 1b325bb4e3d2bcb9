"""String helpers with C-library style semantics."""

from __future__ import annotations

import operator

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value &= (1 << 32) - 1
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    i = 0
    length = len(s)
    while i < length and s[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    total = 0
    while i < length and s[i] in _DIGITS:
        total = total * 10 + int(s[i])
        i += 1
    return _wrap_int32(sign * total)


def itoa(n: int) -> str:
    """Decimal text of ``n`` taken as a signed 32-bit value."""
    return str(_wrap_int32(operator.index(n)))


def split(s: str | None, sep: str) -> list[str]:
    """Words of ``s`` separated by runs of the character ``sep``."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if s is None:
        return []
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Strip characters in ``charset`` from both ends.

    Each end is trimmed no further than the middle of the string, so a
    long run on one side may be only partly removed.
    """
    length = len(s)
    half = length // 2
    start = 0
    while start <= half and start < length and s[start] in charset:
        start += 1
    end = length - 1
    while end >= half and s[end] in charset:
        end -= 1
    if start > end:
        return ""
    return s[start : end + 1]


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if len(s) < start:
        return ""
    return s[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle matches at 0; no match gives ``None``.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenation of two strings; ``None`` when both are missing."""
    if s1 is None and s2 is None:
        return None
    if s1 is None or s2 is None:
        raise TypeError("cannot join a string with None")
    return s1 + s2