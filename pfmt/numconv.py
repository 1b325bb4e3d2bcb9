"""Integer to text conversions and digit counts."""

from __future__ import annotations

import operator

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def itoa(num: int) -> str:
    """Signed decimal text of ``num``."""
    return str(operator.index(num))


def utoa(num: int) -> str:
    """Decimal text of ``num`` taken as an unsigned 32-bit value."""
    return str(operator.index(num) & _UINT_MASK)


def xtoa(num: int, upper: bool) -> str:
    """Hexadecimal text of ``num`` taken as an unsigned 64-bit value."""
    value = operator.index(num) & _ULONG_MASK
    return format(value, "X" if upper else "x")


def _digit_count(n: int, base: int) -> int:
    length = 1
    while n >= base:
        n //= base
        length += 1
    return length


def ptr_len(n: int) -> int:
    """Number of hex digits in an unsigned 64-bit value."""
    return _digit_count(operator.index(n) & _ULONG_MASK, 16)


def unsigned_len(n: int) -> int:
    """Number of decimal digits in an unsigned 32-bit value."""
    return _digit_count(operator.index(n) & _UINT_MASK, 10)


def hex_len(n: int) -> int:
    """Number of hex digits in an unsigned 32-bit value."""
    return _digit_count(operator.index(n) & _UINT_MASK, 16)