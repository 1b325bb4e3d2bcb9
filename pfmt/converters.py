"""Rendering of single conversions (%c, %s, %d/%i, %u, %x/%X, %p) to text."""

from __future__ import annotations

import operator

from pfmt.flags import Flags, Platform
from pfmt.numconv import itoa, ptr_len, utoa, xtoa

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _as_int32(n: int) -> int:
    value = operator.index(n) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def pad_width(total_width: int, size: int, zero: bool) -> str:
    """Padding that fills ``total_width`` after ``size`` characters of content."""
    return ("0" if zero else " ") * max(0, total_width - size)


def format_char(c: str | int, flags: Flags) -> str:
    """Render a single character, padded to the field width."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    else:
        char = chr(operator.index(c) & 0xFF)
    padding = pad_width(flags.width, 1, flags.zero)
    return char + padding if flags.left else padding + char


def _truncated(s: str, precision: int) -> str:
    if precision >= 0:
        return pad_width(precision, len(s), False) + s[:precision]
    return s


def format_str(s: str | None, flags: Flags, platform: Platform) -> str:
    """Render a string; ``None`` is shown as ``(null)``."""
    if s is not None and not isinstance(s, str):
        raise TypeError(f"'s' expects a str or None, got {type(s).__name__}")
    precision = flags.precision
    if s is None and platform is Platform.LINUX and 0 <= precision < 6:
        return pad_width(flags.width, 0, False)
    text = "(null)" if s is None else s.split("\0", 1)[0]
    if precision >= 0 and precision > len(text):
        precision = len(text)
    body = _truncated(text, precision)
    shown = precision if precision >= 0 else len(text)
    padding = pad_width(flags.width, shown, False)
    return body + padding if flags.left else padding + body


def _signed_digits(digits: str, n: int, flags: Flags, precision: int) -> str:
    sign = ""
    if n < 0:
        if not flags.zero or precision >= 0:
            sign = "-"
    elif flags.plus and not flags.zero:
        sign = "+"
    elif flags.space and not flags.zero:
        sign = " "
    zeros = pad_width(precision - 1, len(digits) - 1, True) if precision >= 0 else ""
    return sign + zeros + digits


def _leading_sign(n: int, flags: Flags, width: int) -> tuple[str, int]:
    if n < 0 and flags.precision == -1:
        return "-", width - 1
    if flags.plus:
        return "+", width
    if flags.space:
        return " ", width - 1
    return "", width


def format_int(n: int, flags: Flags) -> str:
    """Render a signed 32-bit integer in decimal."""
    n = _as_int32(n)
    width = flags.width
    precision = flags.precision
    if n < 0 and not flags.zero:
        width -= 1
    if precision == 0 and n == 0:
        return pad_width(width, 0, False)
    digits = itoa(abs(n))
    parts: list[str] = []
    if flags.zero:
        sign, width = _leading_sign(n, flags, width)
        parts.append(sign)
    if flags.left:
        parts.append(_signed_digits(digits, n, flags, precision))
    if 0 <= precision < len(digits):
        precision = len(digits)
    if precision >= 0:
        width -= precision
        if n < 0 and not flags.left:
            width -= 1
        parts.append(pad_width(width, 0, False))
    else:
        parts.append(
            pad_width(width - int(flags.plus) - int(flags.space), len(digits), flags.zero)
        )
    if not flags.left:
        parts.append(_signed_digits(digits, n, flags, precision))
    return "".join(parts)


def _zero_extended(digits: str, precision: int) -> str:
    if precision >= 0:
        return pad_width(precision - 1, len(digits) - 1, True) + digits
    return digits


def format_unsigned(n: int, flags: Flags) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    value = operator.index(n) & _UINT_MASK
    width = flags.width
    precision = flags.precision
    if precision == 0 and value == 0:
        return pad_width(width, 0, False)
    digits = utoa(value)
    parts: list[str] = []
    if flags.left:
        parts.append(_zero_extended(digits, precision))
    if 0 <= precision < len(digits):
        precision = len(digits)
    if precision >= 0:
        parts.append(pad_width(width - precision, 0, False))
    else:
        parts.append(pad_width(width, len(digits), flags.zero))
    if not flags.left:
        parts.append(_zero_extended(digits, precision))
    return "".join(parts)


def _hex_prefix(upper: bool) -> str:
    return "0X" if upper else "0x"


def _hex_body(digits: str, n: int, upper: bool, flags: Flags, precision: int) -> str:
    prefix = _hex_prefix(upper) if not flags.zero and flags.hash and n != 0 else ""
    return prefix + _zero_extended(digits, precision)


def format_hex(n: int, upper: bool, flags: Flags) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    value = operator.index(n) & _UINT_MASK
    width = flags.width
    precision = flags.precision
    if precision == 0 and value == 0:
        return pad_width(width, 0, False)
    digits = xtoa(value, upper)
    parts: list[str] = []
    if flags.zero and flags.hash and value != 0:
        parts.append(_hex_prefix(upper))
    if flags.left:
        parts.append(_hex_body(digits, value, upper, flags, precision))
    if 0 <= precision < len(digits):
        precision = len(digits)
    if precision >= 0:
        parts.append(pad_width(width - precision, 0, False))
    else:
        parts.append(pad_width(width, len(digits) + int(flags.hash) * 2, flags.zero))
    if not flags.left:
        parts.append(_hex_body(digits, value, upper, flags, precision))
    return "".join(parts)


def format_ptr(n: int, flags: Flags, platform: Platform) -> str:
    """Render a pointer value as ``0x`` followed by lower-case hex digits."""
    value = operator.index(n) & _ULONG_MASK
    null = platform.null_pointer
    width = flags.width
    if value == 0:
        width -= len(null) - 1
        body = null
    else:
        width -= 2
        body = "0x" + xtoa(value, False)
    padding = pad_width(width, ptr_len(value), False)
    return body + padding if flags.left else padding + body