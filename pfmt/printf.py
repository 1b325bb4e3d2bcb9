"""Formatting of whole format strings and writing the result."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from pfmt.converters import (
    format_char,
    format_hex,
    format_int,
    format_ptr,
    format_str,
    format_unsigned,
)
from pfmt.flags import Flags, Platform, parse_flags


def _next_arg(args: Iterator[object], spec: str) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def format_arg(
    spec: str,
    args: Iterable[object],
    flags: Flags,
    platform: Platform = Platform.LINUX,
) -> str:
    """Render one conversion, drawing its value from ``args`` when it needs one."""
    args = iter(args)
    if spec == "%":
        return format_char("%", flags)
    if spec not in "csdiuxXp" or len(spec) != 1:
        raise ValueError(f"unknown conversion specifier: {spec!r}")
    value = _next_arg(args, spec)
    if spec == "c":
        return format_char(value, flags)  # type: ignore[arg-type]
    if spec == "s":
        return format_str(value, flags, platform)  # type: ignore[arg-type]
    if spec in "di":
        return format_int(value, flags)  # type: ignore[arg-type]
    if spec == "x":
        return format_hex(value, False, flags)  # type: ignore[arg-type]
    if spec == "X":
        return format_hex(value, True, flags)  # type: ignore[arg-type]
    if spec == "u":
        return format_unsigned(value, flags)  # type: ignore[arg-type]
    return format_ptr(0 if value is None else value, flags, platform)  # type: ignore[arg-type]


def render(fmt: str | None, *args: object, platform: Platform = Platform.LINUX) -> str:
    """Return the text that ``fmt`` produces with ``args``.

    Text after a NUL character is ignored. A directive without a valid
    specifier is written out literally on Linux; elsewhere the character
    where parsing stopped is printed with the collected width.
    """
    if fmt is None:
        return ""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    arg_iter = iter(args)
    out: list[str] = []
    length = len(fmt)
    i = 0
    while i < length:
        c = fmt[i]
        if c == "%" and i + 1 < length:
            end, flags = parse_flags(fmt, i, arg_iter)
            if flags.spec:
                out.append(format_arg(flags.spec, arg_iter, flags, platform))
                i = end
            elif platform is Platform.LINUX:
                out.append(c)
            elif end < length:
                out.append(format_char(fmt[end], flags))
                i = end
            else:
                break
        else:
            out.append(c)
        i += 1
    return "".join(out)


def printf(
    fmt: str | None,
    *args: object,
    platform: Platform = Platform.LINUX,
    file: TextIO | None = None,
) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = render(fmt, *args, platform=platform)
    stream = sys.stdout if file is None else file
    if text:
        stream.write(text)
    return len(text)