# pfmt

`pfmt` formats text in the manner of a classic C `printf`. It supports the
conversions `%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%%`, and the
flags `-`, `0`, `#`, ` ` and `+`. Field width and precision can be given
either as digits or as `*`. When `*` is used, the value is taken from the
next argument.

The package needs nothing outside the standard library.

## Installation

```
pip install .
```

## Formatting

`pfmt.printf.render` returns the formatted text:

```python
from pfmt.printf import render

render("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'
```

`pfmt.printf.printf` writes the formatted text to a stream and returns the
number of characters written. When no `file` is given, it writes to standard
output.

```python
import io
from pfmt.printf import printf

buf = io.StringIO()
count = printf("%08.3d\n", -7, file=buf)
# buf.getvalue() == '    -007\n', count == 9
```

The formatter follows these rules:

- Values for `%d`, `%i`, `%u`, `%x` and `%X` are treated as 32-bit integers.
  Values for `%p` are treated as 64-bit integers.
- `%s` accepts a `str` or `None`. `None` is shown as `(null)`.
- `%c` accepts a one-character `str` or an integer.
- Any text after a NUL character in the format string is ignored. A `None`
  format produces an empty string.
- If there are too few arguments, `TypeError` is raised.

Some output depends on the platform. The `platform` argument takes a
`pfmt.flags.Platform` value, either `LINUX` (the default) or `APPLE`:

- **Null pointer.** Under `LINUX`, `%p` prints a null pointer as `(nil)`.
  Under `APPLE`, it prints `0x0`.
- **`None` string with a short precision.** Under `LINUX`, when `%s` gets
  `None` and the precision is below 6, only padding is printed.
- **Directive without a valid specifier.** Under `LINUX`, the `%` is written
  out literally. Under `APPLE`, the character where parsing stopped is
  printed, padded to the collected width.

## Lower-level pieces

- `pfmt.printf.format_arg` renders a single conversion.
- `pfmt.flags.parse_flags` parses one directive and returns a `Flags`
  instance together with the index where parsing stopped.
- `pfmt.converters` has one function per conversion:
  - `format_char`
  - `format_str`
  - `format_int`
  - `format_unsigned`
  - `format_hex`
  - `format_ptr`

  It also has `pad_width`.
- `pfmt.numconv` has number-to-text helpers and digit-count helpers:
  - `itoa`, `utoa` and `xtoa`
  - `ptr_len`, `unsigned_len` and `hex_len`

## Text helpers

`pfmt.textutil` provides small string utilities that follow C library
conventions:

- `atoi(s)` parses a leading integer. It accepts leading whitespace and one
  sign, and wraps the result to a signed 32-bit value.
- `itoa(n)` returns the decimal text of `n`, taken as a signed 32-bit value.
- `split(s, sep)` returns the non-empty words of `s` between runs of the
  character `sep`.
- `strtrim(s, charset)` strips characters in `charset` from both ends. Each
  end is trimmed no further than the middle of the string.
- `substr(s, start, length)` returns at most `length` characters starting at
  `start`.
- `strnstr(haystack, needle, length)` returns the index of a match that lies
  wholly within the first `length` characters, or `None` if there is no such
  match.
- `strjoin(s1, s2)` concatenates two strings. It returns `None` when both are
  `None`.

## What it does not do

`pfmt` is a library only and has no command-line program. It handles only the
conversions listed above. It has no floating-point conversions, no length
modifiers such as `l` or `h`, and no `%n`.

## Running the tests

```
pip install .[test]
pytest
```