import io

import pytest

from pfmt.flags import Flags, Platform
from pfmt.printf import format_arg, printf, render


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (-42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (5,)),
        ("%.3d", (7,)),
        ("%i and %d", (3, -9)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%s", ("hello",)),
        ("%10s", ("hello",)),
        ("%-10s|", ("hello",)),
        ("%.2s", ("hello",)),
        ("%c", ("A",)),
        ("%3c", ("A",)),
        ("%%", ()),
        ("%*d", (5, 42)),
        ("%*d%d", (3, 1, 2)),
        ("%u", (123,)),
    ],
)
def test_render_agrees_with_standard_formatting(fmt, args):
    assert render(fmt, *args) == fmt % args


def test_negative_star_width_means_left_aligned():
    assert render("%*d|", -5, 42) == "%-5d|" % 42


def test_unsigned_wraps_negative_values():
    assert render("%u", -1) == "4294967295"


def test_pointer_rendering():
    assert render("%p", 255) == "0x" + format(255, "x")
    assert render("%p", None) == "(nil)"
    assert render("%p", 0, platform=Platform.APPLE) == "0x0"


def test_null_string():
    assert render("%s", None) == "(null)"
    assert render("%.3s", None) == ""
    assert render("%.3s", None, platform=Platform.APPLE) == "(null)"[:3]


def test_unknown_directive_printed_literally_on_linux():
    assert render("%y") == "%y"
    assert render("100%") == "100%"


def test_unknown_directive_padded_elsewhere():
    assert render("%5y", platform=Platform.APPLE) == "%5s" % "y"
    assert render("ab%5", platform=Platform.APPLE) == "ab"


def test_text_after_nul_is_ignored():
    assert render("ab\0cd") == "ab"


def test_empty_and_none_formats():
    assert render("") == ""
    assert render(None) == ""


def test_extra_arguments_are_ignored():
    assert render("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%d", "x")


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        render(123)


def test_format_arg_consumes_one_value():
    args = iter([255, 7])
    assert format_arg("x", args, Flags(), Platform.LINUX) == format(255, "x")
    assert next(args) == 7


def test_format_arg_percent_consumes_nothing():
    args = iter([9])
    assert format_arg("%", args, Flags(), Platform.LINUX) == "%"
    assert next(args) == 9


def test_format_arg_rejects_unknown_spec():
    with pytest.raises(ValueError):
        format_arg("q", iter([1]), Flags(), Platform.LINUX)


def test_printf_writes_to_file_and_returns_count():
    buf = io.StringIO()
    count = printf("%s=%5d", "key", 12, file=buf)
    assert buf.getvalue() == "%s=%5d" % ("key", 12)
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%c%c", "o", "k")
    assert capsys.readouterr().out == "ok"
    assert count == 2


def test_printf_empty_returns_zero():
    buf = io.StringIO()
    assert printf("", file=buf) == 0
    assert buf.getvalue() == ""