import pytest

from pfmt.textutil import atoi, itoa, split, strjoin, strnstr, strtrim, substr


@pytest.mark.parametrize("text", ["42", "  42", "-17", "+8", "\t\n\v\f\r 123", "0"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text.strip())


def test_atoi_stops_at_first_non_digit():
    assert atoi("  123abc") == atoi("123")
    assert atoi("12 34") == 12


@pytest.mark.parametrize("text", ["abc", "--5", "+-5", "", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647, 987654])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_wraps_to_int32():
    assert itoa(2**31) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_words_contain_no_separator():
    words = split(",a,,bc,d,,", ",")
    assert all("," not in w and w for w in words)
    assert "".join(words) == "abcd"


def test_split_none_and_empty():
    assert split(None, " ") == []
    assert split("", " ") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim(" \thello\t ", " \t") == "hello"


def test_strtrim_stops_at_middle():
    assert strtrim("aaaaaX", "a") == "aX"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_nothing_to_remove():
    assert strtrim("hello", "xyz") == "hello"


def test_substr():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 2, 100) == "hello"[2:]
    assert substr("hello", 6, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_within_limit():
    hay = "foo bar baz"
    assert strnstr(hay, "bar", len(hay)) == hay.find("bar")


def test_strnstr_needle_must_fit():
    assert strnstr("foo bar baz", "bar", 6) is None
    assert strnstr("foo bar baz", "bar", 7) == 4


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "z", 3) is None


def test_strnstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("", "") == ""
    assert strjoin(None, None) is None


def test_strjoin_with_one_missing_raises():
    with pytest.raises(TypeError):
        strjoin("ab", None)