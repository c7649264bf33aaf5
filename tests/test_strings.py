import pytest

from fractol.strings import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == 2


def test_strchr_first_match():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", ord("e")) == "hello".index("e")


def test_strchr_terminator_and_missing():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", "z") is None


def test_strrchr_last_match():
    assert strrchr("hello", "l") == "hello".rindex("l")
    assert strrchr("hello", "\0") == len("hello")
    assert strrchr("hello", "q") is None


def test_strdup_copies_up_to_nul():
    assert strdup("abc") == "abc"
    assert strdup("ab\0c") == "ab"


def test_striteri_replaces_in_place():
    buf = list("abc")
    striteri(buf, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert buf == ["A", "b", "C"]


def test_striteri_passes_indices():
    seen = []
    buf = list("xyz")
    striteri(buf, lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))


def test_strjoin_example():
    assert strjoin("Bonjour", "Ca va?") == "BonjourCa va?"


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_strlcat_size_zero():
    assert strlcat("ab", "cd", 0) == ("ab", len("cd"))


def test_strlcat_truncates():
    result, length = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert length == len("ab") + len("cdef")


def test_strlcat_dest_fills_buffer():
    assert strlcat("abcd", "xy", 3) == ("abcd", len("xy") + 3)


def test_strlcpy_truncates_and_reports_source_length():
    assert strlcpy("hello", 3) == ("hello"[:2], len("hello"))
    assert strlcpy("hi", 10) == ("hi", len("hi"))


def test_strlcpy_size_zero():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strmapi_applies_function():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("abc", lambda i, ch: str(i)) == "012"


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_limit():
    text = "hello world"
    assert strnstr(text, "world", len(text)) == text.index("world")


def test_strnstr_needle_past_limit():
    text = "hello world"
    assert strnstr(text, "world", len(text) - 1) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_negative_raises():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)