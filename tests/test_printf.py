import pytest

from fractol.printf import hex_digits, pointer_text, printf, render_format


def test_plain_text_passes_through():
    assert render_format("hello world") == "hello world"


def test_percent_escape():
    assert render_format("100%%") == "100%"


def test_int_min():
    assert render_format("%d", -2147483648) == "-2147483648"


def test_d_and_i_agree():
    for n in (0, 7, -42, 123456):
        assert render_format("%d", n) == render_format("%i", n) == str(n)


def test_d_wraps_to_32_bits():
    assert render_format("%d", 2**31) == "-2147483648"


def test_unsigned_wraps():
    assert render_format("%u", -1) == str(2**32 - 1)


def test_null_string():
    assert render_format("%s", None) == "(null)"


def test_string_and_char():
    assert render_format("%s-%c", "abc", "z") == "abc-z"
    assert render_format("%c", ord("Q")) == "Q"


def test_hex_round_trip():
    for n in (0, 1, 15, 16, 255, 4096, 0xDEADBEEF):
        assert int(render_format("%x", n), 16) == n
        assert render_format("%X", n) == render_format("%x", n).upper()


def test_hex_digits_round_trip_and_case():
    for n in (0, 10, 2**40 + 3):
        text = hex_digits(n)
        assert int(text, 16) == n
        assert text == text.lower()
        assert hex_digits(n, True) == text.upper()


def test_hex_digits_rejects_negative():
    with pytest.raises(ValueError):
        hex_digits(-1)


def test_pointer():
    assert pointer_text(None) == "(nil)"
    assert pointer_text(0) == "(nil)"
    text = pointer_text(0x7FFE1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFE1234
    assert render_format("%p", None) == "(nil)"


def test_unknown_conversion_is_dropped():
    assert render_format("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert render_format("end%") == "end"


def test_missing_argument():
    with pytest.raises(TypeError):
        render_format("%d")


def test_none_format():
    with pytest.raises(TypeError):
        render_format(None)


def test_printf_writes_and_counts(capsys):
    count = printf("iterations = %d\n", 52)
    out = capsys.readouterr().out
    assert out == render_format("iterations = %d\n", 52)
    assert count == len(out)