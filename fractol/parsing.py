"""Lenient number parsing and formatting used for command-line values."""

import re

_DOUBLE_SHAPE = re.compile(r"[ \t]*[-+]?[0-9]*\.?[0-9]*")
_DIGITS = re.compile(r"[0-9]*")
_INT_SPACE = " \t\n\v\f\r"


def _take_digits(text: str) -> tuple[str, str]:
    match = _DIGITS.match(text)
    digits = match.group(0)
    return digits, text[len(digits):]


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def is_double(text: str | None) -> bool:
    """Tell whether ``text`` has the shape accepted as a decimal number.

    Leading blanks, one optional sign, digits, an optional point and more
    digits are allowed; nothing may follow. Digits themselves are optional.
    """
    if text is None:
        return False
    return _DOUBLE_SHAPE.fullmatch(text) is not None


def parse_double(text: str) -> float:
    """Read a decimal number from the start of ``text``.

    Leading blanks and tabs are skipped and a leading ``-`` is honoured;
    reading stops at the first character that does not fit.
    """
    rest = text.lstrip(" \t")
    sign = 1.0
    if rest.startswith("-"):
        sign = -1.0
        rest = rest[1:]
    result = 0.0
    divisor = 1.0
    whole, rest = _take_digits(rest)
    for digit in whole:
        result = result * 10 + int(digit)
    if rest.startswith("."):
        rest = rest[1:]
    fraction, _ = _take_digits(rest)
    for digit in fraction:
        result = result * 10 + int(digit)
        divisor *= 10.0
    return result / divisor * sign


def parse_int(text: str) -> int:
    """Read a signed 32-bit integer from the start of ``text``.

    Leading whitespace is skipped, one sign is accepted, and reading stops at
    the first non-digit. Values outside the 32-bit range wrap around.
    """
    rest = text.lstrip(_INT_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits, _ = _take_digits(rest)
    return _wrap_int32(int(digits or "0") * sign)


def int_to_str(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)