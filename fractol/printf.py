"""Formatted output supporting ``%c %s %d %i %u %x %X %p`` and ``%%``."""

import sys
from typing import Any, Optional

_LOWER = "0123456789abcdef"
_UPPER = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def hex_digits(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of the non-negative integer ``n``."""
    n = int(n)
    if n < 0:
        raise ValueError("hex_digits needs a non-negative integer")
    digits = _UPPER if upper else _LOWER
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def pointer_text(address: Optional[int]) -> str:
    """Return ``0x`` and the lower-case hex of ``address``; a null address is ``(nil)``."""
    if not address:
        return "(nil)"
    return "0x" + hex_digits(int(address) & _MASK64)


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char_text(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(int(value) & _MASK32)
    if spec == "x":
        return hex_digits(int(value) & _MASK32)
    if spec == "X":
        return hex_digits(int(value) & _MASK32, upper=True)
    if spec == "p":
        return pointer_text(value)
    raise AssertionError(spec)


_TAKES_ARG = frozenset("csdiuxXp")


def render_format(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``.

    An unknown conversion character is consumed and produces nothing, as does
    a lone ``%`` at the end of ``fmt``. Missing arguments raise ``TypeError``.
    """
    if fmt is None:
        raise TypeError("format must be a string, got None")
    values = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _TAKES_ARG:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            out.append(_convert(spec, value))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write ``render_format(fmt, *args)`` to standard output; return its length."""
    text = render_format(fmt, *args)
    sys.stdout.write(text)
    return len(text)