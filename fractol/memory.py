"""Byte-buffer operations on ``bytearray`` and other mutable byte sequences.

Lengths are checked against the buffers involved: asking for more bytes than
a buffer holds raises ``ValueError``.
"""

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(data: Bytes, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(data):
        raise ValueError(f"{what} holds {len(data)} bytes, {n} requested")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    _check_length(buffer, n)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` among the first ``n``.

    ``c`` is taken modulo 256, as an unsigned byte. ``None`` means no match.
    """
    _check_length(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length(first, n, "first buffer")
    _check_length(second, n, "second buffer")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is src:
        return dest
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the bytes are read before any is overwritten.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    if n == 0 or dest == src:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` modulo 256; return it."""
    _check_length(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer