"""String helpers with C string semantics: text ends at the first NUL character.

Searches return an index, or ``None`` where nothing is found. Functions that
would fill a caller's buffer return the text written along with the length
that the operation reports.
"""

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _c_str(text: str) -> str:
    if text is None:
        raise TypeError("expected a string, got None")
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c)


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_c_str(text))


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c``; a NUL ``c`` finds the terminator."""
    text = _c_str(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c``; a NUL ``c`` finds the terminator."""
    text = _c_str(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return _c_str(text)


def striteri(
    buffer: Optional[MutableSequence[str]],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` for each character of ``buffer``, in place.

    A returned character replaces the one at that index; ``None`` keeps it.
    Iteration stops at the first NUL. A ``None`` buffer is left alone.
    """
    if buffer is None:
        return
    for index, ch in enumerate(buffer):
        if ch == "\0":
            break
        replacement = func(index, ch)
        if replacement is not None:
            buffer[index] = replacement


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _c_str(first) + _c_str(second)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the operation reports: the
    length it tried to create, or ``len(src) + size`` when ``dest`` already
    fills the buffer.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest = _c_str(dest)
    src = _c_str(src)
    if size == 0:
        return dest, len(src)
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits, terminator reserved, and the full length of
    ``src``. A size of zero writes nothing and gives an empty copy.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _c_str(src)
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return the string of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(_c_str(text)))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference where they part."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    a = _c_str(first) + "\0"
    b = _c_str(second) + "\0"
    i = 0
    while a[i] != "\0" and a[i] == b[i] and i < n - 1:
        i += 1
    return ord(a[i]) - ord(b[i])


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within the first ``n`` characters.

    An empty ``needle`` is found at index 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    needle = _c_str(needle)
    if not needle:
        return 0
    if n == 0:
        return None
    index = _c_str(haystack)[:n].find(needle)
    return index if index >= 0 else None