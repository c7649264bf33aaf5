"""Splitting, trimming and slicing of strings with C string semantics.

Text is read up to its first NUL character.
"""

from typing import Optional


def _c_str(text: Optional[str], what: str = "text") -> str:
    if text is None:
        raise TypeError(f"{what} must be a string, got None")
    end = text.find("\0")
    return text if end < 0 else text[:end]


def split(text: str, sep: str) -> list[str]:
    """Return the non-empty runs of ``text`` separated by the character ``sep``."""
    text = _c_str(text)
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Return ``text`` without the leading and trailing characters found in ``charset``."""
    text = _c_str(text)
    charset = _c_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    text = _c_str(text)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]