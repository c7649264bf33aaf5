# fractol

Support code for a fractal viewer: lenient parsing of the numbers given on a
command line, ASCII character tests, byte-buffer and string helpers with
C string semantics (text ends at the first NUL), a singly linked list, a small
`printf`-style formatter and a buffered line reader. It has no dependencies
outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `fractol.parsing`

- `is_double(text)` — true when `text` is optional blanks, an optional sign,
  digits, an optional point and more digits, with nothing after. Digits are
  optional, so `"1."`, `"-.5"` and `""` all pass; `None` does not.
- `parse_double(text)` — reads a decimal from the start of `text`, skipping
  blanks and tabs and honouring a leading `-`; stops at the first character
  that does not fit. `parse_double("-0.8")` gives `-0.8`.
- `parse_int(text)` — reads a signed integer after leading whitespace and one
  optional sign; values wrap to 32 bits, so `"2147483648"` gives
  `-2147483648`.
- `int_to_str(n)` — the decimal text of `n`.

### `fractol.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper` take a character code or a one-character string. The converters
return the same kind of value they were given and leave anything that is not
an ASCII letter unchanged.

### `fractol.memory`

`bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` and `memset` work
on `bytearray` and other byte sequences. Asking for more bytes than a buffer
holds, or a negative count, raises `ValueError`. `memchr` returns an offset or
`None`; `memmove(buffer, dest, src, n)` moves bytes between offsets of one
buffer and handles overlap.

### `fractol.strings`

`strlen`, `strchr`, `strrchr`, `strdup`, `striteri`, `strjoin`, `strlcat`,
`strlcpy`, `strmapi`, `strncmp` and `strnstr`. Searches return an index or
`None`. `strlcpy(src, size)` and `strlcat(dest, src, size)` return the text
that fits in a buffer of `size` characters together with the length the
operation reports, e.g. `strlcpy("hello", 3) == ("he", 5)`.

### `fractol.words`

- `split(text, sep)` — the non-empty runs between occurrences of `sep`:
  `split("  a b  ", " ") == ["a", "b"]`.
- `strtrim(text, charset)` — strips characters of `charset` from both ends:
  `strtrim("o.bonjour.o", ".o") == "bonjour"`.
- `substr(text, start, length)` — at most `length` characters from `start`;
  empty when `start` is at or past the end.

### `fractol.linked`

`LinkedList` holds `Node` cells. It offers `push_front`, `push_back`, `last`,
`pop_front(release)`, `clear(release)`, `for_each(func)`, `map(func, release)`,
`len()` and iteration over contents. When `map`'s function raises, the
contents built so far are passed to `release` and the exception propagates.

```python
from fractol.linked import LinkedList

items = LinkedList([1, 2, 3])
doubled = items.map(lambda n: n * 2)
assert list(doubled) == [2, 4, 6]
```

### `fractol.printf`

`render_format(fmt, *args)` supports `%c %s %d %i %u %x %X %p` and `%%`.
Integers are treated as 32-bit values, so `render_format("%x", -1)` gives
`"ffffffff"`; `%s` of `None` gives `(null)` and `%p` of a null address gives
`(nil)`. Unknown conversions produce nothing; missing arguments raise
`TypeError`. `printf` writes the result to standard output and returns its
length. `hex_digits(n, upper)` and `pointer_text(address)` are available on
their own.

### `fractol.lines`

`LineReader(source, buffer_size=42)` reads lines, newline included, from a
file descriptor or a binary stream, and can be iterated. `get_next_line(fd)`
keeps one reader per descriptor (0 to 1023) and returns `None` at the end of
the data.

```python
import io
from fractol.lines import LineReader

reader = LineReader(io.BytesIO(b"one\ntwo"))
assert list(reader) == [b"one\n", b"two"]
```

## What it does not do

This package does not draw fractals, open a window, handle keyboard or mouse
input, or install a command. It provides only the helper modules listed
above.