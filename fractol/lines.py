"""Reading a file descriptor or binary stream one line at a time."""

import os
from typing import BinaryIO, Dict, Iterator, Optional, Union

BUFFER_SIZE = 42
MAX_FD = 1024

Source = Union[int, BinaryIO]


class LineReader:
    """Reads lines, newline included, from a file descriptor or binary stream.

    Data is pulled ``buffer_size`` bytes at a time; bytes read past a newline
    are kept for the next line.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.buffer_size = buffer_size
        self._pending = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        return chunk or b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once no data is left.

        The last line may lack a trailing newline. A read error discards the
        buffered data and propagates.
        """
        try:
            while b"\n" not in self._pending:
                chunk = self._read_chunk()
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending = b""
            raise
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from descriptor ``fd``, keeping state per descriptor.

    ``None`` marks the end of the data, after which the state for ``fd`` is
    dropped. Descriptors outside ``0 .. MAX_FD - 1`` raise ``ValueError``.
    """
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor {fd} is out of range")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line