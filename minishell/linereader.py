"""Reading newline-terminated lines from file descriptors or binary streams."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Read lines, newline included, from a file descriptor or a binary stream.

    Data is read ``buffer_size`` bytes at a time; bytes read past a newline
    are kept for the next call.
    """

    def __init__(self, source: int | BinaryIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def read_line(self) -> bytes | None:
        """Return the next line, or the unterminated rest, or None at end of input."""
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return line
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                if not self._pending:
                    return None
                line = bytes(self._pending)
                self._pending.clear()
                return line
            self._pending += chunk

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from ``fd``, keeping leftovers per descriptor."""
    if fd < 0 or fd >= MAX_FD:
        raise ValueError(f"file descriptor out of range: {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    return reader.read_line()