"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 100000


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the last line of the input may lack
    one. A line ends early at the first NUL byte. Reaching end of input is not
    final: a later call reads from the descriptor again.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> str | None:
        """Return the next line, or None when the input is exhausted.

        Raises OSError if the descriptor cannot be read.
        """
        self._fill()
        end = self._pending.find(b"\n")
        if end >= 0:
            raw, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        else:
            raw, self._pending = self._pending, b""
        if not raw:
            return None
        raw = raw.split(b"\0", 1)[0]
        return raw.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> list[str]:
    """Read every remaining line from ``fd``."""
    return list(LineReader(fd, buffer_size))