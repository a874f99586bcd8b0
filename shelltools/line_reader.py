"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 300


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Text read past the end of a line is kept for the next call. Lines are
    returned with their trailing newline, the last line of the input
    possibly without one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def read_line(self) -> str | None:
        """The next line, or None once the input is exhausted."""
        while True:
            index = self._pending.find(b"\n")
            if index >= 0:
                line = bytes(self._pending[: index + 1])
                del self._pending[: index + 1]
                return self._decode(line)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line = bytes(self._pending)
        self._pending.clear()
        return self._decode(line)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line